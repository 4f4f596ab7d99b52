"""Live matplotlib preview of a rotating galaxy."""

from galaxy_cloud import GalaxyCluster, GalaxyParameters
from galaxy_cloud.render import Renderer3D

def main():
    """Render a single galaxy for a few seconds."""
    cluster = GalaxyCluster(seed=7)
    cluster.add_galaxy(GalaxyParameters(point_count=4000, rotation_speed=0.5))
    
    renderer = Renderer3D(elevation=30.0)
    fps = 30
    try:
        for frame in range(1, 151):
            cluster.tick(frame / fps, 1.0 / fps)
            renderer.render(cluster)
    finally:
        renderer.close()

if __name__ == "__main__":
    main()
