"""Basic example of generating and animating a galaxy cluster."""

from galaxy_cloud import GalaxyCluster, GalaxyParameters, GalaxyAnimator

def main():
    """Generate two galaxies, retune one, and animate both."""
    cluster = GalaxyCluster(animator=GalaxyAnimator(pulse_amplitude=0.1, pulse_frequency=2.0), seed=42)
    
    cluster.add_galaxy(GalaxyParameters())
    cluster.add_galaxy(
        GalaxyParameters(point_count=3000, radius=3.0, branch_count=2, spin=-2.0,
                         inner_color="#ffd27f", outer_color="#3f7fff"),
        position=(12.0, 0.0, 0.0),
        scale=0.8
    )
    print(f"Generated {len(cluster)} galaxies with {cluster.total_points} points")
    
    # Retune the second galaxy as a control panel would
    params = cluster[1].params.replace(branch_count=3)
    cluster.update_galaxy_parameters(1, params)
    
    fps = 60
    for frame in range(1, 181):
        cluster.tick(frame / fps, 1.0 / fps)
    
    for index, galaxy in enumerate(cluster):
        print(f"Galaxy {index}: rotation_y={galaxy.rotation_y:.4f} opacity={galaxy.opacity:.3f}")

if __name__ == "__main__":
    main()
