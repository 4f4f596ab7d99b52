"""CLI main entry point."""

import argparse
import logging
import math
import sys
from typing import Optional
import numpy as np
from galaxy_cloud.backends.factory import list_available_backends
from galaxy_cloud.core.cluster import GalaxyCluster
from galaxy_cloud.core.parameters import GalaxyParameters
from galaxy_cloud.io.gif_exporter import GIFExporter
from galaxy_cloud.render.renderer_3d import Renderer3D
from galaxy_cloud.utils.config import (
    AnimationConfig,
    GalaxyConfig,
    SceneConfig,
    load_config,
    save_config
)

logger = logging.getLogger(__name__)

# CLI flag -> GalaxyParameters field
PARAMETER_FLAGS = {
    'count': 'point_count',
    'radius': 'radius',
    'branches': 'branch_count',
    'spin': 'spin',
    'randomness': 'randomness',
    'randomness_power': 'randomness_power',
    'inner_color': 'inner_color',
    'outer_color': 'outer_color',
    'size': 'base_size',
    'rotation_speed': 'rotation_speed',
}


def params_from_args(args) -> GalaxyParameters:
    """Build galaxy parameters from CLI flags, defaults for the rest."""
    values = {}
    for flag, name in PARAMETER_FLAGS.items():
        value = getattr(args, flag)
        if value is not None:
            values[name] = value
    return GalaxyParameters(**values)


def scene_from_args(args) -> SceneConfig:
    """Build a scene from --config or from the individual flags.

    With N > 1 galaxies the copies are laid out evenly on a ring in the
    x-z plane.
    """
    if args.config:
        config = load_config(args.config)
    else:
        params = params_from_args(args)
        spacing = args.spacing if args.spacing is not None else 3.0 * params.radius
        ring = spacing / (2.0 * math.sin(math.pi / args.galaxies)) if args.galaxies > 1 else 0.0
        galaxies = []
        for i in range(args.galaxies):
            angle = 2.0 * math.pi * i / args.galaxies
            galaxies.append(GalaxyConfig(
                params=params.to_dict(),
                position=[ring * math.cos(angle), 0.0, ring * math.sin(angle)],
                scale=1.0
            ))
        config = SceneConfig(galaxies=galaxies, animation=AnimationConfig())

    if args.seed is not None:
        config.seed = args.seed
    if args.backend is not None:
        config.backend = args.backend
    if args.tick_mode is not None:
        config.animation.mode = args.tick_mode
    if args.pulse is not None:
        config.animation.pulse_amplitude = args.pulse
    return config


def print_summary(cluster: GalaxyCluster, frame: int, elapsed: float):
    """Print one row per galaxy."""
    print(f"{'Frame':<8} {'Time':<8} {'Galaxy':<8} {'Points':<8} {'Extent':<10} {'RotY':<10} {'Opacity':<8}")
    print("-" * 66)
    for index, galaxy in enumerate(cluster):
        low, high = galaxy.cloud.bounds()
        extent = float(np.max(high - low)) * galaxy.scale
        print(f"{frame:<8} {elapsed:<8.2f} {index:<8} {galaxy.cloud.point_count:<8} "
              f"{extent:<10.3f} {galaxy.rotation_y:<10.4f} {galaxy.opacity:<8.3f}")


def run_scene(args) -> int:
    """Generate and animate a scene."""
    try:
        config = scene_from_args(args)
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    if args.save_config:
        save_config(config, args.save_config)
        print(f"Scene configuration saved to {args.save_config}")

    try:
        cluster = config.build_cluster(clamp=args.clamp)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    print(f"Generated {len(cluster)} galaxies, {cluster.total_points} points "
          f"(backend: {cluster.generator.backend.name}, tick mode: {cluster.animator.mode})")

    renderer: Optional[Renderer3D] = None
    if args.render or args.export_gif:
        render_config = config.render
        renderer = Renderer3D(
            figsize=tuple(render_config.figsize),
            dpi=render_config.dpi,
            elevation=render_config.elevation,
            azimuth=render_config.azimuth,
            starfield=render_config.starfield,
            starfield_count=render_config.starfield_count,
            starfield_scale=render_config.starfield_scale,
            point_scale=render_config.point_scale,
            interactive=args.render
        )

    gif_exporter = GIFExporter(args.export_gif, fps=args.fps) if args.export_gif else None

    delta = 1.0 / args.fps
    print_summary(cluster, 0, 0.0)
    for frame in range(1, args.frames + 1):
        elapsed = frame * delta
        cluster.tick(elapsed, delta)

        if renderer:
            renderer.render(cluster)
            if gif_exporter and renderer.fig is not None:
                gif_exporter.add_frame(renderer.capture_frame())

        if frame % args.report_every == 0:
            logger.info(f"Frame {frame}/{args.frames}")
    if args.frames > 0:
        print_summary(cluster, args.frames, args.frames * delta)

    if gif_exporter:
        print(f"Exporting GIF to {gif_exporter.output_path}...")
        gif_exporter.export()

    if renderer:
        renderer.close()

    cluster.clear()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Galaxy Cloud - procedural spiral galaxy point clouds")

    # Scene
    parser.add_argument('--config', type=str, default=None,
                       help='Scene configuration file (.json or .yaml); replaces the galaxy flags')
    parser.add_argument('--save-config', type=str, default=None,
                       help='Write the resolved scene configuration to this file')
    parser.add_argument('--galaxies', type=int, default=1,
                       help='Number of identical galaxies laid out on a ring')
    parser.add_argument('--spacing', type=float, default=None,
                       help='Distance between neighbouring galaxies (default: 3 * radius)')

    # Galaxy parameters
    parser.add_argument('--count', type=int, default=None,
                       help='Points per galaxy (default: 6000)')
    parser.add_argument('--radius', type=float, default=None,
                       help='Galaxy radius (default: 6.0)')
    parser.add_argument('--branches', type=int, default=None,
                       help='Number of spiral arms (default: 4)')
    parser.add_argument('--spin', type=float, default=None,
                       help='Arm curvature per unit radius (default: 1.5)')
    parser.add_argument('--randomness', type=float, default=None,
                       help='Jitter scale as a fraction of the radius (default: 0.3)')
    parser.add_argument('--randomness-power', type=float, default=None,
                       help='Jitter concentration exponent, >= 1 (default: 3.0)')
    parser.add_argument('--inner-color', type=str, default=None,
                       help='Core color (default: #ff6bff)')
    parser.add_argument('--outer-color', type=str, default=None,
                       help='Rim color (default: #6b6bff)')
    parser.add_argument('--size', type=float, default=None,
                       help='Base point size (default: 0.035)')
    parser.add_argument('--rotation-speed', type=float, default=None,
                       help='Angular velocity in rad/s (default: 0.06)')
    parser.add_argument('--clamp', action='store_true',
                       help='Clamp parameters into the control panel ranges instead of failing')

    # Animation
    parser.add_argument('--frames', type=int, default=120,
                       help='Number of frames to animate')
    parser.add_argument('--fps', type=int, default=30,
                       help='Frames per second (sets the per-frame time delta and GIF speed)')
    parser.add_argument('--tick-mode', type=str, default=None,
                       choices=['per_second', 'per_frame'],
                       help='Rotation convention: angular velocity or fixed step per frame')
    parser.add_argument('--pulse', type=float, default=None,
                       help='Opacity pulse amplitude (default: 0, no pulse)')
    parser.add_argument('--report-every', type=int, default=30,
                       help='Log progress every N frames (with --verbose)')

    # Backend
    parser.add_argument('--backend', type=str, default=None,
                       choices=['numpy', 'jax'],
                       help='Compute backend (default: numpy)')
    parser.add_argument('--list-backends', action='store_true',
                       help='List available backends and exit')

    # Rendering / export
    parser.add_argument('--render', action='store_true',
                       help='Show a live matplotlib preview')
    parser.add_argument('--export-gif', type=str, default=None,
                       help='Capture the preview to an animated GIF at this path')

    # Reproducibility
    parser.add_argument('--seed', type=int, default=None,
                       help='Random seed for reproducibility')
    parser.add_argument('--verbose', action='store_true',
                       help='Enable info logging')
    return parser


def main(argv=None):
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(levelname)s: %(message)s'
    )

    if args.list_backends:
        backends = list_available_backends()
        print("Available backends:")
        for backend in backends:
            print(f"  - {backend}")
        return 0

    if args.galaxies < 1:
        parser.error("--galaxies must be at least 1")
    if args.fps <= 0:
        parser.error("--fps must be positive")
    if args.frames < 0:
        parser.error("--frames must be non-negative")
    if args.report_every < 1:
        parser.error("--report-every must be at least 1")

    return run_scene(args)


if __name__ == '__main__':
    sys.exit(main())
