"""3D preview renderer using matplotlib."""

import numpy as np
import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d import Axes3D
from matplotlib.figure import Figure
from typing import Iterable, Optional, Tuple
from galaxy_cloud.core.instance import GalaxyInstance
from galaxy_cloud.render.base import Renderer


class Renderer3D(Renderer):
    """Draws galaxy point clouds in a matplotlib 3D axes.

    Galaxies are y-up; matplotlib is z-up, so world (x, y, z) is plotted as
    (x, z, y). Axis limits are fixed from the first frame so rotation is
    visible instead of being absorbed by rescaling.
    """

    def __init__(
        self,
        figsize: Tuple[float, float] = (8, 8),
        dpi: int = 100,
        elevation: float = 20.0,
        azimuth: float = 45.0,
        starfield: bool = True,
        starfield_count: int = 300,
        starfield_scale: float = 30.0,
        point_scale: float = 400.0,
        interactive: bool = True
    ):
        """Initialize 3D renderer.

        Args:
            figsize: Figure size
            dpi: Dots per inch
            elevation: Camera elevation angle
            azimuth: Camera azimuth angle
            starfield: Draw a static background starfield
            starfield_count: Number of background stars
            starfield_scale: Edge length of the cube the stars fill
            point_scale: Multiplier from point size to matplotlib marker area
            interactive: Open a window and pump its event loop on each frame
        """
        self.initialized = False
        self.figsize = figsize
        self.dpi = dpi
        self.elevation = elevation
        self.azimuth = azimuth
        self.starfield = starfield
        self.starfield_count = starfield_count
        self.starfield_scale = starfield_scale
        self.point_scale = point_scale
        self.interactive = interactive
        self._starfield = None
        self._limits = None
        self.fig: Optional[Figure] = None
        self.ax: Optional[Axes3D] = None

    def _initialize(self, galaxies):
        """Initialize plot if not already done."""
        if self.initialized:
            return
        self.fig = plt.figure(figsize=self.figsize, dpi=self.dpi)
        self.ax = self.fig.add_subplot(111, projection='3d')
        self.fig.patch.set_facecolor('black')

        points = [galaxy.world_positions() for galaxy in galaxies]
        points = np.concatenate(points, axis=0) if points else np.zeros((1, 3))
        margin = 0.1
        low = points.min(axis=0)
        high = points.max(axis=0)
        center = (low + high) / 2
        half = max(np.max(high - low) * (1 + margin) / 2, 1e-6)
        self._limits = (center, half)

        if self.starfield:
            self._init_starfield()

        if self.interactive:
            plt.show(block=False)
            plt.pause(0.1)

        self.initialized = True

    def _is_figure_open(self) -> bool:
        """Check if the figure window is still open."""
        if self.fig is None:
            return False
        if not plt.fignum_exists(self.fig.number):
            self.initialized = False
            self.fig = None
            self.ax = None
            return False
        return True

    def _setup_axes(self):
        self.ax.set_facecolor('black')
        self.ax.set_axis_off()
        center, half = self._limits
        # (x, z, y) plotting order
        self.ax.set_xlim(center[0] - half, center[0] + half)
        self.ax.set_ylim(center[2] - half, center[2] + half)
        self.ax.set_zlim(center[1] - half, center[1] + half)
        self.ax.view_init(elev=self.elevation, azim=self.azimuth)

    def render(self, galaxies: Iterable[GalaxyInstance]):
        """Render current frame."""
        galaxies = list(galaxies)
        # Window closed by the user: stop drawing
        if self.initialized and self.interactive and not self._is_figure_open():
            return

        self._initialize(galaxies)
        self.ax.clear()
        self._setup_axes()

        if self.starfield:
            self._draw_starfield()

        for galaxy in galaxies:
            positions = galaxy.world_positions()
            colors = np.column_stack([galaxy.cloud.colors, np.full(galaxy.cloud.point_count, galaxy.opacity)])
            self.ax.scatter(
                positions[:, 0], positions[:, 2], positions[:, 1],
                c=colors,
                s=galaxy.cloud.sizes * self.point_scale * galaxy.scale,
                edgecolors='none',
                depthshade=False
            )

        if self.interactive:
            plt.draw()
            plt.pause(0.001)
        else:
            self.fig.canvas.draw()

    def _init_starfield(self):
        """Initialize static starfield."""
        rng = np.random.default_rng(42)
        coords = rng.uniform(-0.5, 0.5, size=(self.starfield_count, 3)) * self.starfield_scale
        sizes = rng.uniform(0.5, 2.0, size=self.starfield_count)
        alphas = rng.uniform(0.2, 0.8, size=self.starfield_count)
        colors = np.column_stack([np.ones((self.starfield_count, 3)), alphas])
        self._starfield = (coords, sizes, colors)

    def _draw_starfield(self):
        if self._starfield is None:
            return
        coords, sizes, colors = self._starfield
        center, _ = self._limits
        self.ax.scatter(coords[:, 0] + center[0], coords[:, 2] + center[2], coords[:, 1] + center[1],
                        s=sizes, c=colors, edgecolors='none', depthshade=False)

    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array."""
        if self.fig is None:
            raise RuntimeError("Renderer not initialized. Call render() first.")

        self.fig.canvas.draw()
        buf = np.asarray(self.fig.canvas.buffer_rgba())
        return buf[:, :, :3].copy()

    def set_view(self, elevation: float, azimuth: float):
        """Set camera view angles.

        Args:
            elevation: Elevation angle
            azimuth: Azimuth angle
        """
        self.elevation = elevation
        self.azimuth = azimuth
        if self.ax is not None:
            self.ax.view_init(elev=elevation, azim=azimuth)

    def clear(self):
        """Clear the renderer."""
        if self.ax is not None:
            self.ax.clear()

    def close(self):
        """Close the renderer."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
            self.initialized = False
