"""Frame export."""

from galaxy_cloud.io.gif_exporter import GIFExporter

__all__ = ["GIFExporter"]
