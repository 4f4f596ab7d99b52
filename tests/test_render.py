"""Tests for the preview renderer and GIF export."""

import os
import numpy as np
import pytest
from galaxy_cloud.core.cluster import GalaxyCluster
from galaxy_cloud.core.parameters import GalaxyParameters
from galaxy_cloud.io.gif_exporter import GIFExporter
from galaxy_cloud.render.renderer_3d import Renderer3D


def make_cluster():
    cluster = GalaxyCluster(seed=5)
    cluster.add_galaxy(GalaxyParameters(point_count=1000))
    cluster.add_galaxy(GalaxyParameters(point_count=1000, radius=2.0), position=(15.0, 0.0, 0.0))
    return cluster


def test_render_and_capture():
    """Test headless rendering of a cluster."""
    cluster = make_cluster()
    renderer = Renderer3D(figsize=(2, 2), dpi=50, interactive=False)
    
    try:
        renderer.render(cluster)
        frame = renderer.capture_frame()
        
        assert frame.shape == (100, 100, 3)
        assert frame.dtype == np.uint8
        assert frame.max() > 0
        
        cluster.tick(1.0, 1.0)
        renderer.render(cluster)
        assert renderer.capture_frame().shape == (100, 100, 3)
    finally:
        renderer.close()
    
    assert renderer.fig is None


def test_capture_before_render():
    """Test that capturing without a frame fails."""
    renderer = Renderer3D(interactive=False)
    
    with pytest.raises(RuntimeError):
        renderer.capture_frame()


def test_gif_export(tmp_path):
    """Test writing captured frames to a GIF."""
    pytest.importorskip("imageio")
    output = tmp_path / "galaxy.gif"
    exporter = GIFExporter(str(output), fps=10)
    
    exporter.add_frame(np.zeros((20, 20, 3), dtype=np.uint8))
    exporter.add_frame(np.ones((20, 20, 3)))
    exporter.export()
    
    assert os.path.exists(output)
    assert os.path.getsize(output) > 0
    assert exporter.frames[1].dtype == np.uint8
    assert exporter.frames[1].max() == 255


def test_gif_export_without_frames():
    """Test that exporting nothing fails."""
    with pytest.raises(ValueError):
        GIFExporter("empty.gif").export()
