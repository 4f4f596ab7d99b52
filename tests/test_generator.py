"""Tests for the galaxy point-cloud generator."""

import math
import numpy as np
import pytest
from galaxy_cloud.core.generator import GalaxyGenerator, generate_galaxy, VERTICAL_FLATTENING
from galaxy_cloud.core.parameters import GalaxyParameters
from galaxy_cloud.core.random_source import NumPyRandomSource, SequenceRandomSource
from galaxy_cloud.errors import InvalidParameters


class CountingSource(NumPyRandomSource):
    """NumPy source that records how many times it was asked for draws."""

    def __init__(self, seed=None):
        super().__init__(seed)
        self.calls = 0

    def uniform(self, shape):
        self.calls += 1
        return super().uniform(shape)


def test_buffer_lengths():
    """Test that all buffers have exactly point_count entries."""
    params = GalaxyParameters(point_count=6000)
    cloud = GalaxyGenerator().generate(params, NumPyRandomSource(1))
    
    assert cloud.positions.shape == (6000, 3)
    assert cloud.colors.shape == (6000, 3)
    assert cloud.sizes.shape == (6000,)
    assert len(cloud) == 6000


@pytest.mark.parametrize("count", [1000, 20000])
def test_point_count_limits(count):
    """Test the control panel minimum and maximum point counts."""
    cloud = generate_galaxy(GalaxyParameters(point_count=count), NumPyRandomSource(2))
    
    assert cloud.point_count == count
    assert cloud.colors.shape[0] == count
    assert cloud.sizes.shape[0] == count


def test_zero_points_fails_without_drawing():
    """Test that invalid parameters fail before any random draw."""
    source = CountingSource(3)
    
    with pytest.raises(InvalidParameters):
        GalaxyGenerator().generate(GalaxyParameters(point_count=0), source)
    
    assert source.calls == 0


@pytest.mark.parametrize("changes", [
    {"point_count": -5},
    {"radius": 0.0},
    {"radius": -1.0},
    {"branch_count": 0},
    {"randomness": -0.1},
    {"randomness_power": 0.5},
    {"base_size": 0.0},
    {"inner_color": "not-a-color"},
])
def test_invalid_parameters(changes):
    """Test each hard constraint."""
    params = GalaxyParameters().replace(**changes)
    
    with pytest.raises(InvalidParameters) as excinfo:
        generate_galaxy(params, NumPyRandomSource(4))
    
    assert len(excinfo.value.errors) == 1


def test_jitter_bounded_per_axis():
    """Test that jitter never exceeds randomness * radius on any axis."""
    # One straight arm along +x: x = r + jx, z = jz
    params = GalaxyParameters(point_count=20000, radius=5.0, branch_count=1, spin=0.0,
                              randomness=0.8, randomness_power=1.0)
    cloud = generate_galaxy(params, NumPyRandomSource(5))
    bound = params.randomness * params.radius
    x, y, z = cloud.positions.T
    
    assert np.all(np.abs(z) <= bound)
    assert np.all(np.abs(y) <= bound * VERTICAL_FLATTENING)
    assert np.all(x <= params.radius + bound)
    assert np.all(x >= -bound)


def test_distance_from_axis_bounded():
    """Test planar distance against radius plus the largest planar jitter."""
    params = GalaxyParameters(point_count=20000, radius=6.0, randomness=0.3)
    cloud = generate_galaxy(params, NumPyRandomSource(6))
    distance = np.hypot(cloud.positions[:, 0], cloud.positions[:, 2])
    
    # x and z jitter are independent, so together they reach sqrt(2) times the per-axis bound
    assert np.all(distance <= params.radius * (1.0 + math.sqrt(2.0) * params.randomness))


def test_disk_is_flattened():
    """Test that height spread is much smaller than the planar spread."""
    params = GalaxyParameters(point_count=10000, randomness=1.0, randomness_power=1.0)
    cloud = generate_galaxy(params, NumPyRandomSource(7))
    
    assert np.std(cloud.positions[:, 1]) < 0.2 * np.std(cloud.positions[:, 0])


def test_color_bounded_between_inner_and_outer():
    """Test that every color channel lies between the inner and outer channel."""
    params = GalaxyParameters(point_count=5000, inner_color="#ff6bff", outer_color="#6b6bff")
    cloud = generate_galaxy(params, NumPyRandomSource(8))
    low = np.minimum(params.inner_rgb, params.outer_rgb)
    high = np.maximum(params.inner_rgb, params.outer_rgb)
    
    assert np.all(cloud.colors >= low)
    assert np.all(cloud.colors <= high)


def test_color_monotonic_in_radius():
    """Test that colors move from inner to outer as radius grows."""
    params = GalaxyParameters(point_count=2000, randomness=0.0,
                              inner_color=(0.0, 1.0, 0.2), outer_color=(1.0, 0.0, 0.2))
    cloud = generate_galaxy(params, NumPyRandomSource(9))
    order = np.argsort(np.hypot(cloud.positions[:, 0], cloud.positions[:, 2]))
    colors = cloud.colors[order]
    
    assert np.all(np.diff(colors[:, 0]) >= -1e-12)
    assert np.all(np.diff(colors[:, 1]) <= 1e-12)
    assert np.allclose(colors[:, 2], 0.2)


def test_sizes_vary_within_range():
    """Test per-point size variance around the base size."""
    params = GalaxyParameters(point_count=5000, base_size=0.05)
    cloud = generate_galaxy(params, NumPyRandomSource(10))
    
    assert np.all(cloud.sizes >= 0.5 * params.base_size)
    assert np.all(cloud.sizes <= params.base_size)
    assert np.std(cloud.sizes) > 0


def test_reproducible_with_seed():
    """Test bit-identical output for the same seed and parameters."""
    params = GalaxyParameters(point_count=3000)
    generator = GalaxyGenerator()
    
    cloud1 = generator.generate(params, NumPyRandomSource(42))
    cloud2 = generator.generate(params, NumPyRandomSource(42))
    
    assert np.array_equal(cloud1.positions, cloud2.positions)
    assert np.array_equal(cloud1.colors, cloud2.colors)
    assert np.array_equal(cloud1.sizes, cloud2.sizes)


def test_different_seeds_differ():
    """Test that different seeds give different clouds."""
    params = GalaxyParameters(point_count=1000)
    
    cloud1 = generate_galaxy(params, NumPyRandomSource(1))
    cloud2 = generate_galaxy(params, NumPyRandomSource(2))
    
    assert not np.array_equal(cloud1.positions, cloud2.positions)


def test_branch_assignment_by_index():
    """Test that 8 points over 4 arms land two per arm, ordered by index."""
    params = GalaxyParameters(point_count=8, branch_count=4, spin=0.0, randomness=0.0, radius=2.0)
    cloud = generate_galaxy(params, SequenceRandomSource([0.5]))
    angles = np.mod(np.arctan2(cloud.positions[:, 2], cloud.positions[:, 0]), 2 * np.pi)
    expected = np.array([0.0, np.pi / 2, np.pi, 3 * np.pi / 2] * 2)
    
    assert np.allclose(angles, expected, atol=1e-12)
    for arm in range(4):
        assert np.allclose(angles[arm::4], arm * np.pi / 2, atol=1e-12)
        assert len(angles[arm::4]) == 2


@pytest.mark.parametrize("power", [1.0, 3.0, 10.0])
def test_zero_randomness_lies_on_spiral(power):
    """Test that without randomness every point sits on its arm's spiral curve."""
    params = GalaxyParameters(point_count=1000, radius=4.0, branch_count=3, spin=1.2,
                              randomness=0.0, randomness_power=power)
    values = np.random.default_rng(11).random(params.point_count * 8)
    cloud = generate_galaxy(params, SequenceRandomSource(values))
    
    r = values.reshape(-1, 8)[:, 0] * params.radius
    index = np.arange(params.point_count)
    angle = (index % 3) / 3 * 2 * np.pi + r * params.spin
    
    assert np.allclose(cloud.positions[:, 0], np.cos(angle) * r, rtol=0, atol=1e-12)
    assert np.allclose(cloud.positions[:, 2], np.sin(angle) * r, rtol=0, atol=1e-12)
    assert np.all(cloud.positions[:, 1] == 0.0)


def test_single_point_draw_order():
    """Test how the eight draws of a point map onto position, color and size."""
    params = GalaxyParameters(point_count=1, radius=2.0, branch_count=2, spin=0.5,
                              randomness=0.4, randomness_power=2.0,
                              inner_color=(0.0, 0.0, 0.0), outer_color=(1.0, 1.0, 1.0),
                              base_size=0.1)
    # r, |jx|, sign x (+), |jy|, sign y (-), |jz|, sign z (+), size
    source = SequenceRandomSource([0.5, 0.5, 0.1, 0.2, 0.9, 0.3, 0.4, 0.6])
    cloud = generate_galaxy(params, source)
    
    r = 1.0
    angle = r * 0.5
    jx = 0.5 ** 2 * 0.4 * r
    jy = -(0.2 ** 2) * 0.4 * r
    jz = 0.3 ** 2 * 0.4 * r
    expected = [np.cos(angle) * r + jx, jy * VERTICAL_FLATTENING, np.sin(angle) * r + jz]
    
    assert np.allclose(cloud.positions[0], expected)
    assert np.allclose(cloud.colors[0], [0.5, 0.5, 0.5])
    assert np.isclose(cloud.sizes[0], 0.1 * (0.5 + 0.5 * 0.6))


def test_jax_backend_matches_numpy():
    """Test that the JAX backend reproduces the NumPy result."""
    pytest.importorskip("jax")
    from galaxy_cloud.backends.jax_backend import JAXBackend
    
    params = GalaxyParameters(point_count=1000)
    cloud_np = GalaxyGenerator().generate(params, NumPyRandomSource(12))
    cloud_jax = GalaxyGenerator(JAXBackend()).generate(params, NumPyRandomSource(12))
    
    assert np.allclose(cloud_np.positions, cloud_jax.positions, atol=1e-4)
    assert np.allclose(cloud_np.colors, cloud_jax.colors, atol=1e-5)
    assert np.allclose(cloud_np.sizes, cloud_jax.sizes, atol=1e-6)
