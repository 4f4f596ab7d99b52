"""Scene configuration management."""

import json
import yaml
from typing import Dict, Any, List, Optional
from pathlib import Path
from dataclasses import dataclass, asdict, field
from galaxy_cloud.core.animator import GalaxyAnimator
from galaxy_cloud.core.cluster import GalaxyCluster
from galaxy_cloud.core.generator import GalaxyGenerator
from galaxy_cloud.core.parameters import GalaxyParameters, clamp_parameters
from galaxy_cloud.backends.factory import get_backend
from galaxy_cloud.errors import InvalidParameters


@dataclass
class GalaxyConfig:
    """Placement and parameters of one galaxy."""
    params: Dict[str, Any] = field(default_factory=dict)
    position: List[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    scale: float = 1.0

    def to_parameters(self) -> GalaxyParameters:
        return GalaxyParameters.from_dict(self.params)


@dataclass
class AnimationConfig:
    """Animator settings."""
    mode: str = "per_second"
    base_opacity: float = 0.8
    pulse_amplitude: float = 0.0
    pulse_frequency: float = 1.0


@dataclass
class RenderConfig:
    """Preview renderer settings."""
    figsize: List[float] = field(default_factory=lambda: [8.0, 8.0])
    dpi: int = 100
    elevation: float = 20.0
    azimuth: float = 45.0
    starfield: bool = True
    starfield_count: int = 300
    starfield_scale: float = 30.0
    point_scale: float = 400.0


@dataclass
class SceneConfig:
    """Scene configuration."""
    galaxies: List[GalaxyConfig] = field(default_factory=lambda: [GalaxyConfig()])
    animation: AnimationConfig = field(default_factory=AnimationConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    backend: str = "numpy"

    # Reproducibility
    seed: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SceneConfig":
        data = dict(data or {})
        galaxies = data.pop("galaxies", None)
        animation = data.pop("animation", None) or {}
        render = data.pop("render", None) or {}
        try:
            config = cls(
                animation=AnimationConfig(**animation),
                render=RenderConfig(**render),
                **data
            )
        except TypeError as exc:
            raise ValueError(f"Invalid scene configuration: {exc}")
        if galaxies is not None:
            config.galaxies = [_galaxy_config(i, g) for i, g in enumerate(galaxies)]
        return config

    def build_cluster(self, clamp: bool = False) -> GalaxyCluster:
        """Create a cluster with every configured galaxy generated.

        Args:
            clamp: Clamp each galaxy's parameters into the control ranges first

        Raises:
            InvalidParameters: If any galaxy has invalid parameters
        """
        animator = GalaxyAnimator(
            mode=self.animation.mode,
            base_opacity=self.animation.base_opacity,
            pulse_amplitude=self.animation.pulse_amplitude,
            pulse_frequency=self.animation.pulse_frequency
        )
        generator = GalaxyGenerator(get_backend(self.backend))
        cluster = GalaxyCluster(generator=generator, animator=animator, seed=self.seed)
        for galaxy in self.galaxies:
            params = galaxy.to_parameters()
            if clamp:
                params = clamp_parameters(params)
            cluster.add_galaxy(params, position=galaxy.position, scale=galaxy.scale)
        return cluster


def _galaxy_config(index: int, data: Dict[str, Any]) -> GalaxyConfig:
    try:
        galaxy = GalaxyConfig(**data)
    except TypeError as exc:
        raise InvalidParameters([f"galaxy {index}: {exc}"])
    if len(galaxy.position) != 3:
        raise InvalidParameters([f"galaxy {index}: position must have 3 components"])
    return galaxy


def load_config(config_path: str) -> SceneConfig:
    """Load scene configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        SceneConfig object
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix in ('.yaml', '.yml'):
            data = yaml.safe_load(f)
        elif config_path.suffix == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {config_path.suffix}. Use .json or .yaml")

    return SceneConfig.from_dict(data)


def save_config(config: SceneConfig, output_path: str):
    """Save scene configuration to file.

    Args:
        config: SceneConfig object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    if output_path.suffix not in ('.yaml', '.yml', '.json'):
        raise ValueError(f"Unsupported config format: {output_path.suffix}. Use .json or .yaml")
    data = asdict(config)

    with open(output_path, 'w') as f:
        if output_path.suffix in ('.yaml', '.yml'):
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        else:
            json.dump(data, f, indent=2)
