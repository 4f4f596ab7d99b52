"""Configuration utilities."""

from galaxy_cloud.utils.config import (
    load_config,
    save_config,
    SceneConfig,
    GalaxyConfig,
    AnimationConfig,
    RenderConfig
)

__all__ = ["load_config", "save_config", "SceneConfig", "GalaxyConfig", "AnimationConfig", "RenderConfig"]
