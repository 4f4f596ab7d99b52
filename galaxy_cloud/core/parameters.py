"""Galaxy parameter record and control ranges."""

import math
import numbers
import warnings
from dataclasses import dataclass, asdict, fields, replace
from typing import Any, Dict, Tuple, Union

from matplotlib.colors import to_rgb

from galaxy_cloud.errors import InvalidParameters

ColorLike = Union[str, Tuple[float, float, float]]

# Reference animation rate the default rotation speed was tuned at
REFERENCE_FRAME_RATE = 60.0

# (min, max, step) for every field exposed on the live control panel.
# step is None for continuous controls.
PARAMETER_RANGES: Dict[str, Tuple[float, float, Any]] = {
    "point_count": (1000, 20000, 500),
    "radius": (1.0, 15.0, None),
    "branch_count": (2, 10, 1),
    "spin": (-5.0, 5.0, None),
    "randomness": (0.0, 2.0, None),
    "randomness_power": (1.0, 10.0, None),
    "base_size": (0.01, 0.1, None),
}


@dataclass(frozen=True)
class GalaxyParameters:
    """Parameters for a single procedurally generated spiral galaxy.

    Two records compare equal only when every field is equal; a galaxy is
    regenerated whenever its record changes by that comparison.
    """
    point_count: int = 6000
    radius: float = 6.0
    branch_count: int = 4
    spin: float = 1.5
    randomness: float = 0.3
    randomness_power: float = 3.0
    inner_color: ColorLike = "#ff6bff"
    outer_color: ColorLike = "#6b6bff"
    base_size: float = 0.035
    rotation_speed: float = 0.001 * REFERENCE_FRAME_RATE  # rad/s

    def validate(self):
        """Check hard constraints.

        Raises:
            InvalidParameters: If any constraint is violated
        """
        errors = []

        if not _is_int(self.point_count) or self.point_count < 1:
            errors.append(f"point_count must be an integer >= 1 (got {self.point_count!r})")
        if not _is_finite(self.radius) or self.radius <= 0:
            errors.append(f"radius must be a finite number > 0 (got {self.radius!r})")
        if not _is_int(self.branch_count) or self.branch_count < 1:
            errors.append(f"branch_count must be an integer >= 1 (got {self.branch_count!r})")
        if not _is_finite(self.spin):
            errors.append(f"spin must be a finite number (got {self.spin!r})")
        if not _is_finite(self.randomness) or self.randomness < 0:
            errors.append(f"randomness must be >= 0 (got {self.randomness!r})")
        if not _is_finite(self.randomness_power) or self.randomness_power < 1:
            errors.append(f"randomness_power must be >= 1 (got {self.randomness_power!r})")
        if not _is_finite(self.base_size) or self.base_size <= 0:
            errors.append(f"base_size must be > 0 (got {self.base_size!r})")
        if not _is_finite(self.rotation_speed):
            errors.append(f"rotation_speed must be a finite number (got {self.rotation_speed!r})")

        for name in ("inner_color", "outer_color"):
            try:
                _parse_color(getattr(self, name))
            except (TypeError, ValueError):
                errors.append(f"{name} is not a valid color (got {getattr(self, name)!r})")

        if errors:
            raise InvalidParameters(errors)

    @property
    def inner_rgb(self) -> Tuple[float, float, float]:
        """Inner color as an RGB float triple."""
        return _color_or_raise("inner_color", self.inner_color)

    @property
    def outer_rgb(self) -> Tuple[float, float, float]:
        """Outer color as an RGB float triple."""
        return _color_or_raise("outer_color", self.outer_color)

    def replace(self, **changes) -> "GalaxyParameters":
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        # Tuples don't survive JSON/YAML, lists do
        for name in ("inner_color", "outer_color"):
            if not isinstance(data[name], str):
                data[name] = list(data[name])
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GalaxyParameters":
        """Build parameters from a plain mapping.

        Missing keys take their defaults; unknown keys are rejected.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidParameters([f"unknown parameter '{key}'" for key in unknown])

        values = dict(data)
        for name in ("inner_color", "outer_color"):
            if isinstance(values.get(name), list):
                values[name] = tuple(values[name])
        return cls(**values)


def clamp_parameters(params: GalaxyParameters) -> GalaxyParameters:
    """Clamp ranged fields into the control panel ranges.

    Returns a new record. A UserWarning names every field that was changed.
    """
    changes = {}
    for name, (low, high, step) in PARAMETER_RANGES.items():
        value = getattr(params, name)
        clamped = min(max(value, low), high)
        if step is not None:
            clamped = low + round((clamped - low) / step) * step
            clamped = int(min(clamped, high))
        if clamped != value:
            changes[name] = clamped

    if not changes:
        return params

    warnings.warn(
        "Galaxy parameters clamped to control ranges: "
        + ", ".join(f"{name}={getattr(params, name)!r} -> {value!r}" for name, value in changes.items()),
        UserWarning
    )
    return replace(params, **changes)


def _parse_color(color: ColorLike) -> Tuple[float, float, float]:
    if isinstance(color, (list, tuple)) and len(color) == 3:
        color = tuple(float(c) for c in color)
    return tuple(float(c) for c in to_rgb(color))


def _color_or_raise(name: str, color: ColorLike) -> Tuple[float, float, float]:
    try:
        return _parse_color(color)
    except (TypeError, ValueError):
        raise InvalidParameters([f"{name} is not a valid color (got {color!r})"])


def _is_int(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _is_finite(value) -> bool:
    try:
        return math.isfinite(value)
    except TypeError:
        return False
