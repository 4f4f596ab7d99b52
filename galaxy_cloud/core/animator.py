"""Per-frame galaxy animation: rigid rotation and an opacity pulse."""

import math
from typing import Literal
from galaxy_cloud.core.instance import GalaxyInstance
from galaxy_cloud.core.parameters import REFERENCE_FRAME_RATE

TickMode = Literal["per_second", "per_frame"]


def per_frame_to_per_second(step: float, fps: float = REFERENCE_FRAME_RATE) -> float:
    """Convert a per-frame rotation increment to an angular velocity (rad/s)."""
    return step * fps


def per_second_to_per_frame(speed: float, fps: float = REFERENCE_FRAME_RATE) -> float:
    """Convert an angular velocity (rad/s) to a per-frame increment."""
    return speed / fps


class GalaxyAnimator:
    """Advances galaxy rotation and opacity once per rendered frame.

    In ``per_second`` mode ``rotation_speed`` is an angular velocity and
    the rotation advances by ``rotation_speed * delta_time``, so it does not
    depend on the frame rate. ``per_frame`` mode reproduces a fixed
    increment per call (``rotation_speed / reference_fps``) and ignores the
    delta: the galaxy then spins faster on faster displays.
    """

    def __init__(
        self,
        mode: TickMode = "per_second",
        base_opacity: float = 0.8,
        pulse_amplitude: float = 0.0,
        pulse_frequency: float = 1.0,
        reference_fps: float = REFERENCE_FRAME_RATE
    ):
        """Initialize animator.

        Args:
            mode: 'per_second' or 'per_frame'
            base_opacity: Opacity around which the pulse oscillates
            pulse_amplitude: Pulse amplitude (0 disables the pulse)
            pulse_frequency: Pulse angular frequency (rad per unit elapsed time)
            reference_fps: Frame rate assumed by 'per_frame' mode
        """
        if mode not in ("per_second", "per_frame"):
            raise ValueError(f"Unknown tick mode: {mode}. Use 'per_second' or 'per_frame'")
        if reference_fps <= 0:
            raise ValueError(f"reference_fps must be > 0, got {reference_fps}")
        self.mode = mode
        self.base_opacity = base_opacity
        self.pulse_amplitude = pulse_amplitude
        self.pulse_frequency = pulse_frequency
        self.reference_fps = reference_fps

    def advance(self, instance: GalaxyInstance, elapsed_time: float, delta_time: float):
        """Advance one frame.

        Args:
            instance: Galaxy to animate
            elapsed_time: Time since the animation started
            delta_time: Time since the previous frame
        """
        if self.mode == "per_second":
            instance.rotation_y += instance.params.rotation_speed * delta_time
        else:
            instance.rotation_y += per_second_to_per_frame(instance.params.rotation_speed, self.reference_fps)

        instance.opacity = self.opacity_at(elapsed_time)

    def opacity_at(self, elapsed_time: float) -> float:
        """Pulsed opacity at a given elapsed time, clipped to [0, 1]."""
        opacity = self.base_opacity + self.pulse_amplitude * math.sin(elapsed_time * self.pulse_frequency)
        return min(max(opacity, 0.0), 1.0)
