"""Per-frame input snapshot consumed by the scene and the boat."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class InputSnapshot:
    """Sanitized input for one frame."""
    forward_held: bool = False
    backward_held: bool = False
    turn_left_held: bool = False
    turn_right_held: bool = False
    camera_mode_1_pressed: bool = False
    camera_mode_2_pressed: bool = False
    pointer_drag: Tuple[float, float] = (0.0, 0.0)
    scroll: float = 0.0
