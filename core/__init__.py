"""Core application components.

Only pygame-free modules are imported here; the window and input layers
live in core.application and core.input_handler.
"""

from .camera import CameraState, OrbitCamera
from .snapshot import InputSnapshot

__all__ = ["CameraState", "OrbitCamera", "InputSnapshot"]
