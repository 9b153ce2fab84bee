"""Rendering components for the boat-on-waves scene."""

from .boat import BoatRenderer
from .text import TextRenderer
from .water import WaterRenderer

__all__ = ["BoatRenderer", "TextRenderer", "WaterRenderer"]
