"""Steerable boat floating on the wave surface."""

from .controller import AlignmentMode, BoatController, BoatPose

__all__ = ["AlignmentMode", "BoatController", "BoatPose"]
