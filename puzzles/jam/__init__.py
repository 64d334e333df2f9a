"""
Traffic Jam: slide cars along their axis until the X car reaches the right edge.
"""

from .board import JamConfig
from .car import Axis, Car
from .model import JamModel

__all__ = ["Axis", "Car", "JamConfig", "JamModel"]
