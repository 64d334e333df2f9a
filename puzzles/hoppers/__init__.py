"""
Hoppers: frogs jump over green frogs until only the red frog remains.
"""

from .board import CellType, HoppersConfig
from .model import HoppersModel

__all__ = ["CellType", "HoppersConfig", "HoppersModel"]
