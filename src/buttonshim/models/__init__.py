"""Data models for the Button SHIM."""

from .color import Color
from .config import DEFAULT_CONFIG_PATH, ShimConfig
from .enums import Button

__all__ = [
    # Enums
    "Button",
    # Models
    "Color",
    "DEFAULT_CONFIG_PATH",
    "ShimConfig",
]
