"""Event and observer protocol definitions."""

from .events import ButtonEvent
from .observers import ButtonObserver

__all__ = ["ButtonEvent", "ButtonObserver"]
