"""Button SHIM device facade: LED, buttons and bring-up."""

from .buttons import Buttons
from .led import Led
from .shim import ButtonShim

__all__ = ["ButtonShim", "Buttons", "Led"]
