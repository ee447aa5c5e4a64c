"""Enumerations for the Button SHIM."""

from enum import Enum


class Button(str, Enum):
    """The five buttons, in input-register bit order."""

    A = "a"  # bit 0
    B = "b"  # bit 1
    C = "c"  # bit 2
    D = "d"  # bit 3
    E = "e"  # bit 4

    @property
    def index(self) -> int:
        """Bit position of this button in the input register (0-4)."""
        return _ORDER.index(self)

    @classmethod
    def from_index(cls, index: int) -> "Button":
        """
        Get the button for a channel index.

        Raises:
            ValueError: If index is not in 0-4
        """
        if not 0 <= index < len(_ORDER):
            raise ValueError(f"Button index must be 0-{len(_ORDER) - 1}, got {index}")
        return _ORDER[index]


_ORDER = (Button.A, Button.B, Button.C, Button.D, Button.E)
