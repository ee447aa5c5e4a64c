"""Color model for LED control."""

from pydantic import BaseModel, ConfigDict, Field


class Color(BaseModel):
    """Standard 8-bit RGB color model.

    The model is frozen so colors can be used as dict keys and shared
    between threads.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @classmethod
    def off(cls) -> "Color":
        """Create off (black) color."""
        return cls(r=0, g=0, b=0)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse a CSS hex color string ('#9400D3' or '9400d3').

        Raises:
            ValueError: If the string is not six hex digits
        """
        digits = value.lstrip("#")
        if len(digits) != 6:
            raise ValueError(f"Expected a 6-digit hex color, got {value!r}")
        number = int(digits, 16)
        return cls(r=(number >> 16) & 0xFF, g=(number >> 8) & 0xFF, b=number & 0xFF)

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Convert to CSS hex color string (e.g., '#FF0000')."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"
