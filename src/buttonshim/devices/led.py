"""RGB LED control."""

import logging

from buttonshim.bus import BusHandle
from buttonshim.core.frame import FrameEncoder
from buttonshim.models import Color

logger = logging.getLogger(__name__)


class Led:
    """
    The SHIM's single RGB LED.

    Each color change encodes a fresh 130-byte frame and writes it through
    the shared bus handle as one transaction. Safe to call from any thread,
    including from a button observer.
    """

    def __init__(self, bus: BusHandle, encoder: FrameEncoder | None = None):
        """
        Initialize LED control.

        Args:
            bus: Shared bus handle for the peripheral
            encoder: Frame encoder (a new one by default)
        """
        self._bus = bus
        self._encoder = encoder or FrameEncoder()
        self._color: Color | None = None

    def set_pixel(self, r: int, g: int, b: int) -> None:
        """
        Set the LED color.

        Args:
            r: Red (0-255)
            g: Green (0-255)
            b: Blue (0-255)

        Raises:
            ValueError: If a channel is outside 0-255
            TransportError: If the frame write fails. The recorded color is
                not rolled back; the LED shows whatever the partial frame
                produced.
        """
        frame = self._encoder.encode(r, g, b)
        self._color = Color(r=r, g=g, b=b)
        logger.debug(f"Setting LED to {self._color.to_hex()}")
        self._bus.write_bytes(frame)

    def set_color(self, color: Color) -> None:
        """Set the LED from a Color model."""
        self.set_pixel(*color.to_rgb_tuple())

    def off(self) -> None:
        """Turn the LED off."""
        self.set_pixel(0, 0, 0)

    @property
    def color(self) -> Color | None:
        """Last color requested, or None if the LED was never set."""
        return self._color
