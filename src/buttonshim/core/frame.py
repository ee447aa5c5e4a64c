"""
Bit-banged LED frame encoder.

The SHIM's RGB LED is an APA102-style addressable LED wired to two pins of
the output register: bit 7 carries data and bit 6 the clock. There is no
SPI hardware in between, so one LED update is sent as a sequence of
output-register values written back to back in a single I2C transaction.

Frame layout
------------

::

    [REG_OUTPUT, 0x00]                 preamble: target register + dummy byte
    0x00 0x00                          start-of-frame
    0xEF                               brightness / frame byte
    B  G  R                            color, blue first
    0x00 0x00                          end-of-frame

Each of the eight logical bytes becomes 16 register values, MSB first::

    bit = 1:   clock low, data 1   ->  0b1000_0000
               clock high, data 1  ->  0b1100_0000
    bit = 0:   clock low, data 0   ->  0b0000_0000
               clock high, data 0  ->  0b0100_0000

Bits other than data and clock are copied from the previous value, so the
frame never disturbs the rest of the output register.

Total length is always 2 + 8 * 16 = 130 bytes.
"""

import threading

from .registers import PIN_LED_CLOCK, PIN_LED_DATA, REG_OUTPUT

START_OF_FRAME = (0x00, 0x00)
BRIGHTNESS = 0xEF
END_OF_FRAME = (0x00, 0x00)

FRAME_LENGTH = 2 + 8 * 16


class FrameEncoder:
    """
    Turns an RGB triple into the byte sequence for one LED update.

    The encoder recycles a scratch buffer between calls and hands out an
    immutable copy, so a returned frame never changes afterwards. Calls are
    serialized internally, one encoder can be shared between threads.
    """

    def __init__(self, register: int = REG_OUTPUT):
        """
        Initialize frame encoder.

        Args:
            register: Output register the frame is written to
        """
        self._register = register
        self._buffer = bytearray()
        self._lock = threading.Lock()

    def encode(self, r: int, g: int, b: int) -> bytes:
        """
        Encode one color frame.

        Args:
            r: Red (0-255)
            g: Green (0-255)
            b: Blue (0-255)

        Returns:
            130 bytes, ready for a raw bus write

        Raises:
            ValueError: If a channel is outside 0-255
        """
        for name, value in (("r", r), ("g", g), ("b", b)):
            if not 0 <= value <= 0xFF:
                raise ValueError(f"{name} must be 0-255, got {value}")

        with self._lock:
            buffer = self._buffer
            buffer.clear()
            buffer.extend((self._register, 0x00))

            for byte in (*START_OF_FRAME, BRIGHTNESS, b, g, r, *END_OF_FRAME):
                self._write_byte(byte)

            return bytes(buffer)

    def _write_byte(self, byte: int) -> None:
        """Clock out one byte, most significant bit first."""
        buffer = self._buffer
        for _ in range(8):
            bit = byte & 0x80
            value = _set_bit(buffer[-1], PIN_LED_CLOCK, False)
            value = _set_bit(value, PIN_LED_DATA, bool(bit))
            buffer.append(value)
            buffer.append(_set_bit(value, PIN_LED_CLOCK, True))
            byte <<= 1


def _set_bit(value: int, pin: int, high: bool) -> int:
    if high:
        return value | (1 << pin)
    return value & ~(1 << pin) & 0xFF


_default_encoder = FrameEncoder()


def encode_frame(r: int, g: int, b: int) -> bytes:
    """Encode a color frame for the default output register."""
    return _default_encoder.encode(r, g, b)
