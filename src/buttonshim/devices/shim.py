"""
Button SHIM peripheral facade.

Architecture Overview
=====================

::

    ┌──────────────────────────────────────────────┐
    │                 ButtonShim                   │
    │   bring-up, lifecycle, set_pixel shortcut    │
    └──────────┬──────────────────────┬────────────┘
               │                      │
          shim.led               shim.buttons
               ↓                      ↓
    ┌──────────────────┐   ┌──────────────────────┐
    │       Led        │   │  Buttons             │
    │  FrameEncoder    │   │   └ ButtonSampler    │
    └────────┬─────────┘   └──────────┬───────────┘
             │   130-byte frame       │  1-byte read
             └──────────┬─────────────┘
                        ↓
              ┌───────────────────┐
              │     BusHandle     │  one lock, one transaction at a time
              └─────────┬─────────┘
                        ↓
              ┌───────────────────┐
              │  SMBusTransport   │  smbus2, /dev/i2c-N @ 0x3F
              └───────────────────┘

Usage Example
-------------

.. code-block:: python

    with ButtonShim() as shim:
        events = shim.buttons.subscribe()
        shim.buttons.start_polling()
        while True:
            event = events.get()
            if event.pressed:
                shim.set_pixel(0xFF, 0x00, 0x00)
"""

import logging

from buttonshim.bus import BusHandle, RegisterTransport, SMBusTransport
from buttonshim.core.registers import (
    CONFIG_BUTTONS_IN,
    OUTPUT_IDLE,
    POLARITY_NORMAL,
    REG_CONFIG,
    REG_OUTPUT,
    REG_POLARITY,
)
from buttonshim.core.sampler import ButtonSampler
from buttonshim.exceptions import ErrorContext
from buttonshim.models import ShimConfig

from .buttons import Buttons
from .led import Led

logger = logging.getLogger(__name__)


class ButtonShim:
    """
    One Button SHIM: five buttons and an RGB LED on a shared I2C bus.

    Opening the SHIM configures the I/O expander once (buttons as inputs,
    LED lines as outputs, no polarity inversion, outputs low). The LED and
    the buttons then share a single BusHandle.
    """

    def __init__(
        self,
        config: ShimConfig | None = None,
        transport: RegisterTransport | None = None,
    ):
        """
        Open and configure the SHIM.

        Args:
            config: Connection and sampling settings (defaults if None)
            transport: Register transport to use instead of opening
                /dev/i2c-N with smbus2

        Raises:
            BusOpenError: If the I2C bus cannot be opened
            TransportError: If configuring the device fails
        """
        self.config = config or ShimConfig()
        if transport is None:
            transport = SMBusTransport(self.config.i2c_bus, self.config.address)

        self.bus = BusHandle(transport)
        try:
            self.configure()
        except Exception:
            self.bus.close()
            raise

        self.led = Led(self.bus)
        self.buttons = Buttons(
            ButtonSampler(self.bus, hold_threshold=self.config.hold_threshold),
            poll_interval=self.config.poll_interval,
            max_consecutive_failures=self.config.max_consecutive_failures,
        )

    def configure(self) -> None:
        """
        Write the I/O expander's direction, polarity and output registers.

        Raises:
            TransportError: If a register write fails
        """
        with ErrorContext("configure button shim", logger_instance=logger):
            with self.bus.exclusive():
                self.bus.write_register(REG_CONFIG, CONFIG_BUTTONS_IN)
                self.bus.write_register(REG_POLARITY, POLARITY_NORMAL)
                self.bus.write_register(REG_OUTPUT, OUTPUT_IDLE)
        logger.info(f"Button SHIM configured at 0x{self.config.address:02X}")

    def set_pixel(self, r: int, g: int, b: int) -> None:
        """Set the LED color; see Led.set_pixel()."""
        self.led.set_pixel(r, g, b)

    def close(self) -> None:
        """Stop polling and release the bus."""
        self.buttons.stop_polling()
        self.bus.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
