"""Bus transport exceptions.

This module defines exceptions for I2C transaction failures:
- TransportError: A register read or write failed (timeout, NACK, arbitration loss)
- BusOpenError: The I2C device node could not be opened
"""

from .base import ButtonShimError


class TransportError(ButtonShimError):
    """An I2C transaction with the peripheral failed."""

    def __init__(
        self,
        operation: str,
        register: int | None = None,
        original_error: str | None = None,
        **kwargs,
    ):
        """
        Initialize transport error.

        Args:
            operation: The bus operation that failed (e.g. "read", "write frame")
            register: Target register address, if known
            original_error: The error message from the I2C library
        """
        target = f" (register 0x{register:02X})" if register is not None else ""
        user_msg = kwargs.pop("user_message", f"I2C {operation} failed{target}.")
        tech_msg = f"I2C {operation}{target} failed"
        if original_error:
            tech_msg += f": {original_error}"

        kwargs.setdefault(
            "recovery_hint",
            "Check that the Button SHIM is seated firmly and that I2C is enabled. "
            "Run 'i2cdetect -y 1' to confirm the device answers at 0x3F.",
        )
        kwargs.setdefault("recoverable", True)
        super().__init__(user_message=user_msg, technical_message=tech_msg, **kwargs)
        self.operation = operation
        self.register = register
        self.original_error = original_error


class BusOpenError(TransportError):
    """The I2C bus device could not be opened."""

    def __init__(self, bus_id: int, original_error: str | None = None):
        """
        Initialize bus-open error.

        Args:
            bus_id: The I2C bus number (as in /dev/i2c-N)
            original_error: The error message from the OS
        """
        user_msg = f"Could not open I2C bus /dev/i2c-{bus_id}."
        recovery = (
            "Enable I2C (e.g. 'sudo raspi-config' > Interface Options > I2C) and "
            "make sure your user is in the 'i2c' group."
        )
        if original_error and "permission" in original_error.lower():
            recovery = "Permission denied: add your user to the 'i2c' group and log in again."

        super().__init__(
            operation="open",
            original_error=original_error,
            user_message=user_msg,
            recoverable=False,
            recovery_hint=recovery,
        )
        self.bus_id = bus_id
