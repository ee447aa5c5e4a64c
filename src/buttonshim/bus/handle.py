"""Serialized access to the SHIM's register interface."""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from buttonshim.exceptions import TransportError, wrap_transport_error

from .protocols import RegisterTransport

logger = logging.getLogger(__name__)


class BusHandle:
    """
    The single point of mutual exclusion for one peripheral.

    Both the LED and the button sampler talk to the device through the same
    handle. Every transaction, including a whole multi-byte LED frame, runs
    with the handle's lock held, so a frame is never interleaved with a
    button read. Errors from the transport come out as TransportError.

    Create exactly one handle per peripheral and share it; do not wrap the
    same transport in a second handle.
    """

    def __init__(self, transport: RegisterTransport):
        """
        Initialize bus handle.

        Args:
            transport: Raw register transport (e.g. SMBusTransport)
        """
        self._transport = transport
        self._lock = threading.RLock()
        self._closed = False

    @contextmanager
    def exclusive(self) -> Iterator["BusHandle"]:
        """
        Hold the bus for several transactions in a row.

        The lock is re-entrant, so the handle's own methods can be called
        inside the block.

        Example:
            ```python
            with bus.exclusive():
                bus.write_register(REG_CONFIG, 0b00011111)
                bus.write_register(REG_POLARITY, 0x00)
            ```
        """
        with self._lock:
            yield self

    def read_register(self, register: int) -> int:
        """
        Read one byte from a register.

        Raises:
            TransportError: If the read fails
        """
        with self._lock:
            self._check_open()
            try:
                return self._transport.read_byte_data(register)
            except OSError as e:
                logger.error(f"Read of register 0x{register:02X} failed: {e}")
                raise wrap_transport_error(e, "read", register) from e

    def write_register(self, register: int, value: int) -> None:
        """
        Write one byte to a register.

        Raises:
            TransportError: If the write fails
        """
        with self._lock:
            self._check_open()
            try:
                self._transport.write_byte_data(register, value)
            except OSError as e:
                logger.error(f"Write of 0x{value:02X} to register 0x{register:02X} failed: {e}")
                raise wrap_transport_error(e, "write", register) from e

    def write_bytes(self, data: bytes) -> None:
        """
        Raw write as one transaction; ``data[0]`` is the target register.

        Raises:
            TransportError: If the write fails. The device may have received
                part of the data.
        """
        register = data[0] if data else None
        with self._lock:
            self._check_open()
            try:
                self._transport.write(data)
            except OSError as e:
                logger.error(f"Raw write of {len(data)} bytes failed: {e}")
                raise wrap_transport_error(e, f"write of {len(data)} bytes", register) from e

    def close(self) -> None:
        """Close the underlying transport. Further transactions raise TransportError."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            try:
                self._transport.close()
            except OSError as e:
                logger.error(f"Error closing bus: {e}")

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise TransportError("access", user_message="The I2C bus has been closed.")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
