"""Transport protocol consumed by the bus handle."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class RegisterTransport(Protocol):
    """
    Raw register access to one I2C peripheral.

    Implementations are already addressed to the peripheral, block until
    the transaction completes, and raise OSError on failure. They are not
    required to be thread-safe; BusHandle provides mutual exclusion.
    """

    def read_byte_data(self, register: int) -> int:
        """Read one byte from a register."""
        ...

    def write_byte_data(self, register: int, value: int) -> None:
        """Write one byte to a register."""
        ...

    def write(self, data: bytes) -> None:
        """Raw write; the first byte selects the target register."""
        ...

    def close(self) -> None:
        """Release the underlying bus."""
        ...
