"""I2C bus access: the shared handle and its smbus2 transport."""

from .handle import BusHandle
from .protocols import RegisterTransport
from .transport import SMBusTransport

__all__ = ["BusHandle", "RegisterTransport", "SMBusTransport"]
