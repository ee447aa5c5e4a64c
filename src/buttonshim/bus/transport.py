"""smbus2-backed register transport."""

import logging

from smbus2 import SMBus, i2c_msg

from buttonshim.exceptions import BusOpenError

logger = logging.getLogger(__name__)


class SMBusTransport:
    """
    Register transport over Linux i2c-dev using smbus2.

    Single-register accesses use SMBus byte-data transfers. Raw writes
    (LED frames) go out as one plain I2C write message via ``i2c_rdwr``,
    since they are longer than the 32-byte SMBus block limit.
    """

    def __init__(self, bus_id: int, address: int):
        """
        Open the I2C bus.

        Args:
            bus_id: Bus number (as in /dev/i2c-N)
            address: 7-bit slave address of the peripheral

        Raises:
            BusOpenError: If /dev/i2c-N cannot be opened
        """
        self.bus_id = bus_id
        self.address = address
        try:
            self._bus = SMBus(bus_id)
        except OSError as e:
            raise BusOpenError(bus_id, str(e)) from e
        logger.info(f"Opened /dev/i2c-{bus_id} for device 0x{address:02X}")

    def read_byte_data(self, register: int) -> int:
        return self._bus.read_byte_data(self.address, register)

    def write_byte_data(self, register: int, value: int) -> None:
        self._bus.write_byte_data(self.address, register, value)

    def write(self, data: bytes) -> None:
        self._bus.i2c_rdwr(i2c_msg.write(self.address, data))

    def close(self) -> None:
        self._bus.close()
        logger.info(f"Closed /dev/i2c-{self.bus_id}")

    def __repr__(self) -> str:
        return f"SMBusTransport(bus_id={self.bus_id}, address=0x{self.address:02X})"
