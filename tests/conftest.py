"""Pytest fixtures for tests."""

import errno
from collections import deque

import pytest

from buttonshim.bus import BusHandle
from buttonshim.core.registers import BUTTON_MASK, REG_INPUT


class FakeTransport:
    """
    In-memory stand-in for the SHIM's register interface.

    The input register returns queued samples first, then ``input_value``
    (all buttons released by default). Every write is recorded.
    """

    def __init__(self, input_value: int = BUTTON_MASK):
        self.input_value = input_value
        self.input_sequence: deque[int] = deque()
        self.register_writes: list[tuple[int, int]] = []
        self.raw_writes: list[bytes] = []
        self.reads: list[int] = []
        self.fail_reads = 0  # number of upcoming reads that fail; -1 = all
        self.fail_writes = False
        self.fail_errno = errno.ETIMEDOUT
        self.closed = False
        self.close_calls = 0

    def queue_inputs(self, *samples: int) -> None:
        self.input_sequence.extend(samples)

    def _maybe_fail_read(self) -> None:
        if self.fail_reads:
            if self.fail_reads > 0:
                self.fail_reads -= 1
            raise OSError(self.fail_errno, "fake read failure")

    def read_byte_data(self, register: int) -> int:
        self.reads.append(register)
        self._maybe_fail_read()
        if register == REG_INPUT and self.input_sequence:
            return self.input_sequence.popleft()
        if register == REG_INPUT:
            return self.input_value
        return 0

    def write_byte_data(self, register: int, value: int) -> None:
        if self.fail_writes:
            raise OSError(self.fail_errno, "fake write failure")
        self.register_writes.append((register, value))

    def write(self, data: bytes) -> None:
        if self.fail_writes:
            raise OSError(self.fail_errno, "fake write failure")
        self.raw_writes.append(bytes(data))

    def close(self) -> None:
        self.closed = True
        self.close_calls += 1


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


@pytest.fixture
def fake_transport():
    """Create a fake transport with all buttons released."""
    return FakeTransport()


@pytest.fixture
def bus(fake_transport):
    """Create a bus handle over the fake transport."""
    handle = BusHandle(fake_transport)
    yield handle
    handle.close()


@pytest.fixture
def clock():
    """Create a manually advanced clock."""
    return FakeClock()
