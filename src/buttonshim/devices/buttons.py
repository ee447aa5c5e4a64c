"""Button control."""

import queue

from buttonshim.core.debounce import ChannelState
from buttonshim.core.sampler import ButtonSampler, SamplingTask
from buttonshim.models import Button
from buttonshim.protocols import ButtonEvent, ButtonObserver


class Buttons:
    """
    The SHIM's five buttons.

    Thin facade over a ButtonSampler: per-button accessors plus polling
    and subscription controls.
    """

    def __init__(
        self,
        sampler: ButtonSampler,
        poll_interval: float = 0.1,
        max_consecutive_failures: int | None = None,
    ):
        """
        Initialize button control.

        Args:
            sampler: Sampler reading the shared bus
            poll_interval: Default seconds between samples for start_polling()
            max_consecutive_failures: Default failure limit for start_polling()
        """
        self.sampler = sampler
        self.poll_interval = poll_interval
        self.max_consecutive_failures = max_consecutive_failures

    @property
    def a(self) -> ChannelState:
        return self.sampler.current(Button.A)

    @property
    def b(self) -> ChannelState:
        return self.sampler.current(Button.B)

    @property
    def c(self) -> ChannelState:
        return self.sampler.current(Button.C)

    @property
    def d(self) -> ChannelState:
        return self.sampler.current(Button.D)

    @property
    def e(self) -> ChannelState:
        return self.sampler.current(Button.E)

    def state(self, button: Button | int) -> ChannelState:
        """Latest state of one button."""
        return self.sampler.current(button)

    def update(self) -> tuple[ChannelState, ...]:
        """
        Sample the buttons once (without the background thread).

        Raises:
            TransportError: If the bus read fails
        """
        return self.sampler.sample_once()

    def start_polling(self, interval: float | None = None) -> SamplingTask:
        """Start background sampling; see ButtonSampler.start()."""
        return self.sampler.start(
            interval or self.poll_interval, self.max_consecutive_failures
        )

    def stop_polling(self) -> None:
        """Stop background sampling."""
        self.sampler.stop()

    def set_hold_threshold(self, seconds: float) -> None:
        """
        Change how long a press must last to count as a hold.

        Takes effect from the next sample.
        """
        self.sampler.hold_threshold = seconds

    def subscribe(self) -> "queue.Queue[ButtonEvent]":
        """Get a new queue receiving every future button event."""
        return self.sampler.subscribe()

    def unsubscribe(self, events: "queue.Queue[ButtonEvent]") -> None:
        self.sampler.unsubscribe(events)

    def register_observer(self, observer: ButtonObserver) -> None:
        self.sampler.register_observer(observer)

    def unregister_observer(self, observer: ButtonObserver) -> None:
        self.sampler.unregister_observer(observer)
