"""
Periodic button sampling and event dispatch.

One tick
--------

::

    BusHandle.read_register(REG_INPUT)        one bus read (may raise TransportError)
          ↓
    advance(previous, sample, now, threshold) pure, computes a fresh tuple
          ↓
    publish                                    readers see old or new tuple, never a mix
          ↓
    diff previous vs. new                      one ButtonEvent per changed channel, A..E
          ↓
    observers and subscriber queues

A failed read leaves the published states untouched and raises.

Threading
---------

- Ticks are serialized: a tick's events are all delivered before the next
  tick reads the bus, whether ticks come from the background task or from
  ``sample_once`` on another thread.
- Subscriber queues are unbounded. A slow consumer lags behind; the
  sampler never blocks on it and never drops events.
- Observers run on the sampling thread. Do not call ``sample_once`` from
  an observer.
"""

import logging
import queue
import threading
import time
from collections.abc import Callable

from buttonshim.bus import BusHandle
from buttonshim.exceptions import TransportError
from buttonshim.models import Button
from buttonshim.protocols import ButtonEvent, ButtonObserver
from buttonshim.utils import ObserverManager

from .debounce import DEFAULT_HOLD_THRESHOLD, ChannelState, advance, initial_states
from .registers import REG_INPUT

logger = logging.getLogger(__name__)


class _QueueSink:
    """Adapts a subscriber queue to the ButtonObserver protocol."""

    def __init__(self, events: "queue.Queue[ButtonEvent]"):
        self.events = events

    def on_button_event(self, event: ButtonEvent) -> None:
        self.events.put(event)

    def __repr__(self) -> str:
        return f"<queue subscriber {id(self.events):#x}>"


class SamplingTask:
    """
    Handle for a running background sampling thread.

    Returned by ButtonSampler.start(). Stopping is cooperative: the thread
    finishes its current tick, then exits instead of sleeping again.
    """

    def __init__(
        self,
        sampler: "ButtonSampler",
        interval: float,
        max_consecutive_failures: int | None = None,
    ):
        """
        Initialize sampling task (not started).

        Args:
            sampler: Sampler to tick
            interval: Seconds to sleep between ticks
            max_consecutive_failures: Stop after this many failed ticks in a
                row. None keeps sampling forever.
        """
        self._sampler = sampler
        self.interval = interval
        self.max_consecutive_failures = max_consecutive_failures
        self.consecutive_failures = 0
        self.last_error: Exception | None = None
        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._run, name="buttonshim-sampler", daemon=True
        )

    def start(self) -> None:
        self._thread.start()
        logger.info(f"Button sampling started (interval={self.interval}s)")

    def stop(self, timeout: float | None = 1.0) -> None:
        """
        Stop sampling and wait for the thread to exit.

        Args:
            timeout: Seconds to wait for the thread (None = wait forever)
        """
        self._stop_event.set()
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join(timeout=timeout)
            if self._thread.is_alive():
                logger.warning("Button sampling thread did not stop within timeout")
                return
        logger.info("Button sampling stopped")

    @property
    def is_running(self) -> bool:
        return self._thread.is_alive() and not self._stop_event.is_set()

    def _run(self) -> None:
        while not self._stop_event.is_set():
            try:
                self._sampler.sample_once()
            except TransportError as e:
                if self._record_failure(e):
                    break
            except Exception as e:
                logger.exception(f"Unexpected error while sampling buttons: {e}")
                if self._record_failure(e):
                    break
            else:
                if self.consecutive_failures:
                    logger.info(
                        f"Button sampling recovered after {self.consecutive_failures} failed sample(s)"
                    )
                    self.consecutive_failures = 0

            self._stop_event.wait(self.interval)

    def _record_failure(self, error: Exception) -> bool:
        """Count a failed tick. Returns True if the task should give up."""
        self.consecutive_failures += 1
        self.last_error = error
        message = getattr(error, "technical_message", str(error))
        logger.error(f"Button sample failed ({self.consecutive_failures} in a row): {message}")

        limit = self.max_consecutive_failures
        if limit is not None and self.consecutive_failures >= limit:
            logger.error(f"Stopping button sampling after {limit} consecutive failures")
            self._stop_event.set()
            return True
        return False

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.stop()


class ButtonSampler:
    """
    Owns the published button states and turns samples into events.

    The sampler is the only writer of the channel states. Any number of
    threads may read them through ``current()`` and ``states()``.

    Example:
        ```python
        sampler = ButtonSampler(bus, hold_threshold=1.0)
        events = sampler.subscribe()
        with sampler.start(interval=0.05):
            event = events.get()
        ```
    """

    def __init__(
        self,
        bus: BusHandle,
        hold_threshold: float = DEFAULT_HOLD_THRESHOLD,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize button sampler.

        Args:
            bus: Shared bus handle for the peripheral
            hold_threshold: Seconds a press must last to become a hold
            clock: Monotonic time source in seconds
        """
        self._bus = bus
        self._clock = clock
        self._hold_threshold = _check_threshold(hold_threshold)

        self._states: tuple[ChannelState, ...] = initial_states()
        self._state_lock = threading.Lock()
        # Serializes whole ticks so events of consecutive ticks never interleave
        self._tick_lock = threading.Lock()

        self._observers = ObserverManager[ButtonObserver](observer_type_name="button")
        self._sinks: dict["queue.Queue[ButtonEvent]", _QueueSink] = {}
        self._sinks_lock = threading.Lock()

        self._task: SamplingTask | None = None
        self._task_lock = threading.Lock()

    # ================================================================
    # SAMPLING
    # ================================================================

    def sample_once(self) -> tuple[ChannelState, ...]:
        """
        Read the buttons once, publish the new states and emit events.

        Returns:
            The newly published states, A to E

        Raises:
            TransportError: If the bus read fails (states are left unchanged)
        """
        with self._tick_lock:
            sample = self._bus.read_register(REG_INPUT)
            now = self._clock()

            with self._state_lock:
                previous = self._states
            current = advance(previous, sample, now, self._hold_threshold)
            with self._state_lock:
                self._states = current

            for index, (old, new) in enumerate(zip(previous, current)):
                if old != new:
                    event = ButtonEvent(Button.from_index(index), new)
                    logger.debug(f"Button event: {event}")
                    self._observers.notify("on_button_event", event)

            return current

    def start(
        self, interval: float, max_consecutive_failures: int | None = None
    ) -> SamplingTask:
        """
        Start sampling on a background thread.

        Returns immediately. If sampling is already running, the running
        task is returned unchanged.

        Args:
            interval: Seconds between samples
            max_consecutive_failures: Stop after this many failed samples in
                a row (None = never stop on failures)

        Returns:
            Handle to the running task
        """
        if interval <= 0:
            raise ValueError(f"Sampling interval must be positive, got {interval}")

        with self._task_lock:
            if self._task is not None and self._task.is_running:
                logger.warning("Button sampling is already running")
                return self._task

            self._task = SamplingTask(self, interval, max_consecutive_failures)
            self._task.start()
            return self._task

    def stop(self, timeout: float | None = 1.0) -> None:
        """Stop background sampling, if running."""
        with self._task_lock:
            task, self._task = self._task, None
        if task is not None:
            task.stop(timeout)

    @property
    def task(self) -> SamplingTask | None:
        """The current background task, if one was started."""
        return self._task

    # ================================================================
    # STATE ACCESS
    # ================================================================

    def current(self, button: Button | int) -> ChannelState:
        """
        Latest published state of one button.

        Args:
            button: Button or channel index (0-4)
        """
        index = button.index if isinstance(button, Button) else Button.from_index(button).index
        with self._state_lock:
            return self._states[index]

    def states(self) -> tuple[ChannelState, ...]:
        """Snapshot of all five published states, A to E."""
        with self._state_lock:
            return self._states

    @property
    def hold_threshold(self) -> float:
        return self._hold_threshold

    @hold_threshold.setter
    def hold_threshold(self, value: float) -> None:
        self._hold_threshold = _check_threshold(value)

    # ================================================================
    # EVENT DELIVERY
    # ================================================================

    def register_observer(self, observer: ButtonObserver) -> None:
        """Register an observer for button events."""
        self._observers.register(observer)

    def unregister_observer(self, observer: ButtonObserver) -> None:
        """Unregister an observer."""
        self._observers.unregister(observer)

    def subscribe(self) -> "queue.Queue[ButtonEvent]":
        """
        Create a new event queue that receives every future button event.

        Each call returns an independent queue; all subscribers see all
        events in the same order.
        """
        events: "queue.Queue[ButtonEvent]" = queue.Queue()
        sink = _QueueSink(events)
        with self._sinks_lock:
            self._sinks[events] = sink
        self._observers.register(sink)
        return events

    def unsubscribe(self, events: "queue.Queue[ButtonEvent]") -> None:
        """Stop delivering events to a queue returned by subscribe()."""
        with self._sinks_lock:
            sink = self._sinks.pop(events, None)
        if sink is None:
            logger.warning("Attempted to unsubscribe an unknown event queue")
            return
        self._observers.unregister(sink)

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.stop()


def _check_threshold(value: float) -> float:
    if value <= 0:
        raise ValueError(f"Hold threshold must be positive, got {value}")
    return float(value)
