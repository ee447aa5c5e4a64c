"""Per-button debounce and edge-detection state machine.

Each button channel is in exactly one of four states:

==============  ======================================  ==========================================
Current         Sample: pressed                         Sample: released
==============  ======================================  ==========================================
Released        Pressed(now)                            Released
Pressed(t0)     Hold if now - t0 > threshold,           Clicked if now - t0 < threshold,
                else Pressed(t0)                        else Released
Hold            Hold                                    Released
Clicked         Pressed(now)                            Released
==============  ======================================  ==========================================

``Clicked`` is a one-tick pulse: the next sample always moves it to
``Released`` or ``Pressed``. ``Hold`` is sticky until physical release.

Threshold tie-break: an elapsed time exactly equal to the hold threshold
is not yet a hold while pressed, and is too long to be a click on release
(the channel goes straight to ``Released``).

Every function here is pure: the current time is passed in, nothing is
read from the bus or the clock.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from .registers import NUM_BUTTONS

DEFAULT_HOLD_THRESHOLD = 2.0


@dataclass(frozen=True, slots=True)
class Released:
    """No press in progress."""


@dataclass(frozen=True, slots=True)
class Pressed:
    """Button is down; ``since`` is the monotonic time the press started."""

    since: float


@dataclass(frozen=True, slots=True)
class Hold:
    """Button held continuously past the hold threshold."""


@dataclass(frozen=True, slots=True)
class Clicked:
    """A short press just ended. Lasts a single sample."""


ChannelState = Released | Pressed | Hold | Clicked

RELEASED = Released()
HOLD = Hold()
CLICKED = Clicked()


def transition(
    state: ChannelState, is_pressed: bool, now: float, hold_threshold: float
) -> ChannelState:
    """
    Advance one channel by one sample.

    Args:
        state: Current state of the channel
        is_pressed: True if the button reads as pressed in this sample
        now: Monotonic timestamp of the sample (seconds)
        hold_threshold: Seconds a press must last to become a hold

    Returns:
        The next state of the channel
    """
    match state:
        case Pressed(since=since):
            elapsed = now - since
            if is_pressed:
                return HOLD if elapsed > hold_threshold else state
            return CLICKED if elapsed < hold_threshold else RELEASED
        case Hold():
            return HOLD if is_pressed else RELEASED
        case _:
            # Released and Clicked behave the same way
            return Pressed(now) if is_pressed else RELEASED


def is_pressed(sample: int, index: int) -> bool:
    """Decode one channel of an active-low input sample."""
    return not sample & (1 << index)


def advance(
    states: Sequence[ChannelState], sample: int, now: float, hold_threshold: float
) -> tuple[ChannelState, ...]:
    """
    Advance all five channels with one raw input sample.

    Args:
        states: Current state of each channel, A to E
        sample: Raw input register value (bit i low = button i pressed)
        now: Monotonic timestamp of the sample (seconds)
        hold_threshold: Seconds a press must last to become a hold

    Returns:
        A new tuple of five states; ``states`` is not modified

    Raises:
        ValueError: If ``states`` does not hold exactly five entries
    """
    if len(states) != NUM_BUTTONS:
        raise ValueError(f"Expected {NUM_BUTTONS} channel states, got {len(states)}")

    return tuple(
        transition(state, is_pressed(sample, index), now, hold_threshold)
        for index, state in enumerate(states)
    )


def initial_states() -> tuple[ChannelState, ...]:
    """All channels released."""
    return (RELEASED,) * NUM_BUTTONS
