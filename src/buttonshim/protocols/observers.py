"""Observer protocols for button events."""

from typing import Protocol, runtime_checkable

from .events import ButtonEvent


@runtime_checkable
class ButtonObserver(Protocol):
    """
    Observer that receives button transition events.

    Any object with an ``on_button_event`` method can be registered with
    the sampler; there is no limit on the number of observers.
    """

    def on_button_event(self, event: ButtonEvent) -> None:
        """
        Handle a button transition.

        Args:
            event: The button and its new channel state

        Note:
            Called from the sampling thread while the tick is in progress,
            so the next sample waits for every observer to return. Keep it
            fast, or hand off to a queue (see ButtonSampler.subscribe).
            Writing the LED from here is fine.
        """
        ...
