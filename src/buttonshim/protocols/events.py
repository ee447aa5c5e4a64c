"""Button events emitted by the sampler."""

from dataclasses import dataclass

from buttonshim.core.debounce import ChannelState, Clicked, Hold, Pressed, Released
from buttonshim.models import Button


@dataclass(frozen=True, slots=True)
class ButtonEvent:
    """A button's channel state changed.

    Emitted once per transition, never for a sample that leaves the state
    unchanged.
    """

    button: Button
    state: ChannelState

    @property
    def pressed(self) -> bool:
        return isinstance(self.state, Pressed)

    @property
    def released(self) -> bool:
        return isinstance(self.state, Released)

    @property
    def held(self) -> bool:
        return isinstance(self.state, Hold)

    @property
    def clicked(self) -> bool:
        return isinstance(self.state, Clicked)

    def __str__(self) -> str:
        return f"{self.button.name} -> {type(self.state).__name__}"
