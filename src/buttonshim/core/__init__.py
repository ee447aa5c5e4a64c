"""Driver core: debounce state machine and LED frame encoder.

The sampling loop lives in ``buttonshim.core.sampler``; it is not
re-exported here because it depends on the event types in
``buttonshim.protocols``, which in turn depend on this package.
"""

from .debounce import (
    DEFAULT_HOLD_THRESHOLD,
    ChannelState,
    Clicked,
    Hold,
    Pressed,
    Released,
    advance,
    initial_states,
    is_pressed,
    transition,
)
from .frame import FRAME_LENGTH, FrameEncoder, encode_frame

__all__ = [
    # Debounce
    "DEFAULT_HOLD_THRESHOLD",
    "ChannelState",
    "Clicked",
    "Hold",
    "Pressed",
    "Released",
    "advance",
    "initial_states",
    "is_pressed",
    "transition",
    # Frame encoder
    "FRAME_LENGTH",
    "FrameEncoder",
    "encode_frame",
]
