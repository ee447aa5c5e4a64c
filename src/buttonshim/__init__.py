"""buttonshim: driver for the Button SHIM (five buttons and an RGB LED over I2C)."""

__version__ = "0.1.0"

from .core import ChannelState, Clicked, Hold, Pressed, Released, encode_frame
from .core.sampler import ButtonSampler, SamplingTask
from .devices import Buttons, ButtonShim, Led
from .exceptions import ButtonShimError, TransportError
from .models import Button, Color, ShimConfig
from .protocols import ButtonEvent, ButtonObserver

__all__ = [
    "Button",
    "ButtonEvent",
    "ButtonObserver",
    "ButtonSampler",
    "ButtonShim",
    "ButtonShimError",
    "Buttons",
    "ChannelState",
    "Clicked",
    "Color",
    "Hold",
    "Led",
    "Pressed",
    "Released",
    "SamplingTask",
    "ShimConfig",
    "TransportError",
    "encode_frame",
]
