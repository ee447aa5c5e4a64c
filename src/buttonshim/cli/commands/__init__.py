"""CLI commands for buttonshim."""

from .buttons import buttons_group
from .config import config_group
from .led import led_group
from .rainbow import rainbow

__all__ = ["buttons_group", "config_group", "led_group", "rainbow"]
