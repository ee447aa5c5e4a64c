"""Helpers shared by CLI commands."""

import logging
import sys
from collections.abc import Callable
from functools import wraps
from pathlib import Path
from typing import TypeVar

import click

from buttonshim.devices import ButtonShim
from buttonshim.exceptions import ButtonShimError, format_error_for_display
from buttonshim.models import ShimConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


def load_config(ctx: click.Context) -> ShimConfig:
    """Load the config selected by the global --config option."""
    obj = ctx.find_root().obj or {}
    path: Path | None = obj.get("config_path")
    return ShimConfig.load_or_default(path)


def open_shim(ctx: click.Context) -> ButtonShim:
    """Open the SHIM using the selected config."""
    return ButtonShim(load_config(ctx))


def report_errors(func: Callable[..., T]) -> Callable[..., T]:
    """
    Show driver errors as a short message plus recovery hint and exit 1.

    Unexpected exceptions propagate unchanged.
    """
    @wraps(func)
    def wrapper(*args, **kwargs) -> T:
        try:
            return func(*args, **kwargs)
        except ButtonShimError as e:
            logger.error(f"Command failed: {e.technical_message}")
            user_message, recovery_hint = format_error_for_display(e)
            click.echo(f"ERROR: {user_message}", err=True)
            if recovery_hint:
                click.echo(f"\n{recovery_hint}", err=True)
            sys.exit(1)

    return wrapper
