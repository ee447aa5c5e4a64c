"""Button command implementations."""

import logging
import queue
from datetime import datetime

import click

from buttonshim.cli.context import open_shim, report_errors
from buttonshim.models import Button

logger = logging.getLogger(__name__)


@click.group(name="buttons")
def buttons_group():
    """Button commands."""
    pass


@buttons_group.command(name="read")
@click.pass_context
@report_errors
def read_buttons(ctx: click.Context):
    """Sample the buttons once and print their states."""
    with open_shim(ctx) as shim:
        states = shim.buttons.update()
        for button, state in zip(Button, states):
            click.echo(f"  {button.name}: {type(state).__name__}")


@buttons_group.command(name="monitor")
@click.option(
    "--interval",
    "-i",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Seconds between samples (default: poll_interval from config)",
)
@click.pass_context
@report_errors
def monitor_buttons(ctx: click.Context, interval: float | None):
    """
    Print button events as they happen.

    Shows presses, holds, clicks and releases with timestamps.

    Press Ctrl+C to stop monitoring.
    """
    with open_shim(ctx) as shim:
        events = shim.buttons.subscribe()
        task = shim.buttons.start_polling(interval)
        click.echo(f"Monitoring buttons every {task.interval}s. Press Ctrl+C to stop\n")

        try:
            while task.is_running:
                try:
                    event = events.get(timeout=0.5)
                except queue.Empty:
                    continue
                timestamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
                click.echo(f"[{timestamp}] {event}")
        except KeyboardInterrupt:
            click.echo("\n\nStopping monitor...")

        if task.last_error is not None and not task.is_running:
            # Polling gave up after repeated failures
            raise task.last_error
