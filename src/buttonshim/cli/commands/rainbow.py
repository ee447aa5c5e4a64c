"""Rainbow demo: each button lights the LED in a different colour."""

import logging
import time

import click

from buttonshim.cli.context import open_shim, report_errors
from buttonshim.devices import Led
from buttonshim.models import Button, Color
from buttonshim.protocols import ButtonEvent

logger = logging.getLogger(__name__)

RAINBOW = {
    Button.A: Color(r=0x94, g=0x00, b=0xD3),  # violet
    Button.B: Color(r=0x00, g=0x00, b=0xFF),  # blue
    Button.C: Color(r=0x00, g=0xFF, b=0x00),  # green
    Button.D: Color(r=0xFF, g=0xFF, b=0x00),  # yellow
    Button.E: Color(r=0xFF, g=0x00, b=0x00),  # red
}


class RainbowObserver:
    """Lights the LED when a button goes down."""

    def __init__(self, led: Led):
        self.led = led

    def on_button_event(self, event: ButtonEvent) -> None:
        if event.pressed:
            self.led.set_color(RAINBOW[event.button])


@click.command(name="rainbow")
@click.pass_context
@report_errors
def rainbow(ctx: click.Context):
    """
    Light up the LED a different colour of the rainbow with each button pressed.

    Press Ctrl+C to exit.
    """
    with open_shim(ctx) as shim:
        shim.buttons.register_observer(RainbowObserver(shim.led))
        task = shim.buttons.start_polling()
        shim.led.off()

        click.echo("Press a button to change colour. Press Ctrl+C to exit.")
        try:
            while task.is_running:
                time.sleep(0.1)
        except KeyboardInterrupt:
            click.echo("\nExiting...")
        finally:
            shim.led.off()

        if task.last_error is not None and not task.is_running:
            raise task.last_error
