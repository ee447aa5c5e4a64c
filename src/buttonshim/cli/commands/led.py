"""LED command implementations."""

import click

from buttonshim.cli.context import open_shim, report_errors

_BYTE = click.IntRange(0, 255)


@click.group(name="led")
def led_group():
    """RGB LED commands."""
    pass


@led_group.command(name="set")
@click.argument("r", type=_BYTE)
@click.argument("g", type=_BYTE)
@click.argument("b", type=_BYTE)
@click.pass_context
@report_errors
def set_led(ctx: click.Context, r: int, g: int, b: int):
    """Set the LED to an RGB color (each channel 0-255)."""
    with open_shim(ctx) as shim:
        shim.set_pixel(r, g, b)
        click.echo(f"LED set to {shim.led.color.to_hex()}")


@led_group.command(name="off")
@click.pass_context
@report_errors
def led_off(ctx: click.Context):
    """Turn the LED off."""
    with open_shim(ctx) as shim:
        shim.led.off()
        click.echo("LED off")
