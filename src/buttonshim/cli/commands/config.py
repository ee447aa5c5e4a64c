"""Configuration commands."""

import click

from buttonshim.cli.context import load_config, report_errors
from buttonshim.models import DEFAULT_CONFIG_PATH, ShimConfig


@click.group(name="config")
def config_group():
    """Show or create the configuration file."""
    pass


@config_group.command(name="show")
@click.pass_context
@report_errors
def show_config(ctx: click.Context):
    """Display the effective configuration."""
    config = load_config(ctx)
    click.echo(config.model_dump_json(indent=2))


@config_group.command(name="init")
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
@click.pass_context
@report_errors
def init_config(ctx: click.Context, force: bool):
    """Write a config file with default values."""
    path = (ctx.find_root().obj or {}).get("config_path") or DEFAULT_CONFIG_PATH
    if path.exists() and not force:
        click.echo(f"Config file already exists: {path} (use --force to overwrite)")
        return

    ShimConfig().save(path)
    click.echo(f"Wrote default config to {path}")
