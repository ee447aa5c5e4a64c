"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from .commands import buttons_group, config_group, led_group, rainbow

logger = logging.getLogger(__name__)


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging in the current directory
        log_file: Custom log file path (optional)
        log_level: Log level used together with --log-file

    Returns:
        Path of the log file
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if log_file:
        level = getattr(logging, log_level.upper())

    if debug and not log_file:
        log_path = Path.cwd() / "buttonshim-debug.log"
    elif log_file:
        log_path = log_file
    else:
        log_dir = Path.home() / ".buttonshim" / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / "buttonshim.log"

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(threadName)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


@click.group()
@click.pass_context
@click.version_option(version="0.1.0", prog_name="buttonshim")
@click.option(
    '--config',
    '-c',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.buttonshim/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./buttonshim-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for --log-file (default: INFO)'
)
def cli(
    ctx: click.Context,
    config_path: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Button SHIM - five buttons and an RGB LED over I2C.

    \b
    Examples:
      # Light the LED red
      buttonshim led set 255 0 0

      # Watch button presses, holds and clicks
      buttonshim buttons monitor

      # Rainbow demo
      buttonshim rainbow

      # Use a different config file
      buttonshim --config ./shim.json buttons read
    """
    log_path = setup_logging(verbose, debug, log_file, log_level)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["log_path"] = log_path


cli.add_command(led_group)
cli.add_command(buttons_group)
cli.add_command(rainbow)
cli.add_command(config_group)

if __name__ == "__main__":
    cli()
