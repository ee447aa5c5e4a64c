"""Allow ``python -m buttonshim``."""

from buttonshim.cli.main import cli

if __name__ == "__main__":
    cli()
