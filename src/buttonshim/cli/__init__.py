"""Command-line interface for buttonshim."""
