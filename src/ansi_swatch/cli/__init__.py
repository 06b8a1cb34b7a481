"""Command-line interface."""

from ansi_swatch.cli.app import create_app
from ansi_swatch.cli.main import main

__all__ = ["create_app", "main"]
