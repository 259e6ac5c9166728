"""Command line interface for shell-colors."""

from shell_colors.cli.app import create_app
from shell_colors.cli.main import main

__all__ = ["create_app", "main"]
