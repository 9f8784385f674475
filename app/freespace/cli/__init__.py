"""CLI package for freespace.

This package contains the Typer application.
"""

from freespace.cli.main import app

__all__ = ["app"]
