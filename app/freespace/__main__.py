"""Allow running freespace with ``python -m freespace``."""

from freespace.cli.main import app

app()
