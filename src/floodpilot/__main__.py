"""Permite ejecutar ``python -m floodpilot``."""

from floodpilot.cli import app

app()
