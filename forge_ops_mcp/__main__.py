"""Allows running the server with ``python -m forge_ops_mcp``."""

from forge_ops_mcp.configuration.cli import typer_app

typer_app()
