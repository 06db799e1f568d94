"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio

import typer
from dotenv import load_dotenv
from typer import Option
from typing_extensions import Annotated

from forge_ops_mcp.config import Settings
from forge_ops_mcp.configuration.exceptions import ProviderConfigurationError
from forge_ops_mcp.configuration.reconcile import reconcile_providers_configuration
from forge_ops_mcp.context import AppContext
from forge_ops_mcp.server import run_stdio
from forge_ops_mcp.utils.log import configure_logging

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False, no_args_is_help=True)


@typer_app.command(name="serve")
def serve_cli(
    debug: Annotated[bool | None, Option(help="Enable debug logging. Overrides DEBUG.")] = None,
    demo: Annotated[bool | None, Option(help="Register anonymous providers when no credentials are configured. Overrides DEMO_MODE.")] = None,
) -> None:
    """Serve the VCS tools over MCP on stdin/stdout."""
    settings = Settings()
    if debug is not None:
        settings.DEBUG = debug
    if demo is not None:
        settings.DEMO_MODE = demo
    configure_logging(settings.DEBUG)

    try:
        context = AppContext.from_settings(settings)
    except ProviderConfigurationError as exc:
        typer.echo(f"Configuration error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    asyncio.run(run_stdio(context))


@typer_app.command(name="providers")
def providers_cli() -> None:
    """Show the providers that would be registered with the current configuration."""
    settings = Settings()
    configure_logging(settings.DEBUG)

    try:
        providers_config = reconcile_providers_configuration(settings)
    except ProviderConfigurationError as exc:
        typer.echo(f"Configuration error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    for provider in providers_config.providers:
        default_marker = " (default)" if provider.name == providers_config.default_provider else ""
        access = "anonymous" if provider.anonymous else "token"
        typer.echo(f"{provider.name}{default_marker}: {provider.type.value} {provider.api_url} [{access}]")


if __name__ == "__main__":
    typer_app()
