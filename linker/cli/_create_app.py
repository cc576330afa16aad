"""Create the main Typer CLI app."""

import logging
from contextlib import suppress

import typer

from linker.api.config.LinkerConfig import LinkerConfig
from linker.cli.config import config
from linker.cli.link import link
from linker.logging_config import setup_logging


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Linker CLI",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(link(), name="link")
    app.add_typer(config(), name="config")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        level = logging.WARNING
        # Invalid settings are reported by the command itself
        with suppress(ValueError):
            if LinkerConfig.load().debug:
                level = logging.DEBUG
        setup_logging(level=level)

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
