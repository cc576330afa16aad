"""Config Typer app factory."""

import typer

from linker.api.config.cmd_init import cmd_init
from linker.api.config.cmd_show import cmd_show
from linker.cli._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Show settings and manage the rule file",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="show")
    def show_cmd(
        workspace: str | None = typer.Option(None, "--workspace", "-w", help="Workspace root (default: cwd)"),
    ) -> None:
        """Show settings and the workspace link rules."""
        _handle_stage_result(cmd_show)(workspace=workspace)

    @app.command(name="init")
    def init_cmd(
        workspace: str | None = typer.Option(None, "--workspace", "-w", help="Workspace root (default: cwd)"),
    ) -> None:
        """Create a rule file with example rules."""
        _handle_stage_result(cmd_init)(workspace=workspace)

    return app
