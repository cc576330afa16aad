"""Link Typer app factory."""

import time
from pathlib import Path

import typer

from linker.api.link._read_document import _read_document
from linker.api.link.cmd_at import cmd_at
from linker.api.link.cmd_path import cmd_path
from linker.api.link.cmd_resolve import cmd_resolve
from linker.api.link.cmd_scan import cmd_scan
from linker.api.link.LinkScanner import LinkScanner
from linker.api.link.scan_document import scan_document
from linker.api.watch.RulesWatcher import RulesWatcher
from linker.cli._handle_stage_result import _extract_display_format, _handle_stage_result
from linker.cli.display.CLIDisplay import CLIDisplay


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Find and resolve links in documents",
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

    @app.command(name="scan")
    def scan_cmd(
        path: str = typer.Argument(..., help="Document to scan"),
        workspace: str | None = typer.Option(None, "--workspace", "-w", help="Workspace root (default: cwd)"),
    ) -> None:
        """List rule matches and inline annotations with their targets."""
        _handle_stage_result(cmd_scan)(path=path, workspace=workspace)

    @app.command(name="at")
    def at_cmd(
        path: str = typer.Argument(..., help="Document to inspect"),
        line: int = typer.Argument(..., help="1-based line"),
        column: int = typer.Argument(..., help="1-based column"),
        workspace: str | None = typer.Option(None, "--workspace", "-w", help="Workspace root (default: cwd)"),
    ) -> None:
        """Show the link at a position."""
        _handle_stage_result(cmd_at)(path=path, line=line, column=column, workspace=workspace)

    @app.command(name="resolve")
    def resolve_cmd(
        template: str = typer.Argument(..., help="Target template, e.g. '${workspaceFolder}/${fileBasename}'"),
        file: str | None = typer.Option(None, "--file", "-f", help="Active document"),
        line: int | None = typer.Option(None, "--line", "-l", help="Active 1-based line"),
        selected_text: str = typer.Option("", "--selection", help="Selected text"),
        workspace: str | None = typer.Option(None, "--workspace", "-w", help="Workspace root (default: cwd)"),
    ) -> None:
        """Substitute ${...} variables in a template."""
        _handle_stage_result(cmd_resolve)(
            template=template, file=file, line=line, selected_text=selected_text, workspace=workspace
        )

    @app.command(name="path")
    def path_cmd(
        path: str = typer.Argument(..., help="Path, optionally prefixed with #:, ~:, <: or >:"),
        file: str | None = typer.Option(None, "--file", "-f", help="Current document"),
        workspace: str | None = typer.Option(None, "--workspace", "-w", help="Workspace root (default: cwd)"),
    ) -> None:
        """Resolve a prefixed path."""
        _handle_stage_result(cmd_path)(path=path, file=file, workspace=workspace)

    @app.command(name="watch")
    def watch_cmd(
        path: str = typer.Argument(..., help="Document to rescan on change"),
        workspace: str | None = typer.Option(None, "--workspace", "-w", help="Workspace root (default: cwd)"),
        interval: float = typer.Option(0.5, help="Seconds between polls"),
    ) -> None:
        """Rescan a document whenever it or the rule file changes."""
        display = CLIDisplay()
        display_format = _extract_display_format()
        workspace_root = str(Path(workspace or Path.cwd()).expanduser().absolute())
        try:
            scanner = LinkScanner.load(workspace_root)
            document, text = _read_document(path)
        except ValueError as e:
            display.error(str(e))
            raise typer.Exit(1) from e

        watch_rules = scanner.config.auto_reload
        if not watch_rules:
            display.warning("auto_reload is disabled in configuration, rule file changes are ignored")

        display.status(f"Watching {document} and {scanner.rules_path} (Ctrl-C to stop)")
        display.json_output(scan_document(scanner, str(document), text), format=display_format)

        with RulesWatcher(scanner, document, watch_rules=watch_rules) as watcher:
            try:
                while True:
                    time.sleep(interval)
                    rules_changed, document_changed = watcher.poll()
                    if not (rules_changed or document_changed):
                        continue
                    try:
                        document, text = _read_document(str(document))
                    except ValueError as e:
                        display.error(str(e))
                        continue
                    display.success("Rules reloaded" if rules_changed else "Document changed")
                    display.json_output(scan_document(scanner, str(document), text), format=display_format)
            except KeyboardInterrupt:
                display.info("Stopped")

    return app
