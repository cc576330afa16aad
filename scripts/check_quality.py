#!/usr/bin/env python3
"""Formatting, lint and type checks for the linker package."""

import argparse
import subprocess
import sys
from pathlib import Path

from rich.console import Console

console = Console()


def run_command(command: list[str], description: str) -> bool:
    console.print(f"[bold blue]Running {description}...[/bold blue]")

    bin_dir = Path(sys.executable).parent
    if (bin_dir / command[0]).exists():
        command[0] = str(bin_dir / command[0])

    try:
        result = subprocess.run(command, check=False, capture_output=True, text=True)
    except OSError as e:
        console.print(f"[bold red]Error running {description}: {e}[/bold red]")
        sys.exit(1)

    if result.returncode != 0:
        console.print(f"[bold red]FAILED: {description}[/bold red]")
        console.print(result.stdout)
        console.print(result.stderr)
        return False
    console.print(f"[bold green]PASSED: {description}[/bold green]")
    return True


def main() -> None:
    parser = argparse.ArgumentParser(description="Run formatting, linting and type checks")
    parser.add_argument("--fix", action="store_true", help="Auto-fix formatting and lint issues")
    parser.add_argument("files", nargs="*", help="Files to check (default: linker and tests)")
    args = parser.parse_args()

    targets = args.files or ["linker", "tests"]
    checks = (
        [
            (["ruff", "format", *targets], "Ruff Formatting (Fix)"),
            (["ruff", "check", "--fix", *targets], "Ruff Linting (Fix)"),
        ]
        if args.fix
        else [
            (["ruff", "format", "--check", *targets], "Ruff Formatting (Check)"),
            (["ruff", "check", *targets], "Ruff Linting (Check)"),
        ]
    )
    checks.append((["mypy", "linker"], "Mypy Type Check"))

    results = [run_command(command, description) for command, description in checks]
    if not all(results):
        sys.exit(1)


if __name__ == "__main__":
    main()
