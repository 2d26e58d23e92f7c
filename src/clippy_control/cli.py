"""
clippy-control CLI - run cargo clippy with lint levels from a config file.

Commands:
    check    Run cargo clippy with the configured lint levels (default)
    show     Print the configured lints and the flags they produce

Without a command name the arguments go to `check`, so
`clippy-control lints.toml --fix` is `clippy-control check lints.toml --fix`.
"""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from typer.core import TyperGroup

from clippy_control.config import DEFAULT_CONFIG_PATH, load_config
from clippy_control.errors import ClippyControlError
from clippy_control.runner import build_command, clippy_flag, run_clippy

CONFIG_ENVVAR = "CLIPPY_CONTROL_CONFIG"


class DefaultCheckGroup(TyperGroup):
    """Command group that falls back to `check` when no command is named."""

    default_command = "check"

    def parse_args(self, ctx, args):
        # Group options are all flags, so skipping them finds the command slot
        group_opts = set()
        for param in self.get_params(ctx):
            group_opts.update(param.opts)
            group_opts.update(param.secondary_opts)

        index = 0
        while index < len(args) and args[index] in group_opts:
            index += 1

        if index == len(args) or args[index] not in self.commands:
            args = [*args[:index], self.default_command, *args[index:]]

        return super().parse_args(ctx, args)


app = typer.Typer(
    name="clippy-control",
    help="Run cargo clippy with lint levels from clippy-control.toml",
    cls=DefaultCheckGroup,
)

console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    """Send package logs to stderr through rich."""
    from rich.logging import RichHandler

    package_logger = logging.getLogger("clippy_control")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=err_console, show_path=False))


def _run_check(config_path: Path, fix: bool, dry_run: bool) -> int:
    """Load the config, build the command and run it. Returns the exit code."""
    config = load_config(config_path)
    cmd = build_command(config, fix=fix)

    if dry_run:
        console.print(escape(" ".join(cmd)), soft_wrap=True)
        return 0

    return run_clippy(cmd)


def _exit_with(config_path: Path, fix: bool, dry_run: bool) -> None:
    """Single exit point for the check action."""
    try:
        code = _run_check(config_path, fix=fix, dry_run=dry_run)
    except ClippyControlError as e:
        err_console.print(f"[red]error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    raise typer.Exit(code)


@app.command()
def check(
    config_path: Path = typer.Argument(
        DEFAULT_CONFIG_PATH,
        envvar=CONFIG_ENVVAR,
        help="Path to clippy-control.toml",
    ),
    fix: bool = typer.Option(False, "--fix", help="Pass --fix to cargo clippy"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the command, don't run it"),
) -> None:
    """
    Run cargo clippy with the configured lint levels.

    Exits with cargo clippy's exit code.

    Example:
        clippy-control check clippy-control.toml --fix
    """
    _exit_with(config_path, fix=fix, dry_run=dry_run)


@app.command()
def show(
    config_path: Path = typer.Argument(
        DEFAULT_CONFIG_PATH,
        envvar=CONFIG_ENVVAR,
        help="Path to clippy-control.toml",
    ),
) -> None:
    """Print the configured lints and the flags they produce."""
    try:
        config = load_config(config_path)
    except ClippyControlError as e:
        err_console.print(f"[red]error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    if not config:
        console.print("[yellow]No lints configured[/yellow]")
        return

    table = Table(title=str(config_path))
    table.add_column("Lint")
    table.add_column("Severity")
    table.add_column("Flag")

    for lint, severity in config.items():
        table.add_row(lint, severity.value, clippy_flag(lint, severity))

    console.print(table)


@app.callback()
def main(
    version: bool = typer.Option(False, "--version", "-V", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """clippy-control: run cargo clippy with lint levels from a config file."""
    if version:
        from clippy_control import __version__
        console.print(f"clippy-control {__version__}")
        raise typer.Exit()

    _configure_logging(verbose)


if __name__ == "__main__":
    app()
