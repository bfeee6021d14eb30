"""Typer application factory and CLI entry point for hkdocs.

This module wires together the top-level Typer application and registers the
built-in sub-commands (``sidebar``, ``paths``, ``validate``).

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs signal handlers and invokes the Typer app.
Unhandled exceptions are written to a crash log under the data directory.
"""

from __future__ import annotations

import signal
import sys
import traceback
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import typer

from hkdocs import __version__
from hkdocs.commands.sidebar import paths_command, sidebar_command
from hkdocs.commands.validate import validate_command
from hkdocs.exit_codes import EXIT_GENERIC_FAILURE, EXIT_INTERRUPTED


app = typer.Typer(
    name="hkdocs",
    help="Build the CLI reference sidebar for the hk documentation site.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command("sidebar")(sidebar_command)
app.command("paths")(paths_command)
app.command("validate")(validate_command)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"hkdocs {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool = typer.Option(
        False, "--json", help="JSON output format."
    ),
    plain_output: bool = typer.Option(
        False, "--plain", help="Plain text output."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Site config file (default ./hkdocs.json)."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Installs the global :class:`~hkdocs.output.OutputManager`, routes
    library logging to stderr, and stores shared options in ``ctx.obj``.
    """
    from hkdocs.output import OutputFormat, OutputManager, configure_logging, set_output

    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN

    output = OutputManager(
        format=fmt,
        no_color=no_color,
        quiet=quiet,
        verbose=verbose,
    )
    set_output(output)
    configure_logging(output)

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log(exc: Exception) -> str:
    """Write a crash traceback to disk and return the log file path."""
    from hkdocs.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(
        "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    )
    return str(log_path)


def main() -> None:
    """CLI entry point invoked by the ``hkdocs`` console script.

    Unhandled :class:`~hkdocs.exceptions.HkdocsError` instances cause a clean
    exit with the error's ``exit_code``. All other exceptions produce a crash
    log and a generic failure exit.
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as exc:
        from hkdocs.exceptions import HkdocsError
        from hkdocs.output import error

        if isinstance(exc, HkdocsError):
            error(str(exc))
            sys.exit(exc.exit_code)
        else:
            log_path = _write_crash_log(exc)
            error(f"Unexpected error. Debug log: {log_path}")
            sys.exit(EXIT_GENERIC_FAILURE)
