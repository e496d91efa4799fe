"""Typer application and CLI entry point for apiref.

This module wires together the top-level Typer application and registers the
built-in ``inspect`` sub-command group.

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs signal handlers, registers commands, and
invokes the Typer app. Unhandled exceptions are written to a crash log under
the data directory.

See Also:
    :mod:`apiref.config`: Docs config resolution and data paths.
    :mod:`apiref.output`: Output formatting initialised in :func:`main_callback`.
"""

from __future__ import annotations

import logging
import signal
import sys
import traceback
from datetime import datetime
from typing import Any

import typer

from apiref import __version__
from apiref.exit_codes import EXIT_GENERIC_FAILURE


app = typer.Typer(
    name="apiref",
    help="Resolve Kubernetes-style OpenAPI definitions into a documentation model.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"apiref {__version__}")
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
) -> None:
    """Root callback executed before every sub-command.

    Initialises the global :class:`~apiref.output.OutputManager` from CLI
    flags and, with ``--verbose``, routes library log records at DEBUG level
    to stderr.
    """
    from apiref.output import OutputFormat, OutputManager, set_output

    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN

    set_output(
        OutputManager(format=fmt, no_color=no_color, quiet=quiet, verbose=verbose)
    )

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log(exc: Exception) -> str:
    """Write a crash traceback to disk and return the log file path."""
    from apiref.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(traceback.format_exc())
    return str(log_path)


def _register_commands() -> None:
    from apiref.commands.inspect import inspect_app

    app.add_typer(inspect_app, name="inspect", help="Inspect resolved definitions.")


_register_commands()


def main() -> None:
    """CLI entry point invoked by the ``apiref`` console script.

    Unhandled :class:`~apiref.exceptions.ApirefError` instances cause a clean
    exit with the error's ``exit_code``. All other exceptions produce a crash
    log and a generic failure exit.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from apiref.exceptions import ApirefError
        from apiref.output import error

        if isinstance(exc, ApirefError):
            error(str(exc))
            sys.exit(exc.exit_code)
        else:
            log_path = _write_crash_log(exc)
            error(f"Unexpected error. Debug log: {log_path}")
            sys.exit(EXIT_GENERIC_FAILURE)
