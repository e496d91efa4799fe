"""Terminal rendering for the ``apiref`` CLI.

Definition tables and JSON documents go to stdout. Status lines and errors
go to stderr, so ``apiref --json inspect definitions | jq`` stays parseable.
Rich styling is used only when stdout is a terminal and colour is allowed
(``NO_COLOR``, ``TERM=dumb`` and ``--no-color`` all turn it off).

Graph and parser modules never print; they log.
"""

from __future__ import annotations

import json
import os
import sys
from enum import Enum
from typing import Any, Optional

from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table


class OutputFormat(str, Enum):
    AUTO = "auto"
    JSON = "json"
    PLAIN = "plain"
    RICH = "rich"


class OutputManager:
    """Renders registry views in the format chosen by the global CLI flags.

    ``AUTO`` becomes ``RICH`` on a colour terminal and ``PLAIN`` otherwise.
    ``quiet`` hides status lines; ``verbose`` shows debug lines. Errors are
    always shown.
    """

    def __init__(
        self,
        format: OutputFormat = OutputFormat.AUTO,
        no_color: bool = False,
        quiet: bool = False,
        verbose: bool = False,
    ) -> None:
        self._no_color = no_color or _should_disable_color()
        self._quiet = quiet
        self._verbose = verbose

        if format == OutputFormat.AUTO:
            rich_ok = _is_tty() and not self._no_color
            format = OutputFormat.RICH if rich_ok else OutputFormat.PLAIN
        self._format = format

        self._stdout = Console(
            file=sys.stdout,
            no_color=self._no_color,
            force_terminal=(format == OutputFormat.RICH),
        )
        self._stderr = Console(file=sys.stderr, no_color=self._no_color, stderr=True)

    @property
    def format(self) -> OutputFormat:
        return self._format

    def _emit(self, text: str) -> None:
        print(text, file=sys.stdout, flush=True)

    def format_response(self, data: Any) -> None:
        """Write one definition view (a dict) or a list of them to stdout."""
        if self._format == OutputFormat.PLAIN:
            self._emit_plain(data)
            return
        text = json.dumps(data, indent=2, ensure_ascii=False, default=str)
        if self._format == OutputFormat.JSON:
            self._emit(text)
        else:
            self._stdout.print(Syntax(text, "json", theme="monokai", word_wrap=True))

    def print_table(
        self,
        headers: list[str],
        rows: list[list[str]],
        title: Optional[str] = None,
    ) -> None:
        """Write rows as JSON records, tab-separated lines, or a Rich table."""
        if self._format == OutputFormat.JSON:
            records = [dict(zip(headers, row)) for row in rows]
            self._emit(json.dumps(records, indent=2, ensure_ascii=False))
        elif self._format == OutputFormat.PLAIN:
            for line in [headers, *rows]:
                self._emit("\t".join(line))
        else:
            table = Table(title=title, header_style="bold cyan")
            for header in headers:
                table.add_column(header)
            for row in rows:
                table.add_row(*row)
            self._stdout.print(table)

    def info(self, message: str) -> None:
        if not self._quiet:
            self._status(message, message)

    def error(self, message: str) -> None:
        self._status(f"Error: {message}", f"[bold red]Error:[/bold red] {message}")

    def debug(self, message: str) -> None:
        if self._verbose:
            self._status(f"[debug] {message}", f"[dim]\\[debug] {message}[/dim]")

    def _status(self, plain: str, markup: str) -> None:
        if self._no_color:
            print(plain, file=sys.stderr, flush=True)
        else:
            self._stderr.print(markup)

    def _emit_plain(self, data: Any) -> None:
        # dict -> "key<TAB>value" lines; nested values as compact JSON
        if isinstance(data, dict):
            for key, value in data.items():
                if isinstance(value, (dict, list)):
                    value = json.dumps(value, ensure_ascii=False, default=str)
                self._emit(f"{key}\t{value}")
        elif isinstance(data, list):
            for item in data:
                if isinstance(item, dict):
                    self._emit("\t".join(str(v) for v in item.values()))
                else:
                    self._emit(str(item))
        else:
            self._emit(str(data))


def _is_tty() -> bool:
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _should_disable_color() -> bool:
    return os.environ.get("NO_COLOR") is not None or os.environ.get("TERM") == "dumb"


_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the manager installed by the root callback, or a default one."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    global _output
    _output = output


def reset_output() -> None:
    global _output
    _output = None


def format_response(data: Any) -> None:
    get_output().format_response(data)


def info(message: str) -> None:
    get_output().info(message)


def error(message: str) -> None:
    get_output().error(message)


def debug(message: str) -> None:
    get_output().debug(message)
