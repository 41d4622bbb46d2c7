"""Console logger built on click.

All user-facing output goes through click so CliRunner can capture it.
Warnings and errors are written to stderr.
"""

import json
import time

import click

LEVELS = ("debug", "info", "warn", "error")

PREFIXES = {
    "log": ("•", "bright_black"),
    "info": ("ℹ", "cyan"),
    "success": ("✓", "green"),
    "warn": ("⚠", "yellow"),
    "error": ("✗", "red"),
    "debug": ("◦", "magenta"),
}


class Logger:
    """Leveled console output with a few formatting helpers."""

    def __init__(self, level: str = "info", silent: bool = False):
        if level not in LEVELS:
            raise ValueError(f"Unknown log level: {level}")
        self.level = level
        self.silent = silent
        self._start_time = 0.0

    def debug(self, message: str, data=None) -> None:
        self._emit("debug", message, data)

    def info(self, message: str, data=None) -> None:
        self._emit("info", message, data)

    def warn(self, message: str, data=None) -> None:
        self._emit("warn", message, data, err=True)

    def error(self, message: str, data=None) -> None:
        self._emit("error", message, data, err=True)

    def success(self, message: str, data=None) -> None:
        if self._enabled("info"):
            self._write("success", click.style(message, fg="green"), data)

    def log(self, message: str, data=None) -> None:
        """Dimmed line, shown at info level."""
        if self._enabled("info"):
            self._write("log", click.style(message, dim=True), data)

    def header(self, message: str) -> None:
        if self._enabled("info"):
            click.echo()
            click.secho(message, fg="cyan", bold=True)
            click.echo()

    def separator(self) -> None:
        if self._enabled("info"):
            click.echo()

    def highlight(self, message: str) -> None:
        if self._enabled("info"):
            click.secho(message, fg="cyan", underline=True)

    def start_timer(self) -> None:
        self._start_time = time.monotonic()

    def end_timer(self, message: str) -> float:
        elapsed = time.monotonic() - self._start_time
        self.log(f"{message} ({elapsed:.2f}s)")
        return elapsed

    def table(self, columns: list[str], rows: list[dict[str, str]]) -> None:
        """Print rows as an aligned, numbered table."""
        if not self._enabled("info") or not rows:
            return

        widths = {
            col: max(len(col), *(len(row.get(col, "")) for row in rows)) + 2
            for col in columns
        }
        index_width = len(str(len(rows)))
        indent = " " * (index_width + 2)

        click.echo(indent + " ".join(click.style(col.upper().ljust(widths[col]), bold=True) for col in columns))
        click.echo(indent + " ".join(click.style("─" * widths[col], dim=True) for col in columns))
        for i, row in enumerate(rows, start=1):
            cells = " ".join(row.get(col, "").ljust(widths[col]) for col in columns)
            click.echo(f"{click.style(str(i).rjust(index_width) + '.', dim=True)} {cells}")

    def _enabled(self, level: str) -> bool:
        if self.silent:
            return False
        return LEVELS.index(level) >= LEVELS.index(self.level)

    def _emit(self, level: str, message: str, data, err: bool = False) -> None:
        if self._enabled(level):
            self._write(level, message, data, err=err)

    def _write(self, kind: str, message: str, data, err: bool = False) -> None:
        symbol, color = PREFIXES[kind]
        line = f"{click.style(symbol, fg=color)} {message}"
        if data is not None:
            line += _format_data(data)
        click.echo(line, err=err)


def _format_data(data) -> str:
    if isinstance(data, (dict, list)):
        text = json.dumps(data, indent=2, default=str)
        return "\n  " + text.replace("\n", "\n  ")
    return f" {data}"
