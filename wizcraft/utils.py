"""Shared utility functions for Wizcraft.

Provides executable lookup, pass-through command execution, duration
formatting, and Rich-based console reporting.  Child processes always
inherit the parent's stdout/stderr so the user sees the generator, build
and container tools exactly as if they had run them by hand.
"""

from __future__ import annotations

import asyncio
import shlex
import shutil
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class CommandError(Exception):
    """Raised when an external command cannot be spawned or exits non-zero."""

    def __init__(
        self,
        message: str,
        command: list[str] | None = None,
        returncode: int | None = None,
    ) -> None:
        self.command = list(command or [])
        self.returncode = returncode
        super().__init__(message)


# ---------------------------------------------------------------------------
# Executable lookup
# ---------------------------------------------------------------------------


def find_executable(name: str) -> str | None:
    """Resolve *name* on ``PATH``.

    Returns:
        The absolute path of the executable, or ``None`` if it cannot be found.
    """
    return shutil.which(name)


# ---------------------------------------------------------------------------
# Command execution
# ---------------------------------------------------------------------------


def format_command(cmd: list[str]) -> str:
    """Render an argument list as a copy-pasteable shell command."""
    return shlex.join(cmd)


async def run_passthrough(
    cmd: list[str],
    cwd: str | Path | None = None,
) -> None:
    """Run *cmd* with the parent's stdout/stderr attached and wait for it.

    Nothing is captured or buffered, and there is no timeout: the child runs
    until it exits.

    Args:
        cmd: Executable followed by its arguments.
        cwd: Working directory for the child process.

    Raises:
        CommandError: If the process cannot be started or exits non-zero.
    """
    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=None,
            stderr=None,
            cwd=str(cwd) if cwd else None,
        )
    except OSError as exc:
        raise CommandError(
            f"could not start {cmd[0]!r}: {exc.strerror or exc}",
            command=cmd,
        ) from exc

    returncode = await process.wait()
    if returncode != 0:
        raise CommandError(
            f"exit status {returncode}",
            command=cmd,
            returncode=returncode,
        )


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
        format_duration(3661.0) -> "1h 1m 1s"
    """
    if seconds < 0:
        return "0.0s"

    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = seconds % 60

    parts: list[str] = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")

    if hours > 0 or minutes > 0:
        parts.append(f"{int(secs)}s")
    else:
        parts.append(f"{secs:.1f}s")

    return " ".join(parts)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


STEP_COLORS: dict[str, str] = {
    "generate": "bright_cyan",
    "build": "bright_yellow",
    "dockerfile": "bright_green",
    "image": "bright_blue",
}


def print_step_header(index: int, name: str, out: Console | None = None) -> None:
    """Print a full-width rule announcing pipeline step *index*."""
    out = out or console
    color = STEP_COLORS.get(name, "white")
    out.print()
    out.print(
        Rule(
            f"[bold {color}] Step {index}: {name.upper()} [/bold {color}]",
            style=color,
        )
    )


def print_summary_table(
    data: dict[str, str],
    title: str = "Summary",
    out: Console | None = None,
) -> None:
    """Print a two-column key/value summary table."""
    out = out or console
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, escape(str(value)))

    out.print(table)


def print_success(message: str, out: Console | None = None) -> None:
    """Print a green success message."""
    (out or console).print(f"[bold green]{escape(message)}[/bold green]", highlight=False, soft_wrap=True)


def print_error(message: str, out: Console | None = None) -> None:
    """Print a red error message."""
    (out or console).print(f"[bold red]{escape(message)}[/bold red]", highlight=False, soft_wrap=True)
