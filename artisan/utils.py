"""Shared utility functions for artisan.

Provides Rich-based console reporting, async command execution for
foreground processes, and the ``--key=value`` flag parser used by commands
that accept options.
"""

from __future__ import annotations

import asyncio
import os
from collections.abc import Iterable, Sequence
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: str,
    cwd: str | Path | None = None,
    env: dict[str, str] | None = None,
) -> int:
    """Run a shell command in the foreground and return its exit code.

    The child shares the parent's stdin, stdout and stderr, so its output
    goes straight to the terminal.  Cancelling the awaiting task (Ctrl+C)
    terminates the child before the cancellation propagates.

    Args:
        cmd: Shell command line.
        cwd: Working directory for the child process.
        env: Extra environment variables merged on top of ``os.environ``.
    """
    merged_env = {**os.environ, **env} if env else None
    process = await asyncio.create_subprocess_shell(
        cmd,
        cwd=str(cwd) if cwd else None,
        env=merged_env,
    )
    try:
        return await process.wait()
    except asyncio.CancelledError:
        if process.returncode is None:
            process.terminate()
            await process.wait()
        raise


# ---------------------------------------------------------------------------
# Flag parsing
# ---------------------------------------------------------------------------


def parse_flags(tokens: Iterable[str]) -> dict[str, str]:
    """Collect ``--key=value`` tokens into a dictionary.

    Positional tokens are ignored.  A bare ``--flag`` maps to ``"true"`` and
    later occurrences of a key override earlier ones.

    Examples::

        parse_flags(["--port=8080", "--host=0.0.0.0"]) -> {"port": "8080", "host": "0.0.0.0"}
        parse_flags(["Post", "--force"]) -> {"force": "true"}
    """
    flags: dict[str, str] = {}
    for token in tokens:
        if not token.startswith("--"):
            continue
        body = token[2:]
        key, sep, value = body.partition("=")
        key = key.strip()
        if not key:
            continue
        flags[key] = value if sep else "true"
    return flags


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_info(message: str) -> None:
    """Print an unstyled informational line."""
    console.print(escape(message))


def print_lines(lines: Iterable[str]) -> None:
    """Print preformatted lines verbatim (no markup, no wrapping)."""
    for line in lines:
        console.print(line, markup=False, highlight=False, soft_wrap=True)


def print_table(
    columns: Sequence[str],
    rows: Iterable[Sequence[str]],
    title: str | None = None,
) -> None:
    """Print a simple table with the given column headers."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    for column in columns:
        table.add_column(column, no_wrap=True)

    for row in rows:
        table.add_row(*(str(cell) for cell in row))

    console.print(table)
    console.print()
