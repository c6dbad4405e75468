"""Shared utility functions for stackseed.

Provides async command execution, file-system helpers and Rich-based console
reporting.  Every operator-facing message goes through the module-level
``console`` so tests can capture or silence it in one place.
"""

from __future__ import annotations

import asyncio
import codecs
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


STDERR_TAIL_CHARS = 2000


async def _tee_stream(stream: asyncio.StreamReader, sink: list[str]) -> None:
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    while True:
        chunk = await stream.read(4096)
        if not chunk:
            break
        text = decoder.decode(chunk)
        sys.stderr.write(text)
        sys.stderr.flush()
        sink.append(text)
    tail = decoder.decode(b"", final=True)
    if tail:
        sys.stderr.write(tail)
        sink.append(tail)


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: float | None = None,
) -> tuple[int, str]:
    """Run an external command asynchronously.

    The child's stdout is inherited so its output reaches the operator as it
    is produced.  Its stderr is echoed to ``sys.stderr`` the same way and also
    kept, so a failure can be reported with the tool's own error text.

    Args:
        cmd: Argument list; the first item is the executable.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.
            ``None`` waits forever.

    Returns:
        A ``(returncode, stderr)`` tuple.  ``stderr`` holds at most the last
        ``STDERR_TAIL_CHARS`` characters.  A timeout yields ``-1``.

    Raises:
        FileNotFoundError: If the executable does not exist.
        PermissionError: If the executable cannot be run.
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        stderr=asyncio.subprocess.PIPE,
        cwd=str(cwd) if cwd else None,
    )

    stderr_chunks: list[str] = []
    try:
        await asyncio.wait_for(
            asyncio.gather(_tee_stream(process.stderr, stderr_chunks), process.wait()),
            timeout=timeout,
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (-1, f"Command timed out after {timeout}s: {' '.join(cmd)}")

    stderr_str = "".join(stderr_chunks).strip()[-STDERR_TAIL_CHARS:]
    return (process.returncode or 0, stderr_str)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Returns:
        The directory as a ``Path``.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def write_text_file(path: str | Path, content: str) -> Path:
    """Write *content* to *path*, creating parent directories first."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    # newline="" keeps the template bytes identical on every platform
    with file_path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(content)
    return file_path


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
    """
    if seconds < 0:
        return "0.0s"

    minutes = int(seconds // 60)
    secs = seconds % 60
    if minutes > 0:
        return f"{minutes}m {int(secs)}s"
    return f"{secs:.1f}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


STAGE_NAMES: dict[int, str] = {
    1: "DIRECTORIES",
    2: "BACKEND",
    3: "FRONTEND",
}

STAGE_COLORS: dict[int, str] = {
    1: "bright_cyan",
    2: "bright_green",
    3: "bright_yellow",
}


def print_stage_header(stage: int, name: str) -> None:
    """Print a full-width rule announcing a scaffold stage."""
    color = STAGE_COLORS.get(stage, "white")
    console.print()
    console.print(
        Rule(
            f"[bold {color}] Stage {stage}: {name.upper()} [/bold {color}]",
            style=color,
        )
    )


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, escape(str(value)))

    console.print(table)


def print_info(message: str) -> None:
    """Print a plain progress message."""
    console.print(message, markup=False, highlight=False)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
