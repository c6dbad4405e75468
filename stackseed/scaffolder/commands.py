"""External command execution for the template writers.

The writers never spawn processes themselves: they call a ``CommandRunner``
and inspect the returned ``CommandResult``.  ``SubprocessRunner`` is the real
implementation; tests substitute a recording fake.
"""

from __future__ import annotations

import shlex
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from rich.markup import escape

from ..utils import console, run_command


@dataclass
class CommandResult:
    """Outcome of one external command."""

    command: list[str]
    cwd: Path
    exit_code: int
    output: str = ""
    duration_seconds: float = 0.0
    launch_error: str = ""

    @property
    def success(self) -> bool:
        return self.exit_code == 0

    @property
    def display(self) -> str:
        """The command as an operator would type it."""
        return shlex.join(self.command)


class StackseedError(Exception):
    """Base class for every error stackseed raises on purpose."""


class CommandFailedError(StackseedError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, result: CommandResult, message: str | None = None):
        self.result = result
        if message is None:
            message = (
                f"Command '{result.display}' failed with exit code {result.exit_code} "
                f"(in {result.cwd})"
            )
            if result.output:
                message = f"{message}: {result.output}"
        super().__init__(message)


class CommandNotFoundError(CommandFailedError):
    """Raised when the executable of a command cannot be started at all."""


class CommandRunner(Protocol):
    async def run(self, command: list[str], cwd: Path) -> CommandResult:
        ...


class SubprocessRunner:
    """Runs commands as child processes whose output streams to the console.

    The tail of each command's stderr is kept as ``CommandResult.output``.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = timeout

    async def run(self, command: list[str], cwd: Path) -> CommandResult:
        console.print(f"  [dim]$ {escape(shlex.join(command))}[/dim]", highlight=False)
        start = time.monotonic()
        try:
            exit_code, stderr = await run_command(
                command, cwd=cwd, timeout=self.timeout
            )
        except FileNotFoundError:
            return CommandResult(
                command=list(command),
                cwd=Path(cwd),
                exit_code=127,
                launch_error=f"Executable not found: '{command[0]}'. "
                "Ensure it is installed and on PATH.",
                duration_seconds=time.monotonic() - start,
            )
        except PermissionError:
            return CommandResult(
                command=list(command),
                cwd=Path(cwd),
                exit_code=126,
                launch_error=f"Permission denied executing: '{command[0]}'.",
                duration_seconds=time.monotonic() - start,
            )

        return CommandResult(
            command=list(command),
            cwd=Path(cwd),
            exit_code=exit_code,
            output=stderr,
            duration_seconds=time.monotonic() - start,
        )


async def run_checked(
    runner: CommandRunner, commands: list[list[str]], cwd: Path
) -> list[CommandResult]:
    """Run *commands* one after another, stopping at the first failure.

    Raises:
        CommandNotFoundError: If an executable is missing or not runnable.
        CommandFailedError: If a command exits non-zero.
    """
    results: list[CommandResult] = []
    for command in commands:
        result = await runner.run(command, cwd)
        results.append(result)
        if result.launch_error:
            raise CommandNotFoundError(result, result.launch_error)
        if not result.success:
            raise CommandFailedError(result)
    return results
