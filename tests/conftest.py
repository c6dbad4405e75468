"""Shared pytest fixtures for the stackseed test suite.

Provides reusable fixtures for:
- Scaffold configurations for both presets, rooted in a temp directory
- A recording fake ``CommandRunner`` that never spawns real tools
- Golden-file lookup for the fixed template outputs
"""

from __future__ import annotations

from pathlib import Path

import pytest

from stackseed.config import ScaffoldConfig
from stackseed.scaffolder.commands import CommandResult

GOLDEN_DIR = Path(__file__).parent / "fixtures" / "golden"


# ---------------------------------------------------------------------------
# Fake command runner
# ---------------------------------------------------------------------------


class FakeRunner:
    """Records every command and returns scripted exit codes.

    ``failures`` maps the leading words of a command (e.g. ``("go", "mod")``)
    to the exit code that command should report.  Commands that would create
    files in a real run (``npm init -y``, ``npx tailwindcss init``) leave a
    stand-in file behind so tests can see whether it was replaced.
    """

    NPM_INIT_MANIFEST = '{\n  "name": "frontend",\n  "version": "1.0.0"\n}\n'
    TAILWIND_INIT_CONFIG = "/** generated by tailwindcss init */\n"

    def __init__(self, failures: dict[tuple[str, ...], int] | None = None) -> None:
        self.failures = failures or {}
        self.calls: list[tuple[list[str], Path]] = []

    @property
    def commands(self) -> list[list[str]]:
        return [command for command, _ in self.calls]

    async def run(self, command: list[str], cwd: Path) -> CommandResult:
        self.calls.append((list(command), Path(cwd)))
        for prefix, exit_code in self.failures.items():
            if tuple(command[: len(prefix)]) == prefix:
                return CommandResult(
                    command=list(command),
                    cwd=Path(cwd),
                    exit_code=exit_code,
                    output=f"simulated failure of {command[0]}",
                )

        if command == ["npm", "init", "-y"]:
            (Path(cwd) / "package.json").write_text(self.NPM_INIT_MANIFEST, encoding="utf-8")
        elif command == ["npx", "tailwindcss", "init"]:
            (Path(cwd) / "tailwind.config.js").write_text(
                self.TAILWIND_INIT_CONFIG, encoding="utf-8"
            )
        return CommandResult(command=list(command), cwd=Path(cwd), exit_code=0)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_runner() -> FakeRunner:
    """A runner where every command succeeds."""
    return FakeRunner()


@pytest.fixture
def make_runner():
    """Factory for runners with scripted failures."""

    def _make(failures: dict[tuple[str, ...], int] | None = None) -> FakeRunner:
        return FakeRunner(failures)

    return _make


@pytest.fixture
def classic_config(tmp_path: Path) -> ScaffoldConfig:
    """The default preset, writing projects under ``tmp_path``."""
    return ScaffoldConfig.from_preset("classic", output_dir=tmp_path)


@pytest.fixture
def vite_config(tmp_path: Path) -> ScaffoldConfig:
    """The Vite preset, writing projects under ``tmp_path``."""
    return ScaffoldConfig.from_preset("vite", output_dir=tmp_path)


@pytest.fixture
def golden():
    """Return the exact bytes a generated file must contain."""

    def _read(rel_path: str) -> bytes:
        path = GOLDEN_DIR / rel_path
        assert path.exists(), f"Golden file not found at {path}"
        return path.read_bytes()

    return _read
