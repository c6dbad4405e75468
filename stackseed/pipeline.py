"""stackseed pipeline and CLI entry point.

Runs the scaffold as three stages:

Stage 1: DIRECTORIES -- create the project root and the fixed folder layout.
Stage 2: BACKEND     -- ``go mod init`` / ``go get`` and write ``main.go``.
Stage 3: FRONTEND    -- ``npm init`` / ``npm install`` / ``npx tailwindcss init``
                        and write the React sources.

The first failing stage stops the run; nothing already written is removed.

Usage::

    stackseed
    python -m stackseed --preset vite --name demo
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import time
import traceback
from pathlib import Path
from typing import Any

from rich.markup import escape
from rich.panel import Panel

from .config import PRESETS, ScaffoldConfig
from .prompts import InputFunc, ask_project_name
from .scaffolder.commands import CommandRunner, StackseedError
from .scaffolder.generator import ProjectGenerator
from .scaffolder.models import ProjectDescriptor
from .scaffolder.templates import TemplateRenderer
from .utils import (
    STAGE_NAMES,
    console,
    format_duration,
    print_error,
    print_info,
    print_stage_header,
    print_success,
    print_summary_table,
    print_warning,
)

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class StageError(StackseedError):
    """Raised when a scaffold stage fails."""

    def __init__(self, stage: int, message: str) -> None:
        self.stage = stage
        super().__init__(f"Stage {stage} ({STAGE_NAMES.get(stage, '?')}): {message}")


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


class Pipeline:
    """Drives a single scaffold run from prompt to follow-up instructions.

    Attributes:
        config: Scaffold configuration.
        generator: The project generator whose stages are executed.
        state: Results accumulated while the run progresses.
    """

    _STAGE_METHODS: dict[int, str] = {
        1: "create_directories",
        2: "write_backend",
        3: "write_frontend",
    }

    def __init__(
        self,
        config: ScaffoldConfig,
        runner: CommandRunner | None = None,
        input_func: InputFunc | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.input_func = input_func
        self.generator = ProjectGenerator(config, runner=runner, renderer=renderer)
        self.state: dict[str, Any] = {
            "stages_completed": [],
            "stages_failed": [],
            "created": [],
            "success": False,
        }

    def collect_project_name(self) -> str:
        """Ask for the project name.

        This blocks on the input provider, so interactive callers should call
        it before starting the event loop and pass the answer to :meth:`run`.
        """
        return ask_project_name(self.input_func, self.config.default_project_name)

    async def run(self, project_name: str | None = None) -> dict[str, Any]:
        """Execute every stage in order.

        Args:
            project_name: Skip the prompt and use this name.  When omitted the
                input provider is asked from inside the running loop.  An
                empty string resolves to the configured default like an empty
                answer does.

        Returns:
            The run state, including a top-level ``success`` boolean.
        """
        if project_name is None:
            project_name = self.collect_project_name()
        project = self.generator.describe(project_name or self.config.default_project_name)

        self.state["project_name"] = project.name
        self.state["project_root"] = str(project.root)

        console.print(
            Panel(
                f"Project : {escape(project.name)}\n"
                f"Root    : {escape(str(project.root))}\n"
                f"Preset  : {escape(self.config.preset)}",
                title="[bold]stackseed[/bold]",
                border_style="bright_cyan",
            )
        )

        run_start = time.monotonic()
        all_success = True

        for stage in sorted(self._STAGE_METHODS):
            stage_name = STAGE_NAMES[stage]
            print_stage_header(stage, stage_name)
            stage_start = time.monotonic()

            try:
                created = await self._run_stage(stage, project)
            except StageError as exc:
                all_success = False
                self.state["stages_failed"].append(stage)
                self.state["error"] = str(exc)
                print_error(
                    f"{exc} (after {format_duration(time.monotonic() - stage_start)})"
                )
                break
            except Exception as exc:
                all_success = False
                self.state["stages_failed"].append(stage)
                tb = traceback.format_exc()
                self.state["error"] = tb
                print_error(f"Stage {stage} ({stage_name}) FAILED: {exc}")
                console.print(f"[dim]{escape(tb)}[/dim]")
                break

            self.state["created"].extend(str(p) for p in created)
            self.state["stages_completed"].append(stage)

        total = time.monotonic() - run_start
        self.state["success"] = all_success
        self.state["total_duration"] = format_duration(total)

        if all_success:
            print_success("Project setup complete!")
            print_info(self.generator.render_instructions(project))
            print_summary_table(
                {
                    "Project": project.name,
                    "Root": str(project.root),
                    "Paths created": str(len(self.state["created"])),
                    "Duration": self.state["total_duration"],
                },
                title="Scaffold Summary",
            )
        else:
            print_warning(
                "Files created before the failure were left in place: "
                f"{project.root}"
            )

        return self.state

    async def _run_stage(self, stage: int, project: ProjectDescriptor) -> list[Path]:
        method = getattr(self.generator, self._STAGE_METHODS[stage])
        try:
            return await method(project)
        except (StackseedError, OSError) as exc:
            raise StageError(stage, str(exc)) from exc


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def _build_config(args) -> ScaffoldConfig:
    if args.config:
        config = ScaffoldConfig.load(Path(args.config))
    else:
        config = ScaffoldConfig.from_env()
    if args.preset:
        config = config.with_preset(args.preset)
    if args.output:
        config = config.model_copy(update={"output_dir": Path(args.output)})
    return config


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``stackseed`` and ``python -m stackseed``."""
    parser = argparse.ArgumentParser(
        prog="stackseed",
        description="Scaffold a Go (Fiber + MongoDB) backend and React (Vite + Tailwind) frontend",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  stackseed\n"
            "  stackseed --preset vite\n"
            "  stackseed --name demo --output ~/code\n"
        ),
    )
    parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default=None,
        help="Layout variant (default: classic, or STACKSEED_PRESET)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a JSON ScaffoldConfig file",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory the project folder is created in (default: current directory)",
    )
    parser.add_argument(
        "--name",
        default=None,
        help="Project name; skips the interactive prompt",
    )

    args = parser.parse_args(argv)

    try:
        config = _build_config(args)
    except (OSError, ValueError) as exc:
        console.print(f"[bold red]Error:[/bold red] Invalid configuration: {escape(str(exc))}")
        sys.exit(2)

    pipeline = Pipeline(config)
    try:
        project_name = args.name
        if project_name is None:
            project_name = pipeline.collect_project_name()
        result = asyncio.run(pipeline.run(project_name))
    except KeyboardInterrupt:
        print_warning("Aborted.")
        sys.exit(130)

    if not result.get("success"):
        print_error("Project setup failed.")
        sys.exit(1)


if __name__ == "__main__":
    main()
