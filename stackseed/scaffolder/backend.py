"""Go backend writer.

Initialises a Go module with Fiber and the MongoDB driver, then renders the
``main.go`` server skeleton.
"""

from __future__ import annotations

from pathlib import Path

from ..config import ScaffoldConfig
from ..utils import print_info, print_success
from .commands import CommandRunner, run_checked
from .models import ProjectDescriptor
from .templates import TemplateRenderer


class BackendWriter:
    """Sets up ``<root>/backend``.

    Every configured command must exit 0 before ``main.go`` is written.
    """

    def __init__(
        self,
        renderer: TemplateRenderer,
        runner: CommandRunner,
        config: ScaffoldConfig,
    ) -> None:
        self.renderer = renderer
        self.runner = runner
        self.config = config

    async def write(self, project: ProjectDescriptor) -> list[Path]:
        print_info("Initializing backend...")
        backend_dir = project.backend_dir

        await run_checked(self.runner, self.config.backend_commands, backend_dir)

        main_go = await self.renderer.render_to_file(
            "backend.main",
            backend_dir / "main.go",
            self.config.options.model_dump(),
        )

        print_success("Backend initialized and dependencies installed successfully!")
        return [main_go]
