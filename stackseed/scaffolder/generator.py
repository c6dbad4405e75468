"""Main scaffolding orchestrator.

Takes a ``ProjectDescriptor`` and generates the project directory: the fixed
folder layout, a Go (Fiber + MongoDB) backend and a React (Vite + Tailwind)
frontend.  Stages run strictly one after another because each depends on the
files the previous one left behind.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from ..config import ScaffoldConfig
from ..utils import print_info, print_success
from .backend import BackendWriter
from .commands import CommandRunner, SubprocessRunner
from .directories import DirectoryBuilder
from .frontend import FrontendWriter
from .models import ProjectDescriptor
from .templates import TemplateRenderer


class ProjectGenerator:
    """Main scaffolding orchestrator.

    Given a ``ScaffoldConfig``, generates a directory tree containing:
    - backend/{config,controllers,models,routes} and ``backend/main.go``
    - frontend/{src,public} with App, stylesheet, bootstrap and Tailwind config
    - optionally ``frontend/index.html``, a fixed ``package.json`` and
      ``shared/utils``
    """

    def __init__(
        self,
        config: ScaffoldConfig,
        runner: CommandRunner | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.runner = runner or SubprocessRunner(timeout=config.command_timeout)
        self.renderer = renderer or TemplateRenderer()
        self.directory_builder = DirectoryBuilder(config.options)
        self.backend_writer = BackendWriter(self.renderer, self.runner, config)
        self.frontend_writer = FrontendWriter(self.renderer, self.runner, config)

    # -- Public API --------------------------------------------------------

    def describe(self, name: str) -> ProjectDescriptor:
        """Build the descriptor for *name* under the configured output dir."""
        return ProjectDescriptor.create(name, self.config.output_dir)

    async def generate(self, project: ProjectDescriptor) -> list[Path]:
        """Run every stage in order.

        Returns:
            Every directory and file created, in creation order.
        """
        created: list[Path] = []
        created += await self.create_directories(project)
        created += await self.write_backend(project)
        created += await self.write_frontend(project)
        return created

    # -- Stages ------------------------------------------------------------

    async def create_directories(self, project: ProjectDescriptor) -> list[Path]:
        """Create the project root and the fixed directory layout."""
        print_info(f"Creating project: {project.name}")
        await asyncio.to_thread(project.root.mkdir, parents=True, exist_ok=True)

        print_info("Creating project folder structure...")
        dirs = await self.directory_builder.build(project.root)
        print_success("Folder structure created successfully!")
        return [project.root, *dirs]

    async def write_backend(self, project: ProjectDescriptor) -> list[Path]:
        return await self.backend_writer.write(project)

    async def write_frontend(self, project: ProjectDescriptor) -> list[Path]:
        return await self.frontend_writer.write(project)

    # -- Follow-up ---------------------------------------------------------

    def render_instructions(self, project: ProjectDescriptor) -> str:
        """The next steps the operator should run by hand."""
        params = {"project_name": project.name, **self.config.options.model_dump()}
        return self.renderer.render("instructions", params)
