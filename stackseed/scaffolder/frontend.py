"""React frontend writer.

Initialises an npm package with React, Vite and Tailwind CSS, optionally
replaces the generated manifest, runs the Tailwind initialiser and renders
the application sources.
"""

from __future__ import annotations

from pathlib import Path

from ..config import ScaffoldConfig
from ..utils import print_info, print_success
from .commands import CommandRunner, run_checked
from .models import ProjectDescriptor
from .templates import TemplateRenderer

# (template key, path relative to frontend/), in write order
SOURCE_FILES: tuple[tuple[str, str], ...] = (
    ("frontend.app_component", "src/App.jsx"),
    ("frontend.stylesheet", "src/index.css"),
    ("frontend.bootstrap", "src/main.jsx"),
    ("frontend.tailwind_config", "tailwind.config.js"),
)

INDEX_HTML = ("frontend.index_html", "index.html")
MANIFEST = ("frontend.manifest", "package.json")


class FrontendWriter:
    """Sets up ``<root>/frontend``."""

    def __init__(
        self,
        renderer: TemplateRenderer,
        runner: CommandRunner,
        config: ScaffoldConfig,
    ) -> None:
        self.renderer = renderer
        self.runner = runner
        self.config = config

    def source_files(self) -> list[tuple[str, str]]:
        """Template keys and destinations of the fixed source files."""
        files = list(SOURCE_FILES)
        if self.config.options.include_index_html:
            files.append(INDEX_HTML)
        return files

    async def write(self, project: ProjectDescriptor) -> list[Path]:
        print_info("Initializing frontend...")
        frontend_dir = project.frontend_dir
        params = self.config.options.model_dump()
        written: list[Path] = []

        await run_checked(self.runner, self.config.frontend_commands, frontend_dir)

        if self.config.options.overwrite_frontend_manifest:
            key, rel = MANIFEST
            written.append(
                await self.renderer.render_to_file(key, frontend_dir / rel, params)
            )

        # Tailwind's initialiser writes its own config; ours replaces it below.
        await run_checked(self.runner, self.config.toolkit_init_commands, frontend_dir)

        for key, rel in self.source_files():
            written.append(
                await self.renderer.render_to_file(key, frontend_dir / rel, params)
            )

        print_success("Frontend initialized successfully!")
        return written
