"""Fixed directory layout of a scaffolded project."""

from __future__ import annotations

import asyncio
from pathlib import Path

from ..config import ScaffoldOptions
from ..utils import ensure_dir

BASE_DIRECTORIES: tuple[str, ...] = (
    "backend/config",
    "backend/controllers",
    "backend/models",
    "backend/routes",
    "frontend/src",
    "frontend/public",
)

SHARED_UTILS_DIRECTORY = "shared/utils"


class DirectoryBuilder:
    """Creates the project's directory tree under a root path."""

    def __init__(self, options: ScaffoldOptions) -> None:
        self.options = options

    def directories(self) -> list[str]:
        """Relative directories to create, in creation order."""
        dirs = list(BASE_DIRECTORIES)
        if self.options.include_shared_utils_dir:
            dirs.append(SHARED_UTILS_DIRECTORY)
        return dirs

    async def build(self, root: Path) -> list[Path]:
        """Create every directory under *root*.

        Missing parents are created and existing directories are left alone.
        Directories are created one at a time; if one fails the earlier ones
        stay on disk and the ``OSError`` propagates.
        """
        created: list[Path] = []
        for rel in self.directories():
            path = await asyncio.to_thread(ensure_dir, Path(root) / rel)
            created.append(path)
        return created
