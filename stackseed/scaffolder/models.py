"""Pydantic models shared by the scaffolder components."""

from __future__ import annotations

from pathlib import Path, PurePath

from pydantic import BaseModel, ConfigDict, Field


class ProjectDescriptor(BaseModel):
    """The project being scaffolded.

    Built once from the operator's answer and read by every writer.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Project name, used as the root folder name")
    root: Path = Field(..., description="Absolute path of the project root")

    @classmethod
    def create(cls, name: str, base_dir: str | Path) -> "ProjectDescriptor":
        """Derive the project root from *base_dir* and *name*.

        The name is always joined as a relative path, so an absolute answer
        such as ``/srv/app`` still lands under *base_dir*.
        """
        relative = PurePath(name)
        if relative.anchor:
            relative = relative.relative_to(relative.anchor)
        return cls(name=name, root=Path(base_dir) / relative)

    @property
    def backend_dir(self) -> Path:
        return self.root / "backend"

    @property
    def frontend_dir(self) -> Path:
        return self.root / "frontend"
