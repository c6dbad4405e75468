"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``stackseed/scaffolder/templates/`` directory and renders them by key
(``"backend.main"``, ``"frontend.app_component"``, ...).  Writers depend only
on ``render(key, params)``; where a template lives on disk is the renderer's
concern.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from ..utils import write_text_file


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

TEMPLATE_FILES: dict[str, str] = {
    "backend.main": "backend/main.go.j2",
    "frontend.app_component": "frontend/src/App.jsx.j2",
    "frontend.stylesheet": "frontend/src/index.css.j2",
    "frontend.bootstrap": "frontend/src/main.jsx.j2",
    "frontend.tailwind_config": "frontend/tailwind.config.js.j2",
    "frontend.manifest": "frontend/package.json.j2",
    "frontend.index_html": "frontend/index.html.j2",
    "instructions": "instructions.txt.j2",
}


class UnknownTemplateError(KeyError):
    """Raised when a template key has no registered file."""


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the scaffold's Jinja2 templates.

    Templates are addressed by key rather than by path.  Rendering is strict:
    a variable the template uses but the caller did not supply is an error,
    not an empty string.
    """

    def __init__(
        self,
        template_dir: str | Path | None = None,
        template_files: dict[str, str] | None = None,
    ) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.template_files = dict(template_files or TEMPLATE_FILES)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    # -- Single template rendering -----------------------------------------

    def template_path(self, key: str) -> str:
        """Return the file (relative to the template root) behind *key*."""
        try:
            return self.template_files[key]
        except KeyError:
            raise UnknownTemplateError(key) from None

    def render(self, key: str, params: dict[str, Any] | None = None) -> str:
        """Render the template registered under *key*.

        Args:
            key: Template key, e.g. ``"backend.main"``.
            params: Variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(self.template_path(key))
        return template.render(**(params or {}))

    # -- File-based rendering (async) --------------------------------------

    async def render_to_file(
        self,
        key: str,
        output_path: str | Path,
        params: dict[str, Any] | None = None,
    ) -> Path:
        """Render a template and write the result to *output_path*.

        Parent directories are created automatically.
        """
        content = self.render(key, params)
        return await asyncio.to_thread(write_text_file, Path(output_path), content)

    # -- Utility -----------------------------------------------------------

    def keys(self) -> list[str]:
        """Return every registered template key, sorted."""
        return sorted(self.template_files)
