"""stackseed configuration.

Centralised, typed configuration for a scaffold run.  All settings use
Pydantic v2 models so they are validated at construction time and can be
serialised to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, PositiveFloat, field_validator

DEFAULT_PROJECT_NAME = "my-project"


class ScaffoldOptions(BaseModel):
    """Switches that select between the generated layout variants."""

    include_shared_utils_dir: bool = Field(
        default=True, description="Create an empty shared/utils directory"
    )
    overwrite_frontend_manifest: bool = Field(
        default=False,
        description="Replace the npm-generated package.json with a fixed Vite manifest",
    )
    include_index_html: bool = Field(
        default=False, description="Write a Vite index.html shell into frontend/"
    )
    include_mongo_ping_check: bool = Field(
        default=False,
        description="Make the Go skeleton ping MongoDB after connecting",
    )


PRESETS: dict[str, ScaffoldOptions] = {
    "classic": ScaffoldOptions(),
    "vite": ScaffoldOptions(
        include_shared_utils_dir=False,
        overwrite_frontend_manifest=True,
        include_index_html=True,
        include_mongo_ping_check=True,
    ),
}

DEFAULT_PRESET = "classic"


def preset_options(name: str) -> ScaffoldOptions:
    """Return a fresh copy of the options of preset *name*.

    Raises:
        ValueError: If *name* is not a known preset.
    """
    if name not in PRESETS:
        known = ", ".join(sorted(PRESETS))
        raise ValueError(f"Unknown preset '{name}' (expected one of: {known})")
    return PRESETS[name].model_copy()


def _default_backend_commands() -> list[list[str]]:
    return [
        ["go", "mod", "init", "backend"],
        ["go", "get", "github.com/gofiber/fiber/v2", "go.mongodb.org/mongo-driver"],
    ]


def _default_frontend_commands() -> list[list[str]]:
    return [
        ["npm", "init", "-y"],
        ["npm", "install", "react", "react-dom", "vite", "tailwindcss"],
    ]


def _default_toolkit_init_commands() -> list[list[str]]:
    return [["npx", "tailwindcss", "init"]]


class ScaffoldConfig(BaseModel):
    """Global stackseed configuration.

    Instances are created once by the CLI entry point and then passed to the
    generator and every template writer.
    """

    preset: str = Field(default=DEFAULT_PRESET)
    options: ScaffoldOptions = Field(default_factory=ScaffoldOptions)
    default_project_name: str = Field(default=DEFAULT_PROJECT_NAME, min_length=1)
    output_dir: Path = Field(default_factory=Path.cwd)
    command_timeout: PositiveFloat | None = Field(
        default=None, description="Per-command timeout in seconds; None waits forever"
    )

    backend_commands: list[list[str]] = Field(default_factory=_default_backend_commands)
    frontend_commands: list[list[str]] = Field(default_factory=_default_frontend_commands)
    toolkit_init_commands: list[list[str]] = Field(
        default_factory=_default_toolkit_init_commands
    )

    @field_validator("backend_commands", "frontend_commands", "toolkit_init_commands")
    @classmethod
    def _commands_not_empty(cls, value: list[list[str]]) -> list[list[str]]:
        for command in value:
            if not command or not command[0]:
                raise ValueError("every command must name an executable")
        return value

    # ------------------------------------------------------------------
    # Presets
    # ------------------------------------------------------------------

    @classmethod
    def from_preset(cls, name: str, **overrides: Any) -> "ScaffoldConfig":
        """Build a config whose options come from the named preset."""
        return cls(preset=name, options=preset_options(name), **overrides)

    def with_preset(self, name: str) -> "ScaffoldConfig":
        """Return a copy of this config with the options of preset *name*."""
        return self.model_copy(update={"preset": name, "options": preset_options(name)})

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "ScaffoldConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            STACKSEED_PRESET, STACKSEED_DEFAULT_NAME, STACKSEED_OUTPUT_DIR,
            STACKSEED_COMMAND_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("STACKSEED_DEFAULT_NAME"):
            kwargs["default_project_name"] = os.environ["STACKSEED_DEFAULT_NAME"]
        if os.environ.get("STACKSEED_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["STACKSEED_OUTPUT_DIR"])
        if os.environ.get("STACKSEED_COMMAND_TIMEOUT"):
            kwargs["command_timeout"] = float(os.environ["STACKSEED_COMMAND_TIMEOUT"])

        preset = os.environ.get("STACKSEED_PRESET", DEFAULT_PRESET)
        return cls.from_preset(preset, **kwargs)
