"""stackseed scaffolder -- generates the project structure.

Quick usage::

    from stackseed.config import ScaffoldConfig
    from stackseed.scaffolder import ProjectGenerator

    generator = ProjectGenerator(ScaffoldConfig.from_preset("vite"))
    project = generator.describe("demo")
    await generator.generate(project)
"""

from stackseed.scaffolder.commands import (
    CommandFailedError,
    CommandNotFoundError,
    CommandResult,
    CommandRunner,
    StackseedError,
    SubprocessRunner,
)
from stackseed.scaffolder.directories import DirectoryBuilder
from stackseed.scaffolder.generator import ProjectGenerator
from stackseed.scaffolder.models import ProjectDescriptor
from stackseed.scaffolder.templates import TemplateRenderer

__all__ = [
    "CommandFailedError",
    "CommandNotFoundError",
    "CommandResult",
    "CommandRunner",
    "DirectoryBuilder",
    "ProjectDescriptor",
    "ProjectGenerator",
    "StackseedError",
    "SubprocessRunner",
    "TemplateRenderer",
]
