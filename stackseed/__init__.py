"""stackseed -- interactive full-stack project scaffolder."""

__version__ = "0.1.0"
