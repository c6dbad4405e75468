"""Interactive prompts."""

from __future__ import annotations

from typing import Callable

from .config import DEFAULT_PROJECT_NAME
from .utils import console

PROJECT_NAME_PROMPT = "Enter your project name: "

InputFunc = Callable[[str], str]


def ask_project_name(
    input_func: InputFunc | None = None,
    default: str = DEFAULT_PROJECT_NAME,
) -> str:
    """Ask the operator for a project name.

    An empty answer (or end of input) falls back to *default*.  Anything else
    is returned exactly as typed.
    """
    read = input_func or console.input
    try:
        answer = read(PROJECT_NAME_PROMPT)
    except EOFError:
        answer = ""
    return answer or default
