"""Interactive prompt collection for ``create-project``.

Reads the project parameters from standard input in a fixed order: name,
an optional recipe-specific version, and the target directory.  Each prompt
takes one whitespace-delimited token; extra tokens typed on a line are kept
and answer the following prompts.  Input is taken as-is: an empty answer,
or a read that fails because input is closed, leaves the field empty and
collection carries on.
"""

from __future__ import annotations

import os
from collections.abc import Callable

from rich.console import Console

from .recipes import Recipe
from .utils import console as default_console

NAME_PROMPT = "Enter project name: "
DIRECTORY_PROMPT = "Enter project directory (default is current directory): "


class PromptCollector:
    """Collects project parameters from the user.

    Args:
        console: Console used to print prompt labels.
        read_line: Callable returning one line of input.  Defaults to the
            builtin ``input``.  May raise ``EOFError`` or ``OSError``.
    """

    def __init__(
        self,
        console: Console | None = None,
        read_line: Callable[[], str] | None = None,
    ) -> None:
        self.console = console or default_console
        self.read_line = read_line or input
        self._pending: list[str] = []

    def ask(self, label: str) -> str:
        """Print *label* and return the next whitespace-delimited token.

        Tokens left over from an earlier line are used before a new line is
        read.  Returns an empty string when the line is blank or cannot be
        read.
        """
        self.console.print(label, end="", markup=False, highlight=False)
        if self._pending:
            self.console.print()
            return self._pending.pop(0)
        try:
            line = self.read_line()
        except (EOFError, OSError):
            self.console.print()
            return ""
        tokens = line.split()
        if not tokens:
            return ""
        self._pending = tokens[1:]
        return tokens[0]

    def collect(self, recipe: Recipe) -> dict[str, str]:
        """Ask for every field *recipe* needs.

        Returns:
            ``{"name": ..., "version": ..., "directory": ...}``.  ``version`` is
            empty when the recipe does not prompt for one, and ``directory``
            falls back to the current working directory.
        """
        name = self.ask(NAME_PROMPT)

        version = ""
        if recipe.version_prompt:
            version = self.ask(recipe.version_prompt)

        directory = self.ask(DIRECTORY_PROMPT)
        if not directory:
            directory = os.getcwd()

        return {"name": name, "version": version, "directory": directory}
