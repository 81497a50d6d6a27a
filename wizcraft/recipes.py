"""Application-type recipes.

A recipe says how one ``--app`` value is scaffolded: which version to ask
for, which arguments the project generator receives, whether the project
is built afterwards, and which container file template it gets.  Only the
``spring`` recipe exists today.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .models import ProjectContext


class UnsupportedAppTypeError(Exception):
    """Raised when ``--app`` names a type with no registered recipe."""

    def __init__(self, app_type: str) -> None:
        self.app_type = app_type
        super().__init__(f"Unsupported application type: {app_type}")


@dataclass(frozen=True)
class Recipe:
    """How to scaffold one application type."""

    app_type: str
    description: str
    generator_label: str
    generator_args: Callable[[ProjectContext], list[str]]
    version_prompt: str = ""
    runs_build: bool = False
    dockerfile_template: str = ""


def _spring_generator_args(ctx: ProjectContext) -> list[str]:
    return [
        "init",
        "--build=gradle",
        f"--java-version={ctx.version}",
        f"--name={ctx.name}",
        "--type=gradle-project-kotlin",
        str(ctx.project_path),
    ]


SPRING = Recipe(
    app_type="spring",
    description="Create a Spring Boot project",
    generator_label="Spring CLI",
    generator_args=_spring_generator_args,
    version_prompt="Enter Java version (e.g., 17, 21): ",
    runs_build=True,
    dockerfile_template="spring/Dockerfile.j2",
)

RECIPES: dict[str, Recipe] = {SPRING.app_type: SPRING}


def get_recipe(app_type: str) -> Recipe:
    """Return the recipe registered for *app_type*.

    Raises:
        UnsupportedAppTypeError: If no recipe is registered under that name.
    """
    try:
        return RECIPES[app_type]
    except KeyError:
        raise UnsupportedAppTypeError(app_type) from None


def supported_app_types() -> list[str]:
    """Sorted list of the ``--app`` values that have a recipe."""
    return sorted(RECIPES)
