"""Wizcraft scaffolder -- files written into a generated project.

The external generator owns the project tree; this package only adds the
files it does not produce, currently the container build file.

Quick usage::

    from wizcraft.scaffolder import DockerGenerator

    path = await DockerGenerator().write(recipe, ctx)
"""

from wizcraft.scaffolder.docker_gen import DockerfileError, DockerGenerator
from wizcraft.scaffolder.templates import TemplateRenderer

__all__ = [
    "DockerGenerator",
    "DockerfileError",
    "TemplateRenderer",
]
