"""Container build file generation for scaffolded projects.

Renders the recipe's Dockerfile template into the project root so the
container build tool can use the project directory as its build context.
"""

from __future__ import annotations

from pathlib import Path

from ..config import WizcraftConfig
from ..models import ProjectContext
from ..recipes import Recipe
from .templates import TemplateRenderer


class DockerfileError(Exception):
    """Raised when the container build file cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(reason)


class DockerGenerator:
    """Writes the container build file for a recipe."""

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        config: WizcraftConfig | None = None,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.config = config or WizcraftConfig()

    def dockerfile_path(self, ctx: ProjectContext) -> Path:
        return ctx.project_path / self.config.dockerfile_name

    def render(self, recipe: Recipe, ctx: ProjectContext) -> str:
        """Return the rendered container file without writing it."""
        return self.renderer.render(recipe.dockerfile_template, _template_context(ctx))

    async def write(self, recipe: Recipe, ctx: ProjectContext) -> Path:
        """Render the recipe's template to ``<project_path>/Dockerfile``.

        The file is created or overwritten with ``config.dockerfile_mode``
        permissions (``0o644`` by default).

        Returns:
            Path of the written file.

        Raises:
            DockerfileError: If the file cannot be written.
        """
        output_path = self.dockerfile_path(ctx)
        try:
            return await self.renderer.render_to_file(
                recipe.dockerfile_template,
                output_path,
                _template_context(ctx),
                mode=self.config.dockerfile_mode,
            )
        except OSError as exc:
            raise DockerfileError(output_path, f"{output_path}: {exc.strerror or exc}") from exc


def _template_context(ctx: ProjectContext) -> dict[str, str]:
    return {"java_version": ctx.version}
