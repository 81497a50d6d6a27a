"""Tests for container build file generation and template rendering.

Covers:
- Rendered Dockerfile content for a Java version
- Output path and file permissions
- Overwriting an existing Dockerfile
- Write failures surfacing as DockerfileError
- TemplateRenderer rendering from a custom template directory
"""

from __future__ import annotations

import stat
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from wizcraft.config import WizcraftConfig
from wizcraft.models import ProjectContext
from wizcraft.recipes import SPRING
from wizcraft.scaffolder.docker_gen import DockerfileError, DockerGenerator
from wizcraft.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def ctx(tmp_path: Path) -> ProjectContext:
    """Context whose project directory already exists."""
    (tmp_path / "demo").mkdir()
    return ProjectContext(app_type="spring", name="demo", version="21", directory=str(tmp_path))


@pytest.fixture
def docker_gen() -> DockerGenerator:
    return DockerGenerator()


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestRender:
    def test_from_line_uses_version(self, docker_gen, ctx):
        assert "FROM openjdk:21-jdk-slim" in docker_gen.render(SPRING, ctx)

    def test_other_version(self, docker_gen, ctx):
        ctx = ctx.model_copy(update={"version": "17"})
        assert "FROM openjdk:17-jdk-slim" in docker_gen.render(SPRING, ctx)

    def test_fixed_lines(self, docker_gen, ctx):
        lines = docker_gen.render(SPRING, ctx).splitlines()
        assert lines == [
            "FROM openjdk:21-jdk-slim",
            "WORKDIR /app",
            "COPY build/libs/*.jar app.jar",
            'ENTRYPOINT ["java", "-jar", "app.jar"]',
        ]


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------


class TestWrite:
    async def test_writes_into_project(self, docker_gen, ctx):
        path = await docker_gen.write(SPRING, ctx)
        assert path == ctx.project_path / "Dockerfile"
        assert "FROM openjdk:21-jdk-slim" in path.read_text(encoding="utf-8")

    async def test_permissions(self, docker_gen, ctx):
        path = await docker_gen.write(SPRING, ctx)
        assert stat.S_IMODE(path.stat().st_mode) == 0o644

    async def test_overwrites_existing(self, docker_gen, ctx):
        existing = ctx.project_path / "Dockerfile"
        existing.write_text("FROM scratch\n", encoding="utf-8")
        existing.chmod(0o755)
        await docker_gen.write(SPRING, ctx)
        assert "scratch" not in existing.read_text(encoding="utf-8")
        assert stat.S_IMODE(existing.stat().st_mode) == 0o644

    async def test_custom_file_name(self, ctx):
        gen = DockerGenerator(config=WizcraftConfig(dockerfile_name="Containerfile"))
        path = await gen.write(SPRING, ctx)
        assert path.name == "Containerfile"

    async def test_missing_project_dir_raises(self, docker_gen, tmp_path):
        ctx = ProjectContext(app_type="spring", name="absent", version="21", directory=str(tmp_path))
        with pytest.raises(DockerfileError) as excinfo:
            await docker_gen.write(SPRING, ctx)
        assert excinfo.value.path == tmp_path / "absent" / "Dockerfile"
        assert str(tmp_path / "absent" / "Dockerfile") in str(excinfo.value)

    async def test_uses_renderer(self, ctx):
        renderer = MagicMock(spec=TemplateRenderer)
        renderer.render_to_file = AsyncMock(return_value=ctx.project_path / "Dockerfile")
        gen = DockerGenerator(renderer)
        await gen.write(SPRING, ctx)
        template, output, context = renderer.render_to_file.call_args.args
        assert template == "spring/Dockerfile.j2"
        assert output == ctx.project_path / "Dockerfile"
        assert context["java_version"] == "21"
        assert renderer.render_to_file.call_args.kwargs == {"mode": 0o644}


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TestTemplateRenderer:
    async def test_render_to_file_custom_dir(self, tmp_path):
        templates = tmp_path / "templates"
        templates.mkdir()
        (templates / "hello.j2").write_text("hello {{ name }}\n", encoding="utf-8")
        renderer = TemplateRenderer(templates)
        out = await renderer.render_to_file("hello.j2", tmp_path / "hello.txt", {"name": "demo"})
        assert out.read_text(encoding="utf-8") == "hello demo\n"
