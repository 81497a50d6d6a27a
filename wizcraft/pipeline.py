"""Wizcraft ``create-project`` pipeline.

Runs the scaffolding steps for one application type, in order:

Step 1: GENERATE   -- run the project generator (``spring init ...``).
Step 2: BUILD      -- run the project's build wrapper (``./gradlew build``).
Step 3: DOCKERFILE -- write the container build file into the project.
Step 4: IMAGE      -- build a container image tagged ``<name>:latest``.

Steps a recipe does not use are skipped.  The first failing step stops the
run; every later step is recorded as skipped and never started.
"""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape

from .config import WizcraftConfig
from .models import PipelineResult, ProjectContext, StepResult, StepStatus
from .prompts import PromptCollector
from .recipes import Recipe, UnsupportedAppTypeError, get_recipe
from .scaffolder.docker_gen import DockerfileError, DockerGenerator
from .utils import (
    CommandError,
    console as default_console,
    find_executable,
    format_command,
    format_duration,
    print_error,
    print_step_header,
    print_success,
    print_summary_table,
    run_passthrough,
)

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class StepError(Exception):
    """Raised when a pipeline step fails; the message is shown to the user."""

    def __init__(self, step: str, message: str) -> None:
        self.step = step
        super().__init__(message)


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Step:
    """A named, guarded unit of work."""

    name: str
    applies: Callable[[Recipe], bool]
    run: Callable[[Recipe, ProjectContext], Awaitable[None]]


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


class Pipeline:
    """Scaffolds, builds and containerises one project.

    Attributes:
        app_type: Value of ``--app``.
        config: Executables and fixed values used by the steps.
        collector: Source of the interactive answers.
        docker_gen: Writer for the container build file.
    """

    def __init__(
        self,
        app_type: str,
        config: WizcraftConfig | None = None,
        collector: PromptCollector | None = None,
        docker_gen: DockerGenerator | None = None,
        console: Console | None = None,
    ) -> None:
        self.app_type = app_type
        self.config = config or WizcraftConfig()
        self.console = console or default_console
        self.collector = collector or PromptCollector(console=self.console)
        self.docker_gen = docker_gen or DockerGenerator(config=self.config)

    def steps(self) -> list[Step]:
        return [
            Step("generate", lambda recipe: True, self.generate_project),
            Step("build", lambda recipe: recipe.runs_build, self.build_project),
            Step("dockerfile", lambda recipe: bool(recipe.dockerfile_template), self.write_dockerfile),
            Step("image", lambda recipe: True, self.build_image),
        ]

    # ------------------------------------------------------------------
    # Pre-flight
    # ------------------------------------------------------------------

    def preflight(self, recipe: Recipe) -> bool:
        """Check that the project generator resolves on ``PATH``.

        Prints installation guidance and returns ``False`` when it does not.
        """
        if find_executable(self.config.generator_executable) is not None:
            return True
        self.console.print(
            f"{recipe.generator_label} is not installed. "
            "Please follow the installation guide:",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
        self.console.print(
            self.config.generator_install_url, markup=False, highlight=False, soft_wrap=True
        )
        self.console.print(
            f"[dim]({escape(self.config.generator_executable)} was not found on PATH)[/dim]",
            highlight=False,
            soft_wrap=True,
        )
        return False

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------

    async def run(self) -> PipelineResult:
        """Execute the whole ``create-project`` flow.

        Returns:
            A ``PipelineResult``; ``success`` is ``True`` only when every
            applicable step completed.
        """
        result = PipelineResult()

        try:
            recipe = get_recipe(self.app_type)
        except UnsupportedAppTypeError as exc:
            print_error(str(exc), out=self.console)
            result.error = str(exc)
            return result
        if not self.preflight(recipe):
            result.error = f"{self.config.generator_executable} not found on PATH"
            return result

        answers = self.collector.collect(recipe)
        ctx = ProjectContext(
            app_type=self.app_type,
            image_tag=self.config.image_tag,
            **answers,
        )
        result.context = ctx

        failed = False
        index = 0
        for step in self.steps():
            if failed or not step.applies(recipe):
                result.steps.append(StepResult(name=step.name, status=StepStatus.SKIPPED))
                continue

            index += 1
            print_step_header(index, step.name, out=self.console)
            started = time.monotonic()
            try:
                await step.run(recipe, ctx)
            except StepError as exc:
                failed = True
                result.error = str(exc)
                result.steps.append(
                    StepResult(
                        name=step.name,
                        status=StepStatus.FAILED,
                        duration=time.monotonic() - started,
                        detail=str(exc),
                    )
                )
                print_error(str(exc), out=self.console)
                continue

            elapsed = time.monotonic() - started
            result.steps.append(
                StepResult(name=step.name, status=StepStatus.OK, duration=elapsed)
            )
            self.console.print(
                f"[dim]{step.name} finished in {format_duration(elapsed)}[/dim]",
                soft_wrap=True,
            )

        result.success = not failed
        self._print_summary(result)
        return result

    # ------------------------------------------------------------------
    # Step implementations
    # ------------------------------------------------------------------

    def generator_command(self, recipe: Recipe, ctx: ProjectContext) -> list[str]:
        """Full generator command line for *ctx* under *recipe*."""
        return [self.config.generator_executable, *recipe.generator_args(ctx)]

    def image_command(self, ctx: ProjectContext) -> list[str]:
        return [self.config.container_tool, "build", "-t", ctx.image_name, str(ctx.project_path)]

    async def _run(self, cmd: list[str], cwd=None) -> None:
        self.console.print(f"[dim]$ {escape(format_command(cmd))}[/dim]", highlight=False, soft_wrap=True)
        await run_passthrough(cmd, cwd=cwd)

    async def generate_project(self, recipe: Recipe, ctx: ProjectContext) -> None:
        try:
            await self._run(self.generator_command(recipe, ctx))
        except CommandError as exc:
            raise StepError("generate", f"Error initializing project: {exc}") from exc
        print_success(
            f"Project initialized successfully in directory: {ctx.project_path}",
            out=self.console,
        )

    async def build_project(self, recipe: Recipe, ctx: ProjectContext) -> None:
        try:
            await self._run(list(self.config.build_command), cwd=ctx.project_path)
        except CommandError as exc:
            raise StepError("build", f"Error building project: {exc}") from exc
        print_success("Project built successfully", out=self.console)

    async def write_dockerfile(self, recipe: Recipe, ctx: ProjectContext) -> None:
        try:
            await self.docker_gen.write(recipe, ctx)
        except DockerfileError as exc:
            raise StepError("dockerfile", f"Error creating Dockerfile: {exc}") from exc
        print_success(
            f"Dockerfile created successfully in directory: {ctx.project_path}",
            out=self.console,
        )

    async def build_image(self, recipe: Recipe, ctx: ProjectContext) -> None:
        try:
            await self._run(self.image_command(ctx))
        except CommandError as exc:
            raise StepError("image", f"Error building Docker image: {exc}") from exc
        print_success(
            f"Docker image built successfully with name: {ctx.image_name}",
            out=self.console,
        )

    # ------------------------------------------------------------------
    # Summary
    # ------------------------------------------------------------------

    def _print_summary(self, result: PipelineResult) -> None:
        ctx = result.context
        if ctx is None:
            return
        data: dict[str, str] = {
            "Application": ctx.app_type,
            "Project path": str(ctx.project_path),
            "Image": ctx.image_name,
        }
        for step in result.steps:
            label = step.status.value
            if step.status is StepStatus.OK:
                label = f"ok ({format_duration(step.duration)})"
            data[f"Step: {step.name}"] = label
        self.console.print()
        print_summary_table(data, title="create-project", out=self.console)
