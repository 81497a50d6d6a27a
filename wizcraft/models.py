"""Pydantic v2 models for a single ``create-project`` run.

Everything here lives for one invocation only: the user's answers, the
paths derived from them, and the per-step outcome record.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class StepStatus(str, Enum):
    """Outcome of a pipeline step."""
    OK = "ok"
    FAILED = "failed"
    SKIPPED = "skipped"


# ---------------------------------------------------------------------------
# Run context
# ---------------------------------------------------------------------------

class ProjectContext(BaseModel):
    """The user-supplied parameters of a run and the values derived from them."""

    app_type: str = Field(..., description="Application type selected with --app")
    name: str = Field(default="", description="Project name, also the image repository")
    version: str = Field(default="", description="Runtime version, e.g. Java '21'")
    directory: str = Field(default="", description="Parent directory of the project")
    image_tag: str = Field(default="latest")

    @property
    def project_path(self) -> Path:
        """``<directory>/<name>``, using the current directory when none was given."""
        base = self.directory or os.getcwd()
        return Path(base) / self.name

    @property
    def image_name(self) -> str:
        """Container image reference, ``<name>:<image_tag>``."""
        return f"{self.name}:{self.image_tag}"


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class StepResult(BaseModel):
    """Outcome of one pipeline step."""
    name: str
    status: StepStatus
    duration: float = Field(default=0.0, ge=0.0, description="Elapsed seconds")
    detail: Optional[str] = None


class PipelineResult(BaseModel):
    """Outcome of a whole ``create-project`` run."""
    success: bool = False
    context: Optional[ProjectContext] = None
    steps: list[StepResult] = Field(default_factory=list)
    error: Optional[str] = None

    def step(self, name: str) -> Optional[StepResult]:
        """Return the result recorded for step *name*, if any."""
        for result in self.steps:
            if result.name == name:
                return result
        return None
