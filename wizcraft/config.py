"""Wizcraft configuration.

Typed configuration for the ``create-project`` pipeline.  Settings use
Pydantic v2 models so they are validated at construction time.  Nothing is
persisted between runs: values come from the defaults below, optionally
overridden through ``WIZCRAFT_*`` environment variables.
"""

from __future__ import annotations

import os
import shlex
from typing import Any

from pydantic import BaseModel, Field, field_validator

SPRING_INSTALL_URL = "https://docs.spring.io/spring-boot/installing.html"


class WizcraftConfig(BaseModel):
    """Global Wizcraft configuration.

    Names the external executables the pipeline drives and the fixed values
    it derives output from.  Instances are created once by the CLI entry
    point and passed to ``Pipeline``.

    Overriding ``generator_executable`` only changes which executable is
    looked up and run; the install guidance still names the recipe's
    generator and ``generator_install_url``, followed by the executable
    that was actually checked.
    """

    generator_executable: str = Field(default="spring", min_length=1)
    generator_install_url: str = Field(default=SPRING_INSTALL_URL)
    build_command: list[str] = Field(default_factory=lambda: ["./gradlew", "build"])
    container_tool: str = Field(default="docker", min_length=1)
    image_tag: str = Field(default="latest", min_length=1)
    dockerfile_name: str = Field(default="Dockerfile", min_length=1)
    dockerfile_mode: int = Field(default=0o644, ge=0, le=0o777)

    @field_validator("build_command")
    @classmethod
    def _build_command_not_empty(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("build_command must contain at least one argument")
        return value

    @classmethod
    def from_env(cls) -> "WizcraftConfig":
        """Build a ``WizcraftConfig`` from environment variables.

        Recognised variables (all optional):
            WIZCRAFT_GENERATOR, WIZCRAFT_CONTAINER_TOOL, WIZCRAFT_IMAGE_TAG,
            WIZCRAFT_BUILD_COMMAND (shell-style string, split with ``shlex``).
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("WIZCRAFT_GENERATOR"):
            kwargs["generator_executable"] = os.environ["WIZCRAFT_GENERATOR"]
        if os.environ.get("WIZCRAFT_CONTAINER_TOOL"):
            kwargs["container_tool"] = os.environ["WIZCRAFT_CONTAINER_TOOL"]
        if os.environ.get("WIZCRAFT_IMAGE_TAG"):
            kwargs["image_tag"] = os.environ["WIZCRAFT_IMAGE_TAG"]
        if os.environ.get("WIZCRAFT_BUILD_COMMAND"):
            kwargs["build_command"] = shlex.split(os.environ["WIZCRAFT_BUILD_COMMAND"])
        return cls(**kwargs)
