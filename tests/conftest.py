"""Shared pytest fixtures for the Wizcraft test suite.

Provides reusable fixtures for:
- A silent Rich console whose output can be inspected
- Scripted standard-input answers for the prompt collector
- A ``Pipeline`` wired to both, with external tools stubbed out
"""

from __future__ import annotations

import io
from collections.abc import Callable, Iterable
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from rich.console import Console

from wizcraft.config import WizcraftConfig
from wizcraft.pipeline import Pipeline
from wizcraft.prompts import PromptCollector


# ---------------------------------------------------------------------------
# Console & input
# ---------------------------------------------------------------------------

@pytest.fixture
def console() -> Console:
    """A wide, colourless console writing to an in-memory buffer."""
    return Console(file=io.StringIO(), width=400, color_system=None, force_terminal=False)


@pytest.fixture
def console_text(console: Console) -> Callable[[], str]:
    """Return everything printed to the ``console`` fixture so far."""
    return lambda: console.file.getvalue()


def scripted_input(lines: Iterable[str]) -> Callable[[], str]:
    """A ``read_line`` replacement that returns *lines* then raises ``EOFError``."""
    remaining = list(lines)

    def _read() -> str:
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return _read


@pytest.fixture
def scripted() -> Callable[[Iterable[str]], Callable[[], str]]:
    """Expose ``scripted_input`` to tests."""
    return scripted_input


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

@pytest.fixture
def make_pipeline(console: Console) -> Callable[..., Pipeline]:
    """Factory building a ``Pipeline`` that reads the given answers."""

    def _make(app_type: str = "spring", answers: Iterable[str] = (), config: WizcraftConfig | None = None) -> Pipeline:
        collector = PromptCollector(console=console, read_line=scripted_input(answers))
        return Pipeline(app_type, config=config, collector=collector, console=console)

    return _make


@pytest.fixture
def generator_on_path():
    """Pretend every executable resolves on ``PATH``."""
    with patch("wizcraft.pipeline.find_executable", return_value="/usr/local/bin/spring") as which:
        yield which


@pytest.fixture
def fake_commands():
    """Replace ``run_passthrough`` in the pipeline with a recording stub.

    The generator call creates the project directory, as the real generator
    would, so later steps can write into it.
    """

    async def _run(cmd: list[str], cwd=None) -> None:
        if cmd and cmd[1:2] == ["init"]:
            Path(cmd[-1]).mkdir(parents=True, exist_ok=True)

    with patch("wizcraft.pipeline.run_passthrough", new=AsyncMock(side_effect=_run)) as runner:
        yield runner
