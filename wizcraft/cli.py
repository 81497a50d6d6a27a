"""Command-line entry point for Wizcraft.

Usage::

    wizcraft create-project --app spring
    python -m wizcraft create-project --app spring
"""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import Sequence

from . import __version__
from .config import WizcraftConfig
from .pipeline import Pipeline
from .recipes import get_recipe, supported_app_types
from .utils import console


def _supported_types_help() -> str:
    lines = ["Create a new project with the specified application type.", "Supported application types:"]
    for name in supported_app_types():
        lines.append(f"  - {name}: {get_recipe(name).description}")
    return "\n".join(lines)


def create_project(args: argparse.Namespace) -> int:
    """Handler for ``create-project``; returns the process exit status."""
    config = WizcraftConfig.from_env()
    pipeline = Pipeline(args.app, config=config)
    result = asyncio.run(pipeline.run())
    return 0 if result.success else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wizcraft",
        description="Wizcraft is a CLI tool for managing microservices",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    parser_create = subparsers.add_parser(
        "create-project",
        help="Create a new project",
        description=_supported_types_help(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    # Unknown values are rejected by the pipeline, not by argparse.
    parser_create.add_argument(
        "--app",
        required=True,
        help="Specify the application type (spring/next)",
    )
    parser_create.set_defaults(func=create_project)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for ``wizcraft`` and ``python -m wizcraft``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except KeyboardInterrupt:
        console.print("\n[bold yellow]Interrupted.[/bold yellow]")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
