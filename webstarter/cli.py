"""Command-line entry point.

Usage::

    webstarter my-app
    webstarter my-app --output ./sites --no-git
    python -m webstarter my-app
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError

from .config import Config
from .generator import ProjectGenerator
from .git import GitError
from .utils import print_error


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="webstarter",
        description="Scaffold a minimal HTML/CSS/JS project and initialize a git repository",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  webstarter myApp\n"
            "  webstarter myApp --output ./sites\n"
            "  webstarter myApp --no-git\n"
        ),
    )
    parser.add_argument(
        "project_name",
        help="Name of the project folder (also used as page title)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory to create the project in (default: current directory)",
    )
    parser.add_argument(
        "--no-git",
        action="store_true",
        help="Skip `git init`",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``webstarter`` and ``python -m webstarter``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    kwargs = {"project_name": args.project_name, "init_git": not args.no_git}
    if args.output is not None:
        kwargs["base_dir"] = Path(args.output)

    try:
        config = Config(**kwargs)
    except ValidationError as exc:
        parser.error("; ".join(err["msg"] for err in exc.errors()))

    generator = ProjectGenerator(config)
    try:
        asyncio.run(generator.generate())
    except GitError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
