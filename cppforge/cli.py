"""Command-line entry point for cppforge.

Usage::

    cppforge Widgets            # application (default)
    cppforge Core --lib         # static / header-only library
    python -m cppforge Core --lib -o ~/projects --std 17 --no-git
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.markup import escape

from cppforge import __version__
from cppforge.config import SUPPORTED_CXX_STANDARDS, Config
from cppforge.scaffolder import ProjectConfig, ProjectGenerator, ProjectKind, ScaffoldError
from cppforge.utils import (
    console,
    detect_compiler,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (exposed for tests)."""
    parser = argparse.ArgumentParser(
        prog="cppforge",
        description="cppforge -- scaffold a CMake C++ application or library",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  cppforge Widgets\n"
            "  cppforge Core --lib\n"
            "  cppforge Core --lib --output ~/projects --std 17\n"
        ),
    )

    parser.add_argument("name", help="Project name (directory and CMake target name)")

    kind = parser.add_mutually_exclusive_group()
    kind.add_argument(
        "--app",
        action="store_true",
        help="Generate an application with an executable target (default)",
    )
    kind.add_argument(
        "--lib",
        action="store_true",
        help="Generate a static or header-only library",
    )

    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Parent directory for the project (default: current directory)",
    )
    parser.add_argument(
        "--std",
        type=int,
        choices=SUPPORTED_CXX_STANDARDS,
        default=None,
        help="C++ standard to build with (default: 20)",
    )
    parser.add_argument(
        "--no-git",
        action="store_true",
        help="Do not initialise a git repository",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``cppforge`` and ``python -m cppforge``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Config.from_env()
    except ValueError as exc:
        parser.error(f"invalid environment configuration: {exc}")

    overrides: dict[str, object] = {}
    if args.output is not None:
        overrides["output_dir"] = Path(args.output)
    if args.std is not None:
        overrides["cpp_standard"] = args.std
    if args.no_git:
        overrides["init_git"] = False
    if overrides:
        settings = settings.model_copy(update=overrides)

    kind = ProjectKind.LIBRARY if args.lib else ProjectKind.APPLICATION
    try:
        project = ProjectConfig(
            name=args.name, kind=kind, cpp_standard=settings.cpp_standard
        )
    except ValidationError as exc:
        parser.error(exc.errors()[0]["msg"])

    generator = ProjectGenerator(project, settings)
    try:
        project_root = asyncio.run(generator.generate())
    except ScaffoldError as exc:
        print_error(f"Error: {escape(str(exc))}")
        return 1

    compiler = detect_compiler()
    print_summary_table(
        {
            "Project": project.name,
            "Kind": project.kind.value,
            "Location": escape(str(project_root.resolve())),
            "C++ standard": str(project.cpp_standard),
            "Files written": str(len(generator.written)),
            "Git repository": "initialised" if generator.git_initialised else "skipped",
            "Compiler": compiler or "not found",
        },
        title="cppforge",
    )
    if compiler is None:
        print_warning("No C++ compiler found on PATH; install g++ or clang++ to build.")

    os.chdir(project_root)
    print_success(f"Created {project.kind.value} project '{project.name}'.")
    console.print(f"Next: cd {escape(str(project_root))} && scripts/build")
    return 0


if __name__ == "__main__":
    sys.exit(main())
