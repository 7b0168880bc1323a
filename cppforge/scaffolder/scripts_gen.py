"""Workflow script generation.

Renders the five workflow scripts (build, clean, rebuild, run, test) into the
generated project's ``scripts/`` directory.  Each script is a standard-library
Python program so it runs on every platform; next to it sits a POSIX ``sh``
launcher of the same name (without extension) that execs it with ``python3``.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from cppforge.utils import make_executable

from .templates import TemplateRenderer

WORKFLOW_SCRIPTS: tuple[str, ...] = ("build", "clean", "rebuild", "run", "test")

# Choices baked into every script that takes --build-type / --compiler.
BUILD_TYPES: tuple[str, ...] = ("Debug", "Release", "RelWithDebInfo", "MinSizeRel")
COMPILERS: dict[str, str] = {"gcc": "g++", "clang": "clang++", "msvc": "cl"}

SCRIPT_SETTINGS: dict[str, Any] = {
    "build_types": BUILD_TYPES,
    "compilers": COMPILERS,
    "compiler_choices": tuple(sorted(COMPILERS)),
    "default_build_type": "Debug",
    "default_compiler": "gcc",
}


class ScriptsGenerator:
    """Generates workflow scripts and their launchers."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    async def generate(
        self,
        scripts_dir: Path,
        context: dict[str, Any],
    ) -> list[Path]:
        """Render every workflow script plus its launcher.

        Args:
            scripts_dir: The ``scripts/`` directory inside the project root.
            context: Template rendering context.

        Returns:
            List of written file paths, script before launcher.
        """
        context = {**context, **SCRIPT_SETTINGS}
        written: list[Path] = []
        for script in WORKFLOW_SCRIPTS:
            written.append(await self._render_executable(
                f"scripts/{script}.py.j2", scripts_dir / f"{script}.py", context
            ))
            written.append(await self._render_executable(
                "scripts/launcher.sh.j2",
                scripts_dir / script,
                {**context, "script": script},
            ))
        return written

    async def _render_executable(
        self, template_name: str, out: Path, context: dict[str, Any]
    ) -> Path:
        path = await self.renderer.render_to_file(template_name, out, context)
        await asyncio.to_thread(make_executable, path)
        return path
