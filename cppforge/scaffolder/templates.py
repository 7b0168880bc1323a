"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``cppforge/scaffolder/templates/`` directory and renders them with
project-specific context data, plus the naming helpers that turn a project
name into C++ identifiers and include guards.
"""

from __future__ import annotations

import asyncio
import re
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from cppforge.utils import write_text


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# Naming helpers
# ---------------------------------------------------------------------------

def cpp_identifier(name: str) -> str:
    """Turn a project name into a C++ identifier.

    Every character outside ``[A-Za-z0-9]`` becomes an underscore; case is
    preserved.  ``"my-lib"`` -> ``"my_lib"``.
    """
    return re.sub(r"[^A-Za-z0-9]", "_", name)


def guard_prefix(name: str) -> str:
    """Upper-cased identifier used for macros and CMake option names."""
    return cpp_identifier(name).upper()


def include_guard(name: str) -> str:
    """Return the header include guard for *name*.

    ``"my-lib"`` -> ``"MY_LIB_HPP"``.  Names that differ only in case or in
    the punctuation they use share a guard.
    """
    return f"{guard_prefix(name)}_HPP"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    Templates live under a configurable directory and are addressed by their
    path relative to it (e.g. ``"library/include/library.hpp.j2"``).
    Undefined variables raise instead of rendering as empty strings.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["identifier"] = cpp_identifier
        self.env.filters["upper_identifier"] = guard_prefix

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory.
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    # -- File-based rendering (async) --------------------------------------

    async def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        The output's parent directory must already exist.  Returns the
        output path.
        """
        content = self.render(template_path, context)
        out = Path(output_path)
        await asyncio.to_thread(write_text, out, content)
        return out

    # -- Utility -----------------------------------------------------------

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.j2`` template paths under *prefix*.

        Paths are relative to the template root and use forward slashes.
        """
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob("*.j2")
        )
