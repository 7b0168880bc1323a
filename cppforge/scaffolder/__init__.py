"""cppforge scaffolder -- generates CMake-based C++ project structures.

This module takes a ``ProjectConfig`` (name plus application/library kind)
and renders a ready-to-build project directory with source stubs,
``CMakeLists.txt``, workflow scripts, clang tooling configuration and an
initial git commit.

Quick usage::

    from cppforge.scaffolder import ProjectConfig, ProjectGenerator, ProjectKind

    config = ProjectConfig(name="Core", kind=ProjectKind.LIBRARY)
    generator = ProjectGenerator(config)
    project_path = await generator.generate("/tmp/output")
"""

from cppforge.scaffolder.errors import DestinationExistsError, GitError, ScaffoldError
from cppforge.scaffolder.generator import ProjectConfig, ProjectGenerator, ProjectKind
from cppforge.scaffolder.templates import TemplateRenderer, include_guard

__all__ = [
    "DestinationExistsError",
    "GitError",
    "ProjectConfig",
    "ProjectGenerator",
    "ProjectKind",
    "ScaffoldError",
    "TemplateRenderer",
    "include_guard",
]
