"""Main scaffolding orchestrator.

Takes a ``ProjectConfig`` and generates a CMake-based C++ project directory:
source stubs, build configuration, workflow scripts, tooling configuration
and an initial git commit.
"""

from __future__ import annotations

import asyncio
import re
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cppforge.config import DEFAULT_CXX_STANDARD, SUPPORTED_CXX_STANDARDS, Config

from .errors import DestinationExistsError, ScaffoldError
from .scripts_gen import ScriptsGenerator
from .templates import TemplateRenderer, cpp_identifier, include_guard
from .vcs import init_repository, initial_commit_message


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

PROJECT_DIRECTORIES: tuple[str, ...] = (
    "src",
    "include",
    "tests",
    "scripts",
    "libs",
    "cmake",
    "external",
)

# (template, output path relative to the project root)
TOOLING_FILES: tuple[tuple[str, str], ...] = (
    ("tooling/clang-format.j2", ".clang-format"),
    ("tooling/clang-tidy.j2", ".clang-tidy"),
    ("tooling/gitignore.j2", ".gitignore"),
    ("tooling/gitattributes.j2", ".gitattributes"),
)

_NAME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_-]*$")

# The name becomes a C++ namespace, so it cannot be a keyword or alternative token.
CPP_KEYWORDS: frozenset[str] = frozenset({
    "alignas", "alignof", "and", "and_eq", "asm", "auto", "bitand", "bitor",
    "bool", "break", "case", "catch", "char", "char8_t", "char16_t", "char32_t",
    "class", "compl", "concept", "const", "consteval", "constexpr", "constinit",
    "const_cast", "continue", "co_await", "co_return", "co_yield", "decltype",
    "default", "delete", "do", "double", "dynamic_cast", "else", "enum",
    "explicit", "export", "extern", "false", "float", "for", "friend", "goto",
    "if", "inline", "int", "long", "mutable", "namespace", "new", "noexcept",
    "not", "not_eq", "nullptr", "operator", "or", "or_eq", "private",
    "protected", "public", "register", "reinterpret_cast", "requires", "return",
    "short", "signed", "sizeof", "static", "static_assert", "static_cast",
    "struct", "switch", "template", "this", "thread_local", "throw", "true",
    "try", "typedef", "typeid", "typename", "union", "unsigned", "using",
    "virtual", "void", "volatile", "wchar_t", "while", "xor", "xor_eq",
})

# Target names CMake reserves for its own build-system targets (compared lower-cased).
CMAKE_RESERVED_TARGETS: frozenset[str] = frozenset({
    "all", "all_build", "clean", "depend", "edit_cache", "help", "install",
    "list_install_components", "package", "package_source", "preinstall",
    "rebuild_cache", "run_tests", "test", "zero_check",
})


# ---------------------------------------------------------------------------
# Configuration model
# ---------------------------------------------------------------------------


class ProjectKind(str, Enum):
    """Which set of templates to emit."""

    APPLICATION = "application"
    LIBRARY = "library"


class ProjectConfig(BaseModel):
    """Pydantic model describing the project to scaffold."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Project name (directory, CMake target, namespace)")
    kind: ProjectKind = Field(default=ProjectKind.APPLICATION)
    cpp_standard: int = Field(default=DEFAULT_CXX_STANDARD)

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not _NAME_RE.match(value):
            raise ValueError(
                f"invalid project name {value!r}: must start with a letter and "
                "contain only letters, digits, '_' or '-'"
            )
        if cpp_identifier(value) in CPP_KEYWORDS:
            raise ValueError(f"invalid project name {value!r}: it is a C++ keyword")
        for target in (value, f"{value}_tests"):
            if target.lower() in CMAKE_RESERVED_TARGETS:
                raise ValueError(
                    f"invalid project name {value!r}: CMake reserves the target name {target!r}"
                )
        return value

    @field_validator("cpp_standard")
    @classmethod
    def _check_standard(cls, value: int) -> int:
        if value not in SUPPORTED_CXX_STANDARDS:
            raise ValueError(f"unsupported C++ standard {value}")
        return value

    @property
    def is_library(self) -> bool:
        return self.kind is ProjectKind.LIBRARY


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Main scaffolding orchestrator.

    Given a ``ProjectConfig``, generates a directory tree containing:
    - ``src/``, ``include/`` and ``tests/`` source stubs
    - ``CMakeLists.txt`` for an executable, static or header-only target
    - build/clean/rebuild/run/test workflow scripts with launchers
    - ``.clang-format``, ``.clang-tidy``, ``.gitignore``, ``.gitattributes``
    - an initial git commit (unless disabled in ``Config``)

    Steps run one after another.  A failure stops generation; whatever was
    already created stays on disk.
    """

    def __init__(
        self,
        project: ProjectConfig,
        settings: Config | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.project = project
        self.settings = settings or Config()
        self.renderer = renderer or TemplateRenderer()
        self.scripts_gen = ScriptsGenerator(self.renderer)
        self.written: list[Path] = []
        self.git_initialised = False

    # -- Public API --------------------------------------------------------

    async def generate(self, output_dir: str | Path | None = None) -> Path:
        """Generate the complete project structure.

        Args:
            output_dir: Parent directory where the project folder will be
                created.  Defaults to ``settings.output_dir``.

        Returns:
            Path to the generated project root.

        Raises:
            DestinationExistsError: The project folder already exists.
            ScaffoldError: A directory or file could not be created.
            GitError: Repository initialisation failed.
        """
        parent = Path(output_dir) if output_dir is not None else self.settings.output_dir
        project_root = parent / self.project.name
        if project_root.exists():
            raise DestinationExistsError(project_root)

        context = self._build_context()

        # 1. Create the skeleton directory structure
        await self._create_directory_structure(project_root)

        try:
            # 2. Source stubs (branches on project kind) and test entry point
            await self._render_sources(project_root, context)

            # 3. Build configuration
            await self._write(
                "CMakeLists.txt.j2", project_root / "CMakeLists.txt", context
            )

            # 4. Workflow scripts and launchers
            self.written.extend(
                await self.scripts_gen.generate(project_root / "scripts", context)
            )

            # 5. Formatting, lint and git metadata files
            await self._render_tooling(project_root, context)
        except OSError as exc:
            raise ScaffoldError(f"Failed to write project files: {exc}") from exc

        # 6. Version control
        if self.settings.init_git:
            await init_repository(
                project_root,
                initial_commit_message(self.project.name, self.project.kind.value),
                git=self.settings.git_executable,
            )
            self.git_initialised = True

        return project_root

    # -- Context building --------------------------------------------------

    def _build_context(self) -> dict[str, Any]:
        """Build the Jinja2 template context from the project config."""
        return {
            "project_name": self.project.name,
            "kind": self.project.kind.value,
            "is_library": self.project.is_library,
            "include_guard": include_guard(self.project.name),
            "cpp_standard": self.project.cpp_standard,
        }

    # -- Directory structure -----------------------------------------------

    async def _create_directory_structure(self, root: Path) -> None:
        """Create the project root and its fixed subdirectories."""
        try:
            await asyncio.to_thread(root.mkdir, parents=True, exist_ok=False)
        except FileExistsError as exc:
            raise DestinationExistsError(root) from exc
        except OSError as exc:
            raise ScaffoldError(f"Could not create {root}: {exc}") from exc

        for d in PROJECT_DIRECTORIES:
            path = root / d
            try:
                await asyncio.to_thread(path.mkdir)
            except OSError as exc:
                raise ScaffoldError(f"Could not create {path}: {exc}") from exc

    # -- Source stubs ------------------------------------------------------

    async def _render_sources(self, root: Path, ctx: dict[str, Any]) -> None:
        """Render the entry point or the library header/implementation pair."""
        name = self.project.name
        if self.project.is_library:
            await self._write(
                "library/include/library.hpp.j2", root / "include" / f"{name}.hpp", ctx
            )
            await self._write(
                "library/src/library.cpp.j2", root / "src" / f"{name}.cpp", ctx
            )
        else:
            await self._write(
                "application/src/main.cpp.j2", root / "src" / "main.cpp", ctx
            )

        await self._write(
            "tests/test_main.cpp.j2", root / "tests" / "test_main.cpp", ctx
        )

    # -- Tooling -----------------------------------------------------------

    async def _render_tooling(self, root: Path, ctx: dict[str, Any]) -> None:
        """Render formatter, linter and git metadata files."""
        for template_name, output_name in TOOLING_FILES:
            await self._write(template_name, root / output_name, ctx)

    # -- Helpers -----------------------------------------------------------

    async def _write(
        self, template_name: str, out: Path, ctx: dict[str, Any]
    ) -> Path:
        path = await self.renderer.render_to_file(template_name, out, ctx)
        self.written.append(path)
        return path
