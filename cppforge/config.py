"""cppforge configuration.

Typed, process-wide defaults for the generator.  Settings use Pydantic v2
models so they are validated at construction time; values can come from the
environment and are then overridden by explicit command-line flags.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

SUPPORTED_CXX_STANDARDS: tuple[int, ...] = (11, 14, 17, 20, 23)
DEFAULT_CXX_STANDARD = 20

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Global cppforge configuration.

    Instances are created once by the CLI entry point and handed to the
    generator.
    """

    output_dir: Path = Field(
        default=Path("."),
        description="Parent directory in which the project folder is created",
    )
    cpp_standard: int = Field(
        default=DEFAULT_CXX_STANDARD,
        description="C++ standard written into CMakeLists.txt",
    )
    git_executable: str = Field(default="git", min_length=1)
    init_git: bool = Field(
        default=True, description="Initialise a git repository and commit the result"
    )

    @field_validator("cpp_standard")
    @classmethod
    def _check_standard(cls, value: int) -> int:
        if value not in SUPPORTED_CXX_STANDARDS:
            supported = ", ".join(str(s) for s in SUPPORTED_CXX_STANDARDS)
            raise ValueError(f"unsupported C++ standard {value} (choose from {supported})")
        return value

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            CPPFORGE_OUTPUT_DIR, CPPFORGE_CXX_STANDARD, CPPFORGE_GIT,
            CPPFORGE_NO_GIT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CPPFORGE_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["CPPFORGE_OUTPUT_DIR"])
        if os.environ.get("CPPFORGE_CXX_STANDARD"):
            kwargs["cpp_standard"] = int(os.environ["CPPFORGE_CXX_STANDARD"])
        if os.environ.get("CPPFORGE_GIT"):
            kwargs["git_executable"] = os.environ["CPPFORGE_GIT"]
        if os.environ.get("CPPFORGE_NO_GIT", "").strip().lower() in _TRUTHY:
            kwargs["init_git"] = False
        return cls(**kwargs)
