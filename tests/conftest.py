"""Shared pytest fixtures for the cppforge test suite.

Provides reusable fixtures for:
- Application and library project configs
- Generator settings with and without git
- An isolated git identity so commits work on any machine
- Pre-generated projects on disk
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from cppforge.config import Config
from cppforge.scaffolder import ProjectConfig, ProjectGenerator, ProjectKind


# ---------------------------------------------------------------------------
# Configs
# ---------------------------------------------------------------------------

@pytest.fixture
def app_config() -> ProjectConfig:
    """Application project named ``Widgets``."""
    return ProjectConfig(name="Widgets", kind=ProjectKind.APPLICATION)


@pytest.fixture
def lib_config() -> ProjectConfig:
    """Library project named ``Core``."""
    return ProjectConfig(name="Core", kind=ProjectKind.LIBRARY)


@pytest.fixture
def no_git_settings(tmp_path: Path) -> Config:
    """Settings that write into ``tmp_path`` and skip git."""
    return Config(output_dir=tmp_path, init_git=False)


# ---------------------------------------------------------------------------
# Git
# ---------------------------------------------------------------------------

@pytest.fixture
def git_env(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Give git a throwaway identity and ignore the user's global config."""
    global_config = tmp_path_factory.mktemp("git-home") / "gitconfig"
    global_config.write_text("", encoding="utf-8")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(global_config))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "cppforge test")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@cppforge.local")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "cppforge test")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@cppforge.local")


# ---------------------------------------------------------------------------
# Generated projects
# ---------------------------------------------------------------------------

@pytest.fixture
def generated_app(app_config: ProjectConfig, no_git_settings: Config) -> Path:
    """A ``Widgets`` application generated without git."""
    generator = ProjectGenerator(app_config, no_git_settings)
    return asyncio.run(generator.generate())


@pytest.fixture
def generated_lib(lib_config: ProjectConfig, no_git_settings: Config) -> Path:
    """A ``Core`` library generated without git."""
    generator = ProjectGenerator(lib_config, no_git_settings)
    return asyncio.run(generator.generate())
