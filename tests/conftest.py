"""Shared pytest fixtures for the psetup test suite.

Provides reusable fixtures for:
- Option definitions and run configuration
- In-memory and on-disk template stores
- Item generators wired to those stores
"""

from __future__ import annotations

from pathlib import Path

import pytest

from psetup.config import Config
from psetup.parser import ArgumentSpec
from psetup.scaffolder import ItemGenerator, TemplateStore


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

@pytest.fixture
def config() -> Config:
    """Default run configuration, independent of the environment."""
    return Config()


@pytest.fixture
def option_specs(config: Config) -> list[ArgumentSpec]:
    """The five CLI option definitions."""
    return config.option_specs()


@pytest.fixture
def language_spec() -> ArgumentSpec:
    """A closed, multi-value spec."""
    return ArgumentSpec(
        name="-lng",
        default_values=("go",),
        allowed_values={"go", "java", "cpp"},
    )


@pytest.fixture
def name_spec() -> ArgumentSpec:
    """An open spec accepting any value."""
    return ArgumentSpec(name="-nme", default_values=("new-project",), allowed_values={"any"})


# ---------------------------------------------------------------------------
# Templates & generation
# ---------------------------------------------------------------------------

@pytest.fixture
def memory_store() -> TemplateStore:
    """A content store holding a couple of small templates."""
    return TemplateStore.from_mapping(
        {
            "readme.txt.j2": "# {{ project_name }}\n",
            "license/mit.txt.j2": "MIT {{ year }} {{ author }}\n",
            "ci.yml": b"run: echo ${{ secrets.TOKEN }}\r\n",
        },
        context={"project_name": "demo", "year": 2024, "author": "Ada"},
    )


@pytest.fixture
def generator(memory_store: TemplateStore) -> ItemGenerator:
    return ItemGenerator(memory_store)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """An existing, empty directory to scaffold into."""
    root = tmp_path / "demo"
    root.mkdir()
    return root
