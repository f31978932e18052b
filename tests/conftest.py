"""Shared pytest fixtures for the full wordswap test suite."""

from __future__ import annotations

from pathlib import Path
import shutil

import pytest

from tests.fixture_paths import replacements_fixture_path, sample_tree_fixture_path


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Provide a writable copy of the sample text tree."""

    target = tmp_path / "tree"
    shutil.copytree(sample_tree_fixture_path(), target)
    return target


@pytest.fixture
def replacements_file() -> Path:
    """Provide the `utilize: use` / `foo: bar` mapping fixture path."""

    return replacements_fixture_path()
