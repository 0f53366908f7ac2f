"""Shared pytest fixtures for the laravel-scaffold test suite.

Provides reusable fixtures for:
- Temporary Laravel project roots
- A generator configuration pointing at them
- A frozen clock for deterministic migration filenames
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from laravel_scaffold.config import Config
from laravel_scaffold.scaffolder.generator import ScaffoldGenerator


FROZEN_NOW = datetime(2024, 3, 5, 14, 7, 9)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def laravel_root(tmp_path: Path) -> Path:
    """Temporary Laravel project root with an existing routes file."""
    root = tmp_path / "blog"
    (root / "routes").mkdir(parents=True)
    (root / "routes" / "web.php").write_text(
        "<?php\n\nuse Illuminate\\Support\\Facades\\Route;\n\n"
        "Route::get('/', function () {\n    return view('welcome');\n});\n",
        encoding="utf-8",
    )
    yield root


@pytest.fixture
def empty_root(tmp_path: Path) -> Path:
    """Temporary directory with no Laravel structure at all."""
    root = tmp_path / "empty"
    root.mkdir()
    yield root


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------

@pytest.fixture
def config(laravel_root: Path) -> Config:
    return Config(project_root=laravel_root)


@pytest.fixture
def frozen_clock():
    """Clock returning a fixed instant."""
    return lambda: FROZEN_NOW


@pytest.fixture
def generator(config: Config, frozen_clock) -> ScaffoldGenerator:
    return ScaffoldGenerator(config, clock=frozen_clock)
