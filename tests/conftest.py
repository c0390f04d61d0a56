"""Shared pytest fixtures for the artisan test suite.

Provides reusable fixtures for:
- A temporary project root and the matching ``Config``
- A frozen clock for deterministic migration timestamps
- A generator, registry and dispatcher wired to the temporary project
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

import pytest

from artisan.commands import CommandRegistry, Dispatcher, build_registry
from artisan.config import Config
from artisan.scaffolder import ResourceGenerator
from artisan.utils import console


FROZEN_NOW = datetime(2025, 1, 15, 10, 30, 0, tzinfo=timezone.utc)
FROZEN_TIMESTAMP = "20250115T103000"


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def wide_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Stop Rich from wrapping long paths in captured output."""
    monkeypatch.setattr(console, "width", 400)


# ---------------------------------------------------------------------------
# Paths & configuration
# ---------------------------------------------------------------------------


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Empty project directory that generated files are written into."""
    root = tmp_path / "app"
    root.mkdir()
    return root


@pytest.fixture
def config(project_root: Path) -> Config:
    return Config(project_root=project_root)


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    return lambda: FROZEN_NOW


# ---------------------------------------------------------------------------
# Wired components
# ---------------------------------------------------------------------------


@pytest.fixture
def generator(config: Config, fixed_clock: Callable[[], datetime]) -> ResourceGenerator:
    return ResourceGenerator(config, clock=fixed_clock)


@pytest.fixture
def registry(config: Config, generator: ResourceGenerator) -> CommandRegistry:
    return build_registry(config, generator)


@pytest.fixture
def dispatcher(registry: CommandRegistry) -> Dispatcher:
    return Dispatcher(registry)


@pytest.fixture
def written_files() -> Callable[[Path], list[Path]]:
    """Return a helper listing every regular file under a root, relative and sorted."""

    def _list(root: Path) -> list[Path]:
        return sorted(p.relative_to(root) for p in root.rglob("*") if p.is_file())

    return _list
