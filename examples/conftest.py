"""Fixtures for the runnable examples.

Each example directory holds an ``app.py`` that builds its output at
import time, next to a ``test_*.py`` that checks it.
"""

from __future__ import annotations

import importlib.util
from pathlib import Path
from types import ModuleType

import pytest


def _load_app(app_path: Path) -> ModuleType:
    spec = importlib.util.spec_from_file_location(f"example_{app_path.parent.name}", app_path)
    if spec is None or spec.loader is None:
        raise ImportError(f"cannot load example from {app_path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def example_dir(request: pytest.FixtureRequest) -> Path:
    """Directory of the example the current test belongs to."""
    return Path(request.path).parent


@pytest.fixture
def example_app(example_dir: Path) -> ModuleType:
    """Freshly executed ``app.py`` of the current example, with clean module state."""
    return _load_app(example_dir / "app.py")
