from __future__ import annotations

import json
import os
import platform
import sys
from pathlib import Path

import pytest
from jinja2 import Environment as Jinja2Environment

from dsattr import install

try:
    import importlib.metadata as importlib_metadata
except ModuleNotFoundError:  # pragma: no cover
    import importlib_metadata  # type: ignore


BASE_DIR = Path(__file__).resolve().parent
BENCHMARK_OUTPUT_DIR = BASE_DIR.parent / ".benchmarks"


def _version(dist: str) -> str:
    try:
        return importlib_metadata.version(dist)
    except importlib_metadata.PackageNotFoundError:
        return "unknown"


def collect_environment_metadata() -> dict[str, object]:
    """Capture reproducibility metadata for each benchmark run."""
    return {
        "python": {
            "version": platform.python_version(),
            "implementation": platform.python_implementation(),
            "executable": sys.executable,
        },
        "os": {
            "system": platform.system(),
            "release": platform.release(),
            "machine": platform.machine(),
        },
        "cpu": {
            "processor": platform.processor(),
            "count": os.cpu_count(),
        },
        "dsattr": _version("dsattr"),
        "markupsafe": _version("markupsafe"),
        "jinja2": _version("jinja2"),
    }


@pytest.fixture(scope="session")
def benchmark_output_dir() -> Path:
    """Directory for benchmark artifacts, created on first use."""
    BENCHMARK_OUTPUT_DIR.mkdir(exist_ok=True)
    return BENCHMARK_OUTPUT_DIR


@pytest.fixture(scope="session")
def environment_metadata(benchmark_output_dir: Path) -> dict[str, object]:
    """Write environment metadata to .benchmarks for ingestion."""
    metadata = collect_environment_metadata()
    (benchmark_output_dir / "environment.json").write_text(json.dumps(metadata, indent=2))
    return metadata


@pytest.fixture(scope="session")
def jinja2_env() -> Jinja2Environment:
    env = Jinja2Environment(autoescape=True)
    install(env)
    return env


@pytest.fixture(scope="session")
def row_context() -> dict[str, object]:
    return {
        "rows": [
            {"id": i, "name": f"Item {i}", "active": i % 3 == 0}
            for i in range(200)
        ]
    }
