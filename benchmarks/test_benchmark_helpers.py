"""Helper throughput benchmarks.

Measures the cost of building attribute maps directly, rendering them
to HTML, and calling the helpers from Jinja2 templates, plus a
hand-written f-string baseline for the same output.

Run with: pytest benchmarks/test_benchmark_helpers.py --benchmark-only -v
"""

from __future__ import annotations

import json
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest
from jinja2 import Environment as Jinja2Environment
from pytest_benchmark.fixture import BenchmarkFixture

from dsattr import (
    MOD_DEBOUNCE,
    MOD_IF_MISSING,
    bool_,
    class_,
    computed,
    float_,
    int_,
    merge,
    ms,
    on_click,
    post,
    render_attrs,
    show,
    signals,
    signals_map,
    string,
)

ROW_TEMPLATE = """
{% for row in rows %}
<li{{ ds.merge(ds.class_('active', row.active | tojson), ds.on_click(ds.post('/api/rows/%d', row.id), ds.MOD_DEBOUNCE, ds.ms(200))) | ds_attrs }}>{{ row.name }}</li>
{% endfor %}
"""

PLAIN_TEMPLATE = """
{% for row in rows %}
<li data-class="{'active': {{ row.active | tojson }}}" data-on:click__debounce.200ms="@post('/api/rows/{{ row.id }}')">{{ row.name }}</li>
{% endfor %}
"""


@pytest.mark.benchmark(group="build:event")
def test_build_on_click(benchmark: BenchmarkFixture) -> None:
    benchmark(on_click, "save()", MOD_DEBOUNCE, ms(300))


@pytest.mark.benchmark(group="build:event")
def test_build_on_click_fstring_baseline(benchmark: BenchmarkFixture) -> None:
    def build() -> dict[str, str]:
        return {f"data-on:click{MOD_DEBOUNCE}{ms(300)}": "save()"}

    benchmark(build)


@pytest.mark.benchmark(group="build:objects")
def test_build_class_pairs(benchmark: BenchmarkFixture) -> None:
    benchmark(class_, "hidden", "$isHidden", "font-bold", "$isBold", "active", "$active")


@pytest.mark.benchmark(group="build:objects")
def test_build_computed(benchmark: BenchmarkFixture) -> None:
    benchmark(computed, "total", "$price * $qty", "label", "'n=' + $n")


@pytest.mark.benchmark(group="build:signals")
def test_build_typed_signals(benchmark: BenchmarkFixture) -> None:
    def build() -> dict[str, str | bool]:
        return signals(
            int_("count", 42),
            string("msg", "hello"),
            bool_("open", False),
            float_("ratio", 0.25),
            MOD_IF_MISSING,
        )

    benchmark(build)


@pytest.mark.benchmark(group="build:signals")
def test_build_signals_map(benchmark: BenchmarkFixture) -> None:
    data = {"count": 42, "msg": "hello", "open": False, "ratio": 0.25}
    benchmark(signals_map, data, MOD_IF_MISSING)


@pytest.mark.benchmark(group="render:attrs")
def test_render_merged_attrs(benchmark: BenchmarkFixture) -> None:
    attrs = merge(show("$open"), on_click(post("/api/save")), class_("active", "$on"))
    benchmark(render_attrs, attrs)


@pytest.mark.benchmark(group="render:template")
def test_render_rows_with_helpers(
    benchmark: BenchmarkFixture,
    jinja2_env: Jinja2Environment,
    row_context: dict[str, object],
    environment_metadata: dict[str, object],
) -> None:
    template = jinja2_env.from_string(ROW_TEMPLATE)
    benchmark(template.render, **row_context)


@pytest.mark.benchmark(group="render:template")
def test_render_rows_handwritten(
    benchmark: BenchmarkFixture,
    jinja2_env: Jinja2Environment,
    row_context: dict[str, object],
) -> None:
    template = jinja2_env.from_string(PLAIN_TEMPLATE)
    benchmark(template.render, **row_context)


@pytest.mark.benchmark(group="concurrent")
def test_build_concurrent(benchmark: BenchmarkFixture) -> None:
    def work(i: int) -> str:
        return class_("a", f"$a{i}", "b", f"$b{i}")["data-class"]

    def run() -> list[str]:
        with ThreadPoolExecutor(max_workers=4) as pool:
            return list(pool.map(work, range(400)))

    result = benchmark(run)
    assert result[7] == "{'a': $a7, 'b': $b7}"


def test_environment_metadata_written(
    benchmark_output_dir: Path, environment_metadata: dict[str, object]
) -> None:
    written = json.loads((benchmark_output_dir / "environment.json").read_text())
    assert written["dsattr"] == environment_metadata["dsattr"]
