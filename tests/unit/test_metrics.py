"""Prometheus metrics tests."""

import pytest
from prometheus_client import REGISTRY

from viewkit.monitoring import metrics_collector


def sample(name, **labels):
    return REGISTRY.get_sample_value(name, labels) or 0.0


@pytest.mark.unit
def test_get_metrics_exposes_render_series():
    metrics_collector.record_render("template", "success", 0.01)

    body = metrics_collector.get_metrics()

    assert isinstance(body, bytes)
    assert b"viewkit_renders_total" in body
    assert b"viewkit_render_duration_seconds" in body


@pytest.mark.unit
def test_record_error_counts_by_stage():
    before = sample("viewkit_errors_total", error_type="KeyError", stage="execute")

    metrics_collector.record_error("KeyError", "execute")

    assert sample("viewkit_errors_total", error_type="KeyError", stage="execute") == before + 1


@pytest.mark.unit
@pytest.mark.asyncio
async def test_cached_render_records_hit_and_miss(renderer):
    hits = sample("viewkit_template_cache_hits_total")
    misses = sample("viewkit_template_cache_misses_total")
    compiles = sample("viewkit_template_compilations_total")

    await renderer.render("{{ n }}", {"n": 1}, cache=True)
    await renderer.render("{{ n }}", {"n": 2}, cache=True)

    assert sample("viewkit_template_cache_hits_total") == hits + 1
    assert sample("viewkit_template_cache_misses_total") == misses + 1
    assert sample("viewkit_template_compilations_total") == compiles + 1
