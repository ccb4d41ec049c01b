import math

import pytest

from aequa import metrics
from aequa.metrics import Registry

HEADER = "# HELP dvt_up 1\n# TYPE dvt_up gauge\ndvt_up 1\n"


def _body(reg):
    text = reg.dump_prom()
    assert text.startswith(HEADER)
    return text[len(HEADER):].splitlines()


def test_empty_registry_dumps_header_only():
    assert Registry().dump_prom() == HEADER


def test_counter_counts_increments():
    reg = Registry()
    for _ in range(3):
        reg.inc("events", None)
    assert _body(reg) == ["events 3"]


def test_labels_sorted_and_quoted():
    reg = Registry()
    reg.inc("req", {"b": "2", "a": "1"})
    reg.inc("req", {"a": "1", "b": "2"})
    assert _body(reg) == ['req{a="1",b="2"} 2']


def test_counters_sorted_by_name_then_labels():
    reg = Registry()
    reg.inc("zeta", None)
    reg.inc("alpha", {"k": "b"})
    reg.inc("alpha", {"k": "a"})
    lines = _body(reg)
    assert lines == sorted(lines)
    assert len(lines) == 3


def test_gauges_after_counters():
    reg = Registry()
    reg.set_gauge("g", None, 10)
    reg.add_gauge("g", None, -4)
    reg.inc("c", None)
    assert _body(reg) == ["c 1", "g 6"]


def test_gauge_with_labels():
    reg = Registry()
    reg.add_gauge("peers", {"role": "x"}, 2)
    reg.add_gauge("peers", {"role": "x"}, 3)
    assert _body(reg) == ['peers{role="x"} 5']


def test_summary_sum_and_count():
    reg = Registry()
    reg.observe_summary("lat", {"op": "a"}, 4.0)
    reg.observe_summary("lat", {"op": "a"}, 6.0)
    assert _body(reg) == ['lat_sum{op="a"} 10', 'lat_count{op="a"} 2']


def test_summary_truncates_each_value():
    reg = Registry()
    reg.observe_summary("d", None, 1.9)
    reg.observe_summary("d", None, 1.9)
    assert _body(reg) == ["d_sum 2", "d_count 2"]


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_summary_ignores_non_finite(value):
    reg = Registry()
    reg.observe_summary("d", None, value)
    assert reg.dump_prom() == HEADER


def test_reset_keeps_gauges():
    reg = Registry()
    reg.inc("c", None)
    reg.observe_summary("s", None, 1)
    reg.set_gauge("g", None, 5)
    reg.reset()
    assert _body(reg) == ["g 5"]


def test_module_level_functions_use_default_registry():
    metrics.reset()
    metrics.inc("module_counter", {"x": "y"})
    metrics.observe_summary("module_summary", None, 3)
    metrics.set_gauge("module_gauge_set", None, 7)
    metrics.add_gauge("module_gauge_add", None, 1)
    text = metrics.dump_prom()
    assert 'module_counter{x="y"} 1\n' in text
    assert "module_summary_sum 3\nmodule_summary_count 1\n" in text
    assert "module_gauge_set 7\n" in text
    metrics.reset()
    assert "module_counter" not in metrics.dump_prom()