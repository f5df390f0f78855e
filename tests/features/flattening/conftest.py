"""BDD step definitions for flattening features."""

import json
from typing import Any

import pytest
from pytest_bdd import given, parsers, then, when

from nodetelemetry.core.flatten import flatten
from nodetelemetry.core.memstats import format_mem_stats
from nodetelemetry.core.models import Measurement, to_metric_value


@given("a snapshot:", target_fixture="snapshot")
def step_snapshot(docstring: str) -> Any:
    return json.loads(docstring)


@given(
    parsers.parse('a snapshot with field "{name}" set to "{value}"'),
    target_fixture="snapshot",
)
def step_snapshot_field(name: str, value: str) -> Any:
    return {name: value}


@when(
    parsers.parse('the snapshot is flattened with prefix "{prefix}"'),
    target_fixture="measurements",
)
def step_flatten(snapshot: Any, prefix: str) -> list[Measurement]:
    tree = to_metric_value(snapshot)
    assert tree is not None
    return flatten(tree, prefix)


@when(
    parsers.parse(
        'the snapshot is formatted as memory statistics with prefix "{prefix}"'
    ),
    target_fixture="measurements",
)
def step_format_mem_stats(snapshot: Any, prefix: str) -> list[Measurement]:
    tree = to_metric_value(snapshot)
    assert tree is not None
    return format_mem_stats(tree, prefix)


@then("the measurements are exactly:")
def step_measurements_exactly(
    measurements: list[Measurement], datatable: list[list[str]]
) -> None:
    header, *rows = datatable
    assert header == ["key", "value"]
    expected = [(key, float(value)) for key, value in rows]
    assert [(m.key, m.value) for m in measurements] == expected


@then(parsers.parse('the measurement "{key}" is {millis}'))
def step_measurement_value(
    measurements: list[Measurement], key: str, millis: str
) -> None:
    values = {m.key: m.value for m in measurements}
    assert values[key] == pytest.approx(float(millis))
