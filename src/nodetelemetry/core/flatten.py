"""Flattening of nested metrics snapshots into dotted-key measurements."""

import math
from typing import Any

from nodetelemetry.core.models import (
    Measurement,
    MetricMapping,
    MetricNumber,
    MetricSequence,
    MetricString,
    MetricValue,
    to_metric_value,
)
from nodetelemetry.core.parsing import duration_string_to_ms, parse_abbreviated_number

GETH_METRICS_PREFIX = "geth.metrics"


def lower_first(name: str) -> str:
    """Lower-case the first character of a field name, keeping the rest."""
    return name[:1].lower() + name[1:]


def interpret_string_leaf(text: str) -> float | None:
    """Interpret a string leaf as a number.

    Recognizes rate-annotated counters such as "1.2K (0.00/s)", of which
    only the counter is kept, and Go duration strings, which are converted
    to milliseconds.

    Args:
        text: The raw string leaf.

    Returns:
        The numeric value, or None if the string matches neither format.
    """
    if text.endswith(")"):
        parts = text.split(" ")
        if len(parts) == 2:
            counter = parse_abbreviated_number(parts[0])
            if math.isfinite(counter):
                return counter
    if text.endswith("s"):
        duration = duration_string_to_ms(text)
        if math.isfinite(duration):
            return duration
    return None


def flatten(obj: MetricValue, prefix: str) -> list[Measurement]:
    """Flatten a metrics tree into measurements keyed by dotted path.

    Finite numeric leaves are emitted as-is, string leaves only when
    interpret_string_leaf understands them. Arrays are skipped; they only
    carry timing breakdowns that do not map onto single values. Nested
    objects are walked recursively, extending the key path.

    Args:
        obj: Root of the snapshot tree. Anything but a mapping yields nothing.
        prefix: Key namespace, joined to field names with ".".

    Returns:
        Measurements in depth-first source order.
    """
    if not isinstance(obj, MetricMapping):
        return []
    measurements: list[Measurement] = []
    for name, value in obj.fields:
        key = f"{prefix}.{lower_first(name)}"
        if isinstance(value, MetricNumber):
            if math.isfinite(value.value):
                measurements.append(Measurement(key, value.value))
        elif isinstance(value, MetricString):
            number = interpret_string_leaf(value.value)
            if number is not None:
                measurements.append(Measurement(key, number))
        elif isinstance(value, MetricSequence):
            continue
        elif isinstance(value, MetricMapping):
            measurements.extend(flatten(value, key))
    return measurements


def format_geth_metrics(raw: Any) -> list[Measurement]:
    """Flatten a decoded debug_metrics response under "geth.metrics"."""
    tree = to_metric_value(raw)
    if tree is None:
        return []
    return flatten(tree, GETH_METRICS_PREFIX)
