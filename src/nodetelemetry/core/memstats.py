"""Formatter for the fixed-shape runtime memory statistics snapshot."""

import math
from typing import Any

from nodetelemetry.core.flatten import lower_first
from nodetelemetry.core.models import (
    Measurement,
    MetricMapping,
    MetricNumber,
    MetricSequence,
    MetricString,
    MetricValue,
    SizeBucket,
    to_metric_value,
)

GETH_MEM_STATS_PREFIX = "geth.memStats."

BY_SIZE_FIELD = "BySize"


def _number(value: MetricValue | None) -> float | None:
    if isinstance(value, MetricNumber) and math.isfinite(value.value):
        return value.value
    return None


def _size_label(size: str | float) -> str:
    if isinstance(size, float) and size.is_integer():
        return str(int(size))
    return str(size)


def parse_size_bucket(entry: MetricValue) -> SizeBucket | None:
    """Read one BySize histogram entry.

    Returns:
        The bucket, or None if the entry has no usable Size.
    """
    if not isinstance(entry, MetricMapping):
        return None
    size = entry.get("Size")
    if isinstance(size, MetricNumber | MetricString):
        return SizeBucket(
            size=size.value,
            mallocs=_number(entry.get("Mallocs")),
            frees=_number(entry.get("Frees")),
        )
    return None


def format_size_buckets(buckets: list[SizeBucket], prefix: str) -> list[Measurement]:
    """Expand histogram buckets into mallocs/frees measurements per size."""
    measurements: list[Measurement] = []
    for bucket in buckets:
        base = f"{prefix}bySize.{_size_label(bucket.size)}"
        if bucket.mallocs is not None:
            measurements.append(Measurement(f"{base}.mallocs", bucket.mallocs))
        if bucket.frees is not None:
            measurements.append(Measurement(f"{base}.frees", bucket.frees))
    return measurements


def format_mem_stats(
    stats: MetricValue, prefix: str = GETH_MEM_STATS_PREFIX
) -> list[Measurement]:
    """Format a memory statistics snapshot.

    Finite numeric top-level fields become ``prefix + lower_first(name)``; other
    top-level fields are dropped. The BySize histogram, if present, is
    expanded after them. Only one level is inspected.

    Args:
        stats: Decoded snapshot. Anything but a mapping yields nothing.
        prefix: Key namespace, expected to end with a separator.

    Returns:
        Measurements for the scalar fields followed by the histogram.
    """
    if not isinstance(stats, MetricMapping):
        return []
    measurements: list[Measurement] = []
    buckets: list[SizeBucket] = []
    for name, value in stats.fields:
        if name == BY_SIZE_FIELD:
            if isinstance(value, MetricSequence):
                parsed = (parse_size_bucket(entry) for entry in value.items)
                buckets = [bucket for bucket in parsed if bucket is not None]
            continue
        number = _number(value)
        if number is not None:
            measurements.append(Measurement(prefix + lower_first(name), number))
    return measurements + format_size_buckets(buckets, prefix)


def format_geth_mem_stats(raw: Any) -> list[Measurement]:
    """Format a decoded debug_memStats response under "geth.memStats."."""
    tree = to_metric_value(raw)
    if tree is None:
        return []
    return format_mem_stats(tree)
