"""nodetelemetry - normalize node introspection snapshots into flat metrics."""

from nodetelemetry.capture.geth import GethAdapter
from nodetelemetry.config import CaptureConfig
from nodetelemetry.core.flatten import flatten, format_geth_metrics
from nodetelemetry.core.memstats import format_geth_mem_stats, format_mem_stats
from nodetelemetry.core.models import (
    Measurement,
    MetricMapping,
    MetricNumber,
    MetricSequence,
    MetricString,
    NodeMetricsMessage,
    PeerMessage,
    to_metric_value,
)
from nodetelemetry.core.parsing import duration_string_to_ms, parse_abbreviated_number

__all__ = [
    "CaptureConfig",
    "GethAdapter",
    "Measurement",
    "MetricMapping",
    "MetricNumber",
    "MetricSequence",
    "MetricString",
    "NodeMetricsMessage",
    "PeerMessage",
    "duration_string_to_ms",
    "flatten",
    "format_geth_mem_stats",
    "format_geth_metrics",
    "format_mem_stats",
    "parse_abbreviated_number",
    "to_metric_value",
]
