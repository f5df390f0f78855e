"""Core domain models for node telemetry snapshots and measurements."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class MetricNumber:
    """Numeric leaf of a snapshot tree."""

    value: float


@dataclass(frozen=True)
class MetricString:
    """String leaf of a snapshot tree.

    May hold a rate-annotated counter ("1.2K (0.00/s)"), a Go duration
    ("1h2m3s") or arbitrary text.
    """

    value: str


@dataclass(frozen=True)
class MetricSequence:
    """Array node of a snapshot tree."""

    items: tuple["MetricValue", ...] = ()


@dataclass(frozen=True)
class MetricMapping:
    """Object node of a snapshot tree.

    Attributes:
        fields: (name, value) pairs in source order.
    """

    fields: tuple[tuple[str, "MetricValue"], ...] = ()

    def get(self, name: str) -> "MetricValue | None":
        """Return the value of the named field, or None if absent."""
        for key, value in self.fields:
            if key == name:
                return value
        return None


MetricValue = MetricNumber | MetricString | MetricSequence | MetricMapping


def to_metric_value(data: Any) -> MetricValue | None:
    """Convert a decoded JSON value into a MetricValue tree.

    Booleans, None and any other type have no MetricValue representation;
    they convert to None and are omitted from their enclosing container.
    """
    if isinstance(data, bool):
        return None
    if isinstance(data, int | float):
        return MetricNumber(data)
    if isinstance(data, str):
        return MetricString(data)
    if isinstance(data, Mapping):
        fields = []
        for name, child in data.items():
            converted = to_metric_value(child)
            if converted is not None:
                fields.append((str(name), converted))
        return MetricMapping(tuple(fields))
    if isinstance(data, list | tuple):
        items = (to_metric_value(child) for child in data)
        return MetricSequence(tuple(item for item in items if item is not None))
    return None


@dataclass(frozen=True)
class Measurement:
    """A single flattened measurement.

    Attributes:
        key: Dotted metric path (e.g., geth.metrics.chain.head.block).
        value: Numeric value of the leaf.
    """

    key: str
    value: float


@dataclass(frozen=True)
class SizeBucket:
    """One size class of the allocator histogram in a memory stats snapshot.

    Attributes:
        size: Size class identifier, used verbatim in the metric key.
        mallocs: Cumulative allocations in this size class.
        frees: Cumulative frees in this size class.
    """

    size: str | float
    mallocs: float | None
    frees: float | None


@dataclass(frozen=True)
class NodeMetricsMessage:
    """Output envelope carrying the merged metrics of one capture.

    Attributes:
        time: Capture timestamp (Unix seconds).
        metrics: Flat metric key to value mapping.
    """

    time: float
    metrics: dict[str, float] = field(default_factory=dict)
    type: str = "node:metrics"


@dataclass(frozen=True)
class PeerMessage:
    """Output envelope carrying one peer record reported by the node."""

    time: float
    peer: dict[str, Any] = field(default_factory=dict)
    type: str = "geth:peer"


OutputMessage = NodeMetricsMessage | PeerMessage


@dataclass(frozen=True)
class RpcRequest:
    """A JSON-RPC method call against the node.

    Attributes:
        method: RPC method name (e.g., debug_metrics).
        params: Positional parameters.
    """

    method: str
    params: tuple[Any, ...] = ()
