"""Capture orchestration for node adapters."""

from nodetelemetry.capture.geth import (
    GethAdapter,
    capture_geth_metrics,
    capture_peers,
    capture_txpool_data,
    merge_measurements,
)

__all__ = [
    "GethAdapter",
    "capture_geth_metrics",
    "capture_peers",
    "capture_txpool_data",
    "merge_measurements",
]
