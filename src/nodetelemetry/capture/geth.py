"""Capture of geth node statistics.

Fetches the introspection snapshots concurrently, normalizes them through
the flattening core and packages the result into output messages. A failing
source is logged and contributes nothing; sibling sources are unaffected.
"""

import asyncio
import logging
from collections.abc import Iterable
from typing import Any

from nodetelemetry.adapters.rpc.requests import (
    geth_mem_stats,
    geth_metrics,
    geth_node_info,
    geth_peers,
    geth_txpool,
)
from nodetelemetry.core.flatten import format_geth_metrics
from nodetelemetry.core.memstats import format_geth_mem_stats
from nodetelemetry.core.models import (
    Measurement,
    NodeMetricsMessage,
    OutputMessage,
    PeerMessage,
    RpcRequest,
)
from nodetelemetry.core.ports import NodeClientPort

logger = logging.getLogger(__name__)

TXPOOL_PREFIX = "geth.txpool."


async def _fetch_or_none(
    client: NodeClientPort, request: RpcRequest, source: str
) -> Any | None:
    """Fetch one snapshot, logging and returning None on failure."""
    try:
        return await client.request(request)
    except Exception:
        logger.warning(
            "Failed to retrieve %s from geth node",
            source,
            exc_info=True,
            extra={"rpc_method": request.method},
        )
        return None


def merge_measurements(*sets: Iterable[Measurement]) -> dict[str, float]:
    """Merge measurement sets into one mapping; later keys win."""
    merged: dict[str, float] = {}
    for measurements in sets:
        for measurement in measurements:
            merged[measurement.key] = measurement.value
    return merged


async def capture_geth_metrics(
    client: NodeClientPort, capture_time: float
) -> list[OutputMessage]:
    """Capture debug_metrics and debug_memStats as one metrics message."""
    metrics_result, mem_stats_result = await asyncio.gather(
        _fetch_or_none(client, geth_metrics(True), "metrics"),
        _fetch_or_none(client, geth_mem_stats(), "memStats"),
    )
    metrics = merge_measurements(
        format_geth_metrics(metrics_result) if metrics_result is not None else [],
        format_geth_mem_stats(mem_stats_result) if mem_stats_result is not None else [],
    )
    if not metrics:
        return []
    return [NodeMetricsMessage(time=capture_time, metrics=metrics)]


def _count_transactions(section: Any) -> int:
    """Count transactions in a txpool section keyed by address, then nonce."""
    if not isinstance(section, dict):
        return 0
    return sum(len(by_nonce) for by_nonce in section.values() if isinstance(by_nonce, dict))


async def capture_txpool_data(
    client: NodeClientPort, capture_time: float
) -> list[OutputMessage]:
    """Capture pending and queued transaction counts."""
    txpool = await _fetch_or_none(client, geth_txpool(), "txpool data")
    if not isinstance(txpool, dict):
        return []
    # TODO: emit messages for the raw pending/queued transactions
    return [
        NodeMetricsMessage(
            time=capture_time,
            metrics={
                f"{TXPOOL_PREFIX}pending": _count_transactions(txpool.get("pending")),
                f"{TXPOOL_PREFIX}queued": _count_transactions(txpool.get("queued")),
            },
        )
    ]


async def capture_peers(
    client: NodeClientPort, capture_time: float
) -> list[OutputMessage]:
    """Capture one peer message per connected peer."""
    peers = await _fetch_or_none(client, geth_peers(), "peers")
    if not isinstance(peers, list):
        return []
    return [
        PeerMessage(time=capture_time, peer=peer)
        for peer in peers
        if isinstance(peer, dict)
    ]


class GethAdapter:
    """Node adapter for go-ethereum clients.

    Example:
        ```python
        adapter = GethAdapter("Geth/v1.13.5-stable/linux-amd64/go1.21.4")
        await adapter.initialize(client)
        messages = await adapter.capture_node_stats(client, time.time())
        ```
    """

    def __init__(self, client_version: str) -> None:
        self.full_version = client_version
        self.node_info: dict[str, Any] | None = None

    @property
    def name(self) -> str:
        return "geth"

    @property
    def enode(self) -> str | None:
        """Enode URL of the node, once initialize() has retrieved it."""
        if self.node_info is None:
            return None
        return self.node_info.get("enode") or None

    async def initialize(self, client: NodeClientPort) -> None:
        """Retrieve node info from the node.

        Raises:
            NodeTelemetryError: If the node info cannot be retrieved.
        """
        logger.debug("Retrieving nodeInfo from geth node")
        node_info = await client.request(geth_node_info())
        logger.debug("Retrieved node info: %r", node_info)
        self.node_info = node_info if isinstance(node_info, dict) else {}

    async def capture_node_stats(
        self, client: NodeClientPort, capture_time: float
    ) -> list[OutputMessage]:
        """Capture metrics, txpool counts and peers concurrently."""
        metrics, txpool, peers = await asyncio.gather(
            capture_geth_metrics(client, capture_time),
            capture_txpool_data(client, capture_time),
            capture_peers(client, capture_time),
        )
        return [*metrics, *txpool, *peers]
