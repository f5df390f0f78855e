"""JSON-RPC transport adapter and geth request builders."""

from nodetelemetry.adapters.rpc.jsonrpc import JsonRpcClient
from nodetelemetry.adapters.rpc.requests import (
    geth_mem_stats,
    geth_metrics,
    geth_node_info,
    geth_peers,
    geth_txpool,
    web3_client_version,
)

__all__ = [
    "JsonRpcClient",
    "geth_mem_stats",
    "geth_metrics",
    "geth_node_info",
    "geth_peers",
    "geth_txpool",
    "web3_client_version",
]
