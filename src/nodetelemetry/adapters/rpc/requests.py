"""Request builders for the geth introspection RPC methods."""

from nodetelemetry.core.models import RpcRequest


def geth_metrics(raw: bool) -> RpcRequest:
    """debug_metrics; raw=True returns counters instead of rendered rates."""
    return RpcRequest("debug_metrics", (raw,))


def geth_mem_stats() -> RpcRequest:
    return RpcRequest("debug_memStats")


def geth_node_info() -> RpcRequest:
    return RpcRequest("admin_nodeInfo")


def geth_txpool() -> RpcRequest:
    return RpcRequest("txpool_content")


def geth_peers() -> RpcRequest:
    return RpcRequest("admin_peers")


def web3_client_version() -> RpcRequest:
    """web3_clientVersion; e.g. "Geth/v1.13.5-stable/linux-amd64/go1.21.4"."""
    return RpcRequest("web3_clientVersion")
