"""Shared test fixtures for all test modules."""

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from nodetelemetry.core.models import RpcRequest


class StubNodeClient:
    """NodeClientPort double answering from a method -> result table.

    A table value that is an exception instance is raised instead of returned.
    """

    def __init__(self, responses: dict[str, Any]) -> None:
        self.responses = responses
        self.requests: list[RpcRequest] = []

    async def request(self, request: RpcRequest) -> Any:
        self.requests.append(request)
        if request.method not in self.responses:
            raise KeyError(f"no stubbed response for {request.method}")
        result = self.responses[request.method]
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def metrics_snapshot() -> dict[str, Any]:
    """Representative debug_metrics(true) response."""
    return {
        "chain": {
            "head": {"block": 18_000_000, "Receipt": 17_999_990},
            "inserts": {"Count": "1.2K (0.00/s)", "Mean": "1.5ms"},
        },
        "p2p": {
            "InboundTraffic": "2.5M (12.30/s)",
            "dials": 42,
        },
        "txpool": {"Pending": {"Discard": "0 (0.00/s)"}},
        "system": {"cpu": {"Procload": [1, 2, 3]}},
        "Uptime": "1h2m3.4s",
        "Version": "1.13.5-stable",
    }


@pytest.fixture
def mem_stats_snapshot() -> dict[str, Any]:
    """Representative debug_memStats response (trimmed)."""
    return {
        "Alloc": 1024,
        "HeapAlloc": 2048,
        "NumGC": 7,
        "EnableGC": True,
        "PauseNs": [100, 200],
        "BySize": [
            {"Size": 0, "Mallocs": 0, "Frees": 0},
            {"Size": 16, "Mallocs": 40, "Frees": 12},
        ],
    }


@pytest.fixture
def stub_client_factory() -> Callable[[dict[str, Any]], StubNodeClient]:
    """Factory fixture for StubNodeClient instances."""
    return StubNodeClient


@pytest.fixture
def mock_transport_client():
    """Factory fixture that creates an httpx.AsyncClient over a MockTransport.

    Usage:
        async def test_something(mock_transport_client):
            async with mock_transport_client(handler) as http_client:
                client = JsonRpcClient("http://node", client=http_client)
    """

    def _get_client(handler: Callable[[httpx.Request], httpx.Response]):
        return httpx.AsyncClient(
            transport=httpx.MockTransport(handler), base_url="http://node"
        )

    return _get_client
