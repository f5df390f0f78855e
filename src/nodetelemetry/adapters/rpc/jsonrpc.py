"""JSON-RPC over HTTP client adapter.

Implements NodeClientPort on top of httpx.AsyncClient so capture code can
issue requests without knowing about the transport.
"""

import itertools
import logging
from types import TracebackType
from typing import Any

import httpx

from nodetelemetry.core.errors import RpcError, RpcTransportError
from nodetelemetry.core.models import RpcRequest

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class JsonRpcClient:
    """Async JSON-RPC 2.0 client for a node's HTTP endpoint.

    Example:
        ```python
        async with JsonRpcClient("http://localhost:8545") as client:
            metrics = await client.request(geth_metrics(True))
        ```
    """

    def __init__(
        self,
        url: str,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            url: JSON-RPC endpoint of the node.
            timeout: Per-request timeout in seconds (ignored if client is given).
            client: Optional pre-configured httpx client. It is not closed by
                this object.
        """
        self.url = url
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._ids = itertools.count(1)

    async def __aenter__(self) -> "JsonRpcClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying httpx client if this object created it."""
        if self._owns_client:
            await self._client.aclose()

    def _payload(self, request: RpcRequest) -> dict[str, Any]:
        return {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": request.method,
            "params": list(request.params),
        }

    async def request(self, request: RpcRequest) -> Any:
        """Send a request and return its result member.

        Raises:
            RpcTransportError: On connection failures, non-2xx responses or
                bodies that are not JSON-RPC responses.
            RpcError: If the node returns an error object.
        """
        payload = self._payload(request)
        logger.debug("Sending %s (id=%s)", request.method, payload["id"])
        try:
            response = await self._client.post(self.url, json=payload)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise RpcTransportError(f"{request.method} failed: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            raise RpcTransportError(f"{request.method} returned invalid JSON") from e
        if not isinstance(body, dict):
            raise RpcTransportError(f"{request.method} returned a non-object response")

        error = body.get("error")
        if error is not None:
            if isinstance(error, dict):
                code = error.get("code")
                raise RpcError(
                    code if isinstance(code, int) else 0,
                    str(error.get("message", "")),
                )
            raise RpcError(0, str(error))
        if "result" not in body:
            raise RpcTransportError(f"{request.method} response has no result")
        return body["result"]
