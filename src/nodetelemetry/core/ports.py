"""Port interfaces for transport and output adapters.

These protocols define the contracts that adapters must implement.
The capture logic depends only on these interfaces, not concrete implementations.
"""

from collections.abc import AsyncIterable
from typing import Any, Protocol, runtime_checkable

from nodetelemetry.core.models import OutputMessage, RpcRequest


@runtime_checkable
class NodeClientPort(Protocol):
    """Port for issuing requests against a node's introspection API.

    Examples: JsonRpcClient, or a stub returning canned snapshots in tests.
    """

    async def request(self, request: RpcRequest) -> Any:
        """Execute a request and return its decoded result.

        Raises:
            NodeTelemetryError: If the node cannot answer the request.
        """
        ...


@runtime_checkable
class MessageSinkPort(Protocol):
    """Port for output message sinks.

    Examples: InMemoryMessageSink, RingBufferMessageSink.
    """

    async def write(self, message: OutputMessage) -> None:
        """Write an output message to the sink."""
        ...

    def read(self) -> AsyncIterable[OutputMessage]:
        """Read all retained messages in write order."""
        ...
