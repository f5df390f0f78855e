"""Tests for port interfaces."""

from collections.abc import AsyncIterable
from typing import Any

import pytest

from nodetelemetry.adapters.rpc.jsonrpc import JsonRpcClient
from nodetelemetry.adapters.sinks import InMemoryMessageSink, RingBufferMessageSink
from nodetelemetry.core.models import OutputMessage, RpcRequest
from nodetelemetry.core.ports import MessageSinkPort, NodeClientPort


class TestNodeClientPort:
    """Tests for NodeClientPort protocol."""

    @pytest.mark.core
    def test_protocol_has_request_method(self) -> None:
        """NodeClientPort must define request(request: RpcRequest)."""
        assert hasattr(NodeClientPort, "request")

    @pytest.mark.core
    def test_class_implementing_protocol_is_recognized(self) -> None:
        """A class with a request coroutine satisfies NodeClientPort."""

        class FakeClient:
            async def request(self, request: RpcRequest) -> Any:
                return None

        client: NodeClientPort = FakeClient()
        assert isinstance(client, NodeClientPort)

    @pytest.mark.core
    async def test_json_rpc_client_satisfies_port(self) -> None:
        """JsonRpcClient is a NodeClientPort."""
        async with JsonRpcClient("http://localhost:8545") as client:
            assert isinstance(client, NodeClientPort)


class TestMessageSinkPort:
    """Tests for MessageSinkPort protocol."""

    @pytest.mark.core
    def test_protocol_has_write_and_read_methods(self) -> None:
        """MessageSinkPort must define write() and read()."""
        assert hasattr(MessageSinkPort, "write")
        assert hasattr(MessageSinkPort, "read")

    @pytest.mark.core
    def test_class_implementing_protocol_is_recognized(self) -> None:
        """A class with write and read methods satisfies MessageSinkPort."""

        class FakeSink:
            async def write(self, message: OutputMessage) -> None:
                pass

            async def read(self) -> AsyncIterable[OutputMessage]:
                for message in []:
                    yield message

        sink: MessageSinkPort = FakeSink()
        assert isinstance(sink, MessageSinkPort)

    @pytest.mark.core
    @pytest.mark.parametrize(
        "sink", [InMemoryMessageSink(), RingBufferMessageSink(max_size=2)]
    )
    def test_bundled_sinks_satisfy_port(self, sink: MessageSinkPort) -> None:
        """Both bundled sinks implement MessageSinkPort."""
        assert isinstance(sink, MessageSinkPort)
