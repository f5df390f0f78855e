"""In-memory sink adapter for output messages."""

from collections.abc import AsyncIterable

from nodetelemetry.core.models import OutputMessage


class InMemoryMessageSink:
    """In-memory implementation of MessageSinkPort.

    Stores output messages in a list. Suitable for testing and
    short-lived captures where nothing is forwarded downstream.
    """

    def __init__(self) -> None:
        self._messages: list[OutputMessage] = []

    async def write(self, message: OutputMessage) -> None:
        """Write an output message to the sink."""
        self._messages.append(message)

    async def read(self) -> AsyncIterable[OutputMessage]:
        """Read all messages in write order."""
        for message in self._messages:
            yield message
