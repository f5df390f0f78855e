"""Ring buffer sink adapter for output messages.

Provides bounded in-memory retention that automatically evicts the oldest
messages when the buffer is full. Useful for long-running capture loops
that need predictable memory usage.
"""

from collections import deque
from collections.abc import AsyncIterable

from nodetelemetry.core.models import OutputMessage


class RingBufferMessageSink:
    """Ring buffer implementation of MessageSinkPort.

    Args:
        max_size: Maximum number of messages to retain.
    """

    def __init__(self, max_size: int) -> None:
        self._buffer: deque[OutputMessage] = deque(maxlen=max_size)

    async def write(self, message: OutputMessage) -> None:
        """Write an output message, evicting the oldest one when full."""
        self._buffer.append(message)

    async def read(self) -> AsyncIterable[OutputMessage]:
        """Read retained messages in write order."""
        for message in self._buffer:
            yield message
