"""Sink adapters implementing MessageSinkPort."""

from nodetelemetry.adapters.sinks.in_memory import InMemoryMessageSink
from nodetelemetry.adapters.sinks.ring_buffer import RingBufferMessageSink

__all__ = [
    "InMemoryMessageSink",
    "RingBufferMessageSink",
]
