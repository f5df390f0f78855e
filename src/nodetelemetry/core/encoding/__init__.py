"""Output encoders."""

from nodetelemetry.core.encoding.ndjson import encode_messages

__all__ = ["encode_messages"]
