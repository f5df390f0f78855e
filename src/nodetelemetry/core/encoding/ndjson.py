"""NDJSON encoder for output messages."""

import json
from collections.abc import Iterable
from typing import Any

from nodetelemetry.core.models import NodeMetricsMessage, OutputMessage


def _message_to_dict(message: OutputMessage) -> dict[str, Any]:
    obj: dict[str, Any] = {"type": message.type, "time": message.time}
    if isinstance(message, NodeMetricsMessage):
        obj["metrics"] = message.metrics
    else:
        obj["peer"] = message.peer
    return obj


def encode_messages(messages: Iterable[OutputMessage]) -> str:
    """Encode output messages to newline-delimited JSON.

    Args:
        messages: An iterable of output messages.

    Returns:
        NDJSON string with one JSON object per line.
        Empty string if no messages.
    """
    lines = [json.dumps(_message_to_dict(message)) for message in messages]

    if not lines:
        return ""

    return "\n".join(lines) + "\n"
