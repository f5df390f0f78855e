"""Exception types raised outside the parsing core."""


class NodeTelemetryError(Exception):
    """Base class for nodetelemetry errors."""


class ConfigError(NodeTelemetryError):
    """Raised when configuration values are missing or invalid."""


class RpcTransportError(NodeTelemetryError):
    """Raised when the node cannot be reached or returns an unusable response."""


class RpcError(NodeTelemetryError):
    """Raised when the node answers a request with a JSON-RPC error object.

    Attributes:
        code: JSON-RPC error code.
        message: Error message reported by the node.
    """

    def __init__(self, code: int, message: str) -> None:
        super().__init__(f"JSON-RPC error {code}: {message}")
        self.code = code
        self.message = message
