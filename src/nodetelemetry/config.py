"""Capture configuration loaded from the environment."""

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass

from nodetelemetry.core.errors import ConfigError

ENV_PREFIX = "NODETELEMETRY_"

# Valid log levels for validation
VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _parse_positive_float(name: str, raw: str) -> float:
    """Parse a strictly positive, finite float setting.

    Raises:
        ConfigError: If raw is not a number, or is zero, negative, NaN or infinite.
    """
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None
    if not math.isfinite(value) or value <= 0:
        raise ConfigError(f"{name} must be a positive number, got {raw!r}")
    return value


@dataclass(frozen=True)
class CaptureConfig:
    """Settings for capturing node statistics.

    Attributes:
        rpc_url: JSON-RPC endpoint of the node.
        request_timeout: Per-request timeout in seconds.
        capture_interval: Seconds between two captures.
        log_level: Level for the nodetelemetry logger.
    """

    rpc_url: str = "http://localhost:8545"
    request_timeout: float = 10.0
    capture_interval: float = 15.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "CaptureConfig":
        """Build a config from NODETELEMETRY_* variables, falling back to defaults.

        Args:
            environ: Mapping to read instead of os.environ.

        Raises:
            ConfigError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        timeout_raw = env.get(f"{ENV_PREFIX}REQUEST_TIMEOUT")
        interval_raw = env.get(f"{ENV_PREFIX}CAPTURE_INTERVAL")
        level = env.get(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper()
        if level not in VALID_LEVELS:
            raise ConfigError(f"{ENV_PREFIX}LOG_LEVEL must be one of {sorted(VALID_LEVELS)}")

        return cls(
            rpc_url=env.get(f"{ENV_PREFIX}RPC_URL", defaults.rpc_url),
            request_timeout=(
                _parse_positive_float(f"{ENV_PREFIX}REQUEST_TIMEOUT", timeout_raw)
                if timeout_raw is not None
                else defaults.request_timeout
            ),
            capture_interval=(
                _parse_positive_float(f"{ENV_PREFIX}CAPTURE_INTERVAL", interval_raw)
                if interval_raw is not None
                else defaults.capture_interval
            ),
            log_level=level,
        )
