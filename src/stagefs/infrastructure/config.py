"""Configuration constants and .env parsing."""

from __future__ import annotations

import os
from pathlib import Path

from stagefs.url import parse_public_url


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def read_env_file(keys: list[str]) -> dict[str, str]:
    """Return the non-empty values of the requested keys from ./.env.

    The file is only read; nothing is exported to os.environ.
    """
    try:
        content = (Path.cwd() / ".env").read_text()
    except OSError:
        return {}

    wanted = set(keys)
    result: dict[str, str] = {}
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or key not in wanted:
            continue
        value = _unquote(value.strip())
        if value:
            result[key] = value
    return result


_ENV_KEYS = [
    "STAGEFS_PUBLIC_URL",
    "STAGEFS_BLOCKING_WORKERS",
    "STAGEFS_REMOVE_RETRY_ATTEMPTS",
    "STAGEFS_REMOVE_RETRY_DELAY",
]

# Read config values from .env (falls back to os.environ).
_env_config = read_env_file(_ENV_KEYS)


def _setting(key: str, default: str) -> str:
    return os.environ.get(key) or _env_config.get(key, default)


PUBLIC_URL: str = parse_public_url(_setting("STAGEFS_PUBLIC_URL", "/"))

BLOCKING_MAX_WORKERS: int = max(1, int(_setting("STAGEFS_BLOCKING_WORKERS", str(min(32, (os.cpu_count() or 1) + 4)))))

REMOVE_RETRY_ATTEMPTS: int = max(1, int(_setting("STAGEFS_REMOVE_RETRY_ATTEMPTS", "10")))
REMOVE_RETRY_DELAY: float = max(0.0, float(_setting("STAGEFS_REMOVE_RETRY_DELAY", "0.01")))  # seconds
REMOVE_RETRY_MAX_DELAY: float = 1.0


class RetryConfig:
    """Backoff settings for the final rmdir of a directory being removed."""

    def __init__(
        self,
        attempts: int = REMOVE_RETRY_ATTEMPTS,
        delay: float = REMOVE_RETRY_DELAY,
        max_delay: float = REMOVE_RETRY_MAX_DELAY,
    ) -> None:
        self.attempts = max(1, attempts)
        self.delay = delay
        self.max_delay = max_delay

    def delays(self) -> list[float]:
        """Sleep durations between consecutive attempts (one fewer than attempts)."""
        result: list[float] = []
        current = self.delay
        for _ in range(self.attempts - 1):
            result.append(min(current, self.max_delay))
            current *= 2
        return result
