"""Public URL normalization."""

from __future__ import annotations


def parse_public_url(val: str) -> str:
    """Ensure the given value for `--public-url` starts and ends with a slash."""
    prefix = "" if val.startswith("/") else "/"
    suffix = "" if val.endswith("/") else "/"
    return f"{prefix}{val}{suffix}"
