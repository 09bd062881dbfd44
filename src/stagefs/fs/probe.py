"""Existence probe that does not mask permission or I/O errors."""

from __future__ import annotations

import os

from stagefs.fs.executor import run_blocking


def _stat_exists(path: str | os.PathLike[str]) -> bool:
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    return True


async def path_exists(path: str | os.PathLike[str]) -> bool:
    """Check if path exists with a single metadata read.

    Unlike ``Path.exists``, errors other than absence (permission denied,
    I/O failure) are raised to the caller instead of being reported as False.
    """
    return await run_blocking(_stat_exists, path)
