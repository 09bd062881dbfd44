"""Error types raised by the filesystem helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any


class StageFsError(Exception):
    """Base error carrying structured details for the caller to log or render."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}


class PathAbsentError(StageFsError):
    """A required source path does not exist."""

    def __init__(self, path: str | os.PathLike[str], message: str = "path does not exist") -> None:
        self.path = Path(path)
        super().__init__(f"{message}: {self.path}", {"path": str(self.path)})


class FsOperationError(StageFsError):
    """A copy or delete failed; the underlying OSError is chained as __cause__."""

    def __init__(self, operation: str, path: str | os.PathLike[str]) -> None:
        self.operation = operation
        self.path = Path(path)
        super().__init__(operation, {"operation": operation, "path": str(self.path)})


class DispatchError(FsOperationError):
    """The worker pool could not run the submitted work to completion."""
