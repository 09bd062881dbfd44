"""Async filesystem helpers for staging and cleaning build output."""

from __future__ import annotations

from .errors import DispatchError, FsOperationError, PathAbsentError, StageFsError
from .fs.copy import DEFAULT_COPY_OPTIONS, CopyOptions, copy_dir_recursive
from .fs.executor import BlockingExecutor, run_blocking, shutdown_executor
from .fs.probe import path_exists
from .fs.remove import remove_dir_all, remove_tree
from .ui.emoji import BUILDING, ERROR, SERVER, SUCCESS, Emoji
from .ui.spinner import SpinnerHandle, spinner
from .url import parse_public_url

__all__ = [
    "BUILDING",
    "DEFAULT_COPY_OPTIONS",
    "ERROR",
    "SERVER",
    "SUCCESS",
    "BlockingExecutor",
    "CopyOptions",
    "DispatchError",
    "Emoji",
    "FsOperationError",
    "PathAbsentError",
    "SpinnerHandle",
    "StageFsError",
    "copy_dir_recursive",
    "parse_public_url",
    "path_exists",
    "remove_dir_all",
    "remove_tree",
    "run_blocking",
    "shutdown_executor",
    "spinner",
]
