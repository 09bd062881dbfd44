"""Recursive directory removal tolerant of delayed-visibility deletes.

On Windows a file deleted while another process holds a handle to it stays
visible until that handle closes, so removing its parent right after can fail
with "directory not empty". ``remove_tree`` deletes bottom-up and retries the
final rmdir of each directory with a short backoff, re-scanning for entries
that are still pending deletion between attempts.
"""

from __future__ import annotations

import asyncio
import errno
import os
import stat
import sys
import time
from pathlib import Path

from stagefs.errors import DispatchError, FsOperationError
from stagefs.fs.executor import run_blocking
from stagefs.fs.probe import path_exists
from stagefs.infrastructure.config import RetryConfig
from stagefs.infrastructure.logger import logger

REMOVE_CONTEXT = "error removing directory"

_TRANSIENT_RMDIR_ERRNOS = {errno.ENOTEMPTY, errno.EEXIST, errno.EBUSY}


def _is_transient(err: OSError) -> bool:
    if err.errno in _TRANSIENT_RMDIR_ERRNOS:
        return True
    # Windows reports pending deletes and sharing violations as access denied
    return sys.platform == "win32" and isinstance(err, PermissionError)


def _is_junction(path: str) -> bool:
    isjunction = getattr(os.path, "isjunction", None)
    return bool(isjunction and isjunction(path))


def _make_writable(path: str, extra: int = stat.S_IWRITE) -> None:
    try:
        mode = os.lstat(path).st_mode
        os.chmod(path, stat.S_IMODE(mode) | extra)
    except FileNotFoundError:
        pass


def _unlink(path: str) -> None:
    try:
        os.unlink(path)
    except FileNotFoundError:
        return
    except PermissionError:
        # Read-only files cannot be deleted on Windows; on POSIX the parent directory decides
        if sys.platform != "win32":
            raise
        _make_writable(path)
        try:
            os.unlink(path)
        except FileNotFoundError:
            return


def _scan(path: str) -> list[os.DirEntry[str]]:
    try:
        with os.scandir(path) as entries:
            return list(entries)
    except PermissionError:
        # Directory without read or search permission: grant it and scan again
        _make_writable(path, stat.S_IRWXU)
        with os.scandir(path) as entries:
            return list(entries)


def _clear_dir(path: str, retry: RetryConfig) -> None:
    for entry in _scan(path):
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except FileNotFoundError:
            continue
        if _is_junction(entry.path):
            os.rmdir(entry.path)
        elif is_dir:
            _remove_dir(entry.path, retry)
        else:
            _unlink(entry.path)


def _rmdir_with_retry(path: str, retry: RetryConfig) -> None:
    delays = retry.delays()
    for attempt in range(retry.attempts):
        try:
            os.rmdir(path)
            return
        except FileNotFoundError:
            return
        except OSError as err:
            if attempt == retry.attempts - 1 or not _is_transient(err):
                raise
            logger.debug("Directory not yet empty, retrying", path=path, attempt=attempt + 1, errno=err.errno)
        time.sleep(delays[attempt])
        try:
            _clear_dir(path, retry)
        except FileNotFoundError:
            return


def _remove_dir(path: str, retry: RetryConfig) -> None:
    try:
        _clear_dir(path, retry)
    except FileNotFoundError:
        return
    _rmdir_with_retry(path, retry)


def remove_tree(path: str | os.PathLike[str], retry: RetryConfig | None = None) -> None:
    """Blocking recursive delete of path.

    Symlinks are removed rather than followed. Entries deleted concurrently by
    someone else are ignored. A path that is not a directory is unlinked.
    """
    target = os.fspath(path)
    try:
        mode = os.lstat(target).st_mode
    except FileNotFoundError:
        return
    if _is_junction(target):
        os.rmdir(target)
    elif stat.S_ISDIR(mode):
        _remove_dir(target, retry or RetryConfig())
    else:
        _unlink(target)


async def remove_dir_all(path: str | os.PathLike[str], retry: RetryConfig | None = None) -> None:
    """Recursively delete path. A path that does not exist is a no-op."""
    target = Path(path)

    if not await path_exists(target):
        return

    try:
        await run_blocking(remove_tree, target, retry)
    except asyncio.CancelledError:
        raise
    except OSError as err:
        logger.error("Directory removal failed", operation=REMOVE_CONTEXT, path=str(target), error=str(err))
        raise FsOperationError(REMOVE_CONTEXT, target) from err
    except Exception as err:
        logger.error("Directory removal dispatch failed", operation=REMOVE_CONTEXT, path=str(target), error=repr(err))
        raise DispatchError(REMOVE_CONTEXT, target) from err

    logger.debug("Directory removed", path=str(target))
