"""Recursive directory copy offloaded to the blocking executor."""

from __future__ import annotations

import asyncio
import os
import shutil
from pathlib import Path
from typing import Callable

from pydantic import BaseModel, ConfigDict

from stagefs.errors import DispatchError, FsOperationError, PathAbsentError
from stagefs.fs.executor import run_blocking
from stagefs.fs.probe import path_exists
from stagefs.infrastructure.logger import logger

COPY_CONTEXT = "error copying directory"


class CopyOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    overwrite: bool = True  # Replace existing destination files
    content_only: bool = True  # Copy the children of src, not src itself


DEFAULT_COPY_OPTIONS = CopyOptions()


class _CopyAborted(Exception):
    """Carries the first per-entry OSError out of shutil.copytree.

    copytree collects OSErrors per entry and keeps copying; anything that is
    not an OSError propagates immediately and stops the walk.
    """

    def __init__(self, error: OSError) -> None:
        super().__init__(str(error))
        self.error = error


def _copy_file(overwrite: bool) -> Callable[[str, str], str]:
    def copy(src: str, dst: str) -> str:
        try:
            if not overwrite and os.path.lexists(dst):
                raise FileExistsError(f"destination already exists: {dst}")
            return shutil.copy2(src, dst)
        except OSError as err:
            raise _CopyAborted(err) from err

    return copy


def copy_tree(src: Path, dest: Path, options: CopyOptions = DEFAULT_COPY_OPTIONS) -> Path:
    """Blocking copy of src into dest. Returns the directory the tree landed in.

    Existing directories at the destination are merged into. The first failing
    entry stops the copy; nothing is rolled back, so dest may be left
    partially populated.
    """
    target = dest if options.content_only else dest / src.name
    try:
        shutil.copytree(src, target, copy_function=_copy_file(options.overwrite), dirs_exist_ok=True)
    except _CopyAborted as aborted:
        raise aborted.error from None
    return target


async def copy_dir_recursive(
    from_dir: str | os.PathLike[str],
    to_dir: str | os.PathLike[str],
    options: CopyOptions = DEFAULT_COPY_OPTIONS,
) -> None:
    """Recursively copy the contents of from_dir into to_dir."""
    src = Path(from_dir)
    dest = Path(to_dir)

    if not await path_exists(src):
        logger.warning("Copy source missing", path=str(src))
        raise PathAbsentError(src, "directory can not be copied as it does not exist")

    try:
        target = await run_blocking(copy_tree, src, dest, options)
    except asyncio.CancelledError:
        raise
    except OSError as err:
        logger.error("Directory copy failed", operation=COPY_CONTEXT, path=str(src), dest=str(dest), error=str(err))
        raise FsOperationError(COPY_CONTEXT, src) from err
    except Exception as err:
        logger.error("Directory copy dispatch failed", operation=COPY_CONTEXT, path=str(src), dest=str(dest), error=repr(err))
        raise DispatchError(COPY_CONTEXT, src) from err

    logger.debug("Directory copied", path=str(src), dest=str(target))
