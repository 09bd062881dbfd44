from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from stagefs.fs.executor import shutdown_executor

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def _fresh_executor() -> Iterator[None]:
    """Each test starts and ends without a live worker pool."""
    yield
    shutdown_executor()


@pytest.fixture
def src_tree(tmp_path: Path) -> Path:
    """A source directory holding a.txt and sub/b.txt."""
    src = tmp_path / "src"
    (src / "sub").mkdir(parents=True)
    (src / "a.txt").write_text("alpha")
    (src / "sub" / "b.txt").write_text("bravo")
    return src
