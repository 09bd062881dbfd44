"""Status glyphs for build output."""

from __future__ import annotations

import sys
from typing import NamedTuple, TextIO


class Emoji(NamedTuple):
    glyph: str
    fallback: str = ""

    def render(self, stream: TextIO | None = None) -> str:
        """Return the glyph if stream can encode it, else the fallback."""
        encoding = getattr(stream or sys.stdout, "encoding", None) or "ascii"
        try:
            self.glyph.encode(encoding)
        except (UnicodeEncodeError, LookupError):
            return self.fallback
        return self.glyph

    def __str__(self) -> str:
        return self.render()


BUILDING = Emoji("📦")
SUCCESS = Emoji("✅")
ERROR = Emoji("❌")
SERVER = Emoji("📡")
