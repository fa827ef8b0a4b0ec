"""Inode numbers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class INode:
    index: int | None = None

    @classmethod
    def from_stat(cls, st: Any) -> INode:
        """Take the inode from a stat result; Windows has none to show."""
        if os.name == "nt":
            return cls(None)
        return cls(st.st_ino)

    def render(self) -> str:
        return "-" if self.index is None else str(self.index)