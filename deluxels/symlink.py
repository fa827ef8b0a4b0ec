"""Symbolic link targets."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_ARROW = "\u21d2"


@dataclass(frozen=True)
class SymLink:
    """The target a link points at, and whether that target exists."""

    target: str | None = None
    valid: bool = False

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> SymLink:
        """Read the link at ``path``; a non-link gives an empty ``SymLink``."""
        path = os.fspath(path)
        try:
            target = os.readlink(path)
        except (OSError, ValueError):
            return cls()
        parent = os.path.dirname(path.rstrip(os.sep) or path)
        if os.path.isabs(target) or path == os.sep:
            valid = os.path.exists(target)
        else:
            valid = os.path.exists(os.path.join(parent, target))
        return cls(target=target, valid=valid)

    @property
    def symlink_string(self) -> str | None:
        return self.target

    def render(self, arrow: str = DEFAULT_ARROW) -> str:
        """Return `` <arrow> <target>``, or nothing when not a link."""
        if self.target is None:
            return ""
        return f" {arrow} {self.target}"