"""File owner and group names."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

try:
    import grp
    import pwd
except ImportError:  # pragma: no cover - not available on Windows
    grp = None  # type: ignore[assignment]
    pwd = None  # type: ignore[assignment]


@dataclass(frozen=True)
class Owner:
    user: str
    group: str

    @classmethod
    def from_stat(cls, st: Any) -> Owner:
        """Resolve names for the stat's uid and gid, falling back to numbers."""
        return cls(_user_name(st.st_uid), _group_name(st.st_gid))

    def render_user(self) -> str:
        return self.user

    def render_group(self) -> str:
        return self.group


def _user_name(uid: int) -> str:
    if pwd is not None:
        try:
            return pwd.getpwuid(uid).pw_name
        except (KeyError, OverflowError):
            pass
    return str(uid)


def _group_name(gid: int) -> str:
    if grp is not None:
        try:
            return grp.getgrgid(gid).gr_name
        except (KeyError, OverflowError):
            pass
    return str(gid)