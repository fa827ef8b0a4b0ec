"""Unix permission bits and their ``rwx`` rendering."""

from __future__ import annotations

import stat
from dataclasses import dataclass


@dataclass(frozen=True)
class Permissions:
    """The nine access bits plus the sticky, setgid and setuid bits."""

    user_read: bool = False
    user_write: bool = False
    user_execute: bool = False

    group_read: bool = False
    group_write: bool = False
    group_execute: bool = False

    other_read: bool = False
    other_write: bool = False
    other_execute: bool = False

    sticky: bool = False
    setgid: bool = False
    setuid: bool = False

    @classmethod
    def from_mode(cls, mode: int) -> Permissions:
        """Build permissions from an ``st_mode`` value."""

        def has(bit: int) -> bool:
            return mode & bit == bit

        return cls(
            user_read=has(stat.S_IRUSR),
            user_write=has(stat.S_IWUSR),
            user_execute=has(stat.S_IXUSR),
            group_read=has(stat.S_IRGRP),
            group_write=has(stat.S_IWGRP),
            group_execute=has(stat.S_IXGRP),
            other_read=has(stat.S_IROTH),
            other_write=has(stat.S_IWOTH),
            other_execute=has(stat.S_IXOTH),
            sticky=has(stat.S_ISVTX),
            setgid=has(stat.S_ISGID),
            setuid=has(stat.S_ISUID),
        )

    def render(self) -> str:
        """Return the nine-character ``rwxrwxrwx`` form."""
        return "".join(
            (
                "r" if self.user_read else "-",
                "w" if self.user_write else "-",
                _exec_char(self.user_execute, self.setuid, "s"),
                "r" if self.group_read else "-",
                "w" if self.group_write else "-",
                _exec_char(self.group_execute, self.setgid, "s"),
                "r" if self.other_read else "-",
                "w" if self.other_write else "-",
                _exec_char(self.other_execute, self.sticky, "t"),
            )
        )

    def is_executable(self) -> bool:
        """True when anyone may execute the file."""
        return self.user_execute or self.group_execute or self.other_execute


def _exec_char(execute: bool, special: bool, letter: str) -> str:
    if special:
        return letter if execute else letter.upper()
    return "x" if execute else "-"