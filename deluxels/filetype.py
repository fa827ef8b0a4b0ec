"""Classification of directory entries by kind."""

from __future__ import annotations

import enum
import stat
from dataclasses import dataclass
from typing import Any

from deluxels.permissions import Permissions


class FileKind(enum.Enum):
    BLOCK_DEVICE = "block_device"
    CHAR_DEVICE = "char_device"
    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"
    PIPE = "pipe"
    SOCKET = "socket"
    SPECIAL = "special"


_SYMBOLS = {
    FileKind.FILE: ".",
    FileKind.DIRECTORY: "d",
    FileKind.PIPE: "|",
    FileKind.SYMLINK: "l",
    FileKind.BLOCK_DEVICE: "b",
    FileKind.CHAR_DEVICE: "c",
    FileKind.SOCKET: "s",
    FileKind.SPECIAL: "?",
}


@dataclass(frozen=True)
class FileType:
    """An entry's kind plus the flags that matter for that kind."""

    kind: FileKind
    uid: bool = False
    exec: bool = False
    is_dir: bool = False

    @classmethod
    def from_stat(
        cls, st: Any, target_st: Any | None, permissions: Permissions
    ) -> FileType:
        """Classify ``st``; ``target_st`` is the link target's stat, if any."""
        mode = st.st_mode
        if stat.S_ISREG(mode):
            return cls(
                FileKind.FILE,
                uid=permissions.setuid,
                exec=permissions.is_executable(),
            )
        if stat.S_ISDIR(mode):
            return cls(FileKind.DIRECTORY, uid=permissions.setuid)
        if stat.S_ISFIFO(mode):
            return cls(FileKind.PIPE)
        if stat.S_ISLNK(mode):
            # A broken link has no target and counts as not a directory.
            is_dir = target_st is not None and stat.S_ISDIR(target_st.st_mode)
            return cls(FileKind.SYMLINK, is_dir=is_dir)
        if stat.S_ISCHR(mode):
            return cls(FileKind.CHAR_DEVICE)
        if stat.S_ISBLK(mode):
            return cls(FileKind.BLOCK_DEVICE)
        if stat.S_ISSOCK(mode):
            return cls(FileKind.SOCKET)
        return cls(FileKind.SPECIAL)

    def is_dirlike(self) -> bool:
        """True for directories and links to directories."""
        return self.kind is FileKind.DIRECTORY or (
            self.kind is FileKind.SYMLINK and self.is_dir
        )

    def symbol(self) -> str:
        """The single character shown in the type column."""
        return _SYMBOLS[self.kind]