"""The trailing type indicator (``/``, ``*``, ``|``, ``=``, ``@``)."""

from __future__ import annotations

from dataclasses import dataclass

from deluxels.filetype import FileKind, FileType


@dataclass(frozen=True)
class Indicator:
    symbol: str

    @classmethod
    def from_file_type(cls, file_type: FileType) -> Indicator:
        kind = file_type.kind
        if kind is FileKind.DIRECTORY:
            return cls("/")
        if kind is FileKind.FILE and file_type.exec:
            return cls("*")
        if kind is FileKind.PIPE:
            return cls("|")
        if kind is FileKind.SOCKET:
            return cls("=")
        if kind is FileKind.SYMLINK:
            return cls("@")
        return cls("")

    def render(self, display_indicators: bool) -> str:
        """The indicator, or nothing when indicators are switched off."""
        return self.symbol if display_indicators else ""