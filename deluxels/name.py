"""Entry names: extension lookup, escaping, ordering and display."""

from __future__ import annotations

import enum
import functools
import os
from pathlib import PurePath
from typing import Any

from deluxels.filetype import FileType


class DisplayOption(enum.Enum):
    """How much of an entry's path to show."""

    FILE_NAME = "file_name"
    RELATIVE = "relative"
    NONE = "none"


def _extension_of(file_name: str) -> str | None:
    if not file_name or file_name == "..":
        return None
    dot = file_name.rfind(".")
    if dot <= 0:
        return None
    return file_name[dot + 1 :]


def _is_printable(char: str) -> bool:
    return char >= "\x20" and char != "\x7f"


_CONTROL_ESCAPES = {"\t": "\\t", "\r": "\\r", "\n": "\\n"}


def _escape_char(char: str) -> str:
    if _is_printable(char):
        return char
    return _CONTROL_ESCAPES.get(char, f"\\u{{{ord(char):x}}}")


@functools.total_ordering
class Name:
    """The name of an entry, compared without regard to case."""

    def __init__(self, path: str | os.PathLike[str], file_type: FileType) -> None:
        self.path = os.fspath(path)
        self.file_type = file_type
        base = PurePath(self.path).name
        self.name = self.path if not base or base == ".." else base
        self._extension = _extension_of(base)

    def __repr__(self) -> str:
        return f"Name({self.path!r}, {self.file_type!r})"

    def file_name(self) -> str:
        """The last component of the path, or the display name if there is none."""
        base = PurePath(self.path).name
        if not base or base == "..":
            return self.name
        return base

    def extension(self) -> str | None:
        """The text after the last dot, ignoring a leading dot."""
        return self._extension

    def escape(self, string: str) -> str:
        """Replace control characters with visible escape sequences."""
        if all(_is_printable(char) for char in string):
            return string
        return "".join(_escape_char(char) for char in string)

    def relative_path(self, base_path: str | os.PathLike[str]) -> PurePath:
        """The path of this entry as seen from ``base_path``."""
        target = PurePath(self.path)
        base = PurePath(base_path)
        if target == base:
            return PurePath(".")
        shared = 0
        for target_part, base_part in zip(target.parts, base.parts):
            if target_part != base_part:
                break
            shared += 1
        ups = [".."] * (len(base.parts) - shared)
        return PurePath(*ups, *target.parts[shared:])

    def render(
        self,
        icons: Any,
        display_option: DisplayOption,
        base_path: str | os.PathLike[str] | None = None,
    ) -> str:
        """The icon followed by the escaped name in the chosen form."""
        if display_option is DisplayOption.FILE_NAME:
            text = self.file_name()
        elif display_option is DisplayOption.RELATIVE:
            if base_path is None:
                raise ValueError("a base path is needed for relative display")
            text = str(self.relative_path(base_path))
        else:
            text = self.path
        return icons.get(self) + self.escape(text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self.name.lower() == other.name.lower()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self.name.lower() < other.name.lower()

    def __hash__(self) -> int:
        return hash(self.name.lower())