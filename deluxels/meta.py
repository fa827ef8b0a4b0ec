"""Everything known about one directory entry, and walking into directories."""

from __future__ import annotations

import copy
import dataclasses
import enum
import fnmatch
import os
import stat
import sys
from dataclasses import dataclass, field
from typing import Any

from deluxels.date import Date
from deluxels.filetype import FileKind, FileType
from deluxels.indicator import Indicator
from deluxels.inode import INode
from deluxels.name import Name
from deluxels.owner import Owner
from deluxels.permissions import Permissions
from deluxels.size import Size
from deluxels.symlink import SymLink

_PROGRAM = "deluxels"


class Display(enum.Enum):
    """Which entries of a directory are listed."""

    ALL = "all"
    ALMOST_ALL = "almost_all"
    DIRECTORY_ONLY = "directory_only"
    VISIBLE_ONLY = "visible_only"


class Layout(enum.Enum):
    GRID = "grid"
    TREE = "tree"
    ONE_LINE = "one_line"


@dataclass(frozen=True)
class ListingOptions:
    """The settings that decide what a directory walk collects."""

    display: Display = Display.VISIBLE_ONLY
    layout: Layout = Layout.GRID
    dereference: bool = False
    ignore_globs: tuple[str, ...] = ()

    def is_ignored(self, name: str) -> bool:
        return any(fnmatch.fnmatchcase(name, glob) for glob in self.ignore_globs)


def _report(path: str, err: BaseException) -> None:
    message = getattr(err, "strerror", None) or str(err)
    try:
        sys.stderr.write(f"{_PROGRAM}: {path}: {message}.\n\n")
        sys.stderr.flush()
    except OSError:
        # Nowhere left to report to; stop quietly.
        raise SystemExit(0) from None


def _is_link(path: str) -> bool:
    try:
        os.readlink(path)
    except (OSError, ValueError):
        return False
    return True


@dataclass
class Meta:
    """The metadata of one entry, plus its children once walked."""

    name: Name
    path: str
    permissions: Permissions
    date: Date
    owner: Owner
    file_type: FileType
    size: Size
    symlink: SymLink
    indicator: Indicator
    inode: INode
    content: list[Meta] | None = field(default=None)

    @classmethod
    def from_path(cls, path: str | os.PathLike[str], dereference: bool = False) -> Meta:
        """Read the entry at ``path``; a link is described itself unless dereferenced."""
        path = os.fspath(path)
        target_st: Any | None = None
        if _is_link(path) and not dereference:
            st = os.lstat(path)
            try:
                target_st = os.stat(path)
            except OSError:
                target_st = None
        else:
            st = os.stat(path)

        owner = Owner.from_stat(st)
        permissions = Permissions.from_mode(st.st_mode)
        file_type = FileType.from_stat(st, target_st, permissions)
        return cls(
            name=Name(path, file_type),
            path=path,
            permissions=permissions,
            date=Date.from_stat(st),
            owner=owner,
            file_type=file_type,
            size=Size(st.st_size),
            symlink=SymLink.from_path(path),
            indicator=Indicator.from_file_type(file_type),
            inode=INode.from_stat(st),
        )

    def recurse_into(self, depth: int, options: ListingOptions) -> list[Meta] | None:
        """Collect the entries below this one, ``depth`` levels deep.

        Returns ``None`` when this entry is not walked into.  Entries that
        cannot be read are reported on stderr and left out.
        """
        if depth == 0:
            return None
        if options.display is Display.DIRECTORY_ONLY and options.layout is not Layout.TREE:
            return None

        kind = self.file_type.kind
        if kind is FileKind.SYMLINK and self.file_type.is_dir:
            if options.layout is Layout.ONE_LINE:
                return None
        elif kind is not FileKind.DIRECTORY:
            return None

        try:
            with os.scandir(self.path) as iterator:
                entries = list(iterator)
        except OSError as err:
            _report(self.path, err)
            return None

        content: list[Meta] = []

        if options.display is Display.ALL:
            current_name = copy.copy(self.name)
            current_name.name = "."
            current = dataclasses.replace(self, name=current_name)
            parent = Meta.from_path(os.path.join(self.path, os.pardir), options.dereference)
            content.append(current)
            content.append(parent)

        for entry in entries:
            name = entry.name
            if options.is_ignored(name):
                continue
            if options.display is Display.VISIBLE_ONLY and name.startswith("."):
                continue

            try:
                entry_meta = Meta.from_path(entry.path, options.dereference)
            except OSError as err:
                _report(entry.path, err)
                continue

            if (
                options.layout is Layout.TREE
                and options.display is Display.DIRECTORY_ONLY
                and not entry.is_dir(follow_symlinks=False)
            ):
                continue

            try:
                entry_meta.content = entry_meta.recurse_into(depth - 1, options)
            except OSError as err:
                _report(entry.path, err)
                continue

            content.append(entry_meta)

        return content

    def calculate_total_size(self) -> None:
        """Replace a directory's size with the size of everything below it."""
        if self.file_type.kind is not FileKind.DIRECTORY:
            return
        if self.content is not None:
            total = self.size.bytes
            for child in self.content:
                child.calculate_total_size()
                total += child.size.bytes
            self.size = Size(total)
        else:
            # The walk may have stopped short of this directory.
            self.size = Size(_total_file_size(self.path))


def _total_file_size(path: str) -> int:
    try:
        st = os.lstat(path) if _is_link(path) else os.stat(path)
    except OSError as err:
        _report(path, err)
        return 0

    if stat.S_ISREG(st.st_mode):
        return st.st_size
    if not stat.S_ISDIR(st.st_mode):
        return 0

    size = st.st_size
    try:
        names = os.listdir(path)
    except OSError as err:
        _report(path, err)
        return size
    return size + sum(_total_file_size(os.path.join(path, name)) for name in names)