"""Ordering of entries by name, size, time, version or extension."""

from __future__ import annotations

import enum
import functools
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Iterable

if TYPE_CHECKING:
    from deluxels.meta import Meta

SortFn = Callable[["Meta", "Meta"], int]


class SortColumn(enum.Enum):
    NAME = "name"
    SIZE = "size"
    TIME = "time"
    VERSION = "version"
    EXTENSION = "extension"


class SortOrder(enum.Enum):
    DEFAULT = "default"
    REVERSE = "reverse"


class DirGrouping(enum.Enum):
    FIRST = "first"
    LAST = "last"
    NONE = "none"


@dataclass(frozen=True)
class SortOptions:
    column: SortColumn = SortColumn.NAME
    order: SortOrder = SortOrder.DEFAULT
    dir_grouping: DirGrouping = DirGrouping.NONE


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _with_dirs_first(a: Meta, b: Meta) -> int:
    return _cmp(b.file_type.is_dirlike(), a.file_type.is_dirlike())


def _by_size(a: Meta, b: Meta) -> int:
    return _cmp(b.size.bytes, a.size.bytes)


def _by_name(a: Meta, b: Meta) -> int:
    return _cmp(a.name, b.name)


def _by_date(a: Meta, b: Meta) -> int:
    return _cmp(b.date, a.date) or _by_name(a, b)


def _by_version(a: Meta, b: Meta) -> int:
    return version_compare(a.name.name, b.name.name)


def _extension_key(meta: Meta) -> tuple[bool, str]:
    extension = meta.name.extension()
    return (extension is not None, extension or "")


def _by_extension(a: Meta, b: Meta) -> int:
    return _cmp(_extension_key(a), _extension_key(b))


_COLUMN_SORTERS: dict[SortColumn, SortFn] = {
    SortColumn.NAME: _by_name,
    SortColumn.SIZE: _by_size,
    SortColumn.TIME: _by_date,
    SortColumn.VERSION: _by_version,
    SortColumn.EXTENSION: _by_extension,
}


def assemble_sorters(options: SortOptions) -> list[tuple[SortOrder, SortFn]]:
    """The comparisons to apply in turn, each with its direction."""
    sorters: list[tuple[SortOrder, SortFn]] = []
    if options.dir_grouping is DirGrouping.FIRST:
        sorters.append((SortOrder.DEFAULT, _with_dirs_first))
    elif options.dir_grouping is DirGrouping.LAST:
        sorters.append((SortOrder.REVERSE, _with_dirs_first))
    sorters.append((options.order, _COLUMN_SORTERS[options.column]))
    return sorters


def by_meta(sorters: Iterable[tuple[SortOrder, SortFn]], a: Meta, b: Meta) -> int:
    """Compare two entries: negative, zero or positive."""
    for direction, sorter in sorters:
        ordering = sorter(a, b)
        if ordering == 0:
            continue
        return -ordering if direction is SortOrder.REVERSE else ordering
    return 0


_CHUNK = re.compile(r"\d+|\D", re.UNICODE)


def version_compare(a: str, b: str) -> int:
    """Compare strings with runs of digits taken as numbers; digits sort first."""
    chunks_a = _CHUNK.findall(a)
    chunks_b = _CHUNK.findall(b)
    for chunk_a, chunk_b in zip(chunks_a, chunks_b):
        digit_a = chunk_a.isdecimal()
        digit_b = chunk_b.isdecimal()
        if digit_a and digit_b:
            ordering = _cmp(int(chunk_a), int(chunk_b))
        elif digit_a:
            return -1
        elif digit_b:
            return 1
        else:
            ordering = _cmp(chunk_a, chunk_b)
        if ordering:
            return ordering
    return _cmp(len(chunks_a), len(chunks_b))


def sort_metas(
    metas: Iterable[Meta], sorters: Iterable[tuple[SortOrder, SortFn]]
) -> list[Meta]:
    """Return the entries sorted; equal entries keep their order."""
    sorters = list(sorters)
    return sorted(metas, key=functools.cmp_to_key(lambda a, b: by_meta(sorters, a, b)))