import os
from datetime import datetime

import pytest

from deluxels.meta import Meta
from deluxels.sort import (
    DirGrouping,
    SortColumn,
    SortOptions,
    SortOrder,
    assemble_sorters,
    by_meta,
    sort_metas,
    version_compare,
)


def _file(tmp_path, name, data=b""):
    path = tmp_path / name
    path.write_bytes(data)
    return Meta.from_path(path)


def _dir(tmp_path, name):
    path = tmp_path / name
    path.mkdir()
    return Meta.from_path(path)


def test_by_name_with_dirs_first(tmp_path):
    meta_a = _file(tmp_path, "zzz")
    meta_z = _dir(tmp_path, "aaa")

    options = SortOptions(dir_grouping=DirGrouping.FIRST)
    assert by_meta(assemble_sorters(options), meta_a, meta_z) > 0

    options = SortOptions(dir_grouping=DirGrouping.FIRST, order=SortOrder.REVERSE)
    assert by_meta(assemble_sorters(options), meta_a, meta_z) > 0


def test_by_name_with_files_first(tmp_path):
    meta_a = _file(tmp_path, "zzz")
    meta_z = _dir(tmp_path, "aaa")

    options = SortOptions(dir_grouping=DirGrouping.LAST)
    assert by_meta(assemble_sorters(options), meta_a, meta_z) < 0

    options = SortOptions(dir_grouping=DirGrouping.LAST, order=SortOrder.REVERSE)
    assert by_meta(assemble_sorters(options), meta_a, meta_z) < 0


def test_by_name_unordered(tmp_path):
    meta_a = _file(tmp_path, "aaa")
    meta_z = _dir(tmp_path, "zzz")

    options = SortOptions(dir_grouping=DirGrouping.NONE)
    assert by_meta(assemble_sorters(options), meta_a, meta_z) < 0

    options = SortOptions(dir_grouping=DirGrouping.NONE, order=SortOrder.REVERSE)
    assert by_meta(assemble_sorters(options), meta_a, meta_z) > 0


def test_by_name_unordered_2(tmp_path):
    meta_a = _file(tmp_path, "zzz")
    meta_z = _dir(tmp_path, "aaa")

    options = SortOptions(dir_grouping=DirGrouping.NONE)
    assert by_meta(assemble_sorters(options), meta_a, meta_z) > 0

    options = SortOptions(dir_grouping=DirGrouping.NONE, order=SortOrder.REVERSE)
    assert by_meta(assemble_sorters(options), meta_a, meta_z) < 0


def test_by_time(tmp_path):
    meta_a = _file(tmp_path, "aaa")
    path_z = tmp_path / "zzz"
    path_z.write_bytes(b"")
    old = datetime(1985, 11, 16).timestamp()
    os.utime(path_z, (old, old))
    meta_z = Meta.from_path(path_z)

    options = SortOptions(column=SortColumn.TIME)
    assert by_meta(assemble_sorters(options), meta_a, meta_z) < 0

    options = SortOptions(column=SortColumn.TIME, order=SortOrder.REVERSE)
    assert by_meta(assemble_sorters(options), meta_a, meta_z) > 0


def test_by_extension(tmp_path):
    meta_a = _file(tmp_path, "aaa.rs")
    meta_z = _file(tmp_path, "zzz.rs")
    meta_j = _file(tmp_path, "zzz.js")
    meta_t = _file(tmp_path, "zzz.txt")

    sorters = assemble_sorters(SortOptions(column=SortColumn.EXTENSION))
    assert by_meta(sorters, meta_a, meta_z) == 0
    assert by_meta(sorters, meta_a, meta_j) > 0
    assert by_meta(sorters, meta_a, meta_t) < 0


def test_by_version(tmp_path):
    meta_a = _file(tmp_path, "2")
    meta_b = _file(tmp_path, "11")
    meta_c = _file(tmp_path, "12")

    sorters = assemble_sorters(SortOptions(column=SortColumn.VERSION))
    assert by_meta(sorters, meta_b, meta_a) > 0
    assert by_meta(sorters, meta_b, meta_c) < 0


def test_version_sort_listing(tmp_path):
    names = ["0.3.7", "0.11.5", "11a", "0.2", "0.11", "1", "11", "2", "22"]
    metas = [_file(tmp_path, name) for name in names]
    ordered = sort_metas(metas, assemble_sorters(SortOptions(column=SortColumn.VERSION)))
    assert [m.name.name for m in ordered] == [
        "0.2",
        "0.3.7",
        "0.11",
        "0.11.5",
        "1",
        "2",
        "11",
        "11a",
        "22",
    ]


def test_version_sort_overwritten_by_time(tmp_path):
    stamp = datetime(2020, 1, 1).timestamp()
    metas = []
    for name in ("2", "11"):
        path = tmp_path / name
        path.write_bytes(b"")
        os.utime(path, (stamp, stamp))
        metas.append(Meta.from_path(path))
    ordered = sort_metas(metas, assemble_sorters(SortOptions(column=SortColumn.TIME)))
    assert [m.name.name for m in ordered] == ["11", "2"]


def test_version_sort_overwritten_by_size(tmp_path):
    metas = [_file(tmp_path, "2"), _file(tmp_path, "11", b"this is larger\n")]
    ordered = sort_metas(metas, assemble_sorters(SortOptions(column=SortColumn.SIZE)))
    assert [m.name.name for m in ordered] == ["11", "2"]


def test_sort_by_name_is_case_insensitive(tmp_path):
    metas = [_file(tmp_path, "Beta"), _file(tmp_path, "alpha"), _file(tmp_path, "gamma")]
    ordered = sort_metas(metas, assemble_sorters(SortOptions()))
    assert [m.name.name for m in ordered] == ["alpha", "Beta", "gamma"]


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        ("2", "11", -1),
        ("11", "2", 1),
        ("11", "11a", -1),
        ("0.11", "0.11.5", -1),
        ("abc", "abc", 0),
        ("1a", "a1", -1),
        ("a", "b", -1),
    ],
)
def test_version_compare(a, b, expected):
    assert version_compare(a, b) == expected