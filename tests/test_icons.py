import os
from dataclasses import dataclass

import pytest

from deluxels.filetype import FileKind, FileType
from deluxels.icons import (
    ICON_SPACE,
    IconTheme,
    Icons,
    default_icons_by_extension,
    default_icons_by_name,
)

PLAIN_FILE = FileType(FileKind.FILE)
DIRECTORY = FileType(FileKind.DIRECTORY)


@dataclass
class _Entry:
    name: str
    file_type: FileType

    def file_name(self):
        return self.name

    def extension(self):
        stem, ext = os.path.splitext(self.name)
        return ext[1:] if ext else None


def test_no_icon():
    assert Icons(IconTheme.NO_ICON).get(_Entry("file.txt", PLAIN_FILE)) == ""


def test_default_file_icon():
    assert Icons(IconTheme.FANCY).get(_Entry("file", PLAIN_FILE)) == "\uf016" + ICON_SPACE


def test_default_file_icon_unicode():
    assert Icons(IconTheme.UNICODE).get(_Entry("file", PLAIN_FILE)) == "\U0001f5cb "


def test_directory_icon():
    assert Icons(IconTheme.FANCY).get(_Entry("tmp", DIRECTORY)) == "\uf115 "


def test_directory_icon_unicode():
    assert Icons(IconTheme.UNICODE).get(_Entry("tmp", DIRECTORY)) == "\U0001f5c1 "


def test_directory_icon_with_ext():
    assert Icons(IconTheme.FANCY).get(_Entry("dir.rs", DIRECTORY)) == "\uf115 "


def test_directory_named_like_known_name_uses_folder_icon():
    assert Icons(IconTheme.FANCY).get(_Entry("node_modules", DIRECTORY)) == "\uf115 "


def test_unicode_theme_ignores_extensions():
    assert Icons(IconTheme.UNICODE).get(_Entry("main.rs", PLAIN_FILE)) == "\U0001f5cb "


@pytest.mark.parametrize("file_name,icon", sorted(default_icons_by_name().items()))
def test_icon_by_name(file_name, icon):
    assert Icons(IconTheme.FANCY).get(_Entry(file_name, PLAIN_FILE)) == icon + ICON_SPACE


@pytest.mark.parametrize("ext,icon", sorted(default_icons_by_extension().items()))
def test_icon_by_extension(ext, icon):
    entry = _Entry(f"file.{ext}", PLAIN_FILE)
    assert Icons(IconTheme.FANCY).get(entry) == icon + ICON_SPACE


@pytest.mark.parametrize("file_name", [".trash", ".TRASH"])
def test_name_match_is_case_insensitive(file_name):
    assert "\uf1f8" in Icons(IconTheme.FANCY).get(_Entry(file_name, PLAIN_FILE))


@pytest.mark.parametrize("file_name", ["test.7z", "test.7Z"])
def test_extension_match_is_case_insensitive(file_name):
    assert "\uf410" in Icons(IconTheme.FANCY).get(_Entry(file_name, PLAIN_FILE))


@pytest.mark.parametrize(
    "file_type,icon",
    [
        (FileType(FileKind.SYMLINK, is_dir=True), "\uf482"),
        (FileType(FileKind.SYMLINK, is_dir=False), "\uf481"),
        (FileType(FileKind.SOCKET), "\uf6a7"),
        (FileType(FileKind.PIPE), "\uf731"),
        (FileType(FileKind.CHAR_DEVICE), "\ue601"),
        (FileType(FileKind.BLOCK_DEVICE), "\ufc29"),
        (FileType(FileKind.SPECIAL), "\uf2dc"),
    ],
)
def test_icons_by_kind(file_type, icon):
    assert Icons(IconTheme.FANCY).get(_Entry("x.rs", file_type)) == icon + ICON_SPACE


def test_default_tables_are_lower_case():
    for table in (default_icons_by_name(), default_icons_by_extension()):
        assert all(key == key.lower() for key in table)