"""Icons shown in front of entry names."""

from __future__ import annotations

import enum
from typing import Any

from deluxels.filetype import FileKind

ICON_SPACE = " "

_FANCY_FILE = "\uf016"
_FANCY_FOLDER = "\uf115"
_UNICODE_FILE = "\U0001f5cb"
_UNICODE_FOLDER = "\U0001f5c1"

_KIND_ICONS = {
    FileKind.SOCKET: "\uf6a7",
    FileKind.PIPE: "\uf731",
    FileKind.CHAR_DEVICE: "\ue601",
    FileKind.BLOCK_DEVICE: "\ufc29",
    FileKind.SPECIAL: "\uf2dc",
}

_SYMLINK_DIR = "\uf482"
_SYMLINK_FILE = "\uf481"


class IconTheme(enum.Enum):
    NO_ICON = "never"
    FANCY = "fancy"
    UNICODE = "unicode"


class Icons:
    """Chooses an icon for an entry from its kind, name and extension.

    ``get`` accepts any object with a ``file_type`` attribute and
    ``file_name()`` and ``extension()`` methods.
    """

    def __init__(self, theme: IconTheme) -> None:
        self.theme = theme
        self.display_icons = theme in (IconTheme.FANCY, IconTheme.UNICODE)
        if theme is IconTheme.FANCY:
            self.icons_by_name = default_icons_by_name()
            self.icons_by_extension = default_icons_by_extension()
            self.default_file_icon = _FANCY_FILE
            self.default_folder_icon = _FANCY_FOLDER
        else:
            self.icons_by_name = {}
            self.icons_by_extension = {}
            self.default_file_icon = _UNICODE_FILE
            self.default_folder_icon = _UNICODE_FOLDER

    def get(self, name: Any) -> str:
        """Return the icon followed by a space, or an empty string."""
        if not self.display_icons:
            return ""
        return self._icon_for(name) + ICON_SPACE

    def _icon_for(self, name: Any) -> str:
        file_type = name.file_type
        kind = file_type.kind
        if kind is FileKind.DIRECTORY:
            return self.default_folder_icon
        if kind is FileKind.SYMLINK:
            return _SYMLINK_DIR if file_type.is_dir else _SYMLINK_FILE
        if kind in _KIND_ICONS:
            return _KIND_ICONS[kind]
        icon = self.icons_by_name.get(name.file_name().lower())
        if icon is not None:
            return icon
        extension = name.extension()
        if extension is not None:
            icon = self.icons_by_extension.get(extension.lower())
            if icon is not None:
                return icon
        return self.default_file_icon


def default_icons_by_name() -> dict[str, str]:
    """Icons for well-known file names; keys are lower case."""
    return {
        ".trash": "\uf1f8",
        ".atom": "\ue764",
        ".bashprofile": "\ue615",
        ".bashrc": "\uf489",
        ".git": "\uf1d3",
        ".gitattributes": "\uf1d3",
        ".gitconfig": "\uf1d3",
        ".github": "\uf408",
        ".gitignore": "\uf1d3",
        ".gitmodules": "\uf1d3",
        ".rvm": "\ue21e",
        ".vimrc": "\ue62b",
        ".vscode": "\ue70c",
        ".zshrc": "\uf489",
        "bin": "\ue5fc",
        "config": "\ue5fc",
        "docker-compose.yml": "\uf308",
        "dockerfile": "\uf308",
        "ds_store": "\uf179",
        "gitignore_global": "\uf1d3",
        "gradle": "\ue70e",
        "gruntfile.coffee": "\ue611",
        "gruntfile.js": "\ue611",
        "gruntfile.ls": "\ue611",
        "gulpfile.coffee": "\ue610",
        "gulpfile.js": "\ue610",
        "gulpfile.ls": "\ue610",
        "hidden": "\uf023",
        "include": "\ue5fc",
        "lib": "\uf121",
        "localized": "\uf179",
        "node_modules": "\ue718",
        "npmignore": "\ue71e",
        "rubydoc": "\ue73b",
    }


def default_icons_by_extension() -> dict[str, str]:
    """Icons for well-known extensions; keys are lower case."""
    return {
        "7z": "\uf410",
        "apk": "\ue70e",
        "avi": "\uf03d",
        "avro": "\ue60b",
        "awk": "\uf489",
        "bash": "\uf489",
        "bash_history": "\uf489",
        "bash_profile": "\uf489",
        "bashrc": "\uf489",
        "bat": "\uf17a",
        "bio": "\uf910",
        "bmp": "\uf1c5",
        "bz2": "\uf410",
        "c": "\ue61e",
        "c++": "\ue61d",
        "cc": "\ue61d",
        "cfg": "\ue615",
        "clj": "\ue768",
        "cljs": "\ue76a",
        "cls": "\ue600",
        "coffee": "\uf0f4",
        "conf": "\ue615",
        "cp": "\ue61d",
        "cpp": "\ue61d",
        "cs": "\uf81a",
        "cshtml": "\uf1fa",
        "csproj": "\uf81a",
        "csx": "\uf81a",
        "csh": "\uf489",
        "css": "\ue749",
        "csv": "\uf1c3",
        "cxx": "\ue61d",
        "d": "\ue7af",
        "dart": "\ue798",
        "db": "\uf1c0",
        "diff": "\uf440",
        "doc": "\uf1c2",
        "docx": "\uf1c2",
        "ds_store": "\uf179",
        "dump": "\uf1c0",
        "ebook": "\ue28b",
        "editorconfig": "\ue615",
        "ejs": "\ue618",
        "elm": "\ue62c",
        "env": "\uf462",
        "eot": "\uf031",
        "epub": "\ue28a",
        "erb": "\ue73b",
        "erl": "\ue7b1",
        "exe": "\uf17a",
        "ex": "\ue62d",
        "exs": "\ue62d",
        "fish": "\uf489",
        "flac": "\uf001",
        "flv": "\uf03d",
        "font": "\uf031",
        "fpl": "\uf910",
        "gdoc": "\uf1c2",
        "gemfile": "\ue21e",
        "gemspec": "\ue21e",
        "gform": "\uf298",
        "gif": "\uf1c5",
        "git": "\uf1d3",
        "go": "\ue626",
        "gradle": "\ue70e",
        "gsheet": "\uf1c3",
        "gslides": "\uf1c4",
        "guardfile": "\ue21e",
        "gz": "\uf410",
        "h": "\uf0fd",
        "hbs": "\ue60f",
        "hpp": "\uf0fd",
        "hs": "\ue777",
        "htm": "\uf13b",
        "html": "\uf13b",
        "hxx": "\uf0fd",
        "ico": "\uf1c5",
        "image": "\uf1c5",
        "iml": "\ue7b5",
        "ini": "\ue615",
        "ipynb": "\ue606",
        "jar": "\ue204",
        "java": "\ue204",
        "jpeg": "\uf1c5",
        "jpg": "\uf1c5",
        "js": "\ue74e",
        "json": "\ue60b",
        "jsx": "\ue7ba",
        "jl": "\ue624",
        "ksh": "\uf489",
        "less": "\ue758",
        "lhs": "\ue777",
        "license": "\uf48a",
        "localized": "\uf179",
        "lock": "\uf023",
        "log": "\uf18d",
        "lua": "\ue620",
        "lz": "\uf410",
        "m3u": "\uf910",
        "m3u8": "\uf910",
        "m4a": "\uf001",
        "markdown": "\uf48a",
        "md": "\uf48a",
        "mkd": "\uf48a",
        "mkv": "\uf03d",
        "mobi": "\ue28b",
        "mov": "\uf03d",
        "mp3": "\uf001",
        "mp4": "\uf03d",
        "mustache": "\ue60f",
        "nix": "\uf313",
        "npmignore": "\ue71e",
        "opus": "\uf001",
        "ogg": "\uf001",
        "ogv": "\uf03d",
        "otf": "\uf031",
        "pdf": "\uf1c1",
        "php": "\ue73d",
        "pl": "\ue769",
        "pls": "\uf910",
        "png": "\uf1c5",
        "ppt": "\uf1c4",
        "pptx": "\uf1c4",
        "procfile": "\ue21e",
        "properties": "\ue60b",
        "ps1": "\uf489",
        "psd": "\ue7b8",
        "pxm": "\uf1c5",
        "py": "\ue606",
        "pyc": "\ue606",
        "r": "\uf25d",
        "rakefile": "\ue21e",
        "rar": "\uf410",
        "razor": "\uf1fa",
        "rb": "\ue21e",
        "rdata": "\uf25d",
        "rdb": "\ue76d",
        "rdoc": "\uf48a",
        "rds": "\uf25d",
        "readme": "\uf48a",
        "rlib": "\ue7a8",
        "rmd": "\uf48a",
        "rs": "\ue7a8",
        "rspec": "\ue21e",
        "rspec_parallel": "\ue21e",
        "rspec_status": "\ue21e",
        "rss": "\uf09e",
        "ru": "\ue21e",
        "rubydoc": "\ue73b",
        "sass": "\ue603",
        "scala": "\ue737",
        "scss": "\ue749",
        "sh": "\uf489",
        "shell": "\uf489",
        "slim": "\ue73b",
        "sln": "\ue70c",
        "sql": "\uf1c0",
        "sqlite3": "\ue7c4",
        "styl": "\ue600",
        "stylus": "\ue600",
        "svg": "\uf1c5",
        "swift": "\ue755",
        "tar": "\uf410",
        "tex": "\ue600",
        "tiff": "\uf1c5",
        "ts": "\ue628",
        "tsx": "\ue7ba",
        "ttc": "\uf031",
        "ttf": "\uf031",
        "twig": "\ue61c",
        "txt": "\uf15c",
        "video": "\uf03d",
        "vim": "\ue62b",
        "vlc": "\uf910",
        "vue": "\ufd42",
        "wav": "\uf001",
        "webm": "\uf03d",
        "webp": "\uf1c5",
        "windows": "\uf17a",
        "wma": "\uf001",
        "wmv": "\uf03d",
        "wpl": "\uf910",
        "woff": "\uf031",
        "woff2": "\uf031",
        "xls": "\uf1c3",
        "xlsx": "\uf1c3",
        "xml": "\ue619",
        "xul": "\ue619",
        "xz": "\uf410",
        "yaml": "\ue60b",
        "yml": "\ue60b",
        "zip": "\uf410",
        "zsh": "\uf489",
        "zsh-theme": "\uf489",
        "zshrc": "\uf489",
    }