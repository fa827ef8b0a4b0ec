# deluxels

The building blocks of a directory lister: reading file metadata, picking icons,
formatting permissions, sizes and dates, and sorting entries.

## Installation

```
pip install deluxels
```

## Usage

### Reading metadata

```python
from deluxels.meta import Meta, ListingOptions, Display

meta = Meta.from_path("/tmp", dereference=False)
meta.content = meta.recurse_into(1, ListingOptions(display=Display.ALL))
meta.calculate_total_size()
```

`Meta.from_path` describes a symbolic link itself unless `dereference` is true.
`recurse_into(depth, options)` returns the entries below a directory, `depth`
levels deep, or `None` when the entry is not walked into. `ListingOptions` sets
which entries are collected (`Display.ALL`, `ALMOST_ALL`, `DIRECTORY_ONLY`,
`VISIBLE_ONLY`), the `Layout` (`GRID`, `TREE`, `ONE_LINE`), `dereference` and
`ignore_globs`. Entries that cannot be read are reported on stderr and left out.
`calculate_total_size()` replaces a directory's size with the size of everything
below it.

Each `Meta` holds a `Name`, `Permissions`, `Owner`, `FileType`, `Size`, `Date`,
`SymLink`, `Indicator` and `INode`. They turn into plain text as follows:

- `Permissions.render()` gives the nine-character `rwxrwxrwx` form, with `s`/`S`
  and `t`/`T` for setuid, setgid and sticky bits.
- `FileType.symbol()` gives the type character (`.`, `d`, `l`, `|`, `b`, `c`,
  `s`, `?`).
- `Owner.render_user()` and `Owner.render_group()` give names, or the numeric id
  when no name is known.
- `INode.render()` gives the inode number, or `-` where there is none.
- `Indicator.render(display_indicators)` gives `/`, `*`, `|`, `=` or `@`.
- `SymLink.render(arrow)` gives ` ⇒ target` for links and nothing otherwise.
- `Name.render(icons, display_option, base_path)` gives the icon and the name,
  with control characters escaped; `DisplayOption` chooses the file name, the
  path relative to `base_path`, or the whole path.

### Sorting

```python
from deluxels.sort import SortOptions, SortColumn, DirGrouping, assemble_sorters, sort_metas

sorters = assemble_sorters(
    SortOptions(column=SortColumn.VERSION, dir_grouping=DirGrouping.FIRST)
)
entries = sort_metas(meta.content, sorters)
```

Entries can be sorted by `NAME` (case-insensitive), `SIZE` (largest first),
`TIME` (newest first), `VERSION` or `EXTENSION`, in `SortOrder.DEFAULT` or
`REVERSE`, with directories first, last or mixed in. `by_meta(sorters, a, b)`
compares two entries and returns a negative, zero or positive number.
`version_compare` puts names that contain numbers in natural order: `2` comes
before `11`.

### Sizes and dates

```python
from deluxels.size import Size, SizeFlag

Size(42 * 1024).value_string(SizeFlag.DEFAULT)  # "42"
Size(42 * 1024).unit_string(SizeFlag.SHORT)     # "K"
Size(42 * 1024).render(SizeFlag.SHORT, 3)       # " 42K"
```

`Size.render` raises `ValueError` when the value is wider than the alignment.

`Date.date_string` writes a modification time in local time in one of three
forms: `DateFormat.DATE` (ctime style), `DateFormat.RELATIVE` (for example
"2 days ago" or "now") or `DateFormat.FORMATTED` with a `strftime` format.
`Date.age` tells whether the date falls within the last hour, the last day, or
earlier.

### Icons

```python
from deluxels.icons import Icons, IconTheme

icons = Icons(IconTheme.FANCY)
icons.get(meta.name)
```

Icons are chosen first by file type, then by file name, then by extension. Both
name and extension matches ignore case. `IconTheme.UNICODE` shows only generic
file and folder icons, and `IconTheme.NO_ICON` shows none.

## What this package does not do

There is no command to run: the package is a library and does not print
listings itself. It does not lay entries out in grids or trees, does not colour
its output, and reads no configuration file. Every rendering method returns
plain text.

## Running the tests

```
pip install -e .[test]
pytest
```