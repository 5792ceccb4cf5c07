"""Directory listing, sorting and path helpers for the file windows."""

from __future__ import annotations

import enum
import fnmatch
import os
import stat
from dataclasses import dataclass

from .fourdos import DEFAULT_DESCRIPTION_FILE, load_all

_SEPS = "\\/"
_HIDDEN_ATTRS = 0x2 | 0x4  # hidden | system


class SortOrder(enum.Enum):
    """How a directory listing is ordered."""

    NAME = "name"
    TYPE = "type"
    SIZE = "size"
    DATE = "date"


class ItemType(enum.Flag):
    """What a listed item is."""

    FILE = enum.auto()
    DIR = enum.auto()
    ALIAS = enum.auto()


@dataclass
class IconItem:
    """One entry of a directory listing."""

    name: str
    kind: ItemType
    size: int = 0
    modified: float = 0.0
    hidden: bool = False
    readonly: bool = False
    description: str = ""

    @property
    def is_dir(self) -> bool:
        return bool(self.kind & ItemType.DIR)


def _sort_key(order: SortOrder):
    def key(item: IconItem):
        name = item.name.casefold()
        group = 0 if item.is_dir else 1
        if order is SortOrder.TYPE:
            return (group, get_ext(item.name).casefold(), name)
        if order is SortOrder.SIZE:
            return (group, item.size, name)
        if order is SortOrder.DATE:
            return (group, -item.modified, name)
        return (group, name)

    return key


def sort_items(items, order=SortOrder.NAME):
    """Return ``items`` sorted by ``order``; folders always come first.

    Date order puts the newest items first.
    """
    return sorted(items, key=_sort_key(SortOrder(order)))


def _matches(name: str, pattern: str) -> bool:
    if pattern in ("*", "*.*"):
        return True
    return fnmatch.fnmatchcase(name.casefold(), pattern.casefold())


def _is_hidden(name: str, st: os.stat_result) -> bool:
    return name.startswith(".") or bool(getattr(st, "st_file_attributes", 0) & _HIDDEN_ATTRS)


def _make_item(entry: os.DirEntry, kind: ItemType, st: os.stat_result) -> IconItem:
    return IconItem(
        name=entry.name,
        kind=kind,
        size=0 if kind & ItemType.DIR else st.st_size,
        modified=st.st_mtime,
        hidden=_is_hidden(entry.name, st),
        readonly=not (st.st_mode & stat.S_IWUSR),
    )


def _scan(path):
    """Yield ``(entry, stat, is_dir)`` in name order, skipping vanished entries."""
    with os.scandir(path) as it:
        entries = sorted(it, key=lambda e: e.name.casefold())
    for entry in entries:
        try:
            st = entry.stat()
        except OSError:
            continue
        yield entry, st, stat.S_ISDIR(st.st_mode)


def enumerate_directory(
    path,
    pattern="*.*",
    show_hidden=False,
    max_items=None,
    sort_order=SortOrder.NAME,
    alias_extension=".als",
):
    """List files matching ``pattern`` and all sub-folders of ``path``.

    Folders whose names start with a dot are never listed. At most
    ``max_items`` items are returned, files taking precedence.
    """
    limit = max_items if max_items is not None else float("inf")
    alias_ext = alias_extension.lstrip(".").casefold()
    scanned = list(_scan(path))
    items: list[IconItem] = []

    for entry, st, is_dir in scanned:
        if len(items) >= limit:
            break
        if is_dir or not _matches(entry.name, pattern):
            continue
        if not show_hidden and _is_hidden(entry.name, st):
            continue
        kind = ItemType.FILE
        if alias_ext and get_ext(entry.name).casefold() == alias_ext:
            kind |= ItemType.ALIAS
        items.append(_make_item(entry, kind, st))

    for entry, st, is_dir in scanned:
        if not is_dir or entry.name.startswith("."):
            continue
        if not show_hidden and _is_hidden(entry.name, st):
            continue
        if len(items) >= limit:
            break
        items.append(_make_item(entry, ItemType.DIR, st))

    return sort_items(items, sort_order)


def directory_size(path):
    """Total size of the visible files directly inside ``path``."""
    return sum(
        st.st_size
        for entry, st, is_dir in _scan(path)
        if not is_dir and not _is_hidden(entry.name, st)
    )


def count_files(path, pattern="*.*", show_hidden=False):
    """Count the files directly inside ``path`` that match ``pattern``."""
    return sum(
        1
        for entry, st, is_dir in _scan(path)
        if not is_dir
        and _matches(entry.name, pattern)
        and (show_hidden or not _is_hidden(entry.name, st))
    )


def directory_exists(path):
    """Tell whether ``path`` is an existing directory."""
    return os.path.isdir(path)


def make_tree(path):
    """Create ``path`` and any missing parent folders."""
    os.makedirs(path, exist_ok=True)


def _has_drive(path: str) -> bool:
    return len(path) >= 2 and path[1] == ":" and path[0].isalpha()


def join_path(parent, name):
    """Join ``name`` onto ``parent``, adding a separator where needed."""
    if not parent:
        return name
    if parent[-1] in _SEPS:
        return parent + name
    if "\\" in parent or _has_drive(parent):
        sep = "\\"
    elif "/" in parent:
        sep = "/"
    else:
        sep = os.sep
    return parent + sep + name


def get_drive(path):
    """Return the drive root of ``path``, such as ``C:\\``."""
    if not path:
        raise ValueError("empty path has no drive")
    return path[0] + ":\\"


def get_parent(path):
    """Return the parent folder of ``path`` with its trailing separator."""
    has_drive = _has_drive(path)
    root_len = 3 if has_drive else 1
    text = path
    if len(text) > root_len and text[-1] in _SEPS:
        text = text[:-1]
    start = 2 if has_drive else 0
    index = max(text.rfind("\\", start), text.rfind("/", start))
    return text[: index + 1] if index >= 0 else text


def get_name(path):
    """Return the last component of ``path``."""
    index = max(path.rfind(c) for c in "\\/:")
    return path[index + 1 :]


def get_ext(name):
    """Return the text after the last dot of ``name``, or ``""``."""
    index = name.rfind(".")
    return name[index + 1 :] if index >= 0 else ""


def load_descriptions(path, items, description_file=DEFAULT_DESCRIPTION_FILE):
    """Fill in ``description`` of each item from the folder's description file.

    Returns the number of items that received a description.
    """
    by_name = {name.casefold(): text for name, text in load_all(path, description_file).items()}
    updated = 0
    for item in items:
        text = by_name.get(item.name.casefold())
        if text is not None:
            item.description = text
            updated += 1
    return updated