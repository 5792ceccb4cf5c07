"""Reading and writing 4DOS ``descript.ion`` file descriptions."""

from __future__ import annotations

import os

DEFAULT_DESCRIPTION_FILE = "descript.ion"

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def parse_line(line):
    """Split a description line into ``(name, description)``.

    Quoted names may hold spaces. Returns None when the line has no name.
    """
    text = line.rstrip("\r\n")
    if text.startswith('"'):
        end = text.find('"', 1)
        if end < 0:
            name, rest = text[1:], ""
        else:
            name, rest = text[1:end], text[end + 1 :]
    else:
        cut = len(text)
        for sep in (" ", "\t"):
            pos = text.find(sep)
            if pos >= 0:
                cut = min(cut, pos)
        name, rest = text[:cut], text[cut:]
    if not name:
        return None
    return name, rest.lstrip(" \t")


def _description_path(directory, description_file):
    return os.path.join(os.fspath(directory), description_file)


def _read_lines(path):
    try:
        with open(path, encoding=_ENCODING, errors=_ERRORS, newline="") as f:
            return f.read().splitlines(keepends=True)
    except FileNotFoundError:
        return None


def _format_entry(name, description):
    if " " in name or "\t" in name:
        name = f'"{name}"'
    return f"{name} {description}\r\n"


def _entries(directory, description_file):
    for line in _read_lines(_description_path(directory, description_file)) or ():
        parsed = parse_line(line)
        if parsed is not None:
            yield parsed


def get_description(directory, name, description_file=DEFAULT_DESCRIPTION_FILE):
    """Return the description of ``name`` in ``directory``, or None."""
    wanted = name.casefold()
    for entry_name, description in _entries(directory, description_file):
        if entry_name.casefold() == wanted:
            return description
    return None


def set_description(directory, name, description, description_file=DEFAULT_DESCRIPTION_FILE):
    """Write or replace the description of ``name``; an empty one removes it."""
    path = _description_path(directory, description_file)
    lines = _read_lines(path)
    if lines is None and not description:
        return
    wanted = name.casefold()
    out = []
    written = False
    for line in lines or ():
        parsed = parse_line(line)
        if parsed is not None and parsed[0].casefold() == wanted:
            if description and not written:
                out.append(_format_entry(name, description))
                written = True
            continue
        out.append(line)
    if description and not written:
        if out and not out[-1].endswith(("\r", "\n")):
            out[-1] += "\r\n"
        out.append(_format_entry(name, description))
    temp_path = path[:-1] + "~"
    with open(temp_path, "w", encoding=_ENCODING, errors=_ERRORS, newline="") as f:
        f.writelines(out)
    os.replace(temp_path, path)


def remove_description(directory, name, description_file=DEFAULT_DESCRIPTION_FILE):
    """Remove the description of ``name`` from ``directory``."""
    set_description(directory, name, "", description_file)


def load_all(directory, description_file=DEFAULT_DESCRIPTION_FILE):
    """Return every description in ``directory`` as a name-to-text dict.

    Where a name occurs more than once, the first entry wins.
    """
    result = {}
    seen = set()
    for entry_name, description in _entries(directory, description_file):
        key = entry_name.casefold()
        if key not in seen:
            seen.add(key)
            result[entry_name] = description
    return result