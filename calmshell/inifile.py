"""Private-profile (INI) file access with Windows profile semantics."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"
_INT_RE = re.compile(r"\s*([+-]?\d+)")


@dataclass
class _Section:
    name: str
    lines: list[str] = field(default_factory=list)


def _entry_key(line: str) -> str | None:
    text = line.strip()
    if not text or text.startswith(";") or "=" not in text:
        return None
    return text.split("=", 1)[0].strip()


def _entry_value(line: str) -> str:
    value = line.split("=", 1)[1].strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        value = value[1:-1]
    return value


def _section_header(line: str) -> str | None:
    text = line.strip()
    if text.startswith("[") and "]" in text:
        return text[1 : text.index("]")].strip()
    return None


class IniFile:
    """An INI file that is read on every query and rewritten on every change.

    Section and key names compare case-insensitively; comments and the
    order of entries are kept when the file is rewritten.
    """

    def __init__(self, path):
        self.path = Path(path)

    def _load(self) -> tuple[list[str], list[_Section]]:
        preamble: list[str] = []
        sections: list[_Section] = []
        try:
            text = self.path.read_text(encoding=_ENCODING, errors=_ERRORS)
        except FileNotFoundError:
            return preamble, sections
        for line in text.splitlines():
            name = _section_header(line)
            if name is not None:
                sections.append(_Section(name))
            elif sections:
                sections[-1].lines.append(line)
            else:
                preamble.append(line)
        return preamble, sections

    def _save(self, preamble: list[str], sections: list[_Section]) -> None:
        out = list(preamble)
        for section in sections:
            out.append(f"[{section.name}]")
            out.extend(section.lines)
        text = "\n".join(out) + "\n" if out else ""
        self.path.write_text(text, encoding=_ENCODING, errors=_ERRORS)

    @staticmethod
    def _find(sections: list[_Section], name: str) -> _Section | None:
        wanted = name.casefold()
        return next((s for s in sections if s.name.casefold() == wanted), None)

    @staticmethod
    def _find_line(section: _Section, key: str) -> int | None:
        wanted = key.casefold()
        for index, line in enumerate(section.lines):
            found = _entry_key(line)
            if found is not None and found.casefold() == wanted:
                return index
        return None

    def get_str(self, section, key, default=""):
        """Return the value of ``key`` in ``section``, or ``default``."""
        _, sections = self._load()
        sect = self._find(sections, section)
        if sect is None:
            return default
        index = self._find_line(sect, key)
        if index is None:
            return default
        return _entry_value(sect.lines[index])

    def get_int(self, section, key, default=0):
        """Return the leading integer of a value; 0 if it has none."""
        value = self.get_str(section, key, None)
        if value is None:
            return default
        match = _INT_RE.match(value)
        return int(match.group(1)) if match else 0

    def set_str(self, section, key, value):
        """Set ``key`` in ``section``, creating either as needed."""
        preamble, sections = self._load()
        sect = self._find(sections, section)
        if sect is None:
            sect = _Section(section)
            sections.append(sect)
        line = f"{key}={value}"
        index = self._find_line(sect, key)
        if index is not None:
            sect.lines[index] = line
        else:
            insert_at = len(sect.lines)
            while insert_at > 0 and not sect.lines[insert_at - 1].strip():
                insert_at -= 1
            sect.lines.insert(insert_at, line)
        self._save(preamble, sections)

    def set_int(self, section, key, value):
        """Set ``key`` in ``section`` to an integer."""
        self.set_str(section, key, str(int(value)))

    def has_key(self, section, key):
        """Tell whether ``key`` is present in ``section``."""
        _, sections = self._load()
        sect = self._find(sections, section)
        return sect is not None and self._find_line(sect, key) is not None

    def delete_key(self, section, key):
        """Remove ``key`` from ``section``; missing keys are ignored."""
        preamble, sections = self._load()
        sect = self._find(sections, section)
        if sect is None:
            return
        index = self._find_line(sect, key)
        if index is None:
            return
        del sect.lines[index]
        self._save(preamble, sections)

    def delete_section(self, section):
        """Remove a whole section; a missing section is ignored."""
        preamble, sections = self._load()
        sect = self._find(sections, section)
        if sect is None:
            return
        sections.remove(sect)
        self._save(preamble, sections)

    def sections(self):
        """Return the section names in file order."""
        _, sections = self._load()
        return [s.name for s in sections]

    def keys(self, section):
        """Return the key names of ``section`` in file order."""
        _, sections = self._load()
        sect = self._find(sections, section)
        if sect is None:
            return []
        return [k for k in map(_entry_key, sect.lines) if k is not None]