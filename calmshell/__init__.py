"""Core of a classic desktop shell: INI files, shortcuts, aliases, descriptions, file operations and Program Manager commands."""

__version__ = "0.1.0"

__all__ = [
    "alias",
    "askdrop",
    "calmira",
    "compsys",
    "ddeshell",
    "desk",
    "directory",
    "fileman",
    "fourdos",
    "inifile",
]