"""Alias (.als) files: small INI files that point at another file or folder."""

from __future__ import annotations

from dataclasses import dataclass

from .inifile import IniFile

ALIAS_SECTION = "Alias"
SHOW_NORMAL = 1


@dataclass
class AliasInfo:
    """What an alias points at and how to start it."""

    target: str
    params: str = ""
    work_dir: str = ""
    icon_file: str = ""
    icon_index: int = 0
    show_mode: int = SHOW_NORMAL


def read_alias(path):
    """Read the alias at ``path``; None when it names no target."""
    ini = IniFile(path)
    info = AliasInfo(
        target=ini.get_str(ALIAS_SECTION, "Target", ""),
        params=ini.get_str(ALIAS_SECTION, "Params", ""),
        work_dir=ini.get_str(ALIAS_SECTION, "WorkDir", ""),
        icon_file=ini.get_str(ALIAS_SECTION, "IconFile", ""),
        icon_index=ini.get_int(ALIAS_SECTION, "IconIndex", 0),
        show_mode=ini.get_int(ALIAS_SECTION, "ShowMode", SHOW_NORMAL),
    )
    return info if info.target else None


def write_alias(path, info):
    """Write ``info`` to the alias file at ``path``."""
    ini = IniFile(path)
    ini.set_str(ALIAS_SECTION, "Target", info.target)
    ini.set_str(ALIAS_SECTION, "Params", info.params)
    ini.set_str(ALIAS_SECTION, "WorkDir", info.work_dir)
    ini.set_str(ALIAS_SECTION, "IconFile", info.icon_file)
    ini.set_int(ALIAS_SECTION, "IconIndex", info.icon_index)
    ini.set_int(ALIAS_SECTION, "ShowMode", info.show_mode)


def execute_alias(path, launch=None):
    """Open the target of the alias at ``path``.

    ``launch(target, params, work_dir)`` does the opening; empty params and
    working folder are passed as None. Returns False for an unreadable alias.
    """
    info = read_alias(path)
    if info is None:
        return False
    if launch is None:
        from .fileman import FileManager

        launch = FileManager().default_execute
    return launch(info.target, info.params or None, info.work_dir or None)