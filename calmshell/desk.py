"""Desktop shortcuts and the window arrangements the desktop offers."""

from __future__ import annotations

import enum
from dataclasses import dataclass

DEFAULT_MAX_SHORTCUTS = 64
DESKTOP_SECTION = "Desktop"

_CASCADE_STEP = 20
_CASCADE_LIMIT = 160
_CASCADE_SHRINK = 40


class ShortcutKind(enum.IntEnum):
    """What a desktop shortcut points at."""

    PROGRAM = 1
    FOLDER = 2
    FILE = 3
    URL = 4


@dataclass
class ShortcutInfo:
    """One desktop shortcut, as kept in a ``[ShortcutN]`` section."""

    kind: int
    target: str = ""
    caption: str = ""
    icon_file: str = ""
    icon_index: int = 0
    params: str = ""
    work_dir: str = ""
    show_mode: int = 0
    left: int = 0
    top: int = 0
    minimized: bool = False


def _as_kind(value):
    try:
        return ShortcutKind(value)
    except ValueError:
        return value


def cascade_layout(count, screen_width, screen_height, taskbar_height=0, top_taskbar=False):
    """Return ``(x, y, width, height)`` for ``count`` cascaded windows.

    The taskbar's strip is left free; each window is shifted down and right
    from the one before, starting again at the corner after nine steps.
    """
    top = taskbar_height if top_taskbar else 0
    bottom = screen_height - (0 if top_taskbar else taskbar_height)
    width = screen_width - _CASCADE_SHRINK
    height = bottom - top - _CASCADE_SHRINK
    rects = []
    offset = 0
    for _ in range(count):
        rects.append((offset, top + offset, width, height))
        offset += _CASCADE_STEP
        if offset > _CASCADE_LIMIT:
            offset = 0
    return rects


def arrange_icon_layout(
    count,
    screen_width,
    screen_height,
    spacing_x,
    spacing_y,
    taskbar_height=0,
    top_taskbar=False,
):
    """Return ``(x, y)`` for ``count`` minimised windows along the bottom.

    Rows fill from the left and stack upwards when a row is full.
    """
    x = 0
    y = screen_height - (0 if top_taskbar else taskbar_height) - spacing_y
    positions = []
    for _ in range(count):
        positions.append((x, y))
        x += spacing_x
        if x > screen_width - spacing_x:
            x = 0
            y -= spacing_y
    return positions


def line_up_layout(count, screen_width, grid_x, grid_y):
    """Return ``(x, y)`` grid positions for ``count`` desktop icons."""
    if grid_x <= 0 or grid_y <= 0:
        raise ValueError("grid spacing must be positive")
    columns = max(1, screen_width // grid_x)
    return [
        ((index % columns) * grid_x, (index // columns) * grid_y)
        for index in range(count)
    ]


class Desktop:
    """The shortcuts on the desktop and their shared minimised state."""

    def __init__(self, max_shortcuts=DEFAULT_MAX_SHORTCUTS):
        self.max_shortcuts = max_shortcuts
        self.shortcuts: list[ShortcutInfo] = []
        self.all_minimized = False

    def __len__(self):
        return len(self.shortcuts)

    def __iter__(self):
        return iter(self.shortcuts)

    def load(self, ini):
        """Replace the shortcuts with those stored in ``ini``.

        Sections whose kind is 0 or missing are skipped. Returns the number
        of shortcuts loaded.
        """
        self.shortcuts = []
        stored = ini.get_int(DESKTOP_SECTION, "NumShorts", 0)
        for index in range(stored):
            if len(self.shortcuts) >= self.max_shortcuts:
                break
            section = f"Shortcut{index}"
            kind = ini.get_int(section, "Kind", 0)
            if not kind:
                continue
            self.shortcuts.append(
                ShortcutInfo(
                    kind=_as_kind(kind),
                    target=ini.get_str(section, "Target", ""),
                    caption=ini.get_str(section, "Caption", ""),
                    icon_file=ini.get_str(section, "IconFile", ""),
                    icon_index=ini.get_int(section, "IconIndex", 0),
                    params=ini.get_str(section, "Params", ""),
                    work_dir=ini.get_str(section, "WorkingFolder", ""),
                    show_mode=ini.get_int(section, "ShowMode", 0),
                    left=ini.get_int(section, "Left", 20 + index * 80),
                    top=ini.get_int(section, "Top", 20),
                )
            )
        return len(self.shortcuts)

    def save(self, ini):
        """Write every shortcut and their count to ``ini``."""
        ini.set_int(DESKTOP_SECTION, "NumShorts", len(self.shortcuts))
        for index, info in enumerate(self.shortcuts):
            section = f"Shortcut{index}"
            ini.set_int(section, "Kind", int(info.kind))
            ini.set_str(section, "Target", info.target)
            ini.set_str(section, "Caption", info.caption)
            ini.set_str(section, "IconFile", info.icon_file)
            ini.set_int(section, "IconIndex", info.icon_index)
            ini.set_str(section, "Params", info.params)
            ini.set_str(section, "WorkingFolder", info.work_dir)
            ini.set_int(section, "ShowMode", info.show_mode)
            ini.set_int(section, "Left", info.left)
            ini.set_int(section, "Top", info.top)

    def add_shortcut(self, info):
        """Put ``info`` on the desktop; raises ValueError when it is full."""
        if len(self.shortcuts) >= self.max_shortcuts:
            raise ValueError("the desktop holds no more shortcuts")
        self.shortcuts.append(info)
        return info

    def _set_minimized(self, minimized):
        for info in self.shortcuts:
            info.minimized = minimized

    def clear(self):
        """Minimise every shortcut."""
        self._set_minimized(True)

    def toggle_all(self):
        """Minimise or restore all shortcuts in turn; returns the new state."""
        self.all_minimized = not self.all_minimized
        self._set_minimized(self.all_minimized)
        return self.all_minimized

    def line_up(self, screen_width, grid_x, grid_y):
        """Move the shortcuts onto the desktop grid, row by row."""
        positions = line_up_layout(len(self.shortcuts), screen_width, grid_x, grid_y)
        for info, (x, y) in zip(self.shortcuts, positions):
            info.left = x
            info.top = y