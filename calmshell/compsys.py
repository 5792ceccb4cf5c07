"""The Computer window: folder path, view settings, listing and layout."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .directory import SortOrder, enumerate_directory

COMPUTER_CLASS = "CalmiraComputer"
COMPUTER_SECTION = "Computer"

TOOLBAR_HEIGHT = 28
COMBO_HEIGHT = 22
STATUS_HEIGHT = 18
DEFAULT_TREE_WIDTH = 180
SPLITTER_WIDTH = 4
TREE_MIN_WIDTH = 60
FILE_MIN_WIDTH = 80

DEFAULT_PATH = "C:\\"
DEFAULT_POSITION = (117, 80, 321, 238)


@dataclass(frozen=True)
class Rect:
    """A child window's place inside the client area."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


@dataclass(frozen=True)
class Layout:
    """Where each pane of the Computer window goes."""

    combo: Rect | None
    tree: Rect
    tree_visible: bool
    view: Rect
    status: Rect


class ViewMode(enum.Enum):
    """How the file pane shows its items."""

    LARGE_ICONS = "large"
    SMALL_ICONS = "small"
    DETAILS = "details"


def layout_children(width, height, show_tree=True, tree_width=DEFAULT_TREE_WIDTH, has_combo=True):
    """Lay out toolbar, path box, tree, file pane and status bar.

    The tree and file panes share the space between the path box and the
    status bar; a hidden tree gives the file pane the whole width.
    """
    y = TOOLBAR_HEIGHT
    combo = None
    if has_combo:
        combo = Rect(0, y, width, COMBO_HEIGHT)
        y += COMBO_HEIGHT
    pane_height = max(0, height - y - STATUS_HEIGHT)
    tree_w = tree_width if show_tree else 0
    view_x = tree_w + (SPLITTER_WIDTH if show_tree else 0)
    view_w = max(0, width - view_x)
    return Layout(
        combo=combo,
        tree=Rect(0, y, tree_w, pane_height),
        tree_visible=bool(show_tree),
        view=Rect(view_x, y, view_w, pane_height),
        status=Rect(0, height - STATUS_HEIGHT, width, STATUS_HEIGHT),
    )


def parse_navigation(path):
    """Split a navigation request into ``(path, explorer)``.

    A leading ``*`` asks for explorer mode; an empty path means ``C:\\``.
    """
    explorer = path.startswith("*")
    if explorer:
        path = path[1:]
    return (path or DEFAULT_PATH), explorer


_VIEW_COMMANDS = {
    "view_large": ViewMode.LARGE_ICONS,
    "view_small": ViewMode.SMALL_ICONS,
    "view_details": ViewMode.DETAILS,
}

_SORT_COMMANDS = {
    "sort_name": SortOrder.NAME,
    "sort_type": SortOrder.TYPE,
    "sort_size": SortOrder.SIZE,
    "sort_date": SortOrder.DATE,
}


class ComputerWindow:
    """State of one Computer window and what its menu commands do.

    ``show_hidden_system`` is the user's setting; ``quit_on_close`` makes
    closing the window end the shell instead of hiding it.
    """

    def __init__(self, path=""):
        self.path, self.explorer = parse_navigation(path)
        self.visible = False
        self.view_mode = ViewMode.LARGE_ICONS
        self.sort_order = SortOrder.NAME
        self.pattern = "*.*"
        self.show_hidden_system = False
        self.show_hidden = False
        self.quit_on_close = False
        self.quit_requested = False
        self.show_tree = True
        self.tree_width = DEFAULT_TREE_WIDTH
        self.position = DEFAULT_POSITION
        self.items = []
        self._refresh()

    def _refresh(self):
        try:
            self.items = enumerate_directory(
                self.path, self.pattern, self.show_hidden, None, self.sort_order
            )
        except OSError:
            self.items = []

    def layout(self, width, height):
        """Return the pane layout for a client area of the given size."""
        return layout_children(width, height, self.show_tree, self.tree_width, True)

    def navigate_to(self, path):
        """Show the window on ``path`` (``*`` prefix for explorer mode)."""
        self.path, self.explorer = parse_navigation(path)
        self.visible = True
        self._refresh()
        return self.path

    def handle_command(self, command):
        """Carry out a menu command; returns False for an unknown one."""
        if command == "refresh":
            self._refresh()
        elif command in _VIEW_COMMANDS:
            self.view_mode = _VIEW_COMMANDS[command]
        elif command in _SORT_COMMANDS:
            self.sort_order = _SORT_COMMANDS[command]
            self._refresh()
        elif command == "show_hidden":
            self.show_hidden = not self.show_hidden_system
            self._refresh()
        elif command == "close":
            if self.quit_on_close:
                self.quit_requested = True
            else:
                self.visible = False
        else:
            return False
        return True

    def save_position(self, ini, left, top, width, height):
        """Store the window's normal position in ``ini``."""
        ini.set_int(COMPUTER_SECTION, "Left", left)
        ini.set_int(COMPUTER_SECTION, "Top", top)
        ini.set_int(COMPUTER_SECTION, "Width", width)
        ini.set_int(COMPUTER_SECTION, "Height", height)
        self.position = (left, top, width, height)

    def load_position(self, ini):
        """Read ``(left, top, width, height)`` from ``ini``, with defaults."""
        d_left, d_top, d_width, d_height = DEFAULT_POSITION
        self.position = (
            ini.get_int(COMPUTER_SECTION, "Left", d_left),
            ini.get_int(COMPUTER_SECTION, "Top", d_top),
            ini.get_int(COMPUTER_SECTION, "Width", d_width),
            ini.get_int(COMPUTER_SECTION, "Height", d_height),
        )
        return self.position