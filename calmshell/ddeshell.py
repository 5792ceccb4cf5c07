"""Program Manager style DDE commands that edit the start menu file.

Installers send command strings such as ``[CreateGroup(MyApp)]`` and
``[AddItem(C:\\APP\\APP.EXE,My App)]``. They are turned into edits of the
start menu INI file. Groups become sections under ``Start\\Programs``.
"""

from __future__ import annotations

from .inifile import IniFile

DDE_SERVICE = "PROGMAN"
DDE_TOPIC = "PROGMAN"
ROOT_SECTION = "Start"
PROGRAMS_SECTION = "Start\\Programs"
MAX_CONVERSATIONS = 8

SHOW_NORMAL = 1
SHOW_MINIMIZED = 2

_WHITESPACE = " \t"


def parse_arg(text):
    """Parse one argument from the start of ``text``.

    The argument may be quoted. Returns ``(value, rest)``. ``rest`` starts
    just after a following comma if there is one, or else at the closing
    parenthesis or the end.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    if pos < length and text[pos] == '"':
        end = text.find('"', pos + 1)
        if end < 0:
            value = text[pos + 1 :]
            pos = length
        else:
            value = text[pos + 1 : end]
            pos = end + 1
    else:
        end = pos
        while end < length and text[end] not in ",)":
            end += 1
        value = text[pos:end].rstrip(_WHITESPACE)
        pos = end
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    if pos < length and text[pos] == ",":
        pos += 1
    return value, text[pos:]


def parse_args(text, count):
    """Parse ``count`` arguments from ``text``; missing ones are ``""``."""
    values = []
    for _ in range(count):
        value, text = parse_arg(text)
        values.append(value)
    return values


def split_commands(text):
    """Split ``[Name(args)]...`` into a list of ``(name, args)`` pairs.

    ``args`` is the text after the opening parenthesis, up to the closing
    bracket. It is None for a command that has no parenthesis.
    """
    commands = []
    pos = 0
    length = len(text)
    while True:
        start = text.find("[", pos)
        if start < 0:
            break
        end = start + 1
        while end < length and text[end] not in "(]":
            end += 1
        name = text[start + 1 : end].rstrip(_WHITESPACE)
        if end >= length or text[end] != "(":
            commands.append((name, None))
            pos = end
            continue
        close = text.find("]", end + 1)
        if close < 0:
            close = length
        commands.append((name, text[end + 1 : close]))
        pos = close + 1
    return commands


def _group_section(name):
    return f"{PROGRAMS_SECTION}\\{name}"


def _display_name(command):
    cut = max(command.rfind("\\"), command.rfind(":"))
    name = command[cut + 1 :]
    dot = name.rfind(".")
    return name[:dot] if dot > 0 else name


def _leading_int(text):
    digits = ""
    for char in text:
        if not char.isdigit():
            break
        digits += char
    return int(digits) if digits else 0


class _Conversation:
    __slots__ = ("group",)

    def __init__(self):
        self.group = ""


class DdeShell:
    """Keeps the open conversations and carries out their commands.

    ``start_ini`` is the start menu file (a path or an IniFile);
    ``on_exit()`` is called for ``[ExitProgman]``.
    """

    def __init__(self, start_ini, on_exit=None):
        self.ini = start_ini if isinstance(start_ini, IniFile) else IniFile(start_ini)
        self._on_exit = on_exit
        self._conversations: dict[object, _Conversation] = {}
        self._handlers = {
            "creategroup": self._create_group,
            "showgroup": self._show_group,
            "additem": self._add_item,
            "replaceitem": self._delete_item,
            "deleteitem": self._delete_item,
            "deletegroup": self._delete_group,
            "exitprogman": self._exit,
        }

    def _open(self, client):
        if len(self._conversations) >= MAX_CONVERSATIONS:
            return None
        conv = _Conversation()
        self._conversations[client] = conv
        return conv

    def on_initiate(self, client, app=None, topic=None):
        """Accept a conversation for PROGMAN/PROGMAN; empty names match anything."""
        for name, wanted in ((app, DDE_SERVICE), (topic, DDE_TOPIC)):
            if name and name.casefold() != wanted.casefold():
                return False
        self._open(client)
        return True

    def on_execute(self, client, commands):
        """Carry out a command string from ``client``.

        Returns the acknowledgement: False when a command had no argument
        list or there was no command string at all.
        """
        conv = self._conversations.get(client) or self._open(client) or _Conversation()
        if commands is None:
            return False
        if isinstance(commands, (bytes, bytearray)):
            commands = bytes(commands).split(b"\0", 1)[0].decode("latin-1")
        ok = True
        for name, args in split_commands(commands):
            if args is None:
                ok = False
                continue
            handler = self._handlers.get(name.casefold())
            if handler is not None:
                handler(args, conv)
        return ok

    def on_terminate(self, client):
        """Close the conversation with ``client``."""
        self._conversations.pop(client, None)

    def current_group(self, client):
        """Return the section of the client's current group.

        Returns ``""`` when the client has no current group, and None for an
        unknown client.
        """
        conv = self._conversations.get(client)
        return None if conv is None else conv.group

    def _ensure_folder(self, section, name):
        key = f"{name}*"
        if not self.ini.has_key(section, key):
            self.ini.set_str(section, key, "")

    @staticmethod
    def _target_section(conv):
        return conv.group or PROGRAMS_SECTION

    def _create_group(self, args, conv):
        name, _ = parse_arg(args)
        if not name:
            return
        self._ensure_folder(ROOT_SECTION, "Programs")
        self._ensure_folder(PROGRAMS_SECTION, name)
        conv.group = _group_section(name)

    def _show_group(self, args, conv):
        name, _ = parse_arg(args)
        if name:
            conv.group = _group_section(name)

    def _add_item(self, args, conv):
        command, name, icon_file, icon_index, _hotkey, minimize, work_dir = parse_args(args, 7)
        if not command:
            return
        if not name:
            name = _display_name(command)
        show_mode = SHOW_MINIMIZED if minimize and minimize[0] != "0" else SHOW_NORMAL
        value = f"{command};{work_dir};{show_mode};{icon_file};{_leading_int(icon_index)}"
        self.ini.set_str(self._target_section(conv), name, value)

    def _delete_item(self, args, conv):
        name, _ = parse_arg(args)
        if name:
            self.ini.delete_key(self._target_section(conv), name)

    def _delete_group(self, args, conv):
        name, _ = parse_arg(args)
        if not name:
            return
        section = _group_section(name)
        self.ini.delete_section(section)
        self.ini.delete_key(PROGRAMS_SECTION, f"{name}*")
        if conv.group.casefold() == section.casefold():
            conv.group = ""

    def _exit(self, args, conv):
        if self._on_exit is not None:
            self._on_exit()