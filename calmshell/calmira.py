"""Start-up sequence of the shell and dispatch of its control messages."""

from __future__ import annotations

import argparse
import enum
import sys

from .compsys import ComputerWindow
from .ddeshell import DdeShell
from .desk import Desktop
from .fileman import FileManager
from .inifile import IniFile

SHOW_NORMAL = 1
SHOW = 5
SHOW_MIN_NO_ACTIVE = 7

_TOKEN_LIMIT = 143
_PROGRAM_LIMIT = 143
_ARGS_LIMIT = 255

WINDOWS_SECTION = "Windows"


class CalmiraMessage(enum.Enum):
    """Requests the shell's hidden main window answers."""

    PREV_INSTANCE = "previnstance"
    EXPLORER = "explorer"
    TASKMAN = "taskman"
    TOGGLE_DESKTOP = "toggledesktop"
    START_PROPERTIES = "startprop"
    DDE_INITIATE = "dde_initiate"
    DDE_EXECUTE = "dde_execute"
    DDE_TERMINATE = "dde_terminate"


def split_program_list(line):
    """Split a space-separated ``Load=``/``Run=`` list into program names.

    Names longer than the profile buffer are cut into pieces of that size.
    """
    programs = []
    for token in line.split(" "):
        programs.extend(
            token[start : start + _TOKEN_LIMIT]
            for start in range(0, len(token), _TOKEN_LIMIT)
        )
    return programs


def load_and_run(load_line, run_line, launch):
    """Start the ``Load=`` programs minimised, then the ``Run=`` ones normally.

    ``launch(program, show)`` starts one program. Returns the
    ``(program, show)`` pairs in the order they were launched.
    """
    started = []
    for line, show in ((load_line, SHOW_MIN_NO_ACTIVE), (run_line, SHOW_NORMAL)):
        for program in split_program_list(line or ""):
            launch(program, show)
            started.append((program, show))
    return started


def split_command_line(command):
    """Split a command line into ``(program, arguments)``."""
    text = (command or "").lstrip(" ")
    cut = text.find(" ")
    if cut < 0:
        cut = len(text)
    program = text[:cut][:_PROGRAM_LIMIT]
    arguments = text[cut:].lstrip(" ")[:_ARGS_LIMIT]
    return program, arguments


def run_command_line(command, launch):
    """Start the program named first on ``command``; returns it or None."""
    program, _arguments = split_command_line(command)
    if not program:
        return None
    launch(program, SHOW)
    return program


class Shell:
    """Routes control messages to the Computer window, desktop and DDE server.

    Requests meant for the taskbar are collected in ``requests``; the window
    last brought to the front is kept in ``foreground``.
    """

    def __init__(self, computer=None, desktop=None, dde=None):
        self.computer = computer
        self.desktop = desktop
        self.dde = dde
        self.foreground = None
        self.requests = []

    def handle_message(self, message, argument=None):
        """Carry out ``message``; returns what the addressed part answered."""
        message = CalmiraMessage(message)
        if message is CalmiraMessage.PREV_INSTANCE:
            if self.computer is not None:
                self.foreground = self.computer
            return None
        if message is CalmiraMessage.EXPLORER:
            if self.computer is None:
                return None
            self.foreground = self.computer
            if argument:
                return self.computer.navigate_to(argument)
            self.computer.visible = True
            return self.computer.path
        if message in (CalmiraMessage.TASKMAN, CalmiraMessage.START_PROPERTIES):
            self.requests.append(message)
            return None
        if message is CalmiraMessage.TOGGLE_DESKTOP:
            return self.desktop.toggle_all() if self.desktop is not None else None
        if self.dde is None:
            return False if message is not CalmiraMessage.DDE_TERMINATE else None
        if message is CalmiraMessage.DDE_INITIATE:
            client, app, topic = argument
            return self.dde.on_initiate(client, app, topic)
        if message is CalmiraMessage.DDE_EXECUTE:
            client, commands = argument
            return self.dde.on_execute(client, commands)
        self.dde.on_terminate(argument)
        return None


def _parser():
    parser = argparse.ArgumentParser(prog="calmshell", description="Desktop shell start-up.")
    parser.add_argument("--ini", default="calmira.ini", help="shell settings file")
    parser.add_argument("--start-ini", default="start.ini", help="start menu file")
    parser.add_argument("--win-ini", default=None, help="file holding Load= and Run=")
    parser.add_argument("--shell", action="store_true", help="act as the system shell")
    parser.add_argument("command", nargs=argparse.REMAINDER, help="program to start")
    return parser


def main(argv=None):
    """Run the start-up sequence and store the shell's state afterwards."""
    args = _parser().parse_args(argv)
    manager = FileManager(report=lambda text: print(text, file=sys.stderr))

    def launch(program, show):
        return manager.execute(program)

    ini = IniFile(args.ini)
    desktop = Desktop()
    desktop.load(ini)
    computer = ComputerWindow()
    computer.load_position(ini)
    shell = Shell(computer, desktop, DdeShell(args.start_ini))

    if args.shell and args.win_ini:
        win = IniFile(args.win_ini)
        load_and_run(
            win.get_str(WINDOWS_SECTION, "Load", ""),
            win.get_str(WINDOWS_SECTION, "Run", ""),
            launch,
        )
    run_command_line(" ".join(args.command), launch)

    shell.desktop.save(ini)
    shell.computer.save_position(ini, *shell.computer.position)
    return 0


if __name__ == "__main__":
    sys.exit(main())