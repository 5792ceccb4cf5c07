"""Copying, moving, deleting and launching files for the shell windows."""

from __future__ import annotations

import enum
import errno
import os
import shlex
import shutil
import stat
import subprocess
import sys

from .directory import get_name, get_parent, join_path, make_tree

_CHUNK = 4096
_PROGRAM_EXTENSIONS = " com exe bat pif "

_EXEC_MESSAGES = {
    1: "Out of memory",
    2: "File not found",
    3: "File not found",
    4: "Out of memory",
    5: "Access denied",
    6: "Invalid program file",
    7: "Invalid program file",
    8: "Invalid program file",
    9: "Invalid program file",
    10: "Invalid program file",
    11: "Invalid program file",
    12: "Invalid program file",
    13: "Invalid program file",
    14: "Not a Windows application",
    15: "Requires a newer version of Windows",
    16: "Cannot start a second instance",
    17: "Invalid program file",
    18: "Invalid program file",
    19: "Compressed program file",
    20: "Application is out of memory",
}
_EXEC_UNKNOWN = "Cannot run or view this file"


class FileOpResult(enum.IntEnum):
    """Outcome of a file operation."""

    OK = 0
    ERROR = 1
    CANCEL = 2
    SKIP = 3


class FileOpError(Exception):
    """A file operation failed and nobody was set up to be told."""


class ExecError(FileOpError):
    """A program could not be started."""

    def __init__(self, code, path):
        self.code = code
        self.path = path
        message = exec_error_message(code) or _EXEC_UNKNOWN
        super().__init__(f"{message}: {path}")


def exec_error_message(code):
    """Return the message for a launch error code, or None for success."""
    if code == 0:
        return None
    return _EXEC_MESSAGES.get(code, _EXEC_UNKNOWN)


def is_program(ext, icon_strings=""):
    """Tell whether extension ``ext`` (without a dot) names a program."""
    search = f" {ext[:7].lower()} "
    return search in icon_strings or search in _PROGRAM_EXTENSIONS


def copy_file_raw(src, dest, progress=None):
    """Copy ``src`` to ``dest`` in chunks, calling ``progress`` after each.

    A partly written destination is removed when the copy fails.
    """
    with open(src, "rb") as fin:
        with open(dest, "wb") as fout:
            try:
                while chunk := fin.read(_CHUNK):
                    fout.write(chunk)
                    if progress is not None:
                        progress()
            except BaseException:
                fout.close()
                try:
                    os.remove(dest)
                except OSError:
                    pass
                raise


def _base_name(path):
    return get_name(os.fspath(path).rstrip("\\/"))


def _launch_code(exc):
    if isinstance(exc, FileNotFoundError):
        return 2
    if isinstance(exc, PermissionError):
        return 5
    if isinstance(exc, OSError) and exc.errno == errno.ENOEXEC:
        return 11
    return 31


class FileManager:
    """File operations with confirmation, error reporting and a recycle bin.

    ``confirm(message)`` answers yes/no questions (None accepts everything),
    ``report(message)`` receives error messages (None raises FileOpError),
    ``recycle(path)`` moves a file to the bin and tells whether it did,
    ``progress()`` is called during long operations.
    """

    def __init__(
        self,
        confirm=None,
        report=None,
        recycle=None,
        progress=None,
        confirm_delete=True,
        confirm_protected=True,
        delete_to_bin=False,
    ):
        self._confirm = confirm
        self._report = report
        self._recycle = recycle
        self._progress = progress
        self.confirm_delete = confirm_delete
        self.confirm_protected = confirm_protected
        self.delete_to_bin = delete_to_bin

    def _ask(self, message):
        return True if self._confirm is None else bool(self._confirm(message))

    def _fail(self, message, error=None):
        if self._report is None:
            raise error if error is not None else FileOpError(message)
        self._report(message)

    def _warn(self, message):
        if self._report is not None:
            self._report(message)

    def _tick(self):
        if self._progress is not None:
            self._progress()

    def _confirm_replace(self, dest, name, confirm):
        return not (confirm and os.path.exists(dest)) or self._ask(
            f"Replace the existing file {name}?"
        )

    def copy_file(self, src, dest_dir, confirm=True):
        """Copy file ``src`` into folder ``dest_dir``."""
        name = _base_name(src)
        dest = join_path(os.fspath(dest_dir), name)
        if not self._confirm_replace(dest, name, confirm):
            return FileOpResult.SKIP
        try:
            copy_file_raw(src, dest, self._progress)
        except OSError:
            self._fail(f"Cannot replace file {name}")
            return FileOpResult.ERROR
        return FileOpResult.OK

    def move_file(self, src, dest_dir, confirm=True):
        """Move file ``src`` into folder ``dest_dir``."""
        name = _base_name(src)
        dest = join_path(os.fspath(dest_dir), name)
        if not self._confirm_replace(dest, name, confirm):
            return FileOpResult.SKIP
        try:
            os.rename(src, dest)
            return FileOpResult.OK
        except OSError:
            pass
        try:
            copy_file_raw(src, dest, self._progress)
        except OSError:
            self._fail(f"Cannot move file {name}")
            return FileOpResult.ERROR
        try:
            os.remove(src)
        except OSError:
            self._warn(f"Cannot delete file {src}")
        return FileOpResult.OK

    def delete_file(self, path, to_bin=True, confirm=True):
        """Delete file ``path``, or hand it to the bin where allowed."""
        name = _base_name(path)
        if confirm and self.confirm_delete and not self._ask(f"Delete {name}?"):
            return FileOpResult.CANCEL
        if to_bin and self.delete_to_bin and self._recycle is not None:
            if self._recycle(path):
                return FileOpResult.OK
        try:
            mode = os.stat(path).st_mode
        except OSError:
            mode = None
        if mode is not None and not mode & stat.S_IWUSR and self.confirm_protected:
            if not self._ask(f"{name} is protected. Do you want to delete it anyway?"):
                return FileOpResult.CANCEL
            os.chmod(path, mode | stat.S_IWUSR)
        try:
            os.remove(path)
        except OSError:
            self._fail(f"Cannot delete file {name}")
            return FileOpResult.ERROR
        return FileOpResult.OK

    def copy_dir(self, src, dest_dir, confirm=True):
        """Copy folder ``src`` and its contents into ``dest_dir``.

        Hidden (dot) entries are not copied. Returns the last result.
        """
        src = os.fspath(src)
        name = _base_name(src)
        dest_sub = join_path(os.fspath(dest_dir), name)
        try:
            make_tree(dest_sub)
        except OSError:
            self._fail(f"Cannot create folder {name}")
            return FileOpResult.ERROR
        result = FileOpResult.OK
        with os.scandir(src) as it:
            entries = sorted(it, key=lambda e: e.name.casefold())
        for entry in entries:
            if entry.name.startswith("."):
                continue
            child = join_path(src, entry.name)
            if entry.is_dir(follow_symlinks=False):
                result = self.copy_dir(child, dest_sub, confirm)
            else:
                result = self.copy_file(child, dest_sub, confirm)
            if result is FileOpResult.CANCEL:
                break
            self._tick()
        return result

    def move_dir(self, src, dest_dir, confirm=True):
        """Move folder ``src`` into ``dest_dir``."""
        dest_sub = join_path(os.fspath(dest_dir), _base_name(src))
        try:
            os.rename(src, dest_sub)
            return FileOpResult.OK
        except OSError:
            pass
        result = self.copy_dir(src, dest_dir, confirm)
        if result is FileOpResult.OK:
            self.delete_dir(src, False, False)
        return result

    def delete_dir(self, path, to_bin=False, confirm=False):
        """Delete folder ``path`` with everything inside it."""
        path = os.fspath(path)
        try:
            with os.scandir(path) as it:
                entries = list(it)
        except OSError:
            entries = []
        for entry in entries:
            child = join_path(path, entry.name)
            if entry.is_dir(follow_symlinks=False):
                self.delete_dir(child, to_bin, False)
            else:
                try:
                    mode = os.lstat(child).st_mode
                    if not mode & stat.S_IWUSR and not entry.is_symlink():
                        os.chmod(child, mode | stat.S_IWUSR)
                    os.remove(child)
                except OSError:
                    pass
            self._tick()
        try:
            os.rmdir(path)
        except OSError:
            self._fail(f"Cannot delete file {path}")
            return FileOpResult.ERROR
        return FileOpResult.OK

    def rename(self, old_path, new_name):
        """Rename ``old_path`` within its folder to ``new_name``."""
        old_path = os.fspath(old_path)
        new_path = get_parent(old_path) + new_name
        try:
            os.rename(old_path, new_path)
        except OSError:
            self._fail(f"Cannot rename {old_path}")
            return False
        return True

    def make_dir(self, parent, name):
        """Create folder ``name`` inside ``parent``."""
        try:
            os.mkdir(join_path(os.fspath(parent), name))
        except OSError:
            self._fail(f"Cannot create folder {name}")
            return False
        return True

    def execute(self, path, params=None, work_dir=None):
        """Start program ``path`` with ``params`` in ``work_dir``."""
        args = shlex.split(params, posix=os.name != "nt") if params else []
        try:
            subprocess.Popen([os.fspath(path), *args], cwd=work_dir or None)
        except OSError as exc:
            error = ExecError(_launch_code(exc), os.fspath(path))
            self._fail(str(error), error)
            return False
        return True

    def default_execute(self, path, params=None, work_dir=None):
        """Open ``path`` with its associated program, else start it directly."""
        if self._shell_open(os.fspath(path), params, work_dir):
            return True
        return self.execute(path, params, work_dir)

    @staticmethod
    def _shell_open(path, params, work_dir):
        if not os.path.exists(path):
            return False
        if os.name == "nt":
            try:
                os.startfile(path, "open", params or "", work_dir or "")
            except OSError:
                return False
            return True
        if os.path.isfile(path) and os.access(path, os.X_OK):
            return False
        opener = "open" if sys.platform == "darwin" else "xdg-open"
        opener_path = shutil.which(opener)
        if opener_path is None:
            return False
        try:
            subprocess.Popen([opener_path, path], cwd=work_dir or None)
        except OSError:
            return False
        return True