"""Asking whether dropped items are to be copied or moved."""

from __future__ import annotations

import enum


class DropAction(enum.IntEnum):
    """The answer to a drop question."""

    CANCEL = 2
    COPY = 101
    MOVE = 102


def drop_prompt(count, source, dest):
    """Return the question shown before a drop."""
    return f"Copy or Move {count} item(s) from {source} to {dest}?"


def ask_drop(count, source, dest, ask):
    """Ask ``ask(prompt)`` and map yes/no/None to copy/move/cancel."""
    answer = ask(drop_prompt(count, source, dest))
    if answer is True:
        return DropAction.COPY
    if answer is False:
        return DropAction.MOVE
    return DropAction.CANCEL