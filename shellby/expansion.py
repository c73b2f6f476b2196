"""Expansion of ``$$``, ``$?`` and ``$NAME`` in a command line."""

import os
import re

from .environment import Environment

__all__ = ["expand_variables"]

_NAME = re.compile(r"[^$ ]*")


def expand_variables(
    line: str, last_status: int, env: Environment, pid: int | str | None = None
) -> str:
    """Return ``line`` with its variables replaced.

    ``$$`` becomes the process id, ``$?`` the last exit status and ``$NAME``
    the value of the environment entry that begins with NAME, or nothing.
    A ``$`` at the end of the line or before a space is left as it is.
    Replaced text is scanned again.
    """
    if pid is None:
        pid = os.getpid()
    position = 0
    while True:
        start = line.find("$", position)
        if start == -1:
            return line
        following = line[start + 1 : start + 2]
        if following in ("", " "):
            position = start + 1
            continue
        if following == "$":
            replacement = str(pid)
            end = start + 2
        elif following == "?":
            replacement = str(last_status)
            end = start + 2
        else:
            end = _NAME.match(line, start + 1).end()
            replacement = env.get(line[start + 1 : end]) or ""
        line = line[:start] + replacement + line[end:]
        position = start