"""Lookup of commands in the directories listed by PATH."""

import os

from .environment import Environment
from .lexer import split_tokens

__all__ = ["fill_path_dir", "path_dirs", "find_command"]


def fill_path_dir(path: str, pwd: str) -> str:
    """Replace leading, doubled and trailing colons with ``pwd``."""
    last = len(path) - 1
    parts = []
    for index, char in enumerate(path):
        if char != ":":
            parts.append(char)
        elif index == 0:
            parts.append(pwd + ":")
        elif index == last or path[index + 1] == ":":
            parts.append(":" + pwd)
        else:
            parts.append(":")
    return "".join(parts)


def path_dirs(path: str, pwd: str) -> list[str]:
    """Return the directories of a PATH value, empty entries meaning ``pwd``."""
    return split_tokens(fill_path_dir(path, pwd), ":")


def find_command(command: str, env: Environment) -> str | None:
    """Return the first ``dir/command`` on PATH that exists, or None."""
    path = env.get("PATH")
    if path is None:
        return None
    pwd = env.get("PWD")
    if pwd is None:
        pwd = os.getcwd()
    for directory in path_dirs(path, pwd):
        candidate = f"{directory}/{command}"
        if os.path.exists(candidate):
            return candidate
    return None