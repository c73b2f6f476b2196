"""Commands that the shell runs itself instead of starting a program."""

import os
import stat
from collections.abc import Callable, Sequence
from typing import Protocol

from .aliases import AliasTable, parse_assignment
from .environment import Environment
from .errors import alias_not_found, cd_error, env_error, exit_error
from .help import help_text

__all__ = [
    "ShellExit",
    "get_builtin",
    "builtin_exit",
    "builtin_env",
    "builtin_setenv",
    "builtin_unsetenv",
    "builtin_cd",
    "builtin_alias",
    "builtin_help",
]

_MAX_STATUS = 2**31 - 1
_MAX_DIGITS = 11


class _ShellState(Protocol):
    name: str
    hist: int
    env: Environment
    aliases: AliasTable

    def write(self, text: str) -> None: ...

    def report(self, message: str) -> None: ...


Builtin = Callable[[_ShellState, Sequence[str]], int]


class ShellExit(Exception):
    """Raised by ``exit`` to end the shell.

    ``status`` is None when the shell should end with the status of the
    last command it ran.
    """

    def __init__(self, status: int | None) -> None:
        super().__init__(status)
        self.status = status


def builtin_exit(shell: _ShellState, args: Sequence[str]) -> int:
    """End the shell, or return 2 if the status is not a valid number."""
    if not args:
        raise ShellExit(None)
    argument = args[0]
    digits = argument[1:] if argument.startswith("+") else argument
    limit = _MAX_DIGITS + (1 if argument.startswith("+") else 0)
    if (
        len(argument) > limit
        or not all("0" <= char <= "9" for char in digits)
        or (digits and int(digits) > _MAX_STATUS)
    ):
        shell.report(exit_error(shell.name, shell.hist, argument))
        return 2
    raise ShellExit(int(digits) if digits else 0)


def builtin_env(shell: _ShellState, args: Sequence[str]) -> int:
    """Print every environment entry, one per line."""
    for entry in shell.env:
        shell.write(entry + "\n")
    return 0


def builtin_setenv(shell: _ShellState, args: Sequence[str]) -> int:
    """Set a variable to a value, replacing the entry that matches it."""
    if len(args) < 2:
        shell.report(env_error(shell.name, shell.hist, "setenv"))
        return -1
    shell.env.set(args[0], args[1])
    return 0


def builtin_unsetenv(shell: _ShellState, args: Sequence[str]) -> int:
    """Remove the entry matching a variable, if there is one."""
    if not args:
        shell.report(env_error(shell.name, shell.hist, "unsetenv"))
        return -1
    shell.env.unset(args[0])
    return 0


def _change_dir(target: str | None) -> None:
    if target is None:
        return
    try:
        os.chdir(target)
    except OSError:
        pass


def _is_enterable(path: str) -> bool:
    try:
        mode = os.stat(path).st_mode
    except OSError:
        return False
    return stat.S_ISDIR(mode) and bool(mode & stat.S_IXUSR)


def builtin_cd(shell: _ShellState, args: Sequence[str]) -> int:
    """Change directory and update PWD and OLDPWD.

    With no argument go to $HOME; with ``-`` or ``--`` go to $OLDPWD,
    printing the new directory for ``-``.
    """
    try:
        oldpwd = os.getcwd()
    except OSError:
        return -1

    argument = args[0] if args else None
    if argument is None:
        _change_dir(shell.env.get("HOME"))
    elif argument.startswith("-"):
        if argument not in ("-", "--"):
            shell.report(cd_error(shell.name, shell.hist, argument))
            return 2
        _change_dir(shell.env.get("OLDPWD"))
    elif _is_enterable(argument):
        _change_dir(argument)
    else:
        shell.report(cd_error(shell.name, shell.hist, argument))
        return 2

    try:
        pwd = os.getcwd()
    except OSError:
        return -1
    shell.env.set("OLDPWD", oldpwd)
    shell.env.set("PWD", pwd)
    if argument == "-":
        shell.write(pwd + "\n")
    return 0


def builtin_alias(shell: _ShellState, args: Sequence[str]) -> int:
    """List, show or define aliases; return 1 if a named alias is missing."""
    if not args:
        for name in shell.aliases:
            shell.write(shell.aliases.format(name))
        return 0
    status = 0
    for argument in args:
        assignment = parse_assignment(argument)
        if assignment is not None:
            shell.aliases.define(*assignment)
        elif argument in shell.aliases:
            shell.write(shell.aliases.format(argument))
        else:
            shell.report(alias_not_found(argument))
            status = 1
    return status


def builtin_help(shell: _ShellState, args: Sequence[str]) -> int:
    """Print help for a builtin, or the overview with no argument."""
    topic = args[0] if args else None
    try:
        shell.write(help_text(topic))
    except KeyError:
        shell.report(shell.name)
    return 0


_BUILTINS: dict[str, Builtin] = {
    "exit": builtin_exit,
    "env": builtin_env,
    "setenv": builtin_setenv,
    "unsetenv": builtin_unsetenv,
    "cd": builtin_cd,
    "alias": builtin_alias,
    "help": builtin_help,
}


def get_builtin(command: str) -> Builtin | None:
    """Return the builtin named ``command``, or None."""
    return _BUILTINS.get(command)