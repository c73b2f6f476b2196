"""Diagnostic messages printed by the shell on standard error."""

__all__ = [
    "env_error",
    "alias_not_found",
    "exit_error",
    "cd_error",
    "syntax_error",
    "permission_denied",
    "not_found",
    "cant_open",
]


def env_error(name: str, hist: int, command: str) -> str:
    """Message for a failed ``setenv`` or ``unsetenv``."""
    return f"{name}: {hist}: {command}: Unable to add/remove from environment\n"


def alias_not_found(alias: str) -> str:
    """Message for an ``alias NAME`` lookup that found nothing."""
    return f"alias: {alias} not found\n"


def exit_error(name: str, hist: int, argument: str) -> str:
    """Message for an ``exit`` status that is not a valid number."""
    return f"{name}: {hist}: exit: Illegal number: {argument}\n"


def cd_error(name: str, hist: int, argument: str) -> str:
    """Message for a failed ``cd``.

    Arguments starting with ``-`` are reported as illegal options and cut
    to their first two characters.
    """
    if argument.startswith("-"):
        return f"{name}: {hist}: cd: Illegal option {argument[:2]}\n"
    return f"{name}: {hist}: cd: can't cd to {argument}\n"


def syntax_error(name: str, hist: int, token: str) -> str:
    """Message for a misplaced ``;``, ``&&`` or ``||``."""
    return f'{name}: {hist}: Syntax error: "{token}" unexpected\n'


def permission_denied(name: str, hist: int, command: str) -> str:
    """Message for a command that exists but cannot be executed."""
    return f"{name}: {hist}: {command}: Permission denied\n"


def not_found(name: str, hist: int, command: str) -> str:
    """Message for a command that cannot be located."""
    return f"{name}: {hist}: {command}: not found\n"


def cant_open(name: str, hist: int, path: str) -> str:
    """Message for a script file that cannot be opened."""
    return f"{name}: {hist}: Can't open {path}\n"