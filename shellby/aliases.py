"""Alias definitions and their substitution into command words."""

from collections.abc import Iterator, Sequence

__all__ = ["AliasTable", "parse_assignment"]

_QUOTES = "'\""


def parse_assignment(argument: str) -> tuple[str, str] | None:
    """Split ``NAME=VALUE`` into its name and value.

    Every quote character is removed from the value. Returns None when the
    argument holds no ``=``.
    """
    name, sep, value = argument.partition("=")
    if not sep:
        return None
    return name, "".join(char for char in value if char not in _QUOTES)


class AliasTable:
    """Aliases kept in the order they were first defined."""

    def __init__(self) -> None:
        self._aliases: dict[str, str] = {}

    def define(self, name: str, value: str) -> None:
        """Set an alias; an existing alias keeps its place in the order."""
        self._aliases[name] = value

    def get(self, name: str) -> str | None:
        """Return the value of an alias, or None."""
        return self._aliases.get(name)

    def items(self) -> list[tuple[str, str]]:
        """Return every ``(name, value)`` pair in definition order."""
        return list(self._aliases.items())

    def format(self, name: str) -> str:
        """Render an alias as ``name='value'`` followed by a newline.

        Raises KeyError if no such alias exists.
        """
        try:
            value = self._aliases[name]
        except KeyError:
            raise KeyError(name) from None
        return f"{name}='{value}'\n"

    def replace(self, args: Sequence[str]) -> list[str]:
        """Return the words with every alias name replaced by its value.

        A replaced word is looked up again, so aliases chain; a cycle stops
        at the first name seen twice. Commands starting with ``alias`` are
        left alone.
        """
        if not args or args[0] == "alias":
            return list(args)
        result = []
        for arg in args:
            seen: set[str] = set()
            while arg in self._aliases and arg not in seen:
                seen.add(arg)
                arg = self._aliases[arg]
            result.append(arg)
        return result

    def __contains__(self, name: object) -> bool:
        return name in self._aliases

    def __iter__(self) -> Iterator[str]:
        return iter(self._aliases)

    def __len__(self) -> int:
        return len(self._aliases)