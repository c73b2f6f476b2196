"""The shell's private copy of the process environment."""

from collections.abc import Iterable, Iterator, Mapping

__all__ = ["Environment"]


class Environment:
    """An ordered list of ``NAME=VALUE`` entries.

    Lookups match the first entry that begins with the requested name.
    """

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries = list(entries)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "Environment":
        """Build an environment from a name-to-value mapping."""
        return cls(f"{name}={value}" for name, value in mapping.items())

    def find(self, name: str) -> int | None:
        """Return the position of the first entry beginning with ``name``."""
        return next(
            (index for index, entry in enumerate(self._entries) if entry.startswith(name)),
            None,
        )

    def get(self, name: str) -> str | None:
        """Return the value of the matching entry, or None."""
        index = self.find(name)
        if index is None:
            return None
        return self._entries[index].partition("=")[2]

    def set(self, name: str, value: str) -> None:
        """Replace the matching entry, or append a new one."""
        entry = f"{name}={value}"
        index = self.find(name)
        if index is None:
            self._entries.append(entry)
        else:
            self._entries[index] = entry

    def unset(self, name: str) -> bool:
        """Remove the matching entry; report whether one was removed."""
        index = self.find(name)
        if index is None:
            return False
        del self._entries[index]
        return True

    def entries(self) -> list[str]:
        """Return a copy of the entries in order."""
        return list(self._entries)

    def as_dict(self) -> dict[str, str]:
        """Return the entries as a mapping, earlier entries winning."""
        result: dict[str, str] = {}
        for entry in self._entries:
            name, _, value = entry.partition("=")
            result.setdefault(name, value)
        return result

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)