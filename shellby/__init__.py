"""A small UNIX command interpreter with builtins, aliases, variable expansion and command chaining."""

__version__ = "0.1.0"