"""Help texts for the builtin commands."""

__all__ = ["help_text"]

_ALL = (
    "Shellby\nThese shell commands are defined internally.\n"
    "Type 'help' to see this list.\nType 'help name' to find "
    "out more about the function 'name'.\n\n  alias   \t"
    "alias [NAME[='VALUE'] ...]\n  cd    \tcd   "
    "[DIRECTORY]\n  exit    \texit [STATUS]\n  env     \tenv"
    "\n  setenv  \tsetenv [VARIABLE] [VALUE]\n  unsetenv\t"
    "unsetenv [VARIABLE]\n"
)

_TOPICS = {
    "alias": (
        "alias: alias [NAME[='VALUE'] ...]\n\tHandles aliases.\n"
        "\n\talias: Prints a list of all aliases, one per line, in "
        "the format NAME='VALUE'.\n\talias name [name2 ...]:prints"
        " the aliases name, name2, etc. one per line, in the "
        "form NAME='VALUE'.\n\talias NAME='VALUE' [...]: Defines"
        " an alias for each NAME whose VALUE is given. If NAME "
        "is already an alias, replace its value with VALUE.\n"
    ),
    "cd": (
        "cd: cd [DIRECTORY]\n\tChanges the current directory of the"
        " process to DIRECTORY.\n\n\tIf no argument is given, the "
        "command is interpreted as cd $HOME. If the argument '-' is"
        " given, the command is interpreted as cd $OLDPWD.\n\n"
        "\tThe environment variables PWD and OLDPWD are updated "
        "after a change of directory.\n"
    ),
    "exit": (
        "exit: exit [STATUS]\n\tExits the shell.\n\n\tThe "
        "STATUS argument is the integer used to exit the shell."
        " If no argument is given, the command is interpreted as"
        " exit 0.\n"
    ),
    "env": "env: env\n\tPrints the current environment.\n",
    "setenv": (
        "setenv: setenv [VARIABLE] [VALUE]\n\tInitializes a new"
        "environment variable, or modifies an existing one.\n\n"
        "\tUpon failure, prints a message to stderr.\n"
    ),
    "unsetenv": (
        "unsetenv: unsetenv [VARIABLE]\n\tRemoves an "
        "environmental variable.\n\n\tUpon failure, prints a "
        "message to stderr.\n"
    ),
    "help": (
        "help: help\n\tSee all possible Shellby builtin commands.\n"
        "\n      help [BUILTIN NAME]\n\tSee specific information on each "
        "builtin command.\n"
    ),
}


def help_text(topic: str | None) -> str:
    """Return the help for ``topic``, or the overview when it is None.

    Raises KeyError for a topic that is not a builtin.
    """
    if topic is None:
        return _ALL
    try:
        return _TOPICS[topic]
    except KeyError:
        raise KeyError(topic) from None