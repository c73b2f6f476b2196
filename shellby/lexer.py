"""Splitting of command lines into words and control operators."""

__all__ = ["strip_comment", "partition_operators", "split_tokens"]


def strip_comment(line: str) -> str:
    """Cut the line at the first ``#`` that starts a word."""
    for index, char in enumerate(line):
        if char == "#" and (index == 0 or line[index - 1] == " "):
            return line[:index]
    return line


def partition_operators(line: str) -> str:
    """Strip a trailing comment and put spaces around ``;``, ``&&`` and ``||``."""
    line = strip_comment(line)
    previous_chars = [""] + list(line[:-1])
    following_chars = list(line[1:]) + [""]
    out: list[str] = []

    for index, (previous, current, following) in enumerate(
        zip(previous_chars, line, following_chars)
    ):
        if index == 0:
            if current == ";":
                out.append(";")
                if following not in (" ", ";"):
                    out.append(" ")
                continue
        elif current == ";":
            if following == ";" and previous not in (" ", ";"):
                out.append(" ;")
                continue
            if previous == ";" and following != " ":
                out.append("; ")
                continue
            if previous != " ":
                out.append(" ")
            out.append(";")
            if following != " ":
                out.append(" ")
            continue
        elif current in ("&", "|"):
            if following == current and previous != " ":
                out.append(" ")
            elif previous == current and following != " ":
                out.append(current + " ")
                continue
        out.append(current)

    return "".join(out)


def split_tokens(line: str, delim: str) -> list[str]:
    """Split ``line`` on the separator character ``delim``, dropping empty words."""
    if len(delim) != 1:
        raise ValueError("delimiter must be a single character")
    return [token for token in line.split(delim) if token]