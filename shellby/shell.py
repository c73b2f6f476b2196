"""The command interpreter: reading lines, running builtins and programs."""

import os
import re
import signal
import subprocess
import sys
from collections.abc import Iterator, Mapping, Sequence
from typing import IO, TextIO

from .aliases import AliasTable
from .builtins import ShellExit, get_builtin
from .environment import Environment
from .errors import cant_open, not_found, permission_denied, syntax_error
from .expansion import expand_variables
from .lexer import partition_operators, split_tokens
from .locate import find_command

__all__ = ["Shell", "main"]

PROMPT = "$ "
_OPERATOR_STARTS = (";", "&", "|")
_LEADING_NEWLINES = re.compile(r"\A\n+")
_NEWLINE_RUNS = re.compile(r"\n+")


def _fileno(stream: IO) -> int | None:
    """Return the descriptor behind ``stream``, or None if it has none."""
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None


def _access_denied(path: str) -> bool:
    try:
        os.stat(path)
    except PermissionError:
        return True
    except OSError:
        return False
    return False


def _join_script_lines(content: str) -> str:
    """Turn the lines of a script into one ``;``-separated command line."""
    content = _LEADING_NEWLINES.sub(lambda match: " " * len(match.group()), content)
    return _NEWLINE_RUNS.sub(lambda match: ";" + " " * (len(match.group()) - 1), content)


def _split_on_semicolons(tokens: Sequence[str]) -> Iterator[list[str]]:
    segment: list[str] = []
    for token in tokens:
        if token.startswith(";"):
            yield segment
            segment = []
        else:
            segment.append(token)
    yield segment


class Shell:
    """A shell session with its own environment, aliases and history count."""

    def __init__(
        self,
        name: str = "hsh",
        environ: Mapping[str, str] | Environment | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        if environ is None:
            environ = os.environ
        if isinstance(environ, Environment):
            self.env = environ
        else:
            self.env = Environment.from_mapping(environ)
        self.name = name
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.aliases = AliasTable()
        self.hist = 1
        self.last_status = 0

    def write(self, text: str) -> None:
        """Write text to the shell's standard output."""
        self.stdout.write(text)
        self.stdout.flush()

    def report(self, message: str) -> None:
        """Write a diagnostic to the shell's standard error."""
        self.stderr.write(message)
        self.stderr.flush()

    def check_syntax(self, tokens: Sequence[str]) -> int:
        """Return 2 after reporting a misplaced operator, otherwise 0."""
        for index, token in enumerate(tokens):
            if not token.startswith(_OPERATOR_STARTS):
                continue
            if index == 0 or token[1:2] == ";":
                self.report(syntax_error(self.name, self.hist, token))
                return 2
            following = tokens[index + 1] if index + 1 < len(tokens) else None
            if following is not None and following.startswith(_OPERATOR_STARTS):
                self.report(syntax_error(self.name, self.hist, following))
                return 2
        return 0

    def run_line(self, line: str) -> int:
        """Run one command line and return the last exit status.

        ShellExit raised by ``exit`` is passed on to the caller.
        """
        expanded = expand_variables(line, self.last_status, self.env)
        self._run_tokens(split_tokens(partition_operators(expanded), " "))
        return self.last_status

    def run_stream(self, stream: TextIO, interactive: bool = False) -> int:
        """Run every line read from ``stream`` and return the final status."""
        try:
            while True:
                if interactive:
                    self.write(PROMPT)
                line = stream.readline()
                if not line:
                    if interactive:
                        self.write("\n")
                    return self.last_status
                if line == "\n":
                    self.hist += 1
                    continue
                self.run_line(line[:-1] if line.endswith("\n") else line)
        except ShellExit as request:
            return self._exit_status(request)

    def run_file(self, path: str) -> int:
        """Run the commands stored in a script file and return the status."""
        self.hist = 0
        try:
            with open(path, encoding="utf-8", errors="surrogateescape") as script:
                content = script.read()
        except OSError:
            self.report(cant_open(self.name, self.hist, path))
            self.last_status = 127
            return 127
        if not content:
            return self.last_status
        line = expand_variables(_join_script_lines(content), self.last_status, self.env)
        try:
            self._run_tokens(split_tokens(partition_operators(line), " "))
        except ShellExit as request:
            return self._exit_status(request)
        return self.last_status

    def execute(self, args: Sequence[str]) -> int:
        """Start the program named by ``args[0]`` and return its exit status."""
        command = args[0]
        if command.startswith(("/", ".")):
            path: str | None = command
        else:
            path = find_command(command, self.env)

        if path is None or not os.path.exists(path):
            if path is not None and _access_denied(path):
                self.report(permission_denied(self.name, self.hist, command))
                return 126
            self.report(not_found(self.name, self.hist, command))
            return 127
        return self._run_program(path, args)

    def _run_program(self, path: str, args: Sequence[str]) -> int:
        self.stdout.flush()
        self.stderr.flush()
        out_fd = _fileno(self.stdout)
        err_fd = _fileno(self.stderr)
        try:
            completed = subprocess.run(
                list(args),
                executable=path,
                env=self.env.as_dict(),
                stdout=out_fd if out_fd is not None else subprocess.PIPE,
                stderr=err_fd if err_fd is not None else subprocess.PIPE,
                check=False,
            )
        except PermissionError:
            self.report(permission_denied(self.name, self.hist, args[0]))
            return 126
        except OSError:
            return 0
        if out_fd is None and completed.stdout:
            self.write(completed.stdout.decode(errors="replace"))
        if err_fd is None and completed.stderr:
            self.report(completed.stderr.decode(errors="replace"))
        # A program killed by a signal has no exit status of its own.
        return completed.returncode if completed.returncode >= 0 else 0

    def _run_tokens(self, tokens: Sequence[str]) -> None:
        if not tokens:
            return
        if self.check_syntax(tokens):
            self.last_status = 2
            return
        for segment in _split_on_semicolons(tokens):
            self._run_segment(segment)

    def _run_segment(self, words: Sequence[str]) -> None:
        command: list[str] = []
        for word in words:
            if word.startswith(("||", "&&")):
                self._run_command(command)
                succeeded = self.last_status == 0
                if succeeded == word.startswith("||"):
                    return
                command = []
            else:
                command.append(word)
        self._run_command(command)

    def _run_command(self, words: Sequence[str]) -> None:
        if not words:
            return
        args = self.aliases.replace(words)
        builtin = get_builtin(args[0])
        try:
            if builtin is not None:
                self.last_status = builtin(self, args[1:])
            else:
                self.last_status = self.execute(args)
        finally:
            self.hist += 1

    def _exit_status(self, request: ShellExit) -> int:
        if request.status is not None:
            self.last_status = request.status
        return self.last_status


def main(argv: Sequence[str] | None = None) -> int:
    """Run a script named on the command line, or read commands from stdin."""
    if argv is None:
        argv = sys.argv
    name = argv[0] if argv else "hsh"
    shell = Shell(name)
    if len(argv) > 1:
        return shell.run_file(argv[1])

    interactive = sys.stdin.isatty()
    if not interactive:
        return shell.run_stream(sys.stdin, False)

    def _new_prompt(signum: int, frame: object) -> None:
        shell.write("\n" + PROMPT)

    previous = signal.signal(signal.SIGINT, _new_prompt)
    try:
        return shell.run_stream(sys.stdin, True)
    finally:
        signal.signal(signal.SIGINT, previous)