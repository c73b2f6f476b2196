import os
from dataclasses import dataclass, field

import pytest

from shellby.aliases import AliasTable
from shellby.builtins import (
    ShellExit,
    builtin_alias,
    builtin_cd,
    builtin_env,
    builtin_exit,
    builtin_help,
    builtin_setenv,
    builtin_unsetenv,
    get_builtin,
)
from shellby.environment import Environment
from shellby.errors import alias_not_found, cd_error, env_error, exit_error
from shellby.help import help_text


@dataclass
class FakeShell:
    name: str = "hsh"
    hist: int = 1
    env: Environment = field(default_factory=Environment)
    aliases: AliasTable = field(default_factory=AliasTable)
    out: list = field(default_factory=list)
    err: list = field(default_factory=list)

    def write(self, text):
        self.out.append(text)

    def report(self, message):
        self.err.append(message)


@pytest.fixture
def shell():
    return FakeShell()


@pytest.mark.parametrize(
    "name, func",
    [
        ("exit", builtin_exit),
        ("env", builtin_env),
        ("setenv", builtin_setenv),
        ("unsetenv", builtin_unsetenv),
        ("cd", builtin_cd),
        ("alias", builtin_alias),
        ("help", builtin_help),
    ],
)
def test_get_builtin_known(name, func):
    assert get_builtin(name) is func


def test_get_builtin_unknown():
    assert get_builtin("ls") is None


def test_exit_without_argument(shell):
    with pytest.raises(ShellExit) as info:
        builtin_exit(shell, [])
    assert info.value.status is None


@pytest.mark.parametrize("argument, status", [("42", 42), ("+7", 7), ("0", 0), ("+", 0)])
def test_exit_with_status(shell, argument, status):
    with pytest.raises(ShellExit) as info:
        builtin_exit(shell, [argument])
    assert info.value.status == status


def test_exit_largest_status(shell):
    with pytest.raises(ShellExit) as info:
        builtin_exit(shell, ["2147483647"])
    assert info.value.status == 2147483647


@pytest.mark.parametrize("argument", ["abc", "-1", "2147483648", "12x"])
def test_exit_illegal_number(shell, argument):
    assert builtin_exit(shell, [argument]) == 2
    assert shell.err == [exit_error("hsh", 1, argument)]


def test_env_prints_entries(shell):
    shell.env = Environment(["A=1", "B=2"])
    assert builtin_env(shell, []) == 0
    assert "".join(shell.out) == "A=1\nB=2\n"


def test_setenv_adds_and_replaces(shell):
    assert builtin_setenv(shell, ["FOO", "bar"]) == 0
    assert shell.env.get("FOO") == "bar"
    assert builtin_setenv(shell, ["FOO", "baz"]) == 0
    assert shell.env.entries() == ["FOO=baz"]


def test_setenv_missing_value(shell):
    assert builtin_setenv(shell, ["FOO"]) == -1
    assert shell.err == [env_error("hsh", 1, "setenv")]
    assert shell.env.get("FOO") is None


def test_unsetenv_removes(shell):
    shell.env = Environment(["A=1", "B=2"])
    assert builtin_unsetenv(shell, ["A"]) == 0
    assert shell.env.entries() == ["B=2"]


def test_unsetenv_absent_is_success(shell):
    shell.env = Environment(["A=1"])
    assert builtin_unsetenv(shell, ["Z"]) == 0
    assert shell.env.entries() == ["A=1"]


def test_unsetenv_without_argument(shell):
    assert builtin_unsetenv(shell, []) == -1
    assert shell.err == [env_error("hsh", 1, "unsetenv")]


def test_cd_to_directory(shell, tmp_path, monkeypatch):
    start = tmp_path / "start"
    target = tmp_path / "target"
    start.mkdir()
    target.mkdir()
    monkeypatch.chdir(start)
    assert builtin_cd(shell, [str(target)]) == 0
    assert os.getcwd() == os.path.realpath(target)
    assert shell.env.get("PWD") == os.getcwd()
    assert shell.env.get("OLDPWD") == os.path.realpath(start)
    assert shell.out == []


def test_cd_missing_directory(shell, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    missing = str(tmp_path / "missing")
    assert builtin_cd(shell, [missing]) == 2
    assert shell.err == [cd_error("hsh", 1, missing)]
    assert os.getcwd() == os.path.realpath(tmp_path)


def test_cd_illegal_option(shell, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert builtin_cd(shell, ["-xyz"]) == 2
    assert shell.err == ["hsh: 1: cd: Illegal option -x\n"]


def test_cd_dash_goes_to_oldpwd_and_prints(shell, tmp_path, monkeypatch):
    other = tmp_path / "other"
    other.mkdir()
    monkeypatch.chdir(tmp_path)
    shell.env = Environment([f"OLDPWD={other}"])
    assert builtin_cd(shell, ["-"]) == 0
    assert os.getcwd() == os.path.realpath(other)
    assert shell.out == [os.getcwd() + "\n"]
    assert shell.env.get("OLDPWD") == os.path.realpath(tmp_path)


def test_cd_double_dash_does_not_print(shell, tmp_path, monkeypatch):
    other = tmp_path / "other"
    other.mkdir()
    monkeypatch.chdir(tmp_path)
    shell.env = Environment([f"OLDPWD={other}"])
    assert builtin_cd(shell, ["--"]) == 0
    assert os.getcwd() == os.path.realpath(other)
    assert shell.out == []


def test_cd_without_argument_goes_home(shell, tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.chdir(tmp_path)
    shell.env = Environment([f"HOME={home}"])
    assert builtin_cd(shell, []) == 0
    assert os.getcwd() == os.path.realpath(home)
    assert shell.env.get("PWD") == os.getcwd()


def test_alias_define_and_show(shell):
    assert builtin_alias(shell, ["ll='ls -l'"]) == 0
    assert shell.aliases.get("ll") == "ls -l"
    assert builtin_alias(shell, ["ll"]) == 0
    assert shell.out == [shell.aliases.format("ll")]


def test_alias_list_all_in_order(shell):
    builtin_alias(shell, ["b=2", "a=1"])
    assert builtin_alias(shell, []) == 0
    assert shell.out == [shell.aliases.format("b"), shell.aliases.format("a")]


def test_alias_missing_name(shell):
    assert builtin_alias(shell, ["nope", "x=y"]) == 1
    assert shell.err == [alias_not_found("nope")]
    assert shell.aliases.get("x") == "y"


def test_help_overview(shell):
    assert builtin_help(shell, []) == 0
    assert shell.out == [help_text(None)]


@pytest.mark.parametrize("topic", ["alias", "cd", "exit", "env", "setenv", "unsetenv", "help"])
def test_help_topic(shell, topic):
    assert builtin_help(shell, [topic]) == 0
    assert shell.out == [help_text(topic)]


def test_help_unknown_topic(shell):
    assert builtin_help(shell, ["bogus"]) == 0
    assert shell.out == []
    assert shell.err == ["hsh"]