# shellby

A small UNIX command interpreter. It reads commands from a terminal, from
standard input or from a file. It runs each command either as a builtin or
as a program found on `PATH`.

## Installing

```
pip install .
```

## Running

An interactive session shows the prompt `$ `:

```
shellby
$ echo hello
hello
$ exit
```

To read commands from a pipe:

```
echo "ls -l /tmp" | shellby
```

To run a file of commands, one per line:

```
shellby commands.txt
```

If the file cannot be opened, the shell prints `NAME: 0: Can't open FILE`
and exits with status 127. Otherwise it exits with the status of the last
command it ran, or with the status given to `exit`. In an interactive
session, Ctrl-C prints a fresh prompt.

## What it understands

- Command separators: `;`, and the logical operators `&&` and `||`. A line
  that starts with an operator, or has two operators in a row, is reported
  as `Syntax error` and gives status 2.
- Comments: a `#` at the start of a word ends the line.
- Variable expansion: `$$` (process id), `$?` (status of the last command)
  and `$NAME` (environment variable, or nothing if it is unset).
- Aliases: any word that is the name of an alias is replaced by the alias's
  value. Aliases can chain.

## Builtins

| Command    | Usage                          |
|------------|--------------------------------|
| `alias`    | `alias [NAME[='VALUE'] ...]`   |
| `cd`       | `cd [DIRECTORY]`. With no argument it goes to `$HOME`. `cd -` goes to `$OLDPWD` and prints the new directory. |
| `exit`     | `exit [STATUS]`                |
| `env`      | `env`                          |
| `setenv`   | `setenv VARIABLE VALUE`        |
| `unsetenv` | `unsetenv VARIABLE`            |
| `help`     | `help [BUILTIN]`               |

`cd` updates `PWD` and `OLDPWD`. `exit` with an argument that is not a
number from 0 to 2147483647 prints `exit: Illegal number` and returns 2.

## Not supported

The shell splits words on spaces only. It has no quoting, escapes, pipes
(`|`), redirection, background jobs (`&`), globbing or history. Quote
characters are removed only from the value in an alias definition.

## Using it from Python

```python
import io
from shellby.shell import Shell

out = io.StringIO()
shell = Shell("shellby", {"PATH": "/bin:/usr/bin"}, out, io.StringIO())
shell.run_line("alias greet='echo'")
shell.run_line("alias greet")
print(out.getvalue())   # greet='echo'
```

`Shell.run_line`, `Shell.run_stream` and `Shell.run_file` each return the
last exit status. `Shell.run_line` passes `shellby.builtins.ShellExit` on to
the caller when `exit` runs. The two other methods catch it.

Some of the building blocks can also be used on their own:

- `shellby.expansion.expand_variables`
- `shellby.lexer.partition_operators` and `shellby.lexer.split_tokens`
- `shellby.locate.find_command`
- `shellby.aliases.AliasTable`
- `shellby.environment.Environment`

Error messages take the form `NAME: LINE: message`, for example
`shellby: 1: foo: not found`.