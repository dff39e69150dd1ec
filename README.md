# minifs

A toy file system kept entirely in memory and driven from an interactive
shell. Directories, files and their contents live only as long as the
session does.

## Installation

```
pip install .
```

## The permission shell

```
minifs
```

The prompt shows the current user and directory (`admin@mini_fs:/$ `).
The session starts as user `admin` in the root directory `/`.

| Command           | Effect                                                         |
|-------------------|----------------------------------------------------------------|
| `mkdir NAME`      | create a subdirectory of the current directory                 |
| `cd NAME`         | enter a subdirectory; `cd ..` goes up one level                |
| `ls`              | list directories (`[DIR] name`) and files (`[ARQ] name (owner)`) |
| `touch NAME`      | create an empty text file owned by the current user            |
| `cat NAME`        | print a file's content (needs read permission)                 |
| `echo NAME TEXT`  | replace a file's content (needs write permission)              |
| `chmod MODE NAME` | set the owner, group and others digits, e.g. `640`             |
| `rm NAME`         | delete a file (needs write permission)                         |
| `su USER`         | switch the current user                                        |
| `exit`            | leave the shell                                                |

New files get mode `755`. Each digit is a sum of 4 (read), 2 (write) and
1 (execute). The owner's digit applies to the file's owner; every other user
is checked against the "others" digit. File content is cut to 1023
characters. Anything the shell does not understand prints
`Comando inválido!`.

## The tree shell

```
minifs-tree
```

A simpler shell over a directory tree whose root is `Topo`, with no users or
permission checks.

| Command              | Effect                                                     |
|----------------------|------------------------------------------------------------|
| `create NAME`        | create an empty file                                       |
| `write NAME TEXT`    | replace an existing file's content with the rest of the line |
| `read NAME`          | print a file's content                                     |
| `delete NAME`        | delete a file                                              |
| `mkdir NAME`         | create a subdirectory                                      |
| `rmdir NAME`         | remove a subdirectory, only when it is empty               |
| `cp SOURCE TARGET`   | copy a file's kind, size and permission under a new name; the content is not copied |
| `ls`                 | list entries as `name  -- dir` and `name  -- arquivo`      |
| `cd NAME`            | enter a subdirectory; `..` goes up, `/` goes to the root   |
| `pwd`                | print the current path, e.g. `/Topo/docs`                  |
| `exit`               | leave the shell                                            |

## Using it from Python

```python
from minifs.filesystem import FileSystem

fs = FileSystem("admin")
fs.mkdir("docs")
fs.cd("docs")
fs.touch("notes.txt")
fs.echo("notes.txt", "hello")
print(fs.cat("notes.txt"))  # hello
```

`FileSystem` failures raise `NotFoundError` or `PermissionDeniedError`, both
subclasses of `FileSystemError`. Permission digits are held by
`minifs.permissions.Permission` (`Permission.from_mode(640)`), checked with
the `Access` flags.

The tree model is `minifs.tree.Tree`, with `mkdir`, `rmdir`, `create`,
`delete`, `ls`, `cd`, `pwd`, `copy`, `write` and `read`. Its errors derive
from `TreeError`: `EntryNotFoundError`, `DirectoryNotEmptyError` and
`AlreadyAtRootError`.

Commands can be fed to either shell programmatically with
`minifs.shell.execute(fs, line)` / `minifs.shell.run(fs, stdin, stdout)` or
`minifs.treeshell.execute(tree, line)` / `minifs.treeshell.run(tree, stdin, stdout)`.
`execute` returns the text the command prints, or `None` for `exit`.

## What it does not do

- Nothing is saved: there is no storage on disk, and every session starts empty.
- Commands take plain names in the current directory, not paths.
- The group digit of a mode is stored but never checked, and users have no
  passwords; `su` switches to any name.
- There is no way to remove a directory in the permission shell, and no
  seeking or truncating of files in either shell.

## Running the tests

```
pip install .[test]
pytest
```