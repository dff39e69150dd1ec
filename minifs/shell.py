"""Interactive command loop over a FileSystem."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Optional, TextIO

from minifs.filesystem import Directory, FileSystem, FileSystemError

INVALID = "Comando inválido!\n"

_MKDIR = re.compile(r"mkdir\s*(\S+)")
_CD = re.compile(r"cd\s*(\S+)")
_TOUCH = re.compile(r"touch\s*(\S+)")
_CAT = re.compile(r"cat\s*(\S+)")
_ECHO = re.compile(r"echo\s*(\S+)\s+(\S.*)", re.DOTALL)
_CHMOD = re.compile(r"chmod\s*([+-]?\d+)(?!\d)\s*(\S+)")
_RM = re.compile(r"rm\s*(\S+)")
_SU = re.compile(r"su\s*(\S+)")


def prompt(fs: FileSystem) -> str:
    """The prompt shown before each command."""
    return f"{fs.user}@mini_fs:{fs.current.name}$ "


def _format_entry(entry) -> str:
    if isinstance(entry, Directory):
        return f"[DIR] {entry.name}\n"
    return f"[ARQ] {entry.name} ({entry.owner})\n"


def _dispatch(fs: FileSystem, line: str) -> str:
    if m := _MKDIR.match(line):
        fs.mkdir(m[1])
        return ""
    if m := _CD.match(line):
        fs.cd(m[1])
        return ""
    if line == "ls":
        return "".join(_format_entry(entry) for entry in fs.ls())
    if m := _TOUCH.match(line):
        fs.touch(m[1])
        return ""
    if m := _CAT.match(line):
        return fs.cat(m[1]) + "\n"
    if m := _ECHO.match(line):
        fs.echo(m[1], m[2])
        return ""
    if m := _CHMOD.match(line):
        fs.chmod(m[2], int(m[1]))
        return ""
    if m := _RM.match(line):
        fs.rm(m[1])
        return ""
    if m := _SU.match(line):
        fs.su(m[1])
        return ""
    return INVALID


def execute(fs: FileSystem, line: str) -> Optional[str]:
    """Run one command line; return its output, or None when it asks to exit."""
    if line.startswith("exit"):
        return None
    try:
        return _dispatch(fs, line)
    except FileSystemError as exc:
        return f"{exc}\n"


def run(fs: FileSystem, stdin: TextIO, stdout: TextIO) -> None:
    """Read commands until 'exit' or end of input."""
    while True:
        stdout.write(prompt(fs))
        stdout.flush()
        raw = stdin.readline()
        if not raw:
            break
        output = execute(fs, raw.split("\n", 1)[0])
        if output is None:
            break
        stdout.write(output)


def main(argv=None) -> int:
    """Start an interactive session on a fresh file system."""
    parser = argparse.ArgumentParser(prog="minifs", description="Mini file system shell.")
    parser.parse_args(argv)
    run(FileSystem(), sys.stdin, sys.stdout)
    return 0