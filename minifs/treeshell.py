"""Line-oriented command loop over a Tree."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, TextIO

from minifs.tree import Folder, Tree, TreeError

BANNER = "Mini Shell de Arquivos (digite 'exit' para sair)\n"
PROMPT = ">> "
_WORD = " \n"


class _Tokens:
    """Splits a line the way successive strtok calls would."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def next(self, delims: str = _WORD) -> Optional[str]:
        text = self._text
        rest = text[self._pos:].lstrip(delims)
        if not rest:
            self._pos = len(text)
            return None
        start = len(text) - len(rest)
        end = next((i for i, ch in enumerate(rest) if ch in delims), None)
        if end is None:
            self._pos = len(text)
            return rest
        self._pos = start + end + 1
        return rest[:end]


def _format_entry(entry) -> str:
    kind = "dir" if isinstance(entry, Folder) else "arquivo"
    return f"{entry.name}  -- {kind}\n"


def _dispatch(tree: Tree, cmd: str, tokens: _Tokens) -> Optional[str]:
    if cmd == "create":
        name = tokens.next()
        if name:
            tree.create(name, 0)
        return ""
    if cmd == "write":
        name = tokens.next()
        content = tokens.next("\n")
        if name and content:
            tree.write(name, content)
            return f"Arquivo '{name}' informacoes registradas.\n"
        return ""
    if cmd == "read":
        name = tokens.next()
        if not name:
            return ""
        content = tree.read(name)
        if content:
            return f"Conteudo de '{name}':\n{content}\n"
        return f"Arquivo '{name}' esta vazio.\n"
    if cmd == "delete":
        name = tokens.next()
        if name:
            tree.delete(name)
            return f"Arquivo '{name}' deletado com sucesso.\n"
        return ""
    if cmd == "mkdir":
        name = tokens.next()
        if name:
            tree.mkdir(name)
        return ""
    if cmd == "rmdir":
        name = tokens.next()
        if name:
            tree.rmdir(name)
            return f"Diretorio '{name}' removido com sucesso.\n"
        return ""
    if cmd == "cp":
        source = tokens.next()
        target = tokens.next()
        if source and target:
            tree.copy(source, target)
            return f"Arquivo '{source}' copiado como '{target}'.\n"
        return ""
    if cmd == "ls":
        return "".join(_format_entry(entry) for entry in tree.ls())
    if cmd == "cd":
        name = tokens.next()
        if name:
            tree.cd(name)
        return ""
    if cmd == "pwd":
        return tree.pwd() + "\n"
    if cmd == "exit":
        return None
    return f"Comando desconhecido: {cmd}\n"


def execute(tree: Tree, line: str) -> Optional[str]:
    """Run one command line; return its output, or None when it asks to exit."""
    tokens = _Tokens(line)
    cmd = tokens.next()
    if cmd is None:
        return ""
    try:
        return _dispatch(tree, cmd, tokens)
    except TreeError as exc:
        return f"{exc}\n"


def run(tree: Tree, stdin: TextIO, stdout: TextIO) -> None:
    """Print the banner, then read commands until 'exit' or end of input."""
    stdout.write(BANNER)
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        output = execute(tree, line)
        if output is None:
            break
        stdout.write(output)


def main(argv=None) -> int:
    """Start an interactive session on a fresh tree."""
    parser = argparse.ArgumentParser(prog="minifs-tree", description="Mini file tree shell.")
    parser.parse_args(argv)
    run(Tree(), sys.stdin, sys.stdout)
    return 0