"""A named directory tree whose files keep content, timestamps and ids."""

from __future__ import annotations

import dataclasses
import time
from dataclasses import dataclass, field
from typing import Optional, Union

from minifs.permissions import FileType, Permission

DEFAULT_ROOT = "Topo"


class TreeError(Exception):
    """Base error for tree operations."""


class EntryNotFoundError(TreeError):
    """A file or directory is missing, or there are no files at all."""


class DirectoryNotEmptyError(TreeError):
    """A directory to be removed still holds entries."""


class AlreadyAtRootError(TreeError):
    """The current directory has no parent to move to."""


@dataclass(eq=False)
class FileEntry:
    """A file control block."""

    name: str
    id: int
    kind: FileType = FileType.NUMERIC
    content: Optional[str] = None
    size: int = 0
    created: float = field(default_factory=time.time)
    modified: float = 0.0
    accessed: float = 0.0
    permission: Permission = field(default_factory=Permission)

    def __post_init__(self) -> None:
        self.modified = self.modified or self.created
        self.accessed = self.accessed or self.created


@dataclass(eq=False)
class Folder:
    """A directory; newest subdirectories come first."""

    name: str
    parent: Optional[Folder] = field(default=None, repr=False)
    children: list[Folder] = field(default_factory=list, repr=False)
    files: list[FileEntry] = field(default_factory=list, repr=False)

    def path(self) -> str:
        """Absolute path, the root's own name included."""
        names = []
        node: Optional[Folder] = self
        while node is not None:
            names.append(node.name)
            node = node.parent
        return "".join(f"/{name}" for name in reversed(names))


class Tree:
    """A directory tree with a current directory."""

    def __init__(self, root_name: str = DEFAULT_ROOT) -> None:
        self.root = Folder(root_name)
        self.current = self.root
        self._last_id = 0

    def new_id(self) -> int:
        """Next file id, starting at 1."""
        self._last_id += 1
        return self._last_id

    def mkdir(self, name: str) -> Folder:
        """Create a subdirectory of the current directory."""
        folder = Folder(name, parent=self.current)
        self.current.children.insert(0, folder)
        return folder

    def rmdir(self, name: str) -> Folder:
        """Remove an empty subdirectory of the current directory."""
        folder = next((d for d in self.current.children if d.name == name), None)
        if folder is None:
            raise EntryNotFoundError(f"Diretorio '{name}' nao encontrado.")
        if folder.children or folder.files:
            raise DirectoryNotEmptyError(f"Diretorio '{name}' nao esta vazio.")
        self.current.children.remove(folder)
        return folder

    def create(self, name: str, kind: Union[int, FileType] = FileType.NUMERIC) -> FileEntry:
        """Create a file; it goes first in an empty list, otherwise second."""
        entry = FileEntry(name=name, id=self.new_id(), kind=FileType(kind))
        self._place(entry)
        return entry

    def delete(self, name: str) -> FileEntry:
        """Remove a file from the current directory."""
        if not self.current.files:
            raise EntryNotFoundError("Lista de arquivos vazia.")
        entry = self._find(name)
        if entry is None:
            raise EntryNotFoundError(f"Arquivo '{name}' nao encontrado.")
        self.current.files.remove(entry)
        return entry

    def ls(self) -> list[Union[Folder, FileEntry]]:
        """Entries of the current directory: subdirectories, then files."""
        return [*self.current.children, *self.current.files]

    def cd(self, name: str) -> Folder:
        """Move to the parent ('..'), the root ('/') or a named subdirectory."""
        if name == "..":
            if self.current.parent is None:
                raise AlreadyAtRootError("Ja esta na raiz.")
            self.current = self.current.parent
            return self.current
        if name == "/":
            self.current = self.root
            return self.current
        target = next((d for d in self.current.children if d.name == name), None)
        if target is None:
            raise EntryNotFoundError(f"Diretorio '{name}' nao encontrado.")
        self.current = target
        return target

    def pwd(self) -> str:
        """Path of the current directory."""
        return self.current.path()

    def copy(self, source: str, target: str) -> FileEntry:
        """Copy a file's metadata under a new name; the content is not copied."""
        if not self.current.files:
            raise EntryNotFoundError("Nenhum arquivo para copiar.")
        original = self._find(source)
        if original is None:
            raise EntryNotFoundError(f"Arquivo '{source}' não encontrado.")
        duplicate = FileEntry(
            name=target,
            id=self.new_id(),
            kind=original.kind,
            size=original.size,
            permission=dataclasses.replace(original.permission),
        )
        self._place(duplicate)
        return duplicate

    def write(self, name: str, content: str) -> FileEntry:
        """Replace a file's content."""
        entry = self._find(name)
        if entry is None:
            raise EntryNotFoundError(f"Arquivo '{name}' nao encontrado.")
        entry.content = content
        entry.size = len(content.encode("utf-8"))
        entry.modified = time.time()
        return entry

    def read(self, name: str) -> Optional[str]:
        """A file's content, or None when nothing was ever written."""
        entry = self._find(name)
        if entry is None:
            raise EntryNotFoundError(f"Arquivo '{name}' nao encontrado.")
        entry.accessed = time.time()
        return entry.content

    def _find(self, name: str) -> Optional[FileEntry]:
        return next((f for f in self.current.files if f.name == name), None)

    def _place(self, entry: FileEntry) -> None:
        files = self.current.files
        files.insert(1 if files else 0, entry)