"""An in-memory directory tree with owned, permission-checked files."""

from __future__ import annotations

import itertools
import time
from dataclasses import dataclass, field
from typing import Optional, Union

from minifs.permissions import Access, FileType, Permission

MAX_NAME = 100
MAX_CONTENT = 1024
DEFAULT_USER = "admin"


class FileSystemError(Exception):
    """Base error for file system operations."""


class NotFoundError(FileSystemError):
    """A file or directory does not exist in the current directory."""


class PermissionDeniedError(FileSystemError):
    """The current user may not perform the operation."""


@dataclass(eq=False)
class File:
    """A file control block."""

    name: str
    id: int
    owner: str
    type: FileType = FileType.TEXT
    content: str = ""
    size: int = 0
    created: float = field(default_factory=time.time)
    modified: float = 0.0
    accessed: float = 0.0
    permission: Permission = field(default_factory=Permission)

    def __post_init__(self) -> None:
        self.modified = self.modified or self.created
        self.accessed = self.accessed or self.created


@dataclass(eq=False)
class Directory:
    """A directory; newest entries come first."""

    name: str
    parent: Optional[Directory] = field(default=None, repr=False)
    subdirs: list[Directory] = field(default_factory=list, repr=False)
    files: list[File] = field(default_factory=list, repr=False)

    def find_file(self, name: str) -> Optional[File]:
        """First file with this name, or None."""
        return next((f for f in self.files if f.name == name), None)

    def find_subdir(self, name: str) -> Optional[Directory]:
        """First subdirectory with this name, or None."""
        return next((d for d in self.subdirs if d.name == name), None)


class FileSystem:
    """A file tree with a current directory and a current user."""

    def __init__(self, user: str = DEFAULT_USER) -> None:
        self.root = Directory("/")
        self.current = self.root
        self.user = user
        self._ids = itertools.count(1)

    def mkdir(self, name: str) -> Directory:
        """Create a subdirectory of the current directory."""
        directory = Directory(name, parent=self.current)
        self.current.subdirs.insert(0, directory)
        return directory

    def cd(self, name: str) -> Directory:
        """Change to the parent ('..') or to a named subdirectory."""
        if name == ".." and self.current.parent is not None:
            self.current = self.current.parent
            return self.current
        target = self.current.find_subdir(name)
        if target is None:
            raise NotFoundError("Diretório não encontrado!")
        self.current = target
        return target

    def ls(self) -> list[Union[Directory, File]]:
        """Entries of the current directory: subdirectories, then files."""
        return [*self.current.subdirs, *self.current.files]

    def touch(self, name: str) -> File:
        """Create an empty text file owned by the current user."""
        new = File(name=name, id=next(self._ids), owner=self.user)
        self.current.files.insert(0, new)
        return new

    def cat(self, name: str) -> str:
        """Content of a file the current user may read."""
        found = self._require_file(name)
        self._check(found, Access.READ, "leitura")
        return found.content

    def echo(self, name: str, content: str) -> File:
        """Replace a file's content, cut to the maximum size."""
        found = self._require_file(name)
        self._check(found, Access.WRITE, "escrita")
        found.content = content[: MAX_CONTENT - 1]
        found.size = len(found.content.encode("utf-8"))
        found.modified = time.time()
        return found

    def chmod(self, name: str, value: int) -> File:
        """Set a file's permission from a decimal mode."""
        found = self._require_file(name)
        found.permission = Permission.from_mode(value)
        return found

    def rm(self, name: str) -> None:
        """Remove a file the current user may write."""
        found = self._require_file(name)
        self._check(found, Access.WRITE, "exclusão")
        self.current.files.remove(found)

    def su(self, user: str) -> None:
        """Switch the current user."""
        self.user = user

    def _require_file(self, name: str) -> File:
        found = self.current.find_file(name)
        if found is None:
            raise NotFoundError("Arquivo não encontrado!")
        return found

    def _check(self, target: File, access: Access, action: str) -> None:
        if not target.permission.allows(self.user == target.owner, access):
            raise PermissionDeniedError(f"Permissão negada para {action}.")