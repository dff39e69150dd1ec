"""An in-memory toy file system with permissions, a directory tree model and interactive shells."""

__version__ = "0.1.0"
__all__ = ["filesystem", "permissions", "shell", "tree", "treeshell"]