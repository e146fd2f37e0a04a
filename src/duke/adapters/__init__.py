"""Adapters - I/O implementations of ports."""

from .file_storage import FileTaskStore, StorageError
from .console import ConsoleUI

__all__ = [
    "FileTaskStore",
    "StorageError",
    "ConsoleUI",
]
