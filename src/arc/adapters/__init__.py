"""Adapters - I/O implementations of ports."""

from .file_storage import FileStorage

__all__ = [
    "FileStorage",
]
