"""Ports - interfaces/protocols for external dependencies."""

from .storage import Storage

__all__ = [
    "Storage",
]
