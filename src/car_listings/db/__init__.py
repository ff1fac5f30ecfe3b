"""Database module."""

from .schema import init_db
from .store import CarStore

__all__ = [
    "init_db",
    "CarStore",
]
