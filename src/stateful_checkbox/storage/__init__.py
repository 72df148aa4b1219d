"""Persistent selection state storage."""

from .providers import JsonFileProvider, MemoryProvider, PersistenceProvider, SQLiteProvider
from .state_store import SelectionStateStore

__all__ = [
    "JsonFileProvider",
    "MemoryProvider",
    "PersistenceProvider",
    "SQLiteProvider",
    "SelectionStateStore",
]
