"""Key-value persistence providers.

The selection core only needs ``get``/``set``/``clear`` from a provider.
Values are lists of identifiers; how they are encoded is up to the provider.
"""

from __future__ import annotations

import copy
import json
import logging
import os
import sqlite3
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class PersistenceProvider(Protocol):
    """Generic key-value store. ``get`` returns None for unknown keys."""

    def get(self, key: str) -> Any | None: ...

    def set(self, key: str, value: Any) -> None: ...

    def clear(self, key: str) -> None: ...


class MemoryProvider:
    """Process-local provider. Values are deep-copied in and out."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def get(self, key: str) -> Any | None:
        if key not in self._data:
            return None
        return copy.deepcopy(self._data[key])

    def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    def clear(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)

    def __repr__(self) -> str:
        return f"MemoryProvider(keys={len(self._data)})"


class JsonFileProvider:
    """All keys in one JSON document on disk.

    Every ``set``/``clear`` rewrites the file atomically, so a crash leaves
    either the old or the new document, never a torn one.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        with open(self.path, encoding="utf-8") as f:
            text = f.read()
        if not text.strip():
            return {}
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not contain a JSON object.")
        return data

    def _write(self, data: dict[str, Any]) -> None:
        fd, tmp = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f)
            os.replace(tmp, self.path)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise

    def get(self, key: str) -> Any | None:
        return self._read().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def clear(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def __repr__(self) -> str:
        return f"JsonFileProvider(path='{self.path}')"


class SQLiteProvider:
    """Key-value table in a SQLite database, values stored as JSON text."""

    CREATE_TABLE_SQL = """
        CREATE TABLE IF NOT EXISTS selection_state (
            state_key TEXT PRIMARY KEY,
            value TEXT NOT NULL
        )
    """

    def __init__(self, database_path: Path | str) -> None:
        self.database_path = Path(database_path)
        self.database_path.parent.mkdir(parents=True, exist_ok=True)
        with self._get_connection() as conn:
            conn.execute(self.CREATE_TABLE_SQL)
            conn.commit()
        logger.debug(f"SQLite provider ready at {self.database_path}")

    @contextmanager
    def _get_connection(self) -> Iterator[sqlite3.Connection]:
        conn = sqlite3.connect(self.database_path, timeout=30.0)
        try:
            yield conn
        finally:
            conn.close()

    def get(self, key: str) -> Any | None:
        with self._get_connection() as conn:
            row = conn.execute(
                "SELECT value FROM selection_state WHERE state_key = ?", (key,)
            ).fetchone()
        if row is None:
            return None
        return json.loads(row[0])

    def set(self, key: str, value: Any) -> None:
        with self._get_connection() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO selection_state (state_key, value) VALUES (?, ?)",
                (key, json.dumps(value)),
            )
            conn.commit()

    def clear(self, key: str) -> None:
        with self._get_connection() as conn:
            conn.execute("DELETE FROM selection_state WHERE state_key = ?", (key,))
            conn.commit()

    def __repr__(self) -> str:
        return f"SQLiteProvider(database_path='{self.database_path}')"
