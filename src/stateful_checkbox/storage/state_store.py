"""
Selection state store.

Thin typed adapter over a key-value persistence provider: reads, writes
and clears a named selection set stored as an ordered list of identifiers.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, TypeVar

from ..core.errors import PersistenceError
from ..core.identity import normalize_identifier
from .providers import PersistenceProvider

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SelectionStateStore:
    """
    Persisted selection sets, one per state key.

    Usage:
        store = SelectionStateStore(JsonFileProvider("data/selection.json"))

        ids = store.get("orders_grid")     # [] the first time
        store.set("orders_grid", ids + [42])
        store.clear("orders_grid")

    Provider failures are raised as PersistenceError. Nothing is retried
    and nothing is cached: every read goes to the provider.
    """

    def __init__(self, provider: PersistenceProvider):
        """
        Initialize the store.

        Args:
            provider: Key-value provider with get/set/clear
        """
        if not isinstance(provider, PersistenceProvider):
            raise TypeError(
                f"provider must implement get/set/clear, got {type(provider).__name__}"
            )
        self.provider = provider

    def _call(self, operation: str, state_key: str, fn: Callable[[], T]) -> T:
        try:
            return fn()
        except PersistenceError:
            raise
        except Exception as e:
            raise PersistenceError(
                f"Persistence provider failed to {operation} '{state_key}': {e}"
            ) from e

    def get(self, state_key: str) -> list:
        """
        Get the selection set for a key.

        A key that was never written is initialized to an empty list, which
        is written through to the provider before returning.

        Args:
            state_key: Key scoping the selection set

        Returns:
            List of identifiers (never None)
        """
        value = self._call("get", state_key, lambda: self.provider.get(state_key))

        if value is None:
            logger.info(f"Initializing empty selection for '{state_key}'")
            self.set(state_key, [])
            value = self._call("get", state_key, lambda: self.provider.get(state_key))
            if value is None:
                raise PersistenceError(
                    f"Persistence provider did not keep the value written for '{state_key}'"
                )

        ids = list(value)
        logger.debug(f"Read {len(ids)} selected ids for '{state_key}'")
        return ids

    def set(self, state_key: str, ids: Iterable[Any] | None) -> None:
        """
        Persist a selection set.

        Passing None is a no-op, so a missing value never erases a stored
        selection. Uniqueness is the caller's responsibility.

        Args:
            state_key: Key scoping the selection set
            ids: Identifiers to store
        """
        if ids is None:
            logger.debug(f"Ignoring empty write for '{state_key}'")
            return

        value = [normalize_identifier(x) for x in ids]
        self._call("set", state_key, lambda: self.provider.set(state_key, value))
        logger.debug(f"Wrote {len(value)} selected ids for '{state_key}'")

    def clear(self, state_key: str) -> None:
        """
        Remove a selection set entirely.

        A later get() starts again from an empty list.

        Args:
            state_key: Key scoping the selection set
        """
        self._call("clear", state_key, lambda: self.provider.clear(state_key))
        logger.info(f"Cleared selection for '{state_key}'")
