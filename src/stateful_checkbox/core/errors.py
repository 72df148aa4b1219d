"""Error taxonomy for stateful checkbox selection."""

from __future__ import annotations


class SelectionError(Exception):
    """Base class for all stateful-checkbox errors."""


class ConfigurationError(SelectionError, ValueError):
    """Raised when required options are missing or invalid.

    Raised before anything is bound, so a failed ``initialize`` leaves the
    controller untouched.
    """


class PersistenceError(SelectionError, RuntimeError):
    """Raised when the persistence provider fails to get, set or clear."""


class IdentityError(SelectionError, KeyError):
    """Raised when a record has no usable identifier value."""

    def __str__(self) -> str:
        # KeyError quotes its message; keep it readable.
        return str(self.args[0]) if self.args else ""
