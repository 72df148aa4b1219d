"""SelectionEvents: callback registry for selection notifications."""

from __future__ import annotations

from typing import Any, Callable


ChangeCallback = Callable[[list], Any]
RefreshCallback = Callable[[], Any]


class SelectionEvents:
    """Holds observers of one selection and dispatches notifications.

    Two notification kinds: "selection changed" carries the full current
    list of selected identifiers; "refresh" asks the view to re-render.
    """

    def __init__(self) -> None:
        self._change_callbacks: list[ChangeCallback] = []
        self._refresh_callbacks: list[RefreshCallback] = []

    def on_change(self, callback: ChangeCallback) -> ChangeCallback:
        """Register a callback: fn(selected_ids)."""
        self._change_callbacks.append(callback)
        return callback

    def on_refresh(self, callback: RefreshCallback) -> RefreshCallback:
        """Register a callback: fn()."""
        self._refresh_callbacks.append(callback)
        return callback

    def remove(self, callback: Callable) -> None:
        """Unregister a callback of either kind. Unknown callbacks are ignored."""
        if callback in self._change_callbacks:
            self._change_callbacks.remove(callback)
        if callback in self._refresh_callbacks:
            self._refresh_callbacks.remove(callback)

    def emit_change(self, ids: list) -> None:
        """Notify change observers. Each gets its own copy of the list."""
        for cb in list(self._change_callbacks):
            cb(list(ids))

    def emit_refresh(self) -> None:
        for cb in list(self._refresh_callbacks):
            cb()

    def __repr__(self) -> str:
        return (
            f"SelectionEvents(change={len(self._change_callbacks)}, "
            f"refresh={len(self._refresh_callbacks)})"
        )
