"""SelectionController: the user-facing selection API.

Owns toggle, select-all and deselect-all over a record collection and the
"all selected" header state. Every mutation reads the persisted set,
changes it, writes it back and only then notifies observers, so the
store is the single source of truth.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

import pandas as pd
import param

from .config import CheckboxColumnConfig
from .core.aggregate import Aggregate, all_selected, classify
from .core.errors import ConfigurationError, IdentityError
from .core.identity import RecordIdentity
from .core.selection_set import SelectionSet
from .core.validation import (
    validate_record_index_field,
    validate_records,
    validate_state_key,
)
from .storage.state_store import SelectionStateStore
from .widget.selection import ChangeCallback, RefreshCallback, SelectionEvents

logger = logging.getLogger(__name__)


def _snapshot(records: Any) -> Any:
    """Validated collection that can be iterated more than once."""
    records = validate_records(records)
    if isinstance(records, pd.DataFrame):
        return records
    return list(records)


class SelectionController(param.Parameterized):
    """Persistent multi-item selection over a paginated record collection.

    Usage::

        store = SelectionStateStore(MemoryProvider())
        controller = SelectionController(store)
        controller.on_change(lambda ids: print(ids))
        controller.initialize("orders_grid", "id", records=df)

        controller.toggle({"id": 5})        # -> [5]
        controller.select_all(df)
        controller.recompute_aggregate(df)  # -> True
    """

    header_checked = param.Boolean(default=False, doc="Header shows 'all selected'")

    def __init__(
        self,
        store: SelectionStateStore,
        config: CheckboxColumnConfig | None = None,
        **params,
    ) -> None:
        super().__init__(**params)
        if not isinstance(store, SelectionStateStore):
            raise TypeError(
                f"store must be a SelectionStateStore, got {type(store).__name__}."
            )
        self.store = store
        self.config = config
        self.events = SelectionEvents()
        self._state_key: str | None = None
        self._identity: RecordIdentity | None = None
        # Last collection reported by the view; header state is computed on it.
        self._visible: Any = ()

    @classmethod
    def from_config(
        cls,
        store: SelectionStateStore,
        config: CheckboxColumnConfig,
        records: Any = (),
    ) -> SelectionController:
        """Create and initialize a controller from a validated config."""
        config.validate()
        controller = cls(store, config=config)
        controller.initialize(config.state_key, config.record_index_field, records=records)
        return controller

    # ------------------------------------------------------------------
    # Binding
    # ------------------------------------------------------------------

    def initialize(
        self,
        state_key: str,
        record_index_field: str | Callable[[Any], Any],
        records: Any = (),
    ) -> list:
        """Bind to a state key and identifier field.

        Computes the header state over ``records`` and emits the initial
        change notification. Nothing is bound if validation or the first
        read fails.
        """
        state_key = validate_state_key(state_key)
        identity = RecordIdentity.coerce(validate_record_index_field(record_index_field))
        records = _snapshot(records)
        ids = self.store.get(state_key)

        self._state_key = state_key
        self._identity = identity
        self._visible = records
        self.recompute_aggregate(records)
        logger.info(
            f"Selection '{state_key}' bound to field '{identity.name}' "
            f"with {len(ids)} selected"
        )
        self.events.emit_change(ids)
        return ids

    @property
    def state_key(self) -> str | None:
        return self._state_key

    @property
    def identity(self) -> RecordIdentity | None:
        return self._identity

    @property
    def is_initialized(self) -> bool:
        return self._state_key is not None

    def _require_initialized(self) -> tuple[str, RecordIdentity]:
        if self._state_key is None or self._identity is None:
            raise ConfigurationError(
                "SelectionController is not initialized. Call initialize() first."
            )
        return self._state_key, self._identity

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def on_change(self, callback: ChangeCallback) -> ChangeCallback:
        """Register fn(selected_ids), called after every change."""
        return self.events.on_change(callback)

    def on_refresh(self, callback: RefreshCallback) -> RefreshCallback:
        """Register fn(), called when the view should re-render its rows."""
        return self.events.on_refresh(callback)

    def remove_callback(self, callback: Callable) -> None:
        """Unregister a change or refresh callback."""
        self.events.remove(callback)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def _read(self) -> SelectionSet:
        state_key, _ = self._require_initialized()
        return SelectionSet.from_ids(self.store.get(state_key))

    @property
    def selection(self) -> SelectionSet:
        """Snapshot of the persisted selection for repeated membership tests."""
        return self._read()

    @property
    def selected_ids(self) -> list:
        """Current persisted selection, read through the store."""
        return self._read().to_list()

    def is_selected(self, record: Any, selection: SelectionSet | None = None) -> bool:
        """True if the record's identifier is selected. False without identity.

        Pass ``selection`` to test against a snapshot instead of reading
        the store.
        """
        _, identity = self._require_initialized()
        try:
            identifier = identity(record)
        except IdentityError:
            return False
        if selection is None:
            selection = self._read()
        return identifier in selection

    def recompute_aggregate(self, records: Any) -> bool:
        """Return True iff every record is selected and there is at least one.

        Updates ``header_checked``; never changes the selection.
        """
        _, identity = self._require_initialized()
        records = validate_records(records)
        result = all_selected(self._read(), identity.iter_ids(records, skip_missing=False))
        self.header_checked = result
        return result

    def aggregate(self, records: Any) -> Aggregate:
        """Tri-state header value (all / partial / none) over ``records``."""
        _, identity = self._require_initialized()
        records = validate_records(records)
        return classify(self._read(), identity.iter_ids(records, skip_missing=False))

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def _commit(self, selection: SelectionSet) -> list:
        state_key, _ = self._require_initialized()
        ids = selection.to_list()
        self.store.set(state_key, ids)
        self.events.emit_change(ids)
        return ids

    def toggle(self, record: Any) -> list:
        """Select the record if unselected, else unselect it.

        A record without an identifier is left alone.
        """
        _, identity = self._require_initialized()
        try:
            identifier = identity(record)
        except IdentityError as e:
            logger.warning(f"Ignoring toggle on record without identifier: {e}")
            return self.selected_ids

        ids = self._commit(self._read().toggle(identifier))
        logger.debug(f"Toggled {identifier!r}; {len(ids)} selected")
        self.recompute_aggregate(self._visible)
        return ids

    def select_all(self, records: Any) -> list:
        """Add every record of ``records`` to the selection.

        Pass the whole logical collection (all pages). Identifiers selected
        elsewhere, e.g. on records not loaded, are kept.
        """
        _, identity = self._require_initialized()
        records = validate_records(records)
        ids = self._commit(self._read().union(identity.collect(records)))
        logger.debug(f"Selected all; {len(ids)} selected")
        self.events.emit_refresh()
        self.recompute_aggregate(self._visible)
        return ids

    def deselect_all(self, records: Any) -> list:
        """Remove every record of ``records`` from the selection.

        Identifiers of records outside ``records`` are kept.
        """
        _, identity = self._require_initialized()
        records = validate_records(records)
        ids = self._commit(self._read().difference(identity.collect(records)))
        logger.debug(f"Deselected all; {len(ids)} selected")
        self.events.emit_refresh()
        self.recompute_aggregate(self._visible)
        return ids

    def teardown(self) -> None:
        """Remove the persisted selection."""
        state_key, _ = self._require_initialized()
        self.store.clear(state_key)
        logger.info(f"Selection '{state_key}' torn down")

    # ------------------------------------------------------------------
    # View events
    # ------------------------------------------------------------------

    def on_header_click(self, records: Any) -> list:
        """Header checkbox clicked: flip between select-all and deselect-all."""
        self._require_initialized()
        self._visible = _snapshot(records)
        if self.header_checked:
            return self.deselect_all(self._visible)
        return self.select_all(self._visible)

    def on_row_click(self, record: Any) -> list:
        """Row checkbox clicked."""
        return self.toggle(record)

    def on_view_refresh(self, records: Any) -> bool:
        """Rendered rows changed (paging, sorting, filtering, reload)."""
        self._require_initialized()
        self._visible = _snapshot(records)
        return self.recompute_aggregate(self._visible)

    def __repr__(self) -> str:
        if not self.is_initialized:
            return "SelectionController(uninitialized)"
        return (
            f"SelectionController(state_key={self._state_key!r}, "
            f"field={self._identity.name!r}, header_checked={self.header_checked})"
        )
