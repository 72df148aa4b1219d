"""RecordIdentity: stable record identifiers independent of row position.

A record's identifier is read through a typed accessor rather than by
position, so sorting, paging and filtering never change which records
are selected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator

import numpy as np
import pandas as pd

from .errors import IdentityError
from .validation import validate_records

# Field name that resolves to the DataFrame index label of a row.
INDEX_FIELD = "index"

# Stands in for the identifier of a record that has none.
MISSING = object()


def normalize_identifier(value: Any) -> Any:
    """Return a plain Python scalar for numpy scalars, else the value itself.

    Keeps persisted selection sets JSON-friendly and makes ``np.int64(5)``
    and ``5`` the same identifier.
    """
    if isinstance(value, np.generic):
        return value.item()
    return value


def is_missing(value: Any) -> bool:
    """True for None and scalar NA values (NaN, NaT, pd.NA)."""
    if value is None:
        return True
    if pd.api.types.is_scalar(value):
        return bool(pd.isna(value))
    return False


def iter_records(records: Any) -> Iterator[Any]:
    """Iterate a record collection, one record per row.

    DataFrame rows are yielded as object-dtype Series named by their index
    label, so integer identifiers are not upcast to float by mixed dtypes.
    """
    records = validate_records(records)
    if isinstance(records, pd.DataFrame):
        columns = records.columns
        for label, values in zip(records.index, records.itertuples(index=False, name=None)):
            yield pd.Series(values, index=columns, name=label, dtype=object)
    else:
        yield from records


def record_at(df: pd.DataFrame, position: int) -> pd.Series:
    """Return the row at an integer position, typed like ``iter_records``."""
    return pd.Series(
        [df.iat[position, i] for i in range(df.shape[1])],
        index=df.columns,
        name=df.index[position],
        dtype=object,
    )


def _field_getter(field: str) -> Callable[[Any], Any]:
    def get(record: Any) -> Any:
        getter = getattr(record, "get", None)
        if callable(getter):
            value = getter(field)
        else:
            value = getattr(record, field, None)
        if value is None and field == INDEX_FIELD and isinstance(record, pd.Series):
            value = record.name
        return value

    return get


@dataclass(frozen=True)
class RecordIdentity:
    """Typed accessor ``(record) -> identifier``.

    Built from a field name (looked up with ``record.get(field)`` or as an
    attribute) or from any callable.
    """

    name: str
    accessor: Callable[[Any], Any]
    field: str | None = None

    @classmethod
    def from_field(cls, field: str) -> RecordIdentity:
        """Identity read from a named record field."""
        return cls(name=field, accessor=_field_getter(field), field=field)

    @classmethod
    def from_callable(cls, fn: Callable[[Any], Any], name: str | None = None) -> RecordIdentity:
        """Identity computed by ``fn(record)``."""
        return cls(name=name or getattr(fn, "__name__", "identifier"), accessor=fn)

    @classmethod
    def coerce(cls, field_or_fn: str | Callable[[Any], Any]) -> RecordIdentity:
        if isinstance(field_or_fn, RecordIdentity):
            return field_or_fn
        if callable(field_or_fn):
            return cls.from_callable(field_or_fn)
        return cls.from_field(field_or_fn)

    def __call__(self, record: Any) -> Any:
        """Return the record's identifier or raise IdentityError."""
        try:
            value = self.accessor(record)
        except (KeyError, AttributeError) as exc:
            raise IdentityError(f"Record has no '{self.name}' field.") from exc
        if is_missing(value):
            raise IdentityError(f"Record has no value for '{self.name}'.")
        value = normalize_identifier(value)
        try:
            hash(value)
        except TypeError:
            raise IdentityError(
                f"Identifier '{self.name}' must be hashable, got {type(value).__name__}."
            ) from None
        return value

    def resolve(self, record: Any, default: Any = None) -> Any:
        """Like calling the identity, but returns ``default`` when missing."""
        try:
            return self(record)
        except IdentityError:
            return default

    def iter_ids(self, records: Any, skip_missing: bool = True) -> Iterator[Any]:
        """Yield identifiers in collection order.

        Records without an identifier are skipped, or yielded as ``MISSING``
        when ``skip_missing`` is False.
        """
        if isinstance(records, pd.DataFrame) and self.field is not None:
            yield from self._iter_frame_ids(records, skip_missing)
            return
        for record in iter_records(records):
            try:
                yield self(record)
            except IdentityError:
                if not skip_missing:
                    yield MISSING

    def _iter_frame_ids(self, df: pd.DataFrame, skip_missing: bool) -> Iterator[Any]:
        if self.field in df.columns:
            values = df[self.field].tolist()
        elif self.field == INDEX_FIELD:
            values = df.index.tolist()
        else:
            values = [None] * len(df)
        for value in values:
            if not is_missing(value):
                yield normalize_identifier(value)
            elif not skip_missing:
                yield MISSING

    def collect(self, records: Any) -> list:
        """Unique identifiers of a collection, in first-seen order."""
        seen: set = set()
        ids: list = []
        for value in self.iter_ids(records):
            if value not in seen:
                seen.add(value)
                ids.append(value)
        return ids
