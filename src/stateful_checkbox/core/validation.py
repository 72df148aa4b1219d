"""Input validation with clear error messages for grid integrators."""

from __future__ import annotations

from typing import Any, Callable, Mapping

import pandas as pd

from .errors import ConfigurationError

HEADER_POSITION_KEYWORDS = ("first", "last")


def validate_state_key(value: Any) -> str:
    """Validate that a state key is a non-empty string.

    Returns the key unchanged.
    """
    if value is None:
        raise ConfigurationError(
            "state_key is required. Pass a key that is unique per grid, "
            "e.g. 'orders_grid'."
        )
    if not isinstance(value, str):
        raise ConfigurationError(
            f"state_key must be a string, got {type(value).__name__}."
        )
    if not value.strip():
        raise ConfigurationError("state_key must not be blank.")
    return value


def validate_record_index_field(value: Any) -> str | Callable[[Any], Any]:
    """Validate the identifier field: a field name or an accessor callable."""
    if value is None:
        raise ConfigurationError(
            "record_index_field is required. Name the record field that "
            "uniquely identifies each row, e.g. 'id'."
        )
    if callable(value):
        return value
    if not isinstance(value, str):
        raise ConfigurationError(
            "record_index_field must be a field name or a callable, "
            f"got {type(value).__name__}."
        )
    if not value.strip():
        raise ConfigurationError("record_index_field must not be blank.")
    return value


def validate_header_position(value: Any) -> int | str:
    """Validate a header position: non-negative int, 'first' or 'last'."""
    if isinstance(value, str):
        if value not in HEADER_POSITION_KEYWORDS:
            raise ConfigurationError(
                f"Unknown header_position '{value}'. "
                f"Use an index or one of {list(HEADER_POSITION_KEYWORDS)}."
            )
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(
            f"header_position must be an int or a keyword, got {type(value).__name__}."
        )
    if value < 0:
        raise ConfigurationError(f"header_position must be >= 0, got {value}.")
    return value


def validate_records(records: Any) -> Any:
    """Validate that records is a DataFrame or an iterable of records.

    Returns the collection unchanged.
    """
    if isinstance(records, pd.DataFrame):
        return records
    if isinstance(records, (str, bytes)):
        raise TypeError(
            "Expected a collection of records, got a string. "
            "Pass a DataFrame or a list of dicts."
        )
    if isinstance(records, Mapping):
        raise TypeError(
            "Expected a collection of records, got a single mapping. "
            "Wrap it in a list."
        )
    if isinstance(records, pd.Series):
        raise TypeError(
            "Expected a collection of records, got a single Series. "
            "Wrap it in a list or pass the DataFrame."
        )
    try:
        iter(records)
    except TypeError:
        raise TypeError(
            f"Expected a DataFrame or an iterable of records, got {type(records).__name__}."
        ) from None
    return records
