"""Aggregate indicator: does a selection cover a record collection?"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable

from .selection_set import SelectionSet


class Aggregate(Enum):
    """Header state over a record collection."""

    ALL = "all"
    PARTIAL = "partial"
    NONE = "none"


def all_selected(selection: SelectionSet, identifiers: Iterable[Any]) -> bool:
    """True iff there is at least one identifier and every one is selected.

    Stops at the first unselected identifier. An empty collection is never
    "all selected", so an empty page shows an unchecked header.
    """
    seen_any = False
    for identifier in identifiers:
        if identifier not in selection:
            return False
        seen_any = True
    return seen_any


def classify(selection: SelectionSet, identifiers: Iterable[Any]) -> Aggregate:
    """Full tri-state classification. Visits every identifier."""
    total = 0
    selected = 0
    for identifier in identifiers:
        total += 1
        if identifier in selection:
            selected += 1
    if total and selected == total:
        return Aggregate.ALL
    if selected:
        return Aggregate.PARTIAL
    return Aggregate.NONE
