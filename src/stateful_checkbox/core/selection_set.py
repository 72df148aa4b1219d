"""SelectionSet: ordered, duplicate-free set of selected identifiers.

Immutable: every mutation returns a new SelectionSet.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator


@dataclass(frozen=True)
class SelectionSet:
    """Ordered unique identifiers.

    Insertion order is kept so persisted sets round-trip in a stable order;
    it carries no other meaning. New identifiers are always appended.
    """

    ids: tuple = ()
    _members: frozenset = field(default=frozenset(), init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_members", frozenset(self.ids))
        if len(self._members) != len(self.ids):
            raise ValueError("SelectionSet identifiers must be unique.")

    @classmethod
    def from_ids(cls, values: Iterable[Any] | None) -> SelectionSet:
        """Build from any iterable, dropping repeats after the first."""
        if values is None:
            return cls()
        seen: set = set()
        ordered: list = []
        for value in values:
            if value not in seen:
                seen.add(value)
                ordered.append(value)
        return cls(ids=tuple(ordered))

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._members

    def __len__(self) -> int:
        return len(self.ids)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.ids)

    def to_list(self) -> list:
        return list(self.ids)

    def toggle(self, identifier: Any) -> SelectionSet:
        """Remove the identifier if present, else append it."""
        if identifier in self._members:
            return SelectionSet(ids=tuple(x for x in self.ids if x != identifier))
        return SelectionSet(ids=self.ids + (identifier,))

    def union(self, identifiers: Iterable[Any]) -> SelectionSet:
        """Append every absent identifier, in the order given."""
        added: list = []
        seen = set(self._members)
        for identifier in identifiers:
            if identifier not in seen:
                seen.add(identifier)
                added.append(identifier)
        if not added:
            return self
        return SelectionSet(ids=self.ids + tuple(added))

    def difference(self, identifiers: Iterable[Any]) -> SelectionSet:
        """Remove the given identifiers; all others are left as they are."""
        removed = set(identifiers) & self._members
        if not removed:
            return self
        return SelectionSet(ids=tuple(x for x in self.ids if x not in removed))

    def is_superset_of(self, identifiers: Iterable[Any]) -> bool:
        return all(identifier in self._members for identifier in identifiers)
