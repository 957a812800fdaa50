"""Archetype signatures and the map from archetype to table."""

from __future__ import annotations

from typing import Any, Iterator


class ArchetypeComponents:
    """The set of component types an entity is made of; order does not matter."""

    def __init__(self, *args: Any) -> None:
        self._signature = frozenset(type(component) for component in args)

    @classmethod
    def from_types(cls, *args: type) -> ArchetypeComponents:
        result = cls()
        result._signature = frozenset(args)
        return result

    @property
    def signature(self) -> frozenset[type]:
        return self._signature

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArchetypeComponents):
            return NotImplemented
        return self._signature == other._signature

    def __hash__(self) -> int:
        return hash(self._signature)

    def _names(self) -> Iterator[str]:
        return iter(sorted(t.__qualname__ for t in self._signature))

    def __str__(self) -> str:
        if not self._signature:
            return "{}"
        return "{ " + ", ".join(self._names()) + " }"

    def __repr__(self) -> str:
        return f"ArchetypeComponents({str(self)})"


class Archetypes:
    """Maps each archetype to the id of the table that stores it."""

    def __init__(self) -> None:
        self._table_ids: dict[ArchetypeComponents, int] = {}

    def __contains__(self, archetype_components: object) -> bool:
        return archetype_components in self._table_ids

    def insert(self, archetype_components: ArchetypeComponents, table_id: int) -> None:
        """Record the table for an archetype; an existing entry is kept."""
        self._table_ids.setdefault(archetype_components, table_id)

    def at(self, archetype_components: ArchetypeComponents) -> int:
        """Return the table id of an archetype, raising KeyError if unknown."""
        return self._table_ids[archetype_components]

    def __len__(self) -> int:
        return len(self._table_ids)