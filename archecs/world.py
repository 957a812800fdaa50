"""The world: spawns entities and stores them in per-archetype tables."""

from __future__ import annotations

from typing import Any

from .archetype import ArchetypeComponents, Archetypes
from .component import Entity, EntityMetaData
from .table import Table


class World:
    """Holds all entities and their components."""

    def __init__(self) -> None:
        self._entities: list[EntityMetaData] = []
        self._archetypes = Archetypes()
        self._tables: list[Table] = []
        self._next_id = 0

    def spawn(self, *args: Any) -> Entity:
        """Create an entity made of the given components and return it."""
        archetype = ArchetypeComponents(*args)
        entity = Entity(self._next_id)
        self._next_id += 1
        if archetype not in self._archetypes:
            table_id = len(self._tables)
            self._tables.append(Table(*args))
            self._archetypes.insert(archetype, table_id)
        else:
            table_id = self._archetypes.at(archetype)
        row = self._tables[table_id].add(entity, *args)
        self._entities.append(EntityMetaData(table_id, row))
        return entity

    @property
    def entity_count(self) -> int:
        """Number of all currently active entities."""
        return len(self._entities)

    @property
    def tables_count(self) -> int:
        return len(self._tables)

    def get_component(self, component_type: type, entity_index: int) -> Any:
        """Return the component of the given type, or the Entity itself, for an entity index."""
        if entity_index < 0 or entity_index >= len(self._entities):
            raise IndexError(f"entity index {entity_index} out of range")
        meta = self._entities[entity_index]
        table = self._tables[meta.table_id]
        if component_type is Entity:
            return table.entities[meta.table_row]
        return table.get_component(component_type, meta.table_row)