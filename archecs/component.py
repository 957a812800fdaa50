"""Component base class, component identifiers and entity handles."""

from __future__ import annotations

from dataclasses import dataclass


class Component:
    """Base class every component derives from."""

    def hash(self) -> int:
        """Return a hash identifying the concrete component type."""
        return hash(type(self))

    def to_string(self) -> str:
        return "Component"

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True)
class ComponentId:
    """Identifies a component type."""

    id: type

    @classmethod
    def from_type(cls, component_type: type) -> ComponentId:
        return cls(component_type)

    def __str__(self) -> str:
        return f"ComponentId( name: {self.id.__name__}, id: {hash(self.id)})"


@dataclass(frozen=True)
class Entity:
    """Handle to a spawned entity."""

    id: int

    def __str__(self) -> str:
        return f"Entity({self.id})"


@dataclass
class EntityMetaData:
    """Where an entity's components are stored."""

    table_id: int
    table_row: int