"""Column storage of the components of one archetype."""

from __future__ import annotations

from typing import Any

from .component import ComponentId, Entity


class Column:
    """Ordered storage of components of a single type."""

    def __init__(self, component_type: type) -> None:
        self.component_type = component_type
        self._data: list[Any] = []

    def append(self, component: Any) -> None:
        if not isinstance(component, self.component_type):
            raise TypeError(
                f"column of {self.component_type.__name__} cannot hold {type(component).__name__}"
            )
        self._data.append(component)

    def __getitem__(self, index: int) -> Any:
        return self._data[index]

    def __len__(self) -> int:
        return len(self._data)


class Table:
    """Stores entities of one archetype, one column per component type."""

    def __init__(self, *args: Any) -> None:
        self._entities: list[Entity] = []
        self._columns: dict[ComponentId, Column] = {}
        for component in args:
            component_id = ComponentId.from_type(type(component))
            if component_id not in self._columns:
                self._columns[component_id] = Column(component_id.id)

    def _column(self, component_type: type) -> Column:
        try:
            return self._columns[ComponentId.from_type(component_type)]
        except KeyError:
            raise KeyError(f"table has no column for {component_type.__name__}") from None

    def add(self, entity: Entity, *args: Any) -> int:
        """Store an entity and its components; return its row."""
        columns = [self._column(type(component)) for component in args]
        row = len(self._entities)
        self._entities.append(entity)
        for column, component in zip(columns, args):
            column.append(component)
        return row

    @property
    def entity_count(self) -> int:
        return len(self._entities)

    @property
    def entities(self) -> tuple[Entity, ...]:
        return tuple(self._entities)

    def get_component(self, component_type: type, row: int) -> Any:
        """Return the stored component of the given type at the given row."""
        if row < 0:
            raise IndexError(f"row {row} out of range")
        return self._column(component_type)[row]