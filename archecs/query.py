"""Queries over the entities of a world."""

from __future__ import annotations

from typing import Any, ClassVar, Iterator

from .iterable import IterableBase
from .world import World


def _check_types(types: tuple[Any, ...]) -> tuple[type, ...]:
    for param in types:
        if not isinstance(param, type):
            raise TypeError(
                "query parameters must be Entity or component types, "
                f"got {param!r}"
            )
    return tuple(types)


class Query(IterableBase):
    """Yields, for each entity of a world, a tuple of the requested components.

    The requested types are given either as subscript, ``Query[Entity, Position](world)``,
    or as extra arguments, ``Query(world, Entity, Position)``. Requesting ``Entity``
    yields the entity handle itself. An entity that lacks a requested component
    makes iteration raise ``KeyError``.
    """

    _params: ClassVar[tuple[type, ...] | None] = None
    _specialised: ClassVar[dict[tuple[type, ...], type]] = {}

    def __init__(self, world: World, *args: type) -> None:
        if args and self._params is not None:
            raise TypeError("query types are already given by subscript")
        types = args if args else (self._params or ())
        self._world = world
        self._types = _check_types(tuple(types))

    def __class_getitem__(cls, params: Any) -> type[Query]:
        if cls._params is not None:
            raise TypeError(f"{cls.__name__} is already specialised")
        if not isinstance(params, tuple):
            params = (params,)
        types = _check_types(params)
        specialised = Query._specialised.get(types)
        if specialised is None:
            name = "Query[" + ", ".join(t.__name__ for t in types) + "]"
            specialised = type(name, (Query,), {"_params": types})
            Query._specialised[types] = specialised
        return specialised

    @property
    def component_types(self) -> tuple[type, ...]:
        """The types each yielded tuple holds, in order."""
        return self._types

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        world = self._world
        for index in range(world.entity_count):
            yield tuple(world.get_component(t, index) for t in self._types)