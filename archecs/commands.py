"""Commands that systems use to change the world."""

from __future__ import annotations

from typing import Any

from .component import Entity
from .world import World


class Commands:
    """Gives systems a way to spawn entities into a world."""

    def __init__(self, world: World) -> None:
        self._world = world

    def spawn(self, *args: Any) -> Entity:
        """Spawn an entity made of the given components and return it."""
        return self._world.spawn(*args)