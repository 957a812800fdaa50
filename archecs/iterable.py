"""Mixin giving iterable containers a counting helper."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterator


class IterableBase(ABC):
    """Base for classes that can be iterated; adds :meth:`count`."""

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Iterate over the items."""

    def count(self) -> int:
        """Return the number of items one full iteration yields."""
        return sum(1 for _ in self)