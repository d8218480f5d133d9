# world.py
from __future__ import annotations
from typing import Any, Dict, List, Type, TypeVar

from .errors import NotFound

T = TypeVar("T")


class World:
    """
    Entity/component store.

    Entities are integer handles taken from a counter that only grows, so a
    despawned handle is never handed out again. Each component type gets its
    own table {handle: component}; a component is keyed by its Python type.
    """

    def __init__(self) -> None:
        self._next_handle = 0
        self._alive: Dict[int, None] = {}   # insertion-ordered set
        self._tables: Dict[type, Dict[int, Any]] = {}

    def __len__(self) -> int:
        return len(self._alive)

    def contains(self, handle: int) -> bool:
        return handle in self._alive

    def spawn(self, *components: Any) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._alive[handle] = None
        for c in components:
            self.insert(handle, c)
        return handle

    def insert(self, handle: int, component: Any) -> None:
        """Attach a component, replacing any existing one of the same type."""
        if handle not in self._alive:
            raise NotFound(handle)
        self._tables.setdefault(type(component), {})[handle] = component

    def despawn(self, handle: int) -> None:
        if handle not in self._alive:
            raise NotFound(handle)
        del self._alive[handle]
        for table in self._tables.values():
            table.pop(handle, None)

    def get(self, handle: int, kind: Type[T]) -> T:
        if handle not in self._alive:
            raise NotFound(handle)
        try:
            return self._tables[kind][handle]
        except KeyError:
            raise NotFound(handle, kind) from None

    def has(self, handle: int, kind: type) -> bool:
        return handle in self._tables.get(kind, {})

    def query(self, *kinds: type) -> List[int]:
        """Handles carrying every given component type, in spawn order."""
        if not kinds:
            return list(self._alive)
        tables = [self._tables.get(k, {}) for k in kinds]
        return [h for h in self._alive if all(h in t for t in tables)]
