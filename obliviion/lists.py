"""Ordered containers for game objects."""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

import pygame

from obliviion.entities import Entidade

T = TypeVar("T")


class Lista(Generic[T]):
    """An append-only ordered collection that can be cleared."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def append(self, item: T) -> None:
        self._items.append(item)

    def clear(self) -> None:
        self._items.clear()

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


class ListaEntidades:
    """A list of entities that updates and renders them in insertion order."""

    def __init__(self) -> None:
        self._entities: Lista[Entidade] = Lista()

    def add(self, entity: Optional[Entidade]) -> None:
        """Append an entity; None is ignored."""
        if entity is not None:
            self._entities.append(entity)

    def update(self, delta_time: float) -> None:
        for entity in self._entities:
            entity.update(delta_time)

    def render(self, surface: pygame.Surface) -> None:
        for entity in self._entities:
            entity.render(surface)

    def clear(self) -> None:
        self._entities.clear()

    def __iter__(self) -> Iterator[Entidade]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)