"""A registry that keeps the components a system works on."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class ComponentRegistry(Generic[T]):
    """Stores registered components in registration order, compared by identity."""

    def __init__(self) -> None:
        self._components: list[T] = []

    def register(self, component: T | None) -> None:
        if component is None:
            return
        self._components.append(component)

    def unregister(self, component: T | None) -> None:
        if component is None:
            return
        for index, registered in enumerate(self._components):
            if registered is component:
                del self._components[index]
                return

    def __iter__(self) -> Iterator[T]:
        # Iterate over a snapshot so systems may register or remove components meanwhile.
        return iter(list(self._components))

    def __len__(self) -> int:
        return len(self._components)