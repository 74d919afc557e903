"""Axis-aligned collision detection between game objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from .registry import ComponentRegistry
from .vecmath import squared_distance

if TYPE_CHECKING:
    from .physics import PhysicsComponent

_BROAD_PHASE_DISTANCE = 50.0


@dataclass
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    def intersects(self, other: Rect) -> bool:
        """True when the two rectangles overlap with a non-empty area."""
        left = max(min(self.x, self.x + self.width), min(other.x, other.x + other.width))
        right = min(max(self.x, self.x + self.width), max(other.x, other.x + other.width))
        top = max(min(self.y, self.y + self.height), min(other.y, other.y + other.height))
        bottom = min(max(self.y, self.y + self.height), max(other.y, other.y + other.height))
        return left < right and top < bottom


@dataclass(eq=False)
class CollisionComponent:
    """Collision data of one object: its rectangle, physics body, owner and callback."""

    rect: Rect
    physics: PhysicsComponent
    parent: Any = None
    ignored: list = field(default_factory=list)
    callback: Callable[[Any], None] | None = None
    _registered_with: CollisionComponent | None = field(default=None, init=False, repr=False)
    _registered: bool = field(default=False, init=False, repr=False)
    _marked_for_delete: bool = field(default=False, init=False, repr=False)

    @property
    def collision_registered(self) -> bool:
        return self._registered

    @property
    def colliding_component(self) -> CollisionComponent | None:
        return self._registered_with if self._registered else None

    @property
    def marked_for_delete(self) -> bool:
        return self._marked_for_delete

    def register_collision(self, other: CollisionComponent) -> None:
        self._registered = True
        self._registered_with = other

    def reset_collision(self) -> None:
        self._registered = False
        self._registered_with = None

    def mark_for_delete(self) -> None:
        """Have the system drop this component at the end of its next post_update."""
        self._marked_for_delete = True


class CollisionSystem(ComponentRegistry[CollisionComponent]):
    """Finds overlapping components and notifies their owners."""

    def update(self, delta_time: float) -> None:
        components = list(self)
        for component in components:
            rect = component.rect
            position = component.physics.position
            rect.x = position.x - rect.width / 2
            rect.y = position.y - rect.height / 2

        for current in components:
            if current.collision_registered or current.marked_for_delete:
                continue
            current_pos = current.physics.position
            for test in components:
                if test is current or test.collision_registered:
                    continue
                if any(obj is test.parent for obj in current.ignored):
                    continue
                test_pos = test.physics.position
                if squared_distance(test_pos, current_pos) >= _BROAD_PHASE_DISTANCE**2:
                    continue
                if current.rect.intersects(test.rect):
                    current.register_collision(test)
                    test.register_collision(current)

    def post_update(self) -> None:
        """Run collision callbacks, then drop components marked for deletion."""
        components = list(self)
        for component in components:
            if not component.collision_registered or component.marked_for_delete:
                continue
            other = component.colliding_component
            if component.callback is not None and other is not None:
                component.callback(other.parent)

        doomed = [component for component in components if component.marked_for_delete]
        for component in reversed(doomed):
            self.unregister(component)