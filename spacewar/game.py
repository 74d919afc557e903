"""The game world: its objects, textures and the systems that drive them."""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Mapping, TypeVar

import pygame

from .collision import CollisionSystem
from .gameobject import BaseGameObject, PhysicsGameObject
from .input import InputSystem, PygameJoysticks
from .physics import PhysicsSystem
from .vecmath import Vec2

ObjectT = TypeVar("ObjectT", bound=BaseGameObject)


class Game:
    """Owns the game objects and runs the systems each frame."""

    def __init__(self, window_size: tuple[int, int], joysticks: Any = None) -> None:
        width, height = window_size
        self.window_size = (int(width), int(height))
        self.physics = PhysicsSystem()
        self.collision = CollisionSystem()
        self.input = InputSystem(joysticks if joysticks is not None else PygameJoysticks())
        self._textures: dict[str, Any] = {}
        self._objects: list[BaseGameObject] = []
        self._to_destroy: list[BaseGameObject] = []

    @property
    def objects(self) -> list[BaseGameObject]:
        return list(self._objects)

    @property
    def textures(self) -> Mapping[str, Any]:
        return MappingProxyType(self._textures)

    def create_object(
        self, cls: type[ObjectT], texture: Any, origin: Vec2, start_position: Vec2
    ) -> ObjectT:
        obj = cls(self, texture, origin, start_position)
        self._objects.append(obj)
        return obj

    def mark_for_destruction(self, obj: BaseGameObject) -> None:
        """Queue a live object to be destroyed at the start of the next update."""
        if any(current is obj for current in self._objects):
            self._to_destroy.append(obj)

    def destroy_marked(self) -> None:
        while self._to_destroy:
            self.destroy_object(self._to_destroy.pop())

    def destroy_object(self, obj: BaseGameObject) -> None:
        for index, current in enumerate(self._objects):
            if current is obj:
                del self._objects[index]
                obj.dispose()
                return

    def destroy_all(self) -> None:
        while self._objects:
            self._objects.pop().dispose()

    def texture(self, name: str) -> Any:
        return self._textures[name]

    def load_textures(
        self, path: str | Path, loader: Callable[[Path], Any] | None = None
    ) -> None:
        """Load every .png under path, recursively, keyed by file stem."""
        load = loader if loader is not None else pygame.image.load
        for entry in sorted(Path(path).iterdir()):
            if entry.is_dir():
                self.load_textures(entry, loader)
            elif entry.is_file() and entry.suffix == ".png":
                try:
                    self._textures[entry.stem] = load(entry)
                except (OSError, pygame.error):
                    print(f"Failed to load asset {entry.stem} at location {entry}")
                    self._textures.setdefault(entry.stem, None)

    def update(self, delta_time: float) -> None:
        self.destroy_marked()
        # Objects spawned during this frame are first updated on the next one.
        frame_objects = list(self._objects)

        self.input.update()
        self.physics.update(delta_time)
        self.physics.post_update()

        for obj in frame_objects:
            obj.update(delta_time)
            if isinstance(obj, PhysicsGameObject):
                obj.wrap_position(self.window_size)

        self.collision.update(delta_time)
        self.collision.post_update()

    def shutdown(self) -> None:
        """Destroy every object and reset the systems and textures."""
        self.destroy_all()
        self._to_destroy.clear()
        self._textures.clear()
        self.physics = PhysicsSystem()
        self.collision = CollisionSystem()
        self.input = InputSystem(self.input.joysticks)