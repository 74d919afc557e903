"""Sprites, cooldown-limited abilities and the base classes of all game objects."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable

import pygame

from .collision import CollisionComponent, Rect
from .physics import PhysicsComponent
from .vecmath import Vec2

RUMBLE_STRENGTH = 64000
DEFAULT_SCALE = 0.75


@dataclass(eq=False)
class Sprite:
    """A textured quad placed by origin, position, rotation (degrees) and scale."""

    texture: Any = None
    origin: Vec2 = field(default_factory=Vec2)
    position: Vec2 = field(default_factory=Vec2)
    rotation: float = 0.0
    scale: Vec2 = field(default_factory=lambda: Vec2(1.0, 1.0))
    texture_rect: tuple[int, int, int, int] | None = None

    def __post_init__(self) -> None:
        self.rotation %= 360.0

    def rotate(self, degrees: float) -> None:
        self.rotation = (self.rotation + degrees) % 360.0

    def draw(self, target: pygame.Surface, texture: Any = None) -> None:
        """Blit the sprite onto target, using texture in place of its own if given."""
        image = texture if texture is not None else self.texture
        if image is None:
            return
        bounds = image.get_rect()
        if self.texture_rect is None:
            left, top, width, height = 0, 0, bounds.width, bounds.height
        else:
            left, top, width, height = self.texture_rect
        area = pygame.Rect(left, top, width, height).clip(bounds)
        if area.width <= 0 or area.height <= 0:
            return
        image = image.subsurface(area)

        scaled_w = round(area.width * abs(self.scale.x))
        scaled_h = round(area.height * abs(self.scale.y))
        if scaled_w <= 0 or scaled_h <= 0:
            return
        if (scaled_w, scaled_h) != (area.width, area.height):
            image = pygame.transform.scale(image, (scaled_w, scaled_h))
        if self.scale.x < 0 or self.scale.y < 0:
            image = pygame.transform.flip(image, self.scale.x < 0, self.scale.y < 0)
        if self.rotation:
            image = pygame.transform.rotate(image, -self.rotation)

        local_cx = (area.x - left) + area.width / 2
        local_cy = (area.y - top) + area.height / 2
        off_x = (local_cx - self.origin.x) * self.scale.x
        off_y = (local_cy - self.origin.y) * self.scale.y
        theta = math.radians(self.rotation)
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        centre = (
            round(self.position.x + off_x * cos_t - off_y * sin_t),
            round(self.position.y + off_x * sin_t + off_y * cos_t),
        )
        target.blit(image, image.get_rect(center=centre))


class AbilityBlueprint:
    """Cost and cooldown bookkeeping of one ability; the owner exposes a ``charge``."""

    def __init__(
        self,
        owner: Any,
        cost: int,
        cooldown: float,
        rumble_duration: float = 0.2,
        rumble: Callable[[int, int], None] | None = None,
    ) -> None:
        self.owner = owner
        self.cost = cost
        self.cooldown = cooldown
        self.rumble_duration = rumble_duration
        self.rumble = rumble
        self._timer = 0.0
        self._rumble_timer = 0.0

    @property
    def remaining(self) -> float:
        return self._timer

    def can_activate(self) -> bool:
        return self.owner.charge > self.cost and self._timer <= 0.0

    def activate(self) -> bool:
        """Start the cooldown and return True if the ability may be used now."""
        if not self.can_activate():
            return False
        self._timer = self.cooldown
        if self.rumble is not None:
            self.rumble(RUMBLE_STRENGTH, RUMBLE_STRENGTH)
        return True

    def tick(self, delta_time: float) -> None:
        if 0.0 < self._timer <= self.cooldown:
            self._timer -= delta_time
        self._rumble_timer += delta_time
        if self._rumble_timer >= self.rumble_duration:
            self._rumble_timer = 0.0
            if self.rumble is not None:
                self.rumble(0, 0)


class BaseGameObject(ABC):
    """Anything with a sprite that lives in the game."""

    def __init__(self, game: Any, texture: Any, origin: Vec2, start_position: Vec2) -> None:
        self.game = game
        self.disposed = False
        self.sprite = Sprite(
            texture=texture,
            origin=origin,
            position=start_position,
            rotation=0.0,
            scale=Vec2(DEFAULT_SCALE, DEFAULT_SCALE),
        )

    @abstractmethod
    def init(self) -> None:
        """Set up the object once it has been created by the game."""

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the object by one frame."""

    def set_rotation(self, degrees: float) -> None:
        self.sprite.rotation = degrees % 360.0

    def dispose(self) -> None:
        """Release what the object holds; called when the game destroys it."""
        self.disposed = True


class PhysicsGameObject(BaseGameObject):
    """A game object that moves under the physics system and can collide."""

    def __init__(self, game: Any, texture: Any, origin: Vec2, start_position: Vec2) -> None:
        super().__init__(game, texture, origin, start_position)
        self.physics = PhysicsComponent(position=start_position)
        game.physics.register(self.physics)
        self.collision: CollisionComponent | None = None
        self.parent_object: PhysicsGameObject | None = None

    def attach_collision(self, size: Vec2) -> CollisionComponent:
        """Create and register a collision box of the given size that reports to on_collision."""
        position = self.sprite.position
        rect = Rect(position.x, position.y, size.x, size.y)
        self.collision = CollisionComponent(rect, self.physics, self, callback=self.on_collision)
        self.game.collision.register(self.collision)
        return self.collision

    def wrap_position(self, window_size: tuple[int, int]) -> None:
        """Move the object to the opposite edge once it leaves the window."""
        width, height = window_size
        x, y = self.physics.position.x, self.physics.position.y
        if x > width:
            x = 0.0
        elif x < 0.0:
            x = float(width)
        if y > height:
            y = 0.0
        elif y < 0.0:
            y = float(height)
        self.physics.position = Vec2(x, y)

    @abstractmethod
    def on_collision(self, other: PhysicsGameObject) -> None:
        """React to a collision with another object."""

    def set_velocity(self, velocity: Vec2) -> None:
        self.physics.velocity = velocity

    def ignore_collisions_from(self, obj: PhysicsGameObject) -> None:
        if self.collision is None:
            raise RuntimeError("object has no collision component")
        self.collision.ignored.append(obj)

    def dispose(self) -> None:
        super().dispose()
        self.game.physics.unregister(self.physics)
        if self.collision is not None:
            self.collision.mark_for_delete()