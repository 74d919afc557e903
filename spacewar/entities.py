"""The things that fly around: ships, shots, missiles, power packs, the sun and planets."""

from __future__ import annotations

import math
import random
from enum import IntEnum
from typing import Any

from .delegate import Delegate
from .gameobject import BaseGameObject, PhysicsGameObject, Sprite
from .vecmath import (
    Vec2,
    dot_product,
    normalize,
    random_in_range,
    rotation_to_unit_vector,
    squared_distance,
)

FRAME_SIZE = 48
EXPLOSION_TEXTURE = "ship_explosion"
SUN_POSITION = Vec2(960, 540)
ARENA_WIDTH = 1920
ARENA_HEIGHT = 1080

_EFFECT_ORIGIN = Vec2(24, 24)
_PROJECTILE_SIZE = Vec2(20, 20)
_PROJECTILE_SPEED = 500.0


def _scaled(sprite: Sprite, size: Vec2) -> Vec2:
    return Vec2(size.x * sprite.scale.x, size.y * sprite.scale.y)


def _spawn_explosion(game: Any, position: Vec2) -> ExplosionEffect:
    explosion = game.create_object(
        ExplosionEffect, game.texture(EXPLOSION_TEXTURE), _EFFECT_ORIGIN, position
    )
    explosion.init()
    return explosion


class ExplosionEffect(BaseGameObject):
    """A short animated explosion that removes itself when finished."""

    DURATION = 0.85
    FRAMES = 7

    def __init__(self, game: Any, texture: Any, origin: Vec2, start_position: Vec2) -> None:
        super().__init__(game, texture, origin, start_position)
        self.timer = 0.0
        self.frame_duration = 0.0

    def init(self) -> None:
        self.sprite.texture_rect = (0, 0, FRAME_SIZE, FRAME_SIZE)
        self.frame_duration = self.DURATION / self.FRAMES

    def update(self, delta_time: float) -> None:
        if self.frame_duration <= 0.0:
            return
        self.timer += delta_time
        offset = int(self.timer / self.frame_duration) * FRAME_SIZE
        self.sprite.texture_rect = (offset, 0, FRAME_SIZE, FRAME_SIZE)
        if self.timer >= self.DURATION:
            self.game.mark_for_destruction(self)


class PhaserShots(PhysicsGameObject):
    """A straight-flying shot that explodes on contact."""

    SHOT_DAMAGE = 25

    def init(self) -> None:
        physics = self.physics
        physics.movable = True
        physics.affected_by_gravity = False
        physics.max_speed = 500.0
        physics.mass = 0.0
        self.sprite.texture_rect = (FRAME_SIZE, 0, FRAME_SIZE, FRAME_SIZE)
        self.attach_collision(_scaled(self.sprite, _PROJECTILE_SIZE))

    def update(self, delta_time: float) -> None:
        self.sprite.position = self.physics.position

    def on_collision(self, other: PhysicsGameObject) -> None:
        _spawn_explosion(self.game, self.physics.position)
        self.game.mark_for_destruction(self)


class HomingMissile(PhysicsGameObject):
    """A missile that locks on to the first nearby ship it is not told to ignore."""

    MISSILE_DAMAGE = 75
    SEARCH_RADIUS = 200.0
    STEERING_STRENGTH = 200.0

    def __init__(self, game: Any, texture: Any, origin: Vec2, start_position: Vec2) -> None:
        super().__init__(game, texture, origin, start_position)
        self.target: PhysicsGameObject | None = None
        self.angular_speed = 180.0

    def init(self) -> None:
        physics = self.physics
        physics.movable = True
        physics.affected_by_gravity = False
        physics.max_speed = 400.0
        physics.mass = 0.0
        self.sprite.texture_rect = (FRAME_SIZE, 0, FRAME_SIZE, FRAME_SIZE)
        self.attach_collision(_scaled(self.sprite, _PROJECTILE_SIZE))

    def update(self, delta_time: float) -> None:
        self.sprite.position = self.physics.position
        if self.target is not None and self.target.disposed:
            self.target = None
        if self.target is None and not self._search_for_target():
            return

        to_target = normalize(self.target.physics.position - self.physics.position)
        forward = rotation_to_unit_vector(self.sprite.rotation)
        cosine = dot_product(to_target, forward)
        sine = math.sqrt(max(0.0, 1.0 - cosine * cosine))
        self.sprite.rotate(sine * self.angular_speed * delta_time)
        self.physics.velocity += to_target * self.STEERING_STRENGTH

    def on_collision(self, other: PhysicsGameObject) -> None:
        _spawn_explosion(self.game, self.physics.position)
        self.game.mark_for_destruction(self)

    def _search_for_target(self) -> bool:
        ignored = self.collision.ignored if self.collision is not None else []
        limit = self.SEARCH_RADIUS * self.SEARCH_RADIUS
        for obj in self.game.objects:
            if not isinstance(obj, Ship) or any(item is obj for item in ignored):
                continue
            if squared_distance(self.physics.position, obj.physics.position) <= limit:
                self.target = obj
                return True
        return False


class Sun(PhysicsGameObject):
    """The fixed, heavy body in the centre that pulls on everything."""

    def init(self) -> None:
        physics = self.physics
        physics.movable = False
        physics.affected_by_gravity = False
        physics.max_speed = 0.0
        physics.applies_gravity = True
        physics.mass = 5000.0
        physics.gravity_strength = 1000.0
        self.attach_collision(_scaled(self.sprite, Vec2(64, 64)))

    def update(self, delta_time: float) -> None:
        """The sun does not change from frame to frame."""

    def on_collision(self, other: PhysicsGameObject) -> None:
        self.collision.reset_collision()


class PowerPackType(IntEnum):
    NONE = 0
    HEALTH = 1
    ENERGY = 2
    DAMAGE = 3
    TYPE_MAX = 3


def grant_power_pack(pack_type: PowerPackType) -> int:
    """Amount a pack of the given type grants: health points, energy packs or missiles."""
    return {
        PowerPackType.HEALTH: 100,
        PowerPackType.ENERGY: 2,
        PowerPackType.DAMAGE: 2,
    }.get(pack_type, 0)


class PowerPack(PhysicsGameObject):
    """A pickup orbiting the centre of gravity."""

    def __init__(self, game: Any, texture: Any, origin: Vec2, start_position: Vec2) -> None:
        super().__init__(game, texture, origin, start_position)
        self.pack_type = PowerPackType.NONE

    def init(self) -> None:
        physics = self.physics
        physics.movable = True
        physics.affected_by_gravity = True
        physics.applies_gravity = False
        physics.satellite_body = True
        self.sprite.scale = Vec2(1, 1)
        self.attach_collision(Vec2(19, 11))

    def update(self, delta_time: float) -> None:
        self.sprite.position = self.physics.position

    def on_collision(self, other: PhysicsGameObject) -> None:
        if isinstance(other, (Sun, PhaserShots)):
            _spawn_explosion(self.game, self.physics.position)
        self.collision.reset_collision()
        self.game.mark_for_destruction(self)


_PACK_TEXTURES = {
    PowerPackType.HEALTH: "health_pack",
    PowerPackType.ENERGY: "power_pack",
    PowerPackType.DAMAGE: "damage_pack",
}


class Planet(PhysicsGameObject):
    """A fixed gravitational body that periodically spawns power packs around it."""

    def __init__(self, game: Any, texture: Any, origin: Vec2, start_position: Vec2) -> None:
        super().__init__(game, texture, origin, start_position)
        self.rng: random.Random | None = None
        self.spawn_interval = 0.0
        self.timer = 0.0
        self.power_up_type = PowerPackType.NONE
        self.pack_list: list[PowerPack] = []

    def init(self) -> None:
        physics = self.physics
        physics.movable = False
        physics.affected_by_gravity = False
        physics.max_speed = 0.0
        physics.applies_gravity = True
        physics.mass = 500.0
        physics.gravity_strength = 1000.0
        self.power_up_type = PowerPackType(
            random_in_range(1, int(PowerPackType.TYPE_MAX), self.rng)
        )
        if self.power_up_type != PowerPackType.NONE:
            self.spawn_interval = random_in_range(8.0, 15.0, self.rng)

    def update(self, delta_time: float) -> None:
        if self.power_up_type == PowerPackType.NONE:
            return
        self.timer += delta_time
        if self.timer < self.spawn_interval:
            return
        self.timer = 0.0
        self.spawn_interval = random_in_range(8.0, 15.0, self.rng)

        spawn_distance = random_in_range(50.0, 100.0, self.rng)
        rotation = random_in_range(0.0, 360.0, self.rng)
        position = rotation_to_unit_vector(rotation) * spawn_distance + self.physics.position

        texture_name = _PACK_TEXTURES.get(self.power_up_type)
        if texture_name is None:
            return
        pack = self.game.create_object(
            PowerPack, self.game.texture(texture_name), _EFFECT_ORIGIN, position
        )
        pack.init()
        pack.pack_type = self.power_up_type
        self.pack_list.append(pack)

    def on_collision(self, other: PhysicsGameObject) -> None:
        """Planets are not affected by collisions."""


class Ship(PhysicsGameObject):
    """A player's ship; reports hits and pickups through its delegates."""

    ANGULAR_SPEED = 180.0
    BOOST_STRENGTH = 10000.0
    SUN_DAMAGE = 1000

    def __init__(self, game: Any, texture: Any, origin: Vec2, start_position: Vec2) -> None:
        super().__init__(game, texture, origin, start_position)
        self.rng: random.Random | None = None
        self.on_ship_hit = Delegate()
        self.on_power_pack_hit = Delegate()
        self.on_ship_downed = Delegate()
        self.forward = Vec2()
        self.input_rotation = 0.0

    def init(self) -> None:
        physics = self.physics
        physics.movable = True
        physics.affected_by_gravity = True
        physics.max_speed = 300.0
        self.attach_collision(_scaled(self.sprite, Vec2(48, 48)))
        self._update_forward()

    def update(self, delta_time: float) -> None:
        self.sprite.position = self.physics.position
        self.sprite.rotate(self.input_rotation * self.ANGULAR_SPEED * delta_time)
        self._update_forward()

    def on_collision(self, other: PhysicsGameObject) -> None:
        self.collision.reset_collision()
        if isinstance(other, PhaserShots):
            self.on_ship_hit.broadcast(PhaserShots.SHOT_DAMAGE, other)
        elif isinstance(other, Sun):
            self.on_ship_hit.broadcast(self.SUN_DAMAGE, other)
        elif isinstance(other, HomingMissile):
            self.on_ship_hit.broadcast(HomingMissile.MISSILE_DAMAGE, other)
        elif isinstance(other, PowerPack):
            self.on_power_pack_hit.broadcast(other)

    def set_rotation_input(self, rotation: float) -> None:
        self.input_rotation = rotation

    def activate_boosters(self) -> None:
        self.physics.net_force += self.forward * self.BOOST_STRENGTH

    def fire_phaser_shots(self) -> PhaserShots:
        return self._launch(PhaserShots, "shot")

    def engage_hyperdrive(self) -> None:
        source = self.rng if self.rng is not None else random
        self.physics.position = Vec2(
            float(source.randrange(ARENA_WIDTH)), float(source.randrange(ARENA_HEIGHT))
        )

    def fire_homing_missile(self) -> HomingMissile:
        return self._launch(HomingMissile, "missile")

    def _launch(self, cls: type, texture_name: str) -> Any:
        projectile = self.game.create_object(
            cls, self.game.texture(texture_name), _EFFECT_ORIGIN, self.physics.position
        )
        projectile.parent_object = self
        projectile.init()
        projectile.set_velocity(self.forward * _PROJECTILE_SPEED)
        projectile.set_rotation(self.sprite.rotation)
        projectile.ignore_collisions_from(self)
        self.ignore_collisions_from(projectile)
        return projectile

    def _update_forward(self) -> None:
        self.forward = rotation_to_unit_vector(self.sprite.rotation)


def populate_star_system(game: Any, rng: random.Random | None = None) -> list[PhysicsGameObject]:
    """Create the sun and one to three planets around it; return them, sun first."""
    sun = game.create_object(Sun, game.texture("sun_64"), Vec2(32, 32), SUN_POSITION)
    sun.init()
    game.physics.add_gravitational_object(sun.physics)
    created: list[PhysicsGameObject] = [sun]

    planet_count = random_in_range(1, 3, rng)
    for number in range(1, planet_count + 1):
        orbit = random_in_range(150.0, 250.0, rng) * number
        rotation = random_in_range(0.0, 360.0, rng)
        position = rotation_to_unit_vector(rotation) * orbit + SUN_POSITION
        planet = game.create_object(
            Planet, game.texture(f"planet_{number}"), Vec2(24, 24), position
        )
        planet.rng = rng
        planet.init()
        game.physics.add_gravitational_object(planet.physics)
        created.append(planet)
    return created