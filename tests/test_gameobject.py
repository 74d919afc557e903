from types import SimpleNamespace

import pygame
import pytest

from spacewar.collision import CollisionSystem
from spacewar.gameobject import (
    DEFAULT_SCALE,
    RUMBLE_STRENGTH,
    AbilityBlueprint,
    BaseGameObject,
    PhysicsGameObject,
    Sprite,
)
from spacewar.physics import PhysicsSystem
from spacewar.vecmath import Vec2


def make_game():
    return SimpleNamespace(physics=PhysicsSystem(), collision=CollisionSystem())


class Static(BaseGameObject):
    def init(self):
        self.ready = True

    def update(self, delta_time):
        self.last = delta_time


class Body(PhysicsGameObject):
    def init(self):
        self.ready = True

    def update(self, delta_time):
        self.last = delta_time

    def on_collision(self, other):
        self.hit = other


def test_sprite_rotate_stays_in_range_and_reverses():
    sprite = Sprite()
    sprite.rotate(370)
    assert 0 <= sprite.rotation < 360
    sprite.rotate(-370)
    assert sprite.rotation == pytest.approx(0.0)


def test_sprite_draw_centres_on_origin():
    texture = pygame.Surface((10, 10))
    texture.fill((255, 0, 0))
    target = pygame.Surface((100, 100))
    sprite = Sprite(texture=texture, origin=Vec2(5, 5), position=Vec2(50, 50))
    sprite.draw(target)
    assert tuple(target.get_at((50, 50)))[:3] == (255, 0, 0)
    assert tuple(target.get_at((30, 30)))[:3] == (0, 0, 0)


def test_ability_cooldown_cycle():
    owner = SimpleNamespace(charge=100)
    ability = AbilityBlueprint(owner, 10, 0.5)
    assert ability.can_activate()
    assert ability.activate()
    assert not ability.can_activate()
    assert not ability.activate()
    ability.tick(0.25)
    assert not ability.can_activate()
    ability.tick(0.3)
    assert ability.can_activate()


def test_ability_needs_more_charge_than_cost():
    owner = SimpleNamespace(charge=10)
    ability = AbilityBlueprint(owner, 10, 0.5)
    assert not ability.activate()
    owner.charge = 11
    assert ability.activate()


def test_negative_cooldown_allows_repeated_use():
    owner = SimpleNamespace(charge=100)
    ability = AbilityBlueprint(owner, 1, -1.0)
    assert ability.activate()
    assert ability.activate()


def test_ability_rumble_starts_and_stops():
    calls = []
    owner = SimpleNamespace(charge=100)
    ability = AbilityBlueprint(owner, 1, 1.0, rumble_duration=0.5, rumble=lambda a, b: calls.append((a, b)))
    ability.activate()
    assert calls == [(RUMBLE_STRENGTH, RUMBLE_STRENGTH)]
    ability.tick(0.6)
    assert calls[-1] == (0, 0)


def test_base_object_sprite_defaults():
    obj = Static(make_game(), "tex", Vec2(24, 24), Vec2(10, 20))
    assert obj.sprite.position == Vec2(10, 20)
    assert obj.sprite.origin == Vec2(24, 24)
    assert obj.sprite.scale == Vec2(DEFAULT_SCALE, DEFAULT_SCALE)
    obj.set_rotation(-90)
    assert 0 <= obj.sprite.rotation < 360
    obj.dispose()
    assert obj.disposed


def test_physics_object_registers_and_unregisters():
    game = make_game()
    body = Body(game, None, Vec2(), Vec2(3, 4))
    assert len(game.physics) == 1
    assert body.physics.position == Vec2(3, 4)
    body.dispose()
    assert len(game.physics) == 0


def test_collision_attach_and_dispose_marks_for_delete():
    game = make_game()
    body = Body(game, None, Vec2(), Vec2(3, 4))
    component = body.attach_collision(Vec2(20, 20))
    assert list(game.collision) == [component]
    assert component.parent is body
    body.dispose()
    assert component.marked_for_delete


@pytest.mark.parametrize(
    "start, expected",
    [
        (Vec2(810, 10), Vec2(0, 10)),
        (Vec2(-5, 10), Vec2(800, 10)),
        (Vec2(10, 610), Vec2(10, 0)),
        (Vec2(10, -1), Vec2(10, 600)),
        (Vec2(400, 300), Vec2(400, 300)),
    ],
)
def test_wrap_position(start, expected):
    body = Body(make_game(), None, Vec2(), start)
    body.wrap_position((800, 600))
    assert body.physics.position == expected


def test_ignore_requires_collision():
    game = make_game()
    body = Body(game, None, Vec2(), Vec2())
    other = Body(game, None, Vec2(), Vec2())
    with pytest.raises(RuntimeError):
        body.ignore_collisions_from(other)
    body.attach_collision(Vec2(5, 5))
    body.ignore_collisions_from(other)
    assert body.collision.ignored == [other]


def test_set_velocity():
    body = Body(make_game(), None, Vec2(), Vec2())
    body.set_velocity(Vec2(7, -2))
    assert body.physics.velocity == Vec2(7, -2)