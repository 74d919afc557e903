"""A player's ship, resources, abilities and controller input."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import Any, Mapping

from .delegate import Delegate
from .entities import (
    ARENA_HEIGHT,
    ARENA_WIDTH,
    EXPLOSION_TEXTURE,
    ExplosionEffect,
    PowerPack,
    PowerPackType,
    Ship,
    grant_power_pack,
)
from .gameobject import AbilityBlueprint
from .hud import PlayerHud
from .input import InputComponent
from .vecmath import Vec2

HUD_BASE = (120, 980)
HUD_SPACING = 540

_SHIP_ORIGIN = Vec2(24, 24)
_CENTRE_X = (720.0, 1200.0)
_CENTRE_Y = (405.0, 675.0)


class Button(IntEnum):
    """Controller buttons and the abilities they trigger."""

    BOOST = 0
    HYPERDRIVE = 1
    PHASER = 2
    MISSILE = 3


def _edge_coordinate(source: Any, size: int, band: tuple[float, float]) -> float:
    """A random coordinate in [0, size) that lies outside the open central band."""
    low, high = band
    while True:
        value = float(source.randrange(size))
        if not low < value < high:
            return value


class PlayerState:
    """Health, energy, ammunition, abilities and input of one player."""

    MAX_HEALTH = 100
    MAX_ENERGY = 100
    MAX_MISSILE_AMMO = 5

    def __init__(
        self, game: Any, hud_position: tuple[int, int], rng: random.Random | None = None
    ) -> None:
        self.game = game
        self.rng = rng
        self.score = 0
        self.energy_pack = 5
        self.health = self.MAX_HEALTH
        self.energy = self.MAX_ENERGY
        self.missile_ammo = 0
        self.ship: Ship | None = None
        self.hud = PlayerHud(hud_position)
        self.input = InputComponent()
        game.input.register(self.input)
        self.booster = AbilityBlueprint(self, 1, -1.0)
        self.phaser = AbilityBlueprint(self, 10, 0.2)
        self.hyperdrive = AbilityBlueprint(self, 50, 2.0)
        self.missile = AbilityBlueprint(self, 50, 1.0, 0.5)
        self.on_player_dead = Delegate()

    @property
    def charge(self) -> int:
        """Energy available in total, counting unused energy packs."""
        return self.energy + self.energy_pack * self.MAX_ENERGY

    def init(self, ship_name: str) -> None:
        """Spawn the player's ship near the edges of the arena."""
        source = self.rng if self.rng is not None else random
        position = Vec2(
            _edge_coordinate(source, ARENA_WIDTH, _CENTRE_X),
            _edge_coordinate(source, ARENA_HEIGHT, _CENTRE_Y),
        )
        ship = self.game.create_object(
            Ship, self.game.texture(ship_name), _SHIP_ORIGIN, position
        )
        ship.rng = self.rng
        ship.init()
        ship.on_ship_hit.bind(self.take_damage)
        ship.on_power_pack_hit.bind(self.activate_power_pack)
        ship.on_ship_downed.bind(self.add_score)
        self.ship = ship

    def process_input(self, delta_time: float) -> None:
        """Trigger the ability bound to the currently pressed button, if any."""
        button = self.input.button_id
        if button == -1 or self.ship is None:
            return
        if button == Button.BOOST and self.booster.activate():
            self.use_charge(self.booster.cost)
            self.ship.activate_boosters()
        elif button == Button.HYPERDRIVE and self.hyperdrive.activate():
            self.use_charge(self.hyperdrive.cost)
            self.ship.engage_hyperdrive()
        elif button == Button.PHASER and self.phaser.activate():
            self.use_charge(self.phaser.cost)
            self.ship.fire_phaser_shots()
        elif button == Button.MISSILE and self.missile.activate():
            if self.missile_ammo > 0:
                self.ship.fire_homing_missile()
                self.missile_ammo -= 1

    def update(self, delta_time: float) -> None:
        self.booster.tick(delta_time)
        self.phaser.tick(delta_time)
        self.hyperdrive.tick(delta_time)
        if self.ship is not None:
            self.ship.set_rotation_input(self.input.input_rotation)
        self.hud.update(
            self.health,
            self.MAX_HEALTH,
            self.energy,
            self.MAX_ENERGY,
            self.energy_pack,
            self.missile_ammo,
        )

    def render_hud(self, surface: Any, textures: Mapping[str, Any], font: Any) -> None:
        self.hud.draw(surface, textures, font)

    def add_score(self) -> None:
        self.score += 1

    def take_damage(self, amount: int, other: Any) -> None:
        """Lose health; on death credit the attacker, explode and drop the ship."""
        self.health -= amount
        if self.health > 0:
            return
        attacker = getattr(other, "parent_object", None)
        if isinstance(other, Ship):
            other.on_ship_downed.broadcast()
        elif isinstance(attacker, Ship):
            attacker.on_ship_downed.broadcast()

        self.on_player_dead.broadcast(self)

        ship = self.ship
        if ship is None:
            return
        explosion = self.game.create_object(
            ExplosionEffect,
            self.game.texture(EXPLOSION_TEXTURE),
            _SHIP_ORIGIN,
            ship.sprite.position,
        )
        explosion.init()
        ship.on_ship_hit.unbind(self.take_damage)
        ship.on_ship_downed.unbind(self.add_score)
        self.game.mark_for_destruction(ship)
        self.ship = None

    def activate_power_pack(self, other: Any) -> None:
        """Apply the effect of a collected power pack."""
        if not isinstance(other, PowerPack):
            raise TypeError(f"expected a PowerPack, got {type(other).__name__}")
        if other.pack_type == PowerPackType.HEALTH:
            self.health = min(
                self.health + grant_power_pack(PowerPackType.HEALTH), self.MAX_HEALTH
            )
        elif other.pack_type == PowerPackType.ENERGY:
            self.energy_pack += grant_power_pack(PowerPackType.ENERGY)
        elif other.pack_type == PowerPackType.DAMAGE:
            self.missile_ammo += min(
                self.missile_ammo + grant_power_pack(PowerPackType.DAMAGE),
                self.MAX_MISSILE_AMMO,
            )

    def use_charge(self, amount: int) -> None:
        """Spend energy, breaking open a new pack once the current energy runs out."""
        self.energy -= amount
        if self.energy <= 0 and self.energy_pack > 0:
            self.energy_pack -= 1
            self.energy = self.MAX_ENERGY

    def destroy(self) -> None:
        """Remove the player's ship from the game and release its controller."""
        if self.ship is not None:
            self.game.destroy_object(self.ship)
            self.ship = None
        self.game.input.unregister(self.input)


def create_player_states(game: Any, rng: random.Random | None = None) -> list[PlayerState]:
    """One player for every connected controller, with HUDs spaced by controller index."""
    base_x, base_y = HUD_BASE
    return [
        PlayerState(game, (base_x + index * HUD_SPACING, base_y), rng)
        for index in game.input.connected_controllers()
    ]