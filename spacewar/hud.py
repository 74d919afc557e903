"""Per-player heads-up display of health, energy, refill packs and missiles."""

from __future__ import annotations

from typing import Any, Mapping

import pygame

from .gameobject import Sprite
from .vecmath import Vec2

TEXT_COLOR = (2, 153, 192)
FRAME_SIZE = 48
UNITS_PER_FRAME = 25

_BAR_ORIGIN = Vec2(24, 24)
_FRAME_RECT = (0, 0, FRAME_SIZE, FRAME_SIZE)


def bar_frame_offset(value: int, maximum: int) -> int:
    """Horizontal texture offset of the bar frame showing value out of maximum."""
    return int((maximum - value) / UNITS_PER_FRAME) * FRAME_SIZE


class PlayerHud:
    """Display-only view of a player's state at a fixed screen position."""

    def __init__(self, screen_position: tuple[int, int]) -> None:
        position = Vec2(*screen_position)
        vertical = Vec2(0, FRAME_SIZE)
        horizontal = Vec2(12, 0)
        self.position = position
        self.health_bar = Sprite(
            origin=_BAR_ORIGIN, position=position, scale=Vec2(4, 4), texture_rect=_FRAME_RECT
        )
        self.energy_bar = Sprite(
            origin=_BAR_ORIGIN,
            position=position + vertical,
            scale=Vec2(4, 4),
            texture_rect=_FRAME_RECT,
        )
        self.missile = Sprite(
            origin=_BAR_ORIGIN,
            position=position + Vec2(84, 0),
            scale=Vec2(1.5, 1.5),
            texture_rect=_FRAME_RECT,
        )
        self.refill_text_position = position + vertical + Vec2(84, -12)
        self.missile_ammo_text_position = position + horizontal + Vec2(84, -12)
        self.refill_text = ""
        self.missile_ammo_text = ""

    def update(
        self,
        health: int,
        max_health: int,
        energy: int,
        max_energy: int,
        energy_packs: int,
        missile_ammo: int,
    ) -> None:
        self.energy_bar.texture_rect = (
            bar_frame_offset(energy, max_energy), 0, FRAME_SIZE, FRAME_SIZE
        )
        self.refill_text = f"x{energy_packs}"
        self.missile_ammo_text = f"x{missile_ammo}"
        self.health_bar.texture_rect = (
            bar_frame_offset(health, max_health), 0, FRAME_SIZE, FRAME_SIZE
        )

    def draw(self, surface: pygame.Surface, textures: Mapping[str, Any], font: Any) -> None:
        """Draw the bars, missile icon and counters onto surface."""
        self.health_bar.draw(surface, textures.get("health_bar"))
        self.energy_bar.draw(surface, textures.get("power_bar"))
        self._draw_text(surface, font, self.refill_text, self.refill_text_position)
        self.missile.draw(surface, textures.get("missile"))
        self._draw_text(surface, font, self.missile_ammo_text, self.missile_ammo_text_position)

    @staticmethod
    def _draw_text(surface: pygame.Surface, font: Any, text: str, position: Vec2) -> None:
        if font is None or not text:
            return
        image = font.render(text, True, TEXT_COLOR)
        surface.blit(image, (round(position.x), round(position.y)))