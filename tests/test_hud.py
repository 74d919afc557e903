import pygame
import pytest

from spacewar.hud import FRAME_SIZE, TEXT_COLOR, UNITS_PER_FRAME, PlayerHud, bar_frame_offset
from spacewar.vecmath import Vec2


class FakeFont:
    def __init__(self):
        self.rendered = []

    def render(self, text, antialias, color):
        self.rendered.append((text, color))
        return pygame.Surface((4, 4))


def solid(color):
    surface = pygame.Surface((48, 48))
    surface.fill(color)
    return surface


def test_full_bar_uses_first_frame():
    assert bar_frame_offset(100, 100) == 0


def test_one_frame_per_quarter_lost():
    assert bar_frame_offset(75, 100) == 48


@pytest.mark.parametrize("value", [100, 80, 51, 26, 10])
def test_offset_steps_by_frame(value):
    step = bar_frame_offset(value - UNITS_PER_FRAME, 100) - bar_frame_offset(value, 100)
    assert step == FRAME_SIZE


def test_partial_loss_within_frame_keeps_frame():
    assert bar_frame_offset(99, 100) == bar_frame_offset(100, 100)


def test_initial_layout():
    hud = PlayerHud((120, 980))
    assert hud.health_bar.position == Vec2(120, 980)
    assert hud.energy_bar.position == Vec2(120, 980 + FRAME_SIZE)
    assert hud.refill_text == ""
    assert hud.missile_ammo_text == ""


def test_update_sets_frames_and_counters():
    hud = PlayerHud((0, 0))
    hud.update(50, 100, 75, 100, 3, 2)
    assert hud.refill_text == "x3"
    assert hud.missile_ammo_text == "x2"
    assert hud.health_bar.texture_rect[0] == bar_frame_offset(50, 100)
    assert hud.energy_bar.texture_rect[0] == bar_frame_offset(75, 100)


def test_draw_places_bars_and_texts():
    hud = PlayerHud((120, 120))
    hud.update(100, 100, 100, 100, 2, 1)
    textures = {
        "health_bar": solid((255, 0, 0)),
        "power_bar": solid((0, 255, 0)),
        "missile": solid((0, 0, 255)),
    }
    surface = pygame.Surface((400, 400))
    font = FakeFont()
    hud.draw(surface, textures, font)
    assert tuple(surface.get_at((120, 50)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((120, 200)))[:3] == (0, 255, 0)
    assert tuple(surface.get_at((204, 120)))[:3] == (0, 0, 255)
    assert font.rendered == [("x2", TEXT_COLOR), ("x1", TEXT_COLOR)]


def test_draw_frame_outside_texture_draws_nothing():
    hud = PlayerHud((120, 120))
    hud.update(50, 100, 100, 100, 0, 0)
    surface = pygame.Surface((400, 400))
    hud.draw(surface, {"health_bar": solid((255, 0, 0))}, None)
    assert tuple(surface.get_at((120, 50)))[:3] == (0, 0, 0)