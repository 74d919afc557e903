"""Screens of the game (menu, match, game over) and the program entry point."""

from __future__ import annotations

import argparse
import random
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Iterable

import pygame

from .entities import populate_star_system
from .game import Game
from .hud import TEXT_COLOR
from .input import JOYSTICK_COUNT, PygameJoysticks
from .player import PlayerState, create_player_states
from .vecmath import Vec2, random_in_range

WINDOW_SIZE = (1920, 1080)
WINDOW_TITLE = "SpaceWarsRedux"
FPS_CAP = 120
BLACK = (0, 0, 0)

TITLE_POSITION = Vec2(960, 480)
PLAYERS_POSITION = Vec2(960, 680)
START_POSITION = Vec2(960, 720)


class Screen(Enum):
    MAIN_MENU = 0
    IN_GAME = 1
    END_GAME = 2


def _load_font(path: Path, size: int) -> Any:
    try:
        return pygame.font.Font(str(path), size)
    except (OSError, pygame.error):
        return pygame.font.Font(None, size)


class GameState:
    """Runs the window and switches between the menu, the match and the game-over screen."""

    def __init__(
        self,
        resource_dir: str | Path = "Resources",
        *,
        window_size: tuple[int, int] = WINDOW_SIZE,
        joysticks: Any = None,
        rng: random.Random | None = None,
        events: Callable[[], Iterable[Any]] | None = None,
        window_factory: Callable[[tuple[int, int]], Any] | None = None,
        texture_loader: Callable[[Path], Any] | None = None,
        fps_cap: int = FPS_CAP,
    ) -> None:
        self.resource_dir = Path(resource_dir)
        self.window_size = window_size
        self.joysticks = joysticks if joysticks is not None else PygameJoysticks()
        self.rng = rng
        self.fps_cap = fps_cap
        self._events = events if events is not None else pygame.event.get
        self._window_factory = window_factory
        self._texture_loader = texture_loader
        self._owns_display = False
        self._clock: Any = None
        self._running = False

        pygame.font.init()
        fonts = self.resource_dir / "fonts"
        self.title_font = _load_font(fonts / "TitleFont.otf", 48)
        self.general_font = _load_font(fonts / "GeneralFont.otf", 24)
        self.large_font = _load_font(fonts / "GeneralFont.otf", 48)

        self.screen = Screen.MAIN_MENU
        self.surface: Any = None
        self.game: Game | None = None
        self.active_players: list[PlayerState] = []
        self.dead_players: list[PlayerState] = []
        self.title_text = ""
        self.players_text = ""
        self.start_text = ""
        self.end_game_text = ""

    def initialize(self) -> None:
        """Open the window and show the main menu."""
        self._create_window()
        self.screen = Screen.MAIN_MENU
        self._init_main_menu()

    def is_running(self) -> bool:
        return self._running

    def tick(self) -> None:
        """Handle window events, then update and draw the current screen."""
        joystick_count = self._count_joysticks()
        for event in self._events():
            if event.type == pygame.QUIT:
                if self.screen is Screen.IN_GAME:
                    self._teardown_game()
                self._close()
                return
            if event.type == pygame.JOYBUTTONDOWN:
                if self.screen is Screen.MAIN_MENU and joystick_count >= 1:
                    self.screen = Screen.IN_GAME
                    self._init_game()
                    return
                if self.screen is Screen.END_GAME:
                    self.screen = Screen.MAIN_MENU
                    self._init_main_menu()
                    return

        if self.screen is Screen.MAIN_MENU:
            self._update_main_menu()
        elif self.screen is Screen.IN_GAME:
            self._update_game()
        else:
            self._update_end_game()
        if self._clock is not None:
            self._clock.tick(self.fps_cap)

    def on_player_dead(self, player: PlayerState) -> None:
        for index, active in enumerate(self.active_players):
            if active is player:
                del self.active_players[index]
                break
        self.dead_players.append(player)

    def _create_window(self) -> None:
        if self._window_factory is not None:
            self.surface = self._window_factory(self.window_size)
        else:
            pygame.display.init()
            self.surface = pygame.display.set_mode(self.window_size)
            pygame.display.set_caption(WINDOW_TITLE)
            self._owns_display = True
            self._clock = pygame.time.Clock()
        self._running = True

    def _close(self) -> None:
        self._running = False
        if self._owns_display:
            pygame.display.quit()
            self._owns_display = False

    def _count_joysticks(self) -> int:
        return sum(1 for index in range(JOYSTICK_COUNT) if self.joysticks.is_connected(index))

    def _present(self) -> None:
        if self._owns_display:
            pygame.display.flip()

    def _draw_centered(self, font: Any, text: str, position: Vec2) -> None:
        if not text:
            return
        image = font.render(text, True, TEXT_COLOR)
        self.surface.blit(image, image.get_rect(center=(round(position.x), round(position.y))))

    def _init_main_menu(self) -> None:
        self.title_text = "Space Wars Redux"
        self.start_text = ""
        self.end_game_text = ""

    def _update_main_menu(self) -> None:
        count = self._count_joysticks()
        self.players_text = f"{count} player(s) connected"
        if count >= 1:
            self.start_text = "Press any button to start"
        self._render_main_menu()

    def _render_main_menu(self) -> None:
        self.surface.fill(BLACK)
        self._draw_centered(self.title_font, self.title_text, TITLE_POSITION)
        self._draw_centered(self.general_font, self.players_text, PLAYERS_POSITION)
        self._draw_centered(self.general_font, self.start_text, START_POSITION)
        self._present()

    def _init_game(self) -> None:
        game = Game(self.surface.get_size(), self.joysticks)
        game.load_textures(self.resource_dir / "assets", self._texture_loader)
        populate_star_system(game, self.rng)
        self.game = game
        self.active_players = create_player_states(game, self.rng)
        for player in self.active_players:
            player.init(f"ship_{random_in_range(1, 6, self.rng)}")
            player.on_player_dead.bind(self.on_player_dead)

    def _teardown_game(self) -> None:
        while self.dead_players:
            self.dead_players.pop().destroy()
        while self.active_players:
            self.active_players.pop().destroy()
        if self.game is not None:
            self.game.shutdown()
            self.game = None

    def _update_game(self) -> None:
        if len(self.active_players) <= 1 or self.game is None:
            self.screen = Screen.END_GAME
            self._teardown_game()
            return
        delta_time = 1.0 / self.fps_cap
        self.game.update(delta_time)
        for player in list(self.active_players):
            player.process_input(delta_time)
            player.update(delta_time)
        self._render_game()

    def _render_game(self) -> None:
        self.surface.fill(BLACK)
        for obj in self.game.objects:
            obj.sprite.draw(self.surface)
        textures = self.game.textures
        for player in self.active_players:
            player.render_hud(self.surface, textures, self.general_font)
        self._present()

    def _update_end_game(self) -> None:
        self.end_game_text = "Game Over :("
        self.start_text = "Press any button to return to main menu"
        self._render_end_game()

    def _render_end_game(self) -> None:
        self.surface.fill(BLACK)
        self._draw_centered(self.large_font, self.end_game_text, TITLE_POSITION)
        self._draw_centered(self.general_font, self.start_text, START_POSITION)
        self._present()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="spacewar", description="Local multiplayer space duel.")
    parser.add_argument(
        "--resources", default="Resources", help="directory holding assets/ and fonts/"
    )
    args = parser.parse_args(argv)

    random.seed()
    pygame.init()
    try:
        state = GameState(args.resources)
        state.initialize()
        while state.is_running():
            state.tick()
    except (pygame.error, OSError) as exc:
        print(exc)
    finally:
        pygame.quit()
    return 0