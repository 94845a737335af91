"""
Pac-Man: Inaccessible Blocks Filled
===================================
pygame front end for the maze-chase game in game/gamestate.py.

How it works
------------
- A pygame timer posts TICK_EVENT every TICK_MS milliseconds; each one runs
  exactly one GameState.tick(). Key presses come through the same event queue,
  so a tick and a direction change never overlap.
- The timer is stopped the moment the game is lost or won.
- The "Restart" strip below the board (or R) throws the current game away and
  builds a new one. Winning opens a dialog with "Exit" and "New Level".

Run this file directly to play:
    python main.py
"""

import logging
import sys

import numpy as np
import pygame

from game.config import (
    BACKGROUND_COLOR, BLOCK_SIZE, BUTTON_HEIGHT, FPS, GRID_SIZE, TEXT_COLOR, TICK_MS, TITLE,
    ConfigError,
)
from game.gamestate import GameState, Phase
from game.renderer import Renderer
from maze.grid import DOWN, LEFT, RIGHT, UP

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1

KEY_DIRECTIONS = {
    pygame.K_RIGHT: RIGHT,
    pygame.K_LEFT: LEFT,
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
}

EXIT = "exit"
NEW_LEVEL = "new_level"


# ======================================================================
#  RELÓGIO DA SIMULAÇÃO
# ======================================================================
class TickDriver:
    def __init__(self, period_ms: int = TICK_MS, event_type: int = TICK_EVENT):
        self.period_ms = period_ms
        self.event_type = event_type
        self.running = False

    def start(self):
        pygame.time.set_timer(self.event_type, self.period_ms)
        self.running = True

    def stop(self):
        pygame.time.set_timer(self.event_type, 0)
        self.running = False


# ======================================================================
#  DIÁLOGO DE VITÓRIA
# ======================================================================
class WinDialog:
    """Victory overlay with two buttons; "New Level" is the default choice."""

    def __init__(self, width: int, height: int):
        self.box = pygame.Rect(0, 0, min(width - 20, 260), 120)
        self.box.center = (width // 2, height // 2)
        half = (self.box.width - 30) // 2
        self.exit_rect = pygame.Rect(self.box.x + 10, self.box.bottom - 40, half, 30)
        self.new_level_rect = pygame.Rect(self.exit_rect.right + 10, self.box.bottom - 40, half, 30)

    def choice_at(self, pos):
        if self.exit_rect.collidepoint(pos):
            return EXIT
        if self.new_level_rect.collidepoint(pos):
            return NEW_LEVEL
        return None

    def draw(self, surface, font):
        pygame.draw.rect(surface, "white", self.box, 0, 10)
        pygame.draw.rect(surface, "dark gray", self.box.inflate(-8, -8), 0, 10)
        title = font.render("Victory! You Win!", True, "green")
        surface.blit(title, title.get_rect(center=(self.box.centerx, self.box.y + 25)))
        prompt = font.render("Choose an option:", True, TEXT_COLOR)
        surface.blit(prompt, prompt.get_rect(center=(self.box.centerx, self.box.y + 50)))
        for rect, label, color in [(self.exit_rect, "Exit", "gray"),
                                   (self.new_level_rect, "New Level", "blue")]:
            pygame.draw.rect(surface, color, rect, 0, 5)
            text = font.render(label, True, TEXT_COLOR)
            surface.blit(text, text.get_rect(center=rect.center))


# ======================================================================
#  CONTROLADOR DO JOGO
# ======================================================================
class GameController:
    def __init__(self, screen: pygame.Surface, size: int = GRID_SIZE, seed=None):
        self.screen = screen
        self.size = size
        side = size * BLOCK_SIZE
        self.play_area = screen.subsurface(pygame.Rect(0, 0, side, side))
        self.restart_rect = pygame.Rect(0, side, side, BUTTON_HEIGHT)
        self.win_dialog = WinDialog(side, side)
        self.driver = TickDriver()
        self.clock = pygame.time.Clock()
        self.running = True
        # Cada jogo novo recebe uma semente derivada desta
        self._seeds = np.random.SeedSequence(seed)
        self._font = None
        self.new_game()

    @property
    def font(self):
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font("freesansbold.ttf", 16)
        return self._font

    def new_game(self):
        self.driver.stop()
        logger.debug("Starting a new %dx%d game", self.size, self.size)
        self.state = GameState(self.size, seed=self._seeds.spawn(1)[0])
        self.renderer = Renderer(self.play_area)
        self.driver.start()

    # ── Eventos ─────────────────────────────────────────────────────────────
    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.exit()
        elif event.type == TICK_EVENT:
            self.on_tick()
        elif event.type == pygame.KEYDOWN:
            self.on_key(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.on_click(event.pos)

    def on_tick(self):
        # Eventos já enfileirados depois do stop() são descartados
        if not self.driver.running:
            return
        phase = self.state.tick()
        if phase is not Phase.PLAYING:
            self.driver.stop()

    def on_key(self, key):
        if key in KEY_DIRECTIONS:
            self.state.set_direction(KEY_DIRECTIONS[key])
        elif key == pygame.K_r:
            self.new_game()
        elif key == pygame.K_SPACE and not self.state.playing:
            self.new_game()
        elif self.state.game_won:
            if key in (pygame.K_n, pygame.K_RETURN):
                self.choose(NEW_LEVEL)
            elif key == pygame.K_e:
                self.choose(EXIT)

    def on_click(self, pos):
        if self.restart_rect.collidepoint(pos):
            self.new_game()
        elif self.state.game_won:
            choice = self.win_dialog.choice_at(pos)
            if choice is not None:
                self.choose(choice)

    def choose(self, choice):
        if choice == EXIT:
            self.exit()
        elif choice == NEW_LEVEL:
            self.new_game()

    def exit(self):
        logger.info("Exiting")
        self.driver.stop()
        self.running = False

    # ── Desenho ─────────────────────────────────────────────────────────────
    def draw(self):
        self.screen.fill(BACKGROUND_COLOR)
        self.renderer.draw(self.state.snapshot())
        pygame.draw.rect(self.screen, "dark gray", self.restart_rect)
        label = self.font.render("Restart", True, TEXT_COLOR)
        self.screen.blit(label, label.get_rect(center=self.restart_rect.center))
        if self.state.game_won:
            self.win_dialog.draw(self.play_area, self.font)

    def run(self):
        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)
            self.draw()
            pygame.display.flip()
            self.clock.tick(FPS)
        pygame.quit()


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    print("=" * 50)
    print(f" {TITLE}")
    print("=" * 50)

    pygame.init()
    side = GRID_SIZE * BLOCK_SIZE
    screen = pygame.display.set_mode((side, side + BUTTON_HEIGHT))
    pygame.display.set_caption(TITLE)
    try:
        controller = GameController(screen)
    except ConfigError as exc:
        print(f"Erro: configuração inválida: {exc}")
        pygame.quit()
        sys.exit(1)
    controller.run()


if __name__ == "__main__":
    main()
