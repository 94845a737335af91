"""Draws a StateSnapshot with plain pygame shapes."""

import pygame

from game.config import (
    BACKGROUND_COLOR, BLOCK_SIZE, PELLET_COLOR, PLAYER_COLOR, TEXT_COLOR, WALL_COLOR,
)
from game.gamestate import Phase, StateSnapshot


class Renderer:
    def __init__(self, surface: pygame.Surface, block_size: int = BLOCK_SIZE):
        self.surface = surface
        self.block = block_size
        self._font = None

    @property
    def font(self):
        # Carregada sob demanda: pygame.font precisa estar inicializado
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font("freesansbold.ttf", 36)
        return self._font

    def cell_rect(self, pos) -> pygame.Rect:
        x, y = pos
        return pygame.Rect(x * self.block, y * self.block, self.block, self.block)

    def draw(self, snap: StateSnapshot):
        self.surface.fill(BACKGROUND_COLOR)
        self._draw_board(snap)
        self._draw_player(snap)
        self._draw_ghosts(snap)
        if snap.phase is Phase.LOST:
            self._draw_game_over(snap)

    def _draw_board(self, snap):
        for pos in snap.walls:
            pygame.draw.rect(self.surface, WALL_COLOR, self.cell_rect(pos))
        radius = max(1, self.block // 6)
        for pos in snap.pellets:
            pygame.draw.circle(self.surface, PELLET_COLOR, self.cell_rect(pos).center, radius)

    def _draw_player(self, snap):
        rect = self.cell_rect(snap.player_pos)
        pygame.draw.circle(self.surface, PLAYER_COLOR, rect.center, self.block // 2)

    def _draw_ghosts(self, snap):
        for pos, color in zip(snap.ghost_positions, snap.ghost_colors):
            rect = self.cell_rect(pos)
            pygame.draw.circle(self.surface, color, rect.center, self.block // 2)

    def _draw_game_over(self, snap):
        side = snap.size * self.block
        text = self.font.render("GAME OVER", True, TEXT_COLOR)
        self.surface.blit(text, text.get_rect(center=(side // 2, side // 2)))
