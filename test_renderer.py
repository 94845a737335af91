import pygame
import pytest

from game.config import BLOCK_SIZE
from game.gamestate import GameState, Phase, StateSnapshot
from game.renderer import Renderer
from maze.grid import DOWN, from_rows

W, O, P = 1, 0, 2


def rgb(color):
    return tuple(pygame.Color(color))[:3]


def pixel(surface, pos):
    return tuple(surface.get_at(pos))[:3]


@pytest.fixture
def board():
    return from_rows([
        [W, W, W, W, W],
        [W, O, P, P, W],
        [W, P, W, P, W],
        [W, P, P, O, W],
        [W, W, W, W, W],
    ])


@pytest.fixture
def surface():
    return pygame.Surface((5 * BLOCK_SIZE, 5 * BLOCK_SIZE))


def center_of(pos):
    x, y = pos
    return x * BLOCK_SIZE + BLOCK_SIZE // 2, y * BLOCK_SIZE + BLOCK_SIZE // 2


def test_desenha_paredes_pastilhas_e_personagens(board, surface):
    game = GameState.from_grid(board, (1, 1), [(3, 3)], [DOWN])
    Renderer(surface).draw(game.snapshot())

    assert pixel(surface, center_of((0, 0))) == rgb("blue")
    assert pixel(surface, center_of((2, 2))) == rgb("blue")
    assert pixel(surface, center_of((2, 1))) == rgb("white")
    assert pixel(surface, center_of((1, 1))) == rgb("yellow")
    assert pixel(surface, center_of((3, 3))) == rgb("red")


def test_pastilha_e_pequena_e_centralizada(board, surface):
    game = GameState.from_grid(board, (1, 1), [(3, 3)], [DOWN])
    Renderer(surface).draw(game.snapshot())

    # Canto da célula com pastilha continua com o fundo
    assert pixel(surface, (2 * BLOCK_SIZE + 1, 1 * BLOCK_SIZE + 1)) == rgb("black")


def test_celula_vazia_fica_com_fundo():
    grid = from_rows([
        [W, W, W, W],
        [W, O, O, W],
        [W, O, O, W],
        [W, W, W, W],
    ])
    surface = pygame.Surface((4 * BLOCK_SIZE, 4 * BLOCK_SIZE))
    game = GameState.from_grid(grid, (1, 1), [(2, 2)], [DOWN])
    Renderer(surface).draw(game.snapshot())

    assert pixel(surface, center_of((2, 1))) == rgb("black")
    assert pixel(surface, center_of((2, 2))) == rgb("red")


def test_fantasmas_usam_sua_cor(board, surface):
    game = GameState.from_grid(board, (1, 1), [(3, 3), (3, 1)], [DOWN, DOWN])
    Renderer(surface).draw(game.snapshot())

    assert pixel(surface, center_of((3, 3))) == rgb("red")
    assert pixel(surface, center_of((3, 1))) == rgb("pink")


def test_game_over_so_aparece_na_derrota():
    game = GameState(seed=8)
    snap = game.snapshot()
    fields = {k: getattr(snap, k) for k in StateSnapshot.__slots__}
    fields["phase"] = Phase.LOST
    lost = StateSnapshot(**fields)
    fields["phase"] = Phase.WON
    won = StateSnapshot(**fields)

    side = game.size * BLOCK_SIZE
    playing_surface = pygame.Surface((side, side))
    lost_surface = pygame.Surface((side, side))
    won_surface = pygame.Surface((side, side))
    Renderer(playing_surface).draw(snap)
    Renderer(lost_surface).draw(lost)
    Renderer(won_surface).draw(won)

    playing_px = pygame.surfarray.array3d(playing_surface)
    assert (pygame.surfarray.array3d(lost_surface) != playing_px).any()
    assert (pygame.surfarray.array3d(won_surface) == playing_px).all()
