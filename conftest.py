import os

# pygame sem janela nem áudio durante os testes
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pygame
import pytest

from maze.grid import from_rows

W, O, P = 1, 0, 2


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def mini_board():
    """
    Labirinto 5x5 em anel, com uma parede no centro.
    1 = Parede, 2 = Pastilha, 0 = Caminho livre
    """
    return from_rows([
        [W, W, W, W, W],
        [W, P, P, P, W],
        [W, P, W, P, W],
        [W, P, P, P, W],
        [W, W, W, W, W],
    ])


@pytest.fixture
def split_board():
    """
    Labirinto 7x7 com uma parede vertical que separa o bolsão da direita
    (colunas 4 e 5) do resto do mapa.
    """
    return from_rows([
        [W, W, W, W, W, W, W],
        [W, P, P, W, P, P, W],
        [W, P, P, W, P, P, W],
        [W, P, P, W, P, W, W],
        [W, P, P, W, W, P, W],
        [W, P, P, W, P, P, W],
        [W, W, W, W, W, W, W],
    ])
