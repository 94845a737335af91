"""
Grid primitives shared by the maze generator, the connectivity scan and the
simulation.

The board is a square ``numpy`` array of ``int8`` cells indexed ``grid[y, x]``
(row first), while every position handed around the game is an ``(x, y)``
pair.
"""

from enum import IntEnum
from typing import Iterable, Tuple

import numpy as np

Position = Tuple[int, int]
Direction = Tuple[int, int]


class Cell(IntEnum):
    OPEN = 0
    WALL = 1
    PELLET = 2


# Direções como deltas (dx, dy); y cresce para baixo
NONE: Direction = (0, 0)
UP: Direction = (0, -1)
DOWN: Direction = (0, 1)
LEFT: Direction = (-1, 0)
RIGHT: Direction = (1, 0)

# Ordem usada no sorteio das direções dos fantasmas
DIRECTIONS: Tuple[Direction, ...] = (RIGHT, LEFT, DOWN, UP)
ALL_DIRECTIONS: Tuple[Direction, ...] = (NONE,) + DIRECTIONS


def from_rows(rows) -> np.ndarray:
    """Build a grid from nested lists/strings of cell values (tests, fixed boards)."""
    grid = np.array([[int(c) for c in row] for row in rows], dtype=np.int8)
    if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
        raise ValueError(f"grid must be square, got shape {grid.shape}")
    return grid


def in_bounds(grid: np.ndarray, pos: Position) -> bool:
    x, y = pos
    size = grid.shape[0]
    return 0 <= x < size and 0 <= y < size


def cell_at(grid: np.ndarray, pos: Position) -> Cell:
    x, y = pos
    return Cell(int(grid[y, x]))


def set_cell(grid: np.ndarray, pos: Position, cell: Cell) -> None:
    x, y = pos
    grid[y, x] = int(cell)


def is_wall(grid: np.ndarray, pos: Position) -> bool:
    x, y = pos
    return grid[y, x] == Cell.WALL


def can_enter(grid: np.ndarray, pos: Position) -> bool:
    """True when ``pos`` is on the board and not a wall."""
    return in_bounds(grid, pos) and not is_wall(grid, pos)


def step(pos: Position, direction: Direction) -> Position:
    return pos[0] + direction[0], pos[1] + direction[1]


def neighbors4(grid: np.ndarray, pos: Position) -> Iterable[Position]:
    """Yield the enterable 4-neighbours of ``pos`` (left, right, up, down)."""
    for d in (LEFT, RIGHT, UP, DOWN):
        nxt = step(pos, d)
        if can_enter(grid, nxt):
            yield nxt


def pellet_count(grid: np.ndarray) -> int:
    return int(np.count_nonzero(grid == Cell.PELLET))


def wall_count(grid: np.ndarray) -> int:
    return int(np.count_nonzero(grid == Cell.WALL))


def border_mask(size: int) -> np.ndarray:
    mask = np.zeros((size, size), dtype=bool)
    mask[0, :] = mask[-1, :] = True
    mask[:, 0] = mask[:, -1] = True
    return mask
