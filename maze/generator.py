"""Random maze generation: solid border, interior cells rolled independently."""

import logging

import numpy as np

from game.config import validate_config
from maze.grid import Cell, border_mask, wall_count

logger = logging.getLogger(__name__)


def generate_maze(size: int, wall_probability: float, rng: np.random.Generator) -> np.ndarray:
    """
    Build a ``size`` x ``size`` board. Border cells are always walls; every
    interior cell is a wall with probability ``wall_probability`` and a pellet
    otherwise. No cell comes out as plain OPEN.

    Raises ConfigError for size < 3 or a probability outside [0, 1].
    """
    validate_config(size, wall_probability)

    # random() fica em [0, 1): p=0 nunca gera parede, p=1 sempre gera
    walls = rng.random((size, size)) < wall_probability
    walls |= border_mask(size)
    grid = np.where(walls, int(Cell.WALL), int(Cell.PELLET)).astype(np.int8)

    logger.debug("Generated %dx%d maze with %d walls", size, size, wall_count(grid))
    return grid
