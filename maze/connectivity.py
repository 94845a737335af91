"""
Breadth-first reachability over the maze.

Used twice when a board is set up:
  - ``repair`` walls off every cell the player cannot reach from the start,
    so the playable area is a single connected region;
  - ``pick_spawns`` draws ghost start cells from that region.
"""

import logging
from collections import deque
from typing import List, Optional, Set

import numpy as np

from maze.grid import Cell, Position, in_bounds, neighbors4, set_cell

logger = logging.getLogger(__name__)


def reachable(grid: np.ndarray, origin: Position) -> Set[Position]:
    """
    Return every position reachable from ``origin`` by 4-directional steps
    through non-wall cells. The origin itself is always included when it is
    on the board, even if it is a wall.
    """
    if not in_bounds(grid, origin):
        return set()

    visited = np.zeros(grid.shape, dtype=bool)
    visited[origin[1], origin[0]] = True
    found = {origin}
    q = deque([origin])
    while q:
        cur = q.popleft()
        for nxt in neighbors4(grid, cur):
            x, y = nxt
            if not visited[y, x]:
                visited[y, x] = True
                found.add(nxt)
                q.append(nxt)
    return found


def repair(grid: np.ndarray, origin: Position) -> Set[Position]:
    """Turn every cell outside ``reachable(grid, origin)`` into a wall, in place."""
    region = reachable(grid, origin)
    keep = np.zeros(grid.shape, dtype=bool)
    for x, y in region:
        keep[y, x] = True

    walled = int(np.count_nonzero(~keep & (grid != Cell.WALL)))
    grid[~keep] = int(Cell.WALL)
    logger.debug("Repair from %s walled off %d unreachable cells", origin, walled)
    return region


def fallback_spawns(size: int, count: int, origin: Optional[Position] = None) -> List[Position]:
    # Cantos opostos primeiro, depois os outros dois; a largada fica de fora
    corners = [(1, 1), (size - 2, size - 2), (size - 2, 1), (1, size - 2)]
    usable = []
    for corner in corners:
        if corner != origin and corner not in usable:
            usable.append(corner)
    if not usable:
        # 3x3: o único interior é a própria largada
        usable = [corners[0]]
    return [usable[i % len(usable)] for i in range(count)]


def pick_spawns(grid: np.ndarray, origin: Position, count: int,
                rng: np.random.Generator) -> List[Position]:
    """
    Choose ``count`` distinct ghost start cells uniformly at random from the
    cells reachable from ``origin`` (the origin excluded). Chosen cells are
    set to OPEN.

    When the region is too small, fixed corner cells are used instead and
    forced OPEN whatever they held before.
    """
    candidates = sorted(reachable(grid, origin) - {origin})
    if len(candidates) >= count:
        picks = rng.choice(len(candidates), size=count, replace=False)
        spawns = [candidates[int(i)] for i in picks]
    else:
        spawns = fallback_spawns(grid.shape[0], count, origin)
        logger.warning(
            "Only %d reachable cells besides %s, using fallback spawns %s",
            len(candidates), origin, spawns,
        )

    for pos in spawns:
        set_cell(grid, pos, Cell.OPEN)
    return spawns
