"""
Ghost agent: random walk with wall avoidance.

Each ghost keeps heading the same way until the next cell is blocked. When it
is, the ghost stays put for that tick and rolls a fresh direction uniformly
among the four (the roll may pick a blocked one again, in which case it just
waits another tick).
"""

import numpy as np

from maze.grid import DIRECTIONS, Direction, Position, can_enter, step


def random_direction(rng: np.random.Generator) -> Direction:
    return DIRECTIONS[int(rng.integers(len(DIRECTIONS)))]


class Ghost:
    __slots__ = ("x", "y", "direction", "color")

    def __init__(self, x: int, y: int, color: str, direction: Direction):
        if direction not in DIRECTIONS:
            raise ValueError(f"ghost direction must be a unit vector, got {direction!r}")
        self.x = x
        self.y = y
        self.color = color
        self.direction = direction

    @classmethod
    def spawn(cls, pos: Position, color: str, rng: np.random.Generator) -> "Ghost":
        return cls(pos[0], pos[1], color, random_direction(rng))

    @property
    def pos(self) -> Position:
        return (self.x, self.y)

    def move(self, grid: np.ndarray, rng: np.random.Generator) -> bool:
        """Advance one tick. Returns True if the ghost changed cell."""
        nxt = step(self.pos, self.direction)
        if not can_enter(grid, nxt):
            self.direction = random_direction(rng)
            return False
        self.x, self.y = nxt
        return True

    def __repr__(self):
        return f"Ghost({self.x}, {self.y}, {self.color!r}, direction={self.direction})"
