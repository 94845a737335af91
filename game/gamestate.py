"""
Pac-Man maze-chase simulation.

GameState owns one randomly generated board, the player and the ghosts, and
advances them one grid cell per tick:

  - GameState.tick()           → moves the player, then every ghost, then
                                 checks for a collision (Lost) or an empty
                                 board (Won)
  - GameState.set_direction()  → immediate write of the player's heading,
                                 ignored once the game is over
  - GameState.snapshot()       → immutable, hashable copy of the whole state
                                 used by the renderer and the tests

Lost and Won are terminal: tick() becomes a no-op and the only way out is a
brand new GameState.
"""

import logging
from enum import Enum

import numpy as np

from agents.ghost_agent import Ghost
from game.config import GHOST_COLORS, GRID_SIZE, WALL_PROBABILITY, validate_config
from maze.connectivity import pick_spawns, repair
from maze.generator import generate_maze
from maze.grid import (
    ALL_DIRECTIONS, NONE, Cell, Direction, Position, can_enter, cell_at,
    pellet_count, set_cell, step,
)

logger = logging.getLogger(__name__)


class Phase(Enum):
    PLAYING = "playing"
    LOST = "lost"
    WON = "won"


# ══════════════════════════════════════════════════════════════════════════════
#  StateSnapshot
# ══════════════════════════════════════════════════════════════════════════════
class StateSnapshot:
    __slots__ = (
        "size", "walls", "pellets",
        "player_pos", "player_dir",
        "ghost_positions", "ghost_directions", "ghost_colors",
        "phase",
    )

    def __init__(self, **kw):
        for k, v in kw.items():
            object.__setattr__(self, k, v)

    def __setattr__(self, *_):
        raise AttributeError("StateSnapshot is immutable")

    def _key(self):
        return (
            self.size, self.walls, self.pellets,
            self.player_pos, self.player_dir,
            self.ghost_positions, self.ghost_directions, self.ghost_colors,
            self.phase,
        )

    def __hash__(self):
        return hash(self._key())

    def __eq__(self, other):
        return isinstance(other, StateSnapshot) and self._key() == other._key()

    def cell(self, pos: Position) -> Cell:
        if pos in self.walls:
            return Cell.WALL
        if pos in self.pellets:
            return Cell.PELLET
        return Cell.OPEN


# ══════════════════════════════════════════════════════════════════════════════
#  Player
# ══════════════════════════════════════════════════════════════════════════════
class Player:
    __slots__ = ("x", "y", "direction")

    def __init__(self, x: int, y: int, direction: Direction = NONE):
        self.x = x
        self.y = y
        self.direction = direction

    @property
    def pos(self) -> Position:
        return (self.x, self.y)

    def __repr__(self):
        return f"Player({self.x}, {self.y}, direction={self.direction})"


# ══════════════════════════════════════════════════════════════════════════════
#  GameState
# ══════════════════════════════════════════════════════════════════════════════
class GameState:
    def __init__(self, size: int = GRID_SIZE, wall_probability: float = WALL_PROBABILITY,
                 ghost_colors=GHOST_COLORS, seed=None):
        validate_config(size, wall_probability, len(ghost_colors))
        self.size = size
        self.wall_probability = wall_probability
        self.rng = np.random.default_rng(seed)
        self._reset(tuple(ghost_colors))

    def _reset(self, ghost_colors):
        self.grid = generate_maze(self.size, self.wall_probability, self.rng)

        # Pac-Man nasce no centro; a célula vira caminho antes do BFS
        center = (self.size // 2, self.size // 2)
        set_cell(self.grid, center, Cell.OPEN)
        repair(self.grid, center)
        self.player = Player(*center)

        spawns = pick_spawns(self.grid, center, len(ghost_colors), self.rng)
        self.ghosts = [Ghost.spawn(pos, color, self.rng) for pos, color in zip(spawns, ghost_colors)]
        self.phase = Phase.PLAYING

        logger.info("New %dx%d game: %d pellets, ghosts at %s",
                    self.size, self.size, self.pellets_left, [g.pos for g in self.ghosts])

    @classmethod
    def from_grid(cls, grid, player_pos: Position, ghost_positions,
                  ghost_directions=None, ghost_colors=GHOST_COLORS, seed=None) -> "GameState":
        """
        Build a state around a fixed board instead of a generated one. The
        board is used as given (no repair); positions must be enterable cells.
        """
        grid = np.array(grid, dtype=np.int8)
        if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
            raise ValueError(f"grid must be square, got shape {grid.shape}")
        validate_config(grid.shape[0], 0.0, len(ghost_positions))

        for pos in [player_pos, *ghost_positions]:
            if not can_enter(grid, pos):
                raise ValueError(f"{pos} is outside the board or on a wall")

        self = cls.__new__(cls)
        self.size = grid.shape[0]
        self.wall_probability = None
        self.rng = np.random.default_rng(seed)
        self.grid = grid
        self.player = Player(*player_pos)

        colors = [ghost_colors[i % len(ghost_colors)] for i in range(len(ghost_positions))]
        if ghost_directions is None:
            self.ghosts = [Ghost.spawn(pos, c, self.rng) for pos, c in zip(ghost_positions, colors)]
        else:
            self.ghosts = [Ghost(pos[0], pos[1], c, d)
                           for pos, c, d in zip(ghost_positions, colors, ghost_directions)]
        self.phase = Phase.PLAYING
        return self

    # ── Consultas ───────────────────────────────────────────────────────────
    @property
    def playing(self) -> bool:
        return self.phase is Phase.PLAYING

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.LOST

    @property
    def game_won(self) -> bool:
        return self.phase is Phase.WON

    @property
    def pellets_left(self) -> int:
        return pellet_count(self.grid)

    @property
    def ghost_positions(self):
        return [g.pos for g in self.ghosts]

    def snapshot(self) -> StateSnapshot:
        ys, xs = np.nonzero(self.grid == Cell.WALL)
        walls = frozenset(zip(xs.tolist(), ys.tolist()))
        ys, xs = np.nonzero(self.grid == Cell.PELLET)
        pellets = frozenset(zip(xs.tolist(), ys.tolist()))
        return StateSnapshot(
            size             = self.size,
            walls            = walls,
            pellets          = pellets,
            player_pos       = self.player.pos,
            player_dir       = self.player.direction,
            ghost_positions  = tuple(g.pos for g in self.ghosts),
            ghost_directions = tuple(g.direction for g in self.ghosts),
            ghost_colors     = tuple(g.color for g in self.ghosts),
            phase            = self.phase,
        )

    # ── Entrada ─────────────────────────────────────────────────────────────
    def set_direction(self, direction: Direction) -> bool:
        """
        Change the player's heading right away. Ignored (returns False) once
        the game is over. NONE is accepted and parks the player.
        """
        direction = tuple(direction)
        if direction not in ALL_DIRECTIONS:
            raise ValueError(f"not a direction: {direction!r}")
        if not self.playing:
            return False
        self.player.direction = direction
        return True

    # ── Simulação ───────────────────────────────────────────────────────────
    def tick(self) -> Phase:
        if not self.playing:
            return self.phase

        self._move_player()
        self._move_ghosts()
        self._handle_ghost_collisions()
        if self.playing:
            self._check_win_condition()
        return self.phase

    def _move_player(self):
        nxt = step(self.player.pos, self.player.direction)
        if nxt == self.player.pos or not can_enter(self.grid, nxt):
            return
        self.player.x, self.player.y = nxt
        if cell_at(self.grid, nxt) is Cell.PELLET:
            set_cell(self.grid, nxt, Cell.OPEN)

    def _move_ghosts(self):
        for ghost in self.ghosts:
            ghost.move(self.grid, self.rng)

    def _handle_ghost_collisions(self):
        # Compara posições depois do movimento, na ordem fixa da lista
        for i, ghost in enumerate(self.ghosts):
            if ghost.pos == self.player.pos:
                self.phase = Phase.LOST
                logger.info("Game over: ghost %d (%s) caught the player at %s",
                            i, ghost.color, self.player.pos)
                return

    def _check_win_condition(self):
        if self.pellets_left == 0:
            self.phase = Phase.WON
            logger.info("Board cleared, player wins")
