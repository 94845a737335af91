"""Game-wide settings and start-up validation."""

import numbers

GRID_SIZE = 15            # células por lado
WALL_PROBABILITY = 0.25   # chance de uma célula interna virar parede
TICK_MS = 150             # período do tick da simulação
FPS = 60                  # taxa de redesenho da janela

BLOCK_SIZE = 24           # pixels por célula
BUTTON_HEIGHT = 32        # faixa do botão "Restart" abaixo do labirinto

TITLE = "Pac-Man: Inaccessible Blocks Filled"

BACKGROUND_COLOR = "black"
WALL_COLOR = "blue"
PELLET_COLOR = "white"
PLAYER_COLOR = "yellow"
TEXT_COLOR = "white"
GHOST_COLORS = ("red", "pink")

MIN_GRID_SIZE = 3


class ConfigError(ValueError):
    """Raised at construction time for a board that cannot be built."""


def validate_config(size, wall_probability, ghost_count=len(GHOST_COLORS)):
    if not isinstance(size, numbers.Integral) or isinstance(size, bool):
        raise ConfigError(f"grid size must be an integer, got {size!r}")
    if size < MIN_GRID_SIZE:
        raise ConfigError(f"grid size must be at least {MIN_GRID_SIZE}, got {size}")
    if not isinstance(wall_probability, numbers.Real) or isinstance(wall_probability, bool):
        raise ConfigError(f"wall probability must be a number, got {wall_probability!r}")
    if not 0.0 <= wall_probability <= 1.0:
        raise ConfigError(f"wall probability must be within [0, 1], got {wall_probability}")
    if ghost_count < 1:
        raise ConfigError(f"at least one ghost is required, got {ghost_count}")
