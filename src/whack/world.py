import random

from esper import World
from whack.components.board import Board
from whack.components.game_state import GameState, GameMode
from whack.components.score import Score
from whack.constants import DEFAULT_BOARD_SIZE, SUPPORTED_BOARD_SIZES


def create_world(
    initial_mode: GameMode = GameMode.MENU,
    *,
    board_size: int = DEFAULT_BOARD_SIZE,
    rng: random.Random | None = None,
) -> World:
    """Build a fresh game model: an all-empty board, zeroed score and the menu mode."""
    if board_size not in SUPPORTED_BOARD_SIZES:
        raise ValueError(
            f"board size {board_size} not supported; choose one of {SUPPORTED_BOARD_SIZES}"
        )
    world = World()
    setattr(world, "random", rng or random.Random())

    # Single state entity owns every piece of the model.
    world.create_entity(
        GameState(mode=initial_mode),
        Score(),
        Board(size=board_size, rng=getattr(world, "random")),
    )
    return world
