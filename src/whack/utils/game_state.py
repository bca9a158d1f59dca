from __future__ import annotations

import logging

from esper import World

from whack.components.board import Board
from whack.components.game_state import GameMode, GameState
from whack.components.score import Score
from whack.events.bus import EVENT_GAME_MODE_CHANGED, EventBus

logger = logging.getLogger(__name__)


def get_game_state(world: World) -> GameState | None:
    for _, state in world.get_component(GameState):
        return state
    return None


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise LookupError("world has no Board component")


def get_score(world: World) -> Score:
    for _, score in world.get_component(Score):
        return score
    raise LookupError("world has no Score component")


def current_mode(world: World) -> GameMode:
    state = get_game_state(world)
    if state is None:
        raise LookupError("world has no GameState component")
    return state.mode


def set_game_mode(
    world: World,
    event_bus: EventBus | None,
    mode: GameMode,
) -> None:
    """Update the global game mode and emit a change event when it differs."""

    previous_mode: GameMode | None = None
    for _, state in world.get_component(GameState):
        previous_mode = state.mode
        if state.mode == mode:
            return
        state.mode = mode
        break
    else:
        # No existing GameState component; create a new one.
        world.create_entity(GameState(mode=mode))
    logger.debug("mode %s -> %s", previous_mode, mode)
    if event_bus is not None:
        event_bus.emit(
            EVENT_GAME_MODE_CHANGED,
            previous_mode=previous_mode,
            new_mode=mode,
        )
