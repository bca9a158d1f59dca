"""State transitions for the whack-a-mole model.

``update`` applies exactly one event to the world and returns the follow-up
event it causes, if any. It never loops on its own; chaining is the job of
:class:`whack.systems.event_dispatch.EventDispatcher`.
"""
from __future__ import annotations

import logging
import random
from typing import Callable

from esper import World

from whack.components.game_state import GameMode, TERMINAL_MODES
from whack.constants import LOSE_THRESHOLD, WIN_THRESHOLD
from whack.events.bus import EVENT_SCORE_CHANGED, EventBus
from whack.events.game_events import (
    CellIsOccupied,
    CleanupTarget,
    DeclareLoss,
    DeclareWin,
    GameEvent,
    GenerateNextTarget,
    MissedWhack,
    Quit,
    ReturnToMenu,
    StartGame,
    Whack,
)
from whack.utils.game_state import get_board, get_score, get_game_state, set_game_mode

logger = logging.getLogger(__name__)

_Handler = Callable[..., "GameEvent | None"]


def _rng(world: World) -> random.Random | None:
    return getattr(world, "random", None)


def _emit_score(world: World, event_bus: EventBus | None) -> None:
    if event_bus is None:
        return
    score = get_score(world)
    event_bus.emit(EVENT_SCORE_CHANGED, hits=score.hits, misses=score.misses)


def _on_whack(world: World, event: Whack, event_bus: EventBus | None) -> GameEvent | None:
    if get_game_state(world).mode != GameMode.PLAYING:
        return None
    if get_board(world).get(event.index):
        return CellIsOccupied(event.index)
    return MissedWhack(event.index)


def _on_cell_is_occupied(
    world: World, event: CellIsOccupied, event_bus: EventBus | None
) -> GameEvent | None:
    if get_game_state(world).mode != GameMode.PLAYING:
        return None
    score = get_score(world)
    score.hits += 1
    _emit_score(world, event_bus)
    if score.hits >= WIN_THRESHOLD and score.misses < LOSE_THRESHOLD:
        return DeclareWin()
    return CleanupTarget(event.index)


def _on_missed_whack(
    world: World, event: MissedWhack, event_bus: EventBus | None
) -> GameEvent | None:
    if get_game_state(world).mode != GameMode.PLAYING:
        return None
    score = get_score(world)
    score.misses += 1
    _emit_score(world, event_bus)
    if score.misses >= LOSE_THRESHOLD:
        return DeclareLoss()
    return None


def _on_generate_next_target(
    world: World, event: GenerateNextTarget, event_bus: EventBus | None
) -> GameEvent | None:
    if get_game_state(world).mode != GameMode.PLAYING:
        return None
    board = get_board(world)
    # Single mole: whatever was up goes down first.
    board.clear()
    index = board.toggle_random(_rng(world))
    logger.debug("mole up at %d", index)
    return None


def _on_cleanup_target(
    world: World, event: CleanupTarget, event_bus: EventBus | None
) -> GameEvent | None:
    if get_game_state(world).mode != GameMode.PLAYING:
        return None
    board = get_board(world)
    if board.last_toggled == event.index:
        board.clear_last_toggled()
    else:
        board.set(event.index, False)
    return GenerateNextTarget()


def _on_start_game(world: World, event: StartGame, event_bus: EventBus | None) -> GameEvent | None:
    if get_game_state(world).mode != GameMode.MENU:
        return None
    get_board(world).clear()
    get_score(world).reset()
    _emit_score(world, event_bus)
    set_game_mode(world, event_bus, GameMode.PLAYING)
    return GenerateNextTarget()


def _on_declare_loss(world: World, event: DeclareLoss, event_bus: EventBus | None) -> GameEvent | None:
    if get_game_state(world).mode != GameMode.PLAYING:
        return None
    if get_score(world).misses < LOSE_THRESHOLD:
        return None
    set_game_mode(world, event_bus, GameMode.LOST)
    return None


def _on_declare_win(world: World, event: DeclareWin, event_bus: EventBus | None) -> GameEvent | None:
    if get_game_state(world).mode != GameMode.PLAYING:
        return None
    score = get_score(world)
    if score.hits < WIN_THRESHOLD or score.misses >= LOSE_THRESHOLD:
        return None
    set_game_mode(world, event_bus, GameMode.WON)
    return None


def _on_return_to_menu(
    world: World, event: ReturnToMenu, event_bus: EventBus | None
) -> GameEvent | None:
    if get_game_state(world).mode not in TERMINAL_MODES:
        return None
    set_game_mode(world, event_bus, GameMode.MENU)
    return None


def _on_quit(world: World, event: Quit, event_bus: EventBus | None) -> GameEvent | None:
    set_game_mode(world, event_bus, GameMode.EXITED)
    return None


_HANDLERS: dict[type, _Handler] = {
    Whack: _on_whack,
    CellIsOccupied: _on_cell_is_occupied,
    MissedWhack: _on_missed_whack,
    GenerateNextTarget: _on_generate_next_target,
    CleanupTarget: _on_cleanup_target,
    StartGame: _on_start_game,
    DeclareLoss: _on_declare_loss,
    DeclareWin: _on_declare_win,
    ReturnToMenu: _on_return_to_menu,
    Quit: _on_quit,
}


def update(
    world: World,
    event: GameEvent,
    event_bus: EventBus | None = None,
) -> GameEvent | None:
    """Apply ``event`` to ``world`` and return the follow-up event, if any."""
    state = get_game_state(world)
    if state is None:
        raise LookupError("world has no GameState component")
    if state.mode == GameMode.EXITED:
        logger.debug("ignoring %r after exit", event)
        return None
    handler = _HANDLERS.get(type(event))
    if handler is None:
        raise TypeError(f"unsupported game event: {event!r}")
    return handler(world, event, event_bus)
