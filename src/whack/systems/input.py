from __future__ import annotations

import logging

from esper import World

from whack.components.game_state import GameMode, TERMINAL_MODES
from whack.constants import (
    CELL_KEYS,
    DEFAULT_BOARD_SIZE,
    END_KEY_MENU,
    KEY_ENTER,
    KEY_ESCAPE,
    MENU_KEY_PLAY,
    MENU_KEY_QUIT,
)
from whack.events.bus import EVENT_KEY_PRESS, EventBus
from whack.events.game_events import GameEvent, Quit, ReturnToMenu, StartGame, Whack
from whack.systems.event_dispatch import EventDispatcher
from whack.utils.game_state import get_board, get_game_state

logger = logging.getLogger(__name__)


def map_key(mode: GameMode, key: str | None, board_size: int = DEFAULT_BOARD_SIZE) -> GameEvent | None:
    """Translate a normalized key name into the game event it means in ``mode``.

    Unmapped keys return None.
    """
    if not key:
        return None
    if mode == GameMode.MENU:
        if key == MENU_KEY_QUIT:
            return Quit()
        if key == MENU_KEY_PLAY:
            return StartGame()
        return None
    if mode == GameMode.PLAYING:
        if key == KEY_ESCAPE:
            return Quit()
        cell_keys = CELL_KEYS.get(board_size, ())
        if key in cell_keys:
            return Whack(cell_keys.index(key))
        return None
    if mode in TERMINAL_MODES:
        if key in (KEY_ENTER, END_KEY_MENU):
            return ReturnToMenu()
        if key in (MENU_KEY_QUIT, KEY_ESCAPE):
            return Quit()
        return None
    return None


class InputSystem:
    """Turns key presses on the bus into dispatched game events."""

    def __init__(self, world: World, event_bus: EventBus, dispatcher: EventDispatcher | None = None):
        self.world = world
        self.event_bus = event_bus
        self.dispatcher = dispatcher or EventDispatcher(world, event_bus)
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_key_press(self, sender, **payload) -> None:
        key = payload.get("key")
        self.handle_key(key)

    def handle_key(self, key: str | None) -> list[GameEvent]:
        state = get_game_state(self.world)
        if state is None:
            return []
        event = map_key(state.mode, key, get_board(self.world).size)
        if event is None:
            if key:
                logger.debug("unmapped key %r in %s", key, state.mode)
            return []
        return self.dispatcher.dispatch(event)
