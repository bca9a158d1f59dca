from __future__ import annotations

from typing import Protocol

from esper import World
from rich.console import RenderableType

from whack.events.bus import (
    EVENT_GAME_EVENT,
    EVENT_GAME_MODE_CHANGED,
    EVENT_SCORE_CHANGED,
    EventBus,
)
from whack.rendering.screen_renderer import render_screen
from whack.utils.game_state import current_mode, get_board, get_score


class Display(Protocol):
    def show(self, renderable: RenderableType) -> None: ...


class RenderSystem:
    """Redraws the screen after game events, mode changes or score changes."""

    def __init__(self, world: World, event_bus: EventBus, display: Display):
        self.world = world
        self.event_bus = event_bus
        self.display = display
        self._dirty = True
        self.event_bus.subscribe(EVENT_GAME_EVENT, self._mark_dirty)
        self.event_bus.subscribe(EVENT_GAME_MODE_CHANGED, self._mark_dirty)
        self.event_bus.subscribe(EVENT_SCORE_CHANGED, self._mark_dirty)

    def _mark_dirty(self, sender, **payload) -> None:
        self._dirty = True

    def frame(self) -> RenderableType:
        return render_screen(current_mode(self.world), get_board(self.world), get_score(self.world))

    def process(self, *, force: bool = False) -> bool:
        """Draw a frame if anything changed since the last one. Returns True when drawn."""
        if not (self._dirty or force):
            return False
        self.display.show(self.frame())
        self._dirty = False
        return True
