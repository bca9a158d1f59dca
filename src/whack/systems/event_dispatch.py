"""Drains chains of follow-up game events."""
from __future__ import annotations

import logging

from esper import World

from whack.constants import MAX_EVENT_CHAIN
from whack.events.bus import EVENT_GAME_EVENT, EventBus
from whack.events.game_events import GameEvent
from whack.systems.game_update import update

logger = logging.getLogger(__name__)


class EventChainError(RuntimeError):
    """Raised when follow-up events keep coming past the chain limit."""

    def __init__(self, limit: int, last_event: GameEvent | None) -> None:
        super().__init__(f"event chain exceeded {limit} steps (last event {last_event!r})")
        self.limit = limit
        self.last_event = last_event


class EventDispatcher:
    """Applies an event and every follow-up it produces, up to ``max_chain`` steps."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus | None = None,
        *,
        max_chain: int = MAX_EVENT_CHAIN,
    ) -> None:
        if max_chain <= 0:
            raise ValueError("max_chain must be positive")
        self.world = world
        self.event_bus = event_bus
        self.max_chain = max_chain

    def dispatch(self, event: GameEvent | None) -> list[GameEvent]:
        """Run the chain started by ``event`` and return the events that were applied."""
        applied: list[GameEvent] = []
        pending = event
        while pending is not None:
            if len(applied) >= self.max_chain:
                raise EventChainError(self.max_chain, pending)
            follow_up = update(self.world, pending, self.event_bus)
            applied.append(pending)
            logger.debug("applied %r -> %r", pending, follow_up)
            if self.event_bus is not None:
                self.event_bus.emit(
                    EVENT_GAME_EVENT,
                    event=pending,
                    follow_up=follow_up,
                    depth=len(applied),
                )
            pending = follow_up
        return applied
