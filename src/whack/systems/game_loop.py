"""Tick driver: render, poll for a key, dispatch, repeat until the game exits."""
from __future__ import annotations

import logging
from typing import Protocol

from esper import World

from whack.components.game_state import GameMode
from whack.constants import POLL_INTERVAL
from whack.events.bus import EVENT_KEY_PRESS, EventBus
from whack.systems.input import InputSystem
from whack.systems.render import Display, RenderSystem
from whack.utils.game_state import current_mode

logger = logging.getLogger(__name__)


class KeySource(Protocol):
    def poll(self, timeout: float) -> str | None: ...


class GameLoop:
    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        key_source: KeySource,
        display: Display,
        *,
        poll_interval: float = POLL_INTERVAL,
    ):
        self.world = world
        self.event_bus = event_bus
        self.key_source = key_source
        self.poll_interval = poll_interval
        self.input_system = InputSystem(world, event_bus)
        self.render_system = RenderSystem(world, event_bus, display)
        self.ticks = 0

    @property
    def running(self) -> bool:
        return current_mode(self.world) != GameMode.EXITED

    def tick(self) -> None:
        self.render_system.process()
        key = self.key_source.poll(self.poll_interval)
        self.ticks += 1
        if key is not None:
            self.event_bus.emit(EVENT_KEY_PRESS, key=key)

    def run(self, max_ticks: int | None = None) -> int:
        """Tick until the game exits (or ``max_ticks`` elapse). Returns the tick count."""
        logger.info("game loop started")
        while self.running:
            if max_ticks is not None and self.ticks >= max_ticks:
                break
            self.tick()
        logger.info("game loop stopped after %d ticks", self.ticks)
        return self.ticks
