from __future__ import annotations

import io
import random
from typing import Iterable

from esper import World
from rich.console import Console, RenderableType

from whack.components.game_state import GameMode
from whack.events.bus import EventBus
from whack.utils.game_state import get_board
from whack.world import create_world


def fresh_world(
    *,
    seed: int = 0,
    board_size: int = 2,
    mode: GameMode = GameMode.MENU,
) -> tuple[EventBus, World]:
    bus = EventBus()
    world = create_world(mode, board_size=board_size, rng=random.Random(seed))
    return bus, world


def active_cell(world: World) -> int:
    """Index of the single live mole; fails the test if there is not exactly one."""
    active = get_board(world).active_cells()
    assert len(active) == 1, f"expected one active cell, got {active}"
    return active[0]


def render_text(renderable: RenderableType, width: int = 80) -> str:
    console = Console(width=width, record=True, color_system=None, file=io.StringIO())
    console.print(renderable)
    return console.export_text()


class FakeKeySource:
    """Replays scripted keys; ``None`` entries simulate poll timeouts."""

    def __init__(self, keys: Iterable[str | None]):
        self.keys = list(keys)
        self.timeouts: list[float] = []

    def poll(self, timeout: float) -> str | None:
        self.timeouts.append(timeout)
        if not self.keys:
            return None
        return self.keys.pop(0)


class FakeDisplay:
    def __init__(self) -> None:
        self.frames: list[RenderableType] = []

    def show(self, renderable: RenderableType) -> None:
        self.frames.append(renderable)
