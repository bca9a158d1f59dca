"""Terminal adapters: blessed for key polling, rich.live for drawing."""
from __future__ import annotations

import logging

from blessed import Terminal
from blessed.keyboard import Keystroke
from esper import World
from rich.align import Align
from rich.console import Console, RenderableType
from rich.live import Live

from whack.constants import KEY_ENTER, KEY_ESCAPE, POLL_INTERVAL
from whack.events.bus import EventBus
from whack.systems.game_loop import GameLoop

logger = logging.getLogger(__name__)

_SEQUENCE_NAMES = {
    "KEY_ESCAPE": KEY_ESCAPE,
    "KEY_ENTER": KEY_ENTER,
}
_RAW_KEYS = {
    "\x1b": KEY_ESCAPE,
    "\r": KEY_ENTER,
    "\n": KEY_ENTER,
}


def normalize_keystroke(keystroke: Keystroke | str | None) -> str | None:
    """Reduce a blessed keystroke to the key names the input mapper understands."""
    if not keystroke:
        return None
    if getattr(keystroke, "is_sequence", False):
        name = keystroke.name or ""
        return _SEQUENCE_NAMES.get(name, name.lower() or None)
    text = str(keystroke)
    if text in _RAW_KEYS:
        return _RAW_KEYS[text]
    return text.lower()


class BlessedKeySource:
    def __init__(self, term: Terminal):
        self.term = term

    def poll(self, timeout: float) -> str | None:
        return normalize_keystroke(self.term.inkey(timeout=timeout))


class LiveDisplay:
    def __init__(self, live: Live):
        self.live = live

    def show(self, renderable: RenderableType) -> None:
        self.live.update(Align.center(renderable, vertical="middle"), refresh=True)


def run_terminal_game(
    world: World,
    event_bus: EventBus,
    *,
    poll_interval: float = POLL_INTERVAL,
    term: Terminal | None = None,
    console: Console | None = None,
) -> int:
    """Run the game full-screen. The terminal is restored on every exit path."""
    term = term or Terminal()
    console = console or Console()
    logger.debug("terminal %s (%dx%d)", term.kind, term.width, term.height)
    with term.cbreak(), term.hidden_cursor():
        with Live(console=console, screen=True, auto_refresh=False, transient=True) as live:
            loop = GameLoop(
                world,
                event_bus,
                BlessedKeySource(term),
                LiveDisplay(live),
                poll_interval=poll_interval,
            )
            return loop.run()
