"""Game state resource describing the active high-level mode."""
from dataclasses import dataclass
from enum import Enum, auto


class GameMode(Enum):
    """High-level game modes that drive input mapping and rendering."""
    MENU = auto()
    PLAYING = auto()
    LOST = auto()
    WON = auto()
    EXITED = auto()


TERMINAL_MODES = (GameMode.WON, GameMode.LOST)


@dataclass
class GameState:
    """Singleton component storing the currently active game mode."""
    mode: GameMode = GameMode.MENU
