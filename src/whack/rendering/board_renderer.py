from __future__ import annotations

from rich import box
from rich.align import Align
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from whack.components.board import Board
from whack.constants import CELL_KEYS, COLOR_BORDER, COLOR_CELL_ACTIVE, COLOR_CELL_IDLE

CELL_WIDTH = 11
CELL_HEIGHT = 5
MOLE = "(o.o)"


def render_cell(active: bool, key: str | None) -> Panel:
    body = Text(MOLE if active else "", style="bold black" if active else "")
    background = COLOR_CELL_ACTIVE if active else COLOR_CELL_IDLE
    return Panel(
        Align.center(body, vertical="middle"),
        box=box.HEAVY if active else box.ROUNDED,
        title=key.upper() if key else None,
        border_style=COLOR_BORDER,
        style=f"on {background}",
        width=CELL_WIDTH,
        height=CELL_HEIGHT,
    )


def render_board(board: Board) -> Table:
    """Lay the board out as ``size`` rows of bordered cells, the mole highlighted."""
    keys = CELL_KEYS.get(board.size, ())
    grid = Table.grid(padding=(0, 1))
    for _ in range(board.size):
        grid.add_column()
    for row in range(board.size):
        cells = []
        for col in range(board.size):
            index = row * board.size + col
            key = keys[index] if index < len(keys) else None
            cells.append(render_cell(bool(board.get(index)), key))
        grid.add_row(*cells)
    return grid
