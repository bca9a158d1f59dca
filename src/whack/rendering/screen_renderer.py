"""Pure functions turning the game model into a rich renderable."""
from __future__ import annotations

from rich.align import Align
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from whack.components.board import Board
from whack.components.game_state import GameMode
from whack.components.score import Score
from whack.constants import (
    COLOR_BACKGROUND,
    COLOR_LOST,
    COLOR_MENU,
    COLOR_WON,
    LOSE_THRESHOLD,
    WIN_THRESHOLD,
)
from whack.rendering.board_renderer import render_board

TITLE = "Whack-a-Mole"


def render_menu() -> RenderableType:
    lines = Text(justify="center")
    lines.append(f"{TITLE}\n\n", style="bold")
    lines.append("press ")
    lines.append("p", style="bold reverse")
    lines.append(" to play, ")
    lines.append("q", style="bold reverse")
    lines.append(" to quit")
    return Panel(
        Align.center(lines, vertical="middle"),
        title=TITLE,
        border_style=COLOR_MENU,
        style=f"on {COLOR_BACKGROUND}",
        padding=(1, 4),
        expand=False,
    )


def render_status(score: Score) -> Text:
    status = Text(justify="center")
    status.append(f"hits {score.hits}/{WIN_THRESHOLD}", style="bold green")
    status.append("   ")
    status.append(f"misses {score.misses}/{LOSE_THRESHOLD}", style="bold red")
    status.append("   esc to quit", style="dim")
    return status


def render_playing(board: Board, score: Score) -> RenderableType:
    return Panel(
        Group(Align.center(render_board(board)), Text(""), render_status(score)),
        title=TITLE,
        style=f"on {COLOR_BACKGROUND}",
        expand=False,
    )


def render_end_screen(mode: GameMode, score: Score) -> RenderableType:
    won = mode == GameMode.WON
    headline = "You won!" if won else "You lost!"
    color = COLOR_WON if won else COLOR_LOST
    lines = Text(justify="center")
    lines.append(f"{headline}\n\n", style="bold")
    lines.append(f"hits {score.hits}   misses {score.misses}\n\n")
    lines.append("enter", style="bold reverse")
    lines.append(" back to menu, ")
    lines.append("q", style="bold reverse")
    lines.append(" to quit")
    return Panel(
        Align.center(lines, vertical="middle"),
        title=headline,
        border_style=color,
        style=f"on {color}",
        padding=(1, 4),
        expand=False,
    )


def render_exit() -> RenderableType:
    return Text("Bye!", justify="center")


def render_screen(mode: GameMode, board: Board, score: Score) -> RenderableType:
    if mode == GameMode.MENU:
        return render_menu()
    if mode == GameMode.PLAYING:
        return render_playing(board, score)
    if mode in (GameMode.WON, GameMode.LOST):
        return render_end_screen(mode, score)
    return render_exit()
