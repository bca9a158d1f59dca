"""Transient game events consumed by the update function.

Each event is produced and applied within a single tick. Applying one may yield
a single follow-up event, which the dispatcher feeds straight back in.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Whack:
    """Player swung at ``index``."""
    index: int


@dataclass(frozen=True, slots=True)
class CellIsOccupied:
    """The whacked cell held the mole."""
    index: int


@dataclass(frozen=True, slots=True)
class MissedWhack:
    """The whacked cell was empty."""
    index: int


@dataclass(frozen=True, slots=True)
class GenerateNextTarget:
    pass


@dataclass(frozen=True, slots=True)
class CleanupTarget:
    index: int


@dataclass(frozen=True, slots=True)
class StartGame:
    pass


@dataclass(frozen=True, slots=True)
class DeclareLoss:
    pass


@dataclass(frozen=True, slots=True)
class DeclareWin:
    pass


@dataclass(frozen=True, slots=True)
class ReturnToMenu:
    pass


@dataclass(frozen=True, slots=True)
class Quit:
    pass


GameEvent = (
    Whack
    | CellIsOccupied
    | MissedWhack
    | GenerateNextTarget
    | CleanupTarget
    | StartGame
    | DeclareLoss
    | DeclareWin
    | ReturnToMenu
    | Quit
)
