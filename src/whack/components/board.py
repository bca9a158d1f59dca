"""Board component holding the mole holes."""
from __future__ import annotations

import random
from dataclasses import dataclass, field


class BoardIndexError(IndexError):
    """Raised when a cell index falls outside the board."""

    def __init__(self, index: int, cell_count: int) -> None:
        super().__init__(f"cell index {index} outside board of {cell_count} cells")
        self.index = index
        self.cell_count = cell_count


@dataclass(slots=True)
class Board:
    """Square grid of on/off holes stored row-major.

    ``last_toggled`` remembers the most recently flipped cell so the mole can be
    put back down without scanning the grid.
    """

    size: int
    rng: random.Random | None = field(default=None, repr=False, compare=False)
    cells: list[bool] = field(init=False)
    last_toggled: int | None = field(init=False, default=None)

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"board size must be positive, got {self.size}")
        self.cells = [False] * (self.size * self.size)

    @property
    def cell_count(self) -> int:
        return len(self.cells)

    def in_range(self, index: int) -> bool:
        return 0 <= index < len(self.cells)

    def get(self, index: int) -> bool | None:
        if not self.in_range(index):
            return None
        return self.cells[index]

    def set(self, index: int, value: bool) -> None:
        self._check(index)
        self.cells[index] = bool(value)

    def toggle(self, index: int) -> None:
        self._check(index)
        self.cells[index] = not self.cells[index]
        self.last_toggled = index

    def toggle_random(self, rng: random.Random | None = None) -> int:
        """Flip a uniformly chosen cell and return its index.

        Uses ``rng`` when given, otherwise the source the board was built with.
        """
        source = rng or self.rng
        if source is None:
            raise ValueError("toggle_random needs a random source; pass rng or build the board with one")
        index = source.randrange(len(self.cells))
        self.toggle(index)
        return index

    def clear_last_toggled(self) -> int | None:
        """Undo the last toggle. Returns the restored index, or None if nothing was pending."""
        index = self.last_toggled
        if index is None:
            return None
        self.toggle(index)
        self.last_toggled = None
        return index

    def clear(self) -> None:
        for index in range(len(self.cells)):
            self.cells[index] = False
        self.last_toggled = None

    def active_cells(self) -> list[int]:
        return [index for index, value in enumerate(self.cells) if value]

    @property
    def active_index(self) -> int | None:
        active = self.active_cells()
        return active[0] if active else None

    def _check(self, index: int) -> None:
        if not self.in_range(index):
            raise BoardIndexError(index, len(self.cells))
