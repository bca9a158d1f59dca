from dataclasses import dataclass


@dataclass(slots=True)
class Score:
    """Hit and miss counters for the current round."""

    hits: int = 0
    misses: int = 0

    def reset(self) -> None:
        self.hits = 0
        self.misses = 0
