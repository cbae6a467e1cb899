"""Food spawning logic."""

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from snake_sim.grid import Cell, Grid

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places the single food cell on unoccupied grid cells.

    Candidates are drawn uniformly with a seeded NumPy RNG and rejected
    while they land on an occupied cell. After ``max_attempts`` misses the
    spawner enumerates the free cells directly, so placement terminates
    however full the board is.
    """

    def __init__(
        self,
        grid: Grid,
        max_attempts: int = 64,
        rng: np.random.Generator | None = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.grid = grid
        self.max_attempts = max_attempts
        self.rng = rng if rng is not None else np.random.default_rng()
        self.position: Cell | None = None

    def respawn(self, occupied: Collection[Cell]) -> Cell | None:
        """Move the food to a random cell not in *occupied*.

        Returns the new position, or ``None`` if every cell is occupied.
        """
        blocked = occupied if isinstance(occupied, (set, frozenset)) else set(occupied)

        for _ in range(self.max_attempts):
            x = int(self.rng.integers(self.grid.width))
            y = int(self.rng.integers(self.grid.height))
            if (x, y) not in blocked:
                self.position = (x, y)
                logger.debug("Food placed at %s.", self.position)
                return self.position

        free = self.grid.free_cells(blocked)
        if not free:
            logger.warning("No free cells available for food spawning.")
            self.position = None
            return None

        self.position = free[int(self.rng.integers(len(free)))]
        logger.debug(
            "Food placed at %s from %d free cells after %d rejected draws.",
            self.position, len(free), self.max_attempts,
        )
        return self.position

    def clear(self) -> None:
        """Remove the food from the board."""
        self.position = None

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {
            "position": list(self.position) if self.position is not None else None,
        }
