"""Construction-time configuration for a simulation instance."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from snake_sim.grid import Cell

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationConfig:
    """Grid size, spawn layout, and timing for one simulation.

    Immutable once built. Supports JSON serialization so a run can be
    reproduced from a file.
    """

    # Board
    width: int = 10
    height: int = 10

    # Canonical start layout (head, then the single body segment)
    spawn_head: Cell = (3, 3)
    spawn_tail: Cell = (3, 2)

    # Food placement
    max_spawn_attempts: int = 64
    seed: int | None = None

    # Host scheduling, seconds per simulation step
    tick_interval: float = 0.15

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an int, got {value!r}.")
            if value < 1:
                raise ValueError(f"{name} must be at least 1.")
        # JSON hands tuples back as lists.
        object.__setattr__(self, "spawn_head", tuple(self.spawn_head))
        object.__setattr__(self, "spawn_tail", tuple(self.spawn_tail))
        for name in ("spawn_head", "spawn_tail"):
            x, y = getattr(self, name)
            if not (0 <= x < self.width and 0 <= y < self.height):
                raise ValueError(f"{name} {(x, y)} lies outside the grid.")
        hx, hy = self.spawn_head
        tx, ty = self.spawn_tail
        if abs(hx - tx) + abs(hy - ty) != 1:
            raise ValueError("spawn_head and spawn_tail must be adjacent cells.")
        if self.max_spawn_attempts < 1:
            raise ValueError("max_spawn_attempts must be at least 1.")
        if self.tick_interval <= 0:
            raise ValueError("tick_interval must be positive.")

    @property
    def spawn_body(self) -> tuple[Cell, Cell]:
        return self.spawn_head, self.spawn_tail

    def to_dict(self) -> dict:
        """Serialize to a plain dict (tuples become lists)."""
        d = asdict(self)
        d["spawn_head"] = list(self.spawn_head)
        d["spawn_tail"] = list(self.spawn_tail)
        return d

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> SimulationConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
