"""Tick-based simulation composing grid, snake, and food logic."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

import numpy as np

from snake_sim.config import SimulationConfig
from snake_sim.food import FoodSpawner
from snake_sim.grid import Cell, Grid
from snake_sim.snake import CollisionKind, Direction, MoveOutcome, Snake

logger = logging.getLogger(__name__)


class Round(enum.Enum):
    """Outer game state. ``GAME_OVER`` never survives past a tick."""

    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class TickResult:
    """What happened during one :meth:`Simulation.tick` call.

    Hosts can key sound or UI effects off ``ate_food``, ``grew`` and
    ``collision``.
    """

    tick: int
    outcome: MoveOutcome
    round: Round
    ate_food: bool = False
    grew: bool = False
    collision: CollisionKind | None = None
    score: int = 0


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the simulation for a render frame."""

    cells: tuple[Cell, ...]
    food: Cell | None
    round: Round
    direction: Direction
    tick: int
    score: int

    def to_dict(self) -> dict:
        """Return the snapshot as a JSON-serializable dict."""
        return {
            "tick": self.tick,
            "score": self.score,
            "round": self.round.value,
            "direction": self.direction.name.lower(),
            "snake": [list(c) for c in self.cells],
            "food": list(self.food) if self.food is not None else None,
        }


class Simulation:
    """Single-snake, fixed-tick simulation.

    The simulation owns the grid, snake, and food spawner. Input is written
    through :meth:`request_direction` at any rate; each :meth:`tick` runs the
    full pipeline once: place missing food, advance the snake, then either
    reset the round on a collision or apply growth and food consumption.
    """

    def __init__(self, config: SimulationConfig | None = None) -> None:
        self.config = config if config is not None else SimulationConfig()
        self.grid = Grid(width=self.config.width, height=self.config.height)
        self.rng = np.random.default_rng(self.config.seed)
        self.food_spawner = FoodSpawner(
            self.grid, max_attempts=self.config.max_spawn_attempts, rng=self.rng,
        )

        self.snake = Snake(self.config.spawn_body)
        self.round = Round.PLAYING
        self.score = 0
        self.tick_count = 0
        self.rounds_played = 0
        self._growth_due = False

        self.food_spawner.respawn(self.snake.body)

    @property
    def food(self) -> Cell | None:
        return self.food_spawner.position

    def request_direction(self, direction: Direction) -> bool:
        """Buffer a heading for the next tick. Returns True if accepted."""
        if not isinstance(direction, Direction):
            raise TypeError(f"Expected a Direction, got {type(direction).__name__}.")
        return self.snake.request(direction)

    def tick(self) -> TickResult:
        """Advance the simulation by one tick."""
        self.tick_count += 1

        if self.food is None:
            self.food_spawner.respawn(self.snake.body)

        outcome = self.snake.advance(self.grid, self.food)

        if outcome is MoveOutcome.COLLIDED:
            collision = self.snake.last_collision
            final_score = self.score
            self.round = Round.GAME_OVER
            logger.info(
                "Snake hit %s at tick %d with score %d.",
                collision.value if collision else "unknown",
                self.tick_count, self.score,
            )
            self.reset()
            return TickResult(
                tick=self.tick_count,
                outcome=outcome,
                round=self.round,
                collision=collision,
                score=final_score,
            )

        grew = False
        if self._growth_due:
            self.snake.grow()
            self._growth_due = False
            grew = True

        ate = outcome is MoveOutcome.ATE_FOOD
        if ate:
            self.score += 1
            self._growth_due = True
            self.food_spawner.clear()
            self.food_spawner.respawn(self.snake.body)

        return TickResult(
            tick=self.tick_count,
            outcome=outcome,
            round=self.round,
            ate_food=ate,
            grew=grew,
            score=self.score,
        )

    def reset(self) -> None:
        """Start a new round from the canonical spawn layout.

        The food is cleared and placed again on the next tick.
        """
        self.snake = Snake(self.config.spawn_body)
        self.food_spawner.clear()
        self._growth_due = False
        self.score = 0
        self.rounds_played += 1
        self.round = Round.PLAYING
        logger.info("Round %d started.", self.rounds_played + 1)

    def snapshot(self) -> Snapshot:
        """Return the current state without mutating it."""
        return Snapshot(
            cells=tuple(self.snake.body),
            food=self.food,
            round=self.round,
            direction=self.snake.direction,
            tick=self.tick_count,
            score=self.score,
        )
