"""Snake Sim — grid snake simulation core."""

from snake_sim.config import SimulationConfig
from snake_sim.food import FoodSpawner
from snake_sim.grid import Cell, Grid
from snake_sim.runner import TickLoop
from snake_sim.simulation import Round, Simulation, Snapshot, TickResult
from snake_sim.snake import CollisionKind, Direction, MoveOutcome, Snake

__all__ = [
    "Cell",
    "CollisionKind",
    "Direction",
    "FoodSpawner",
    "Grid",
    "MoveOutcome",
    "Round",
    "Simulation",
    "SimulationConfig",
    "Snake",
    "Snapshot",
    "TickLoop",
    "TickResult",
]
