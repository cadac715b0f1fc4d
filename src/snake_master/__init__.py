"""Snake Master 3D: tick-driven game-state engine."""

from snake_master.collision import Outcome, classify
from snake_master.config import DIFFICULTY_INTERVALS_MS, Difficulty, GameConfig
from snake_master.engine import GameEngine, GameSnapshot, Phase
from snake_master.food import FoodPlacer
from snake_master.grid import Cell, Grid
from snake_master.scheduler import TickScheduler
from snake_master.snake import Direction

__all__ = [
    "DIFFICULTY_INTERVALS_MS",
    "Cell",
    "Difficulty",
    "Direction",
    "FoodPlacer",
    "GameConfig",
    "GameEngine",
    "GameSnapshot",
    "Grid",
    "Outcome",
    "Phase",
    "TickScheduler",
    "classify",
]
