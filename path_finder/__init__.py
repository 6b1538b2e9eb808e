"""Path Finder package."""

from .game import GameState, LevelLoader, LevelLoad, PathFinderGame
from .grid import Cell, CellKind, Grid, InvalidLevelError, LevelDescriptor, build_grid, neighbors
from .solver import Solution, solve
from .tracker import PathTracker, TrackerState, TrackerStatus

__all__ = [
    "Cell",
    "CellKind",
    "GameState",
    "Grid",
    "InvalidLevelError",
    "LevelDescriptor",
    "LevelLoad",
    "LevelLoader",
    "PathFinderGame",
    "PathTracker",
    "Solution",
    "TrackerState",
    "TrackerStatus",
    "build_grid",
    "neighbors",
    "solve",
]
