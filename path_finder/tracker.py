"""Incremental validation of a player-drawn path."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from .grid import Grid, Position, manhattan


logger = logging.getLogger(__name__)


class TrackerStatus(Enum):
    IDLE = "idle"
    DRAWING = "drawing"
    WON = "won"


@dataclass(frozen=True)
class TrackerState:
    """Snapshot of the tracker handed to observers."""

    status: TrackerStatus = TrackerStatus.IDLE
    path: Tuple[Position, ...] = field(default_factory=tuple)

    @property
    def steps(self) -> int:
        return max(0, len(self.path) - 1)


class PathTracker:
    """Builds the player's path one pointer sample at a time.

    Rejected samples (walls, off-grid cells, cells that are not adjacent to
    the end of the path) leave the tracker untouched; every method reports
    whether the sample was accepted.
    """

    def __init__(self, grid: Grid):
        self.grid = grid
        self.status = TrackerStatus.IDLE
        self._path: List[Position] = []

    @property
    def path(self) -> Tuple[Position, ...]:
        return tuple(self._path)

    @property
    def player_steps(self) -> int:
        return max(0, len(self._path) - 1)

    @property
    def state(self) -> TrackerState:
        return TrackerState(status=self.status, path=self.path)

    def begin_at(self, cell: Position) -> bool:
        if self.status is TrackerStatus.WON:
            return False
        cell = tuple(cell)
        if not self.grid.in_bounds(*cell):
            return False
        if cell != self.grid.start and self._path:
            logger.debug("begin_at: %s is not the start cell, ignoring", cell)
            return False
        self._path = [self.grid.start]
        self.status = TrackerStatus.DRAWING
        return True

    def extend_to(self, cell: Position) -> bool:
        if self.status is not TrackerStatus.DRAWING:
            return False
        cell = tuple(cell)
        if not self.grid.is_walkable(*cell):
            return False
        if manhattan(cell, self._path[-1]) != 1:
            return False

        if cell in self._path:
            # Re-entering the trail erases everything drawn after that cell.
            del self._path[self._path.index(cell) + 1:]
        else:
            self._path.append(cell)

        if cell == self.grid.goal:
            self.status = TrackerStatus.WON
            logger.debug("extend_to: goal reached in %d steps", self.player_steps)
        return True

    def end_gesture(self) -> None:
        """Pointer released; the partial path is kept for a later gesture."""

    def clear(self) -> None:
        self._path = []
        self.status = TrackerStatus.IDLE
