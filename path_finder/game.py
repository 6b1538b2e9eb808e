"""Level loading and the play session tying grid, solver and tracker together."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from .grid import Grid, InvalidLevelError, LevelDescriptor, Position, build_grid
from .solver import Solution, solve
from .tracker import PathTracker, TrackerStatus


logger = logging.getLogger(__name__)

DEFAULT_LEVEL_ROOT = Path(__file__).resolve().parent / "levels"


class LevelLoader:
    """Load level files stored as JSON."""

    def __init__(self, root: Path = DEFAULT_LEVEL_ROOT):
        self.root = Path(root)

    def available(self) -> List[str]:
        if not self.root.exists():
            raise FileNotFoundError(self.root)
        return sorted(path.stem for path in self.root.glob("*.json"))

    def load(self, name: str) -> LevelDescriptor:
        path = self.root / f"{name}.json"
        if not path.exists():
            raise FileNotFoundError(path)
        data = json.loads(path.read_text())
        data.setdefault("name", name)
        return LevelDescriptor.from_dict(data)

    def load_all(self) -> List[LevelDescriptor]:
        return [self.load(name) for name in self.available()]


@dataclass(frozen=True)
class LevelLoad:
    grid: Grid
    solution: Solution

    @property
    def optimal_path(self) -> Tuple[Position, ...]:
        return self.solution.path


@dataclass(frozen=True)
class GameState:
    """What the UI needs to render the HUD after a transition."""

    status: TrackerStatus
    steps: int
    optimal_steps: Optional[int]
    level: int
    has_next_level: bool
    show_hint: bool = False

    @property
    def won(self) -> bool:
        return self.status is TrackerStatus.WON


StateListener = Callable[[GameState], None]


class PathFinderGame:
    """Play session for a sequence of levels."""

    def __init__(self, levels: Optional[Sequence[LevelDescriptor]] = None):
        if levels is None:
            levels = LevelLoader().load_all()
        self.levels: List[LevelDescriptor] = list(levels)
        self.current_level = 0
        self.grid: Optional[Grid] = None
        self.solution = Solution()
        self.descriptor: Optional[LevelDescriptor] = None
        self.tracker: Optional[PathTracker] = None
        self.show_hint = False
        self._gesture_active = False
        self._listeners: List[StateListener] = []

    # ------------------------------------------------------------------
    # Level handling
    def load_level(self, descriptor: LevelDescriptor) -> LevelLoad:
        """Build and solve *descriptor*, replacing the current level state."""

        grid = build_grid(descriptor)
        solution = solve(grid)
        self.descriptor = descriptor
        if descriptor in self.levels:
            self.current_level = self.levels.index(descriptor)
        self.grid = grid
        self.solution = solution
        self.tracker = PathTracker(grid)
        self.show_hint = False
        self._gesture_active = False
        if solution.reachable:
            logger.info(
                "Loaded level %r (%dx%d), optimal path %d steps",
                descriptor.name,
                grid.rows,
                grid.cols,
                solution.steps,
            )
        else:
            logger.info(
                "Loaded level %r (%dx%d), goal unreachable",
                descriptor.name,
                grid.rows,
                grid.cols,
            )
        self._notify()
        return LevelLoad(grid=grid, solution=solution)

    def start(self) -> LevelLoad:
        if not self.levels:
            raise InvalidLevelError("No levels configured")
        return self.load_level(self.levels[self.current_level])

    def reset(self) -> LevelLoad:
        """Re-solve the current level and clear the player path."""

        if self.descriptor is None:
            return self.start()
        return self.load_level(self.descriptor)

    def set_level(self, index: int) -> None:
        self.current_level = max(0, min(index, len(self.levels) - 1))

    def next_level(self) -> bool:
        if not self.has_next_level:
            return False
        self.current_level += 1
        self.start()
        return True

    @property
    def total_levels(self) -> int:
        return len(self.levels)

    @property
    def has_next_level(self) -> bool:
        return self.current_level < len(self.levels) - 1

    # ------------------------------------------------------------------
    # Pointer input, in cell coordinates
    def on_pointer_down(self, cell: Position) -> bool:
        if self.tracker is None:
            return False
        if self.tracker.begin_at(cell):
            self._gesture_active = True
            self._notify()
            return True
        if self.tracker.status is TrackerStatus.DRAWING:
            # Resume a lifted path: the press itself is treated as a move.
            self._gesture_active = True
            return self.on_pointer_move(cell)
        return False

    def on_pointer_move(self, cell: Position) -> bool:
        if self.tracker is None or not self._gesture_active:
            return False
        if not self.tracker.extend_to(cell):
            return False
        if self.tracker.status is TrackerStatus.WON:
            self._gesture_active = False
            logger.info(
                "Level %d solved in %d steps (optimal %s)",
                self.current_level + 1,
                self.tracker.player_steps,
                self.solution.steps,
            )
        self._notify()
        return True

    def on_pointer_up(self) -> None:
        self._gesture_active = False
        if self.tracker is not None:
            self.tracker.end_gesture()

    # ------------------------------------------------------------------
    # Commands
    def toggle_hint(self) -> bool:
        self.show_hint = not self.show_hint
        self._notify()
        return self.show_hint

    def clear(self) -> None:
        self._gesture_active = False
        if self.tracker is not None:
            self.tracker.clear()
        self._notify()

    # ------------------------------------------------------------------
    # State
    @property
    def status(self) -> TrackerStatus:
        if self.tracker is None:
            return TrackerStatus.IDLE
        return self.tracker.status

    @property
    def player_path(self) -> Tuple[Position, ...]:
        if self.tracker is None:
            return ()
        return self.tracker.path

    @property
    def optimal_path(self) -> Tuple[Position, ...]:
        return self.solution.path

    @property
    def hint_path(self) -> Tuple[Position, ...]:
        if not self.show_hint:
            return ()
        return self.solution.path

    def get_state(self) -> GameState:
        return GameState(
            status=self.status,
            steps=self.tracker.player_steps if self.tracker else 0,
            optimal_steps=self.solution.steps,
            level=self.current_level + 1,
            has_next_level=self.has_next_level,
            show_hint=self.show_hint,
        )

    def add_listener(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        self._listeners.remove(listener)

    def _notify(self) -> None:
        if not self._listeners:
            return
        state = self.get_state()
        for listener in list(self._listeners):
            listener(state)


def summarise_levels(levels: Iterable[LevelDescriptor]) -> List[Dict[str, object]]:
    """Solve every level and describe it for listings."""

    summary: List[Dict[str, object]] = []
    for index, descriptor in enumerate(levels, start=1):
        grid = build_grid(descriptor)
        solution = solve(grid)
        summary.append(
            {
                "index": index,
                "name": descriptor.name,
                "dimensions": f"{grid.rows}x{grid.cols}",
                "walls": len(grid.walls),
                "optimal_steps": solution.steps,
            }
        )
    return summary
