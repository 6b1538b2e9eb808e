"""Grid model for the path finder puzzle."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterator, List, Sequence, Tuple


logger = logging.getLogger(__name__)

Position = Tuple[int, int]  # (row, col)

# Fixed neighbour order: up, down, left, right.
NEIGHBOR_OFFSETS: Tuple[Position, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class InvalidLevelError(ValueError):
    """Raised when a level description cannot produce a playable grid."""


class CellKind(Enum):
    EMPTY = "empty"
    WALL = "wall"
    START = "start"
    GOAL = "goal"


@dataclass(frozen=True)
class Cell:
    row: int
    col: int
    kind: CellKind = CellKind.EMPTY

    @property
    def position(self) -> Position:
        return self.row, self.col


def _as_position(value: object, label: str) -> Position:
    try:
        row, col = value  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise InvalidLevelError(f"{label} must be a (row, col) pair, got {value!r}") from exc
    for coordinate in (row, col):
        if isinstance(coordinate, bool) or not isinstance(coordinate, int):
            raise InvalidLevelError(f"{label} coordinates must be integers, got {value!r}")
    return row, col


@dataclass(frozen=True)
class LevelDescriptor:
    """Declarative description of a level."""

    rows: int
    cols: int
    start: Position
    goal: Position
    walls: Tuple[Position, ...] = field(default_factory=tuple)
    name: str = ""

    @classmethod
    def from_dict(cls, data: Dict) -> "LevelDescriptor":
        try:
            rows = int(data["rows"])
            cols = int(data["cols"])
            start = _as_position(data["start"], "start")
            goal = _as_position(data["goal"], "goal")
        except KeyError as exc:
            raise InvalidLevelError(f"Level description is missing {exc.args[0]!r}") from exc
        except InvalidLevelError:
            raise
        except (TypeError, ValueError) as exc:
            raise InvalidLevelError(f"Level dimensions must be integers: {exc}") from exc
        walls = tuple(_as_position(wall, "wall") for wall in data.get("walls", []))
        return cls(
            rows=rows,
            cols=cols,
            start=start,
            goal=goal,
            walls=walls,
            name=str(data.get("name", "")),
        )


@dataclass(frozen=True)
class Grid:
    """Immutable ``rows x cols`` arrangement of cells for one level."""

    rows: int
    cols: int
    cells: Tuple[Tuple[Cell, ...], ...]
    start: Position
    goal: Position

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, row: int, col: int) -> Cell:
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self.rows}x{self.cols} grid")
        return self.cells[row][col]

    def is_walkable(self, row: int, col: int) -> bool:
        """Return *False* for out-of-bounds and wall cells, *True* otherwise.

        Both the solver and the tracker consult this predicate; start and goal
        cells count as walkable.
        """

        if not self.in_bounds(row, col):
            return False
        return self.cells[row][col].kind is not CellKind.WALL

    @property
    def walls(self) -> FrozenSet[Position]:
        return frozenset(
            cell.position
            for line in self.cells
            for cell in line
            if cell.kind is CellKind.WALL
        )

    def __iter__(self) -> Iterator[Cell]:
        for line in self.cells:
            yield from line


def neighbors(row: int, col: int) -> List[Position]:
    """Four axis-aligned neighbours in the order up, down, left, right."""

    return [(row + d_row, col + d_col) for d_row, d_col in NEIGHBOR_OFFSETS]


def manhattan(a: Sequence[int], b: Sequence[int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def _positive(value: int, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidLevelError(f"{label} must be a positive integer, got {value!r}")
    return value


def build_grid(descriptor: LevelDescriptor) -> Grid:
    """Construct the grid described by *descriptor*.

    Raises :class:`InvalidLevelError` when the dimensions are not positive,
    when start or goal lie outside the grid, or when they coincide. Walls
    outside the grid are ignored; start and goal override walls listed at
    the same coordinate.
    """

    rows = _positive(descriptor.rows, "rows")
    cols = _positive(descriptor.cols, "cols")
    start = _as_position(descriptor.start, "start")
    goal = _as_position(descriptor.goal, "goal")

    for label, position in (("start", start), ("goal", goal)):
        if not (0 <= position[0] < rows and 0 <= position[1] < cols):
            raise InvalidLevelError(
                f"{label} {position} lies outside the {rows}x{cols} grid"
            )
    if start == goal:
        raise InvalidLevelError(f"start and goal must differ, both are {start}")

    kinds: Dict[Position, CellKind] = {}
    for wall in (_as_position(wall, "wall") for wall in descriptor.walls):
        if not (0 <= wall[0] < rows and 0 <= wall[1] < cols):
            logger.debug("Ignoring wall %s outside the %dx%d grid", wall, rows, cols)
            continue
        kinds[wall] = CellKind.WALL
    kinds[start] = CellKind.START
    kinds[goal] = CellKind.GOAL

    cells = tuple(
        tuple(Cell(row, col, kinds.get((row, col), CellKind.EMPTY)) for col in range(cols))
        for row in range(rows)
    )
    return Grid(rows=rows, cols=cols, cells=cells, start=start, goal=goal)
