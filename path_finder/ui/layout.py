"""Layout constants and pixel geometry for the path finder UI."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

# Board metrics
MAX_CELL_SIZE: int = 40
BOARD_PADDING: int = 20
CELL_INSET: int = 1
WINDOW_SIZE: Tuple[int, int] = (600, 400)
HUD_HEIGHT: int = 56

# Path rendering
PLAYER_LINE_WIDTH: int = 6
HINT_LINE_WIDTH: int = 4
HINT_DASH_LENGTH: int = 5
PATH_NODE_RADIUS: int = 6

# Colors expressed as RGB tuples
BACKGROUND_COLOR: Tuple[int, int, int] = (30, 60, 114)
EMPTY_CELL_COLOR: Tuple[int, int, int] = (56, 83, 131)
CELL_BORDER_COLOR: Tuple[int, int, int] = (81, 106, 150)
WALL_COLOR: Tuple[int, int, int] = (44, 62, 80)
START_COLOR: Tuple[int, int, int] = (39, 174, 96)
GOAL_COLOR: Tuple[int, int, int] = (231, 76, 60)
PLAYER_PATH_COLOR: Tuple[int, int, int] = (52, 152, 219)
HINT_COLOR: Tuple[int, int, int] = (241, 196, 15)
WIN_OVERLAY_COLOR: Tuple[int, int, int, int] = (46, 204, 113, 76)
TEXT_COLOR: Tuple[int, int, int] = (255, 255, 255)


@dataclass(frozen=True)
class GridGeometry:
    """Maps between pixels and ``(row, col)`` cells for a board."""

    origin: Tuple[int, int]
    cell_size: int

    def cell_at(self, x: float, y: float) -> Tuple[int, int]:
        """Return the cell under pixel ``(x, y)``.

        ``cell = floor((pixel - offset) / cell_size)`` on each axis. The
        result may lie outside the grid; the core rejects such cells.
        """

        col = math.floor((x - self.origin[0]) / self.cell_size)
        row = math.floor((y - self.origin[1]) / self.cell_size)
        return row, col

    def cell_to_topleft(self, cell: Tuple[int, int]) -> Tuple[int, int]:
        row, col = cell
        return (
            self.origin[0] + col * self.cell_size,
            self.origin[1] + row * self.cell_size,
        )

    def cell_to_center(self, cell: Tuple[int, int]) -> Tuple[int, int]:
        left, top = self.cell_to_topleft(cell)
        return left + self.cell_size // 2, top + self.cell_size // 2


def fit_geometry(
    rows: int,
    cols: int,
    width: int,
    height: int,
    *,
    padding: int = BOARD_PADDING,
    max_cell: int = MAX_CELL_SIZE,
) -> GridGeometry:
    """Largest cell size that fits the area, with the board centred."""

    cell_size = int(
        min(
            (width - 2 * padding) / cols,
            (height - 2 * padding) / rows,
            max_cell,
        )
    )
    cell_size = max(1, cell_size)
    origin = (
        (width - cols * cell_size) // 2,
        (height - rows * cell_size) // 2,
    )
    return GridGeometry(origin=origin, cell_size=cell_size)
