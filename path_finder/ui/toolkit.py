"""Minimal pygame based UI helpers for headless testing.

Rendering is kept deterministic so it can be exercised in automated tests
using the SDL ``dummy`` video driver. Pixel coordinates are converted to
cells here; the game session only ever sees ``(row, col)`` pairs.
"""

from __future__ import annotations

import os
from typing import Iterable, Optional, Sequence, Tuple

from ..game import PathFinderGame
from ..grid import CellKind
from ..tracker import TrackerStatus
from . import layout


# Pygame is imported lazily in ``ensure_pygame`` so test environments can
# select the SDL drivers first.
_PYGAME = None


def ensure_pygame():
    global _PYGAME
    if _PYGAME is None:
        os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
        _PYGAME = __import__("pygame")
        _PYGAME.display.init()
        _PYGAME.font.init()
    return _PYGAME


class PathFinderUI:
    """Small pygame wrapper translating mouse input and drawing the board."""

    def __init__(
        self,
        game: PathFinderGame,
        *,
        size: Tuple[int, int] = layout.WINDOW_SIZE,
        geometry: Optional[layout.GridGeometry] = None,
        surface=None,
    ) -> None:
        pygame = ensure_pygame()
        self.game = game
        if game.grid is None:
            game.start()
        self.size = size
        self.geometry = geometry or layout.fit_geometry(
            game.grid.rows, game.grid.cols, size[0], size[1]
        )
        self.surface = surface or pygame.Surface(size)
        self.font = pygame.font.Font(pygame.font.get_default_font(), 18)

    # ------------------------------------------------------------------
    # Input handling
    def refit(self, size: Optional[Tuple[int, int]] = None) -> None:
        """Recompute the geometry after a resize or level change."""

        if size is not None:
            self.size = size
        grid = self.game.grid
        self.geometry = layout.fit_geometry(grid.rows, grid.cols, self.size[0], self.size[1])

    def on_pointer_down(self, x: float, y: float) -> bool:
        return self.game.on_pointer_down(self.geometry.cell_at(x, y))

    def on_pointer_move(self, x: float, y: float) -> bool:
        return self.game.on_pointer_move(self.geometry.cell_at(x, y))

    def on_pointer_up(self) -> None:
        self.game.on_pointer_up()

    def process_events(self, events: Iterable[object]) -> None:
        pygame = ensure_pygame()
        for event in events:
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.on_pointer_down(*event.pos)
            elif event.type == pygame.MOUSEMOTION:
                self.on_pointer_move(*event.pos)
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self.on_pointer_up()
            elif event.type == pygame.KEYDOWN:
                self._handle_key(event.key)

    def _handle_key(self, key: int) -> None:
        pygame = ensure_pygame()
        if key == pygame.K_h:
            self.game.toggle_hint()
        elif key == pygame.K_c:
            self.game.clear()
        elif key == pygame.K_r:
            self.game.reset()
        elif key == pygame.K_n and self.game.status is TrackerStatus.WON:
            if self.game.next_level():
                self.refit()

    # ------------------------------------------------------------------
    # Rendering helpers
    def render(self):
        pygame = ensure_pygame()
        self.surface.fill(layout.BACKGROUND_COLOR)
        self._draw_cells()
        if self.game.hint_path:
            self._draw_dashed_path(self.game.hint_path)
        self._draw_player_path(self.game.player_path)
        self._draw_markers()
        if self.game.status is TrackerStatus.WON:
            overlay = pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)
            overlay.fill(layout.WIN_OVERLAY_COLOR)
            self.surface.blit(overlay, (0, 0))
        return self.surface

    def _cell_rect(self, cell: Tuple[int, int]):
        pygame = ensure_pygame()
        left, top = self.geometry.cell_to_topleft(cell)
        inset = layout.CELL_INSET
        size = self.geometry.cell_size - 2 * inset
        return pygame.Rect(left + inset, top + inset, size, size)

    def _draw_cells(self) -> None:
        pygame = ensure_pygame()
        colors = {
            CellKind.EMPTY: layout.EMPTY_CELL_COLOR,
            CellKind.WALL: layout.WALL_COLOR,
            CellKind.START: layout.START_COLOR,
            CellKind.GOAL: layout.GOAL_COLOR,
        }
        for cell in self.game.grid:
            rect = self._cell_rect(cell.position)
            self.surface.fill(colors[cell.kind], rect)
            pygame.draw.rect(self.surface, layout.CELL_BORDER_COLOR, rect, 1)

    def _draw_dashed_path(self, path: Sequence[Tuple[int, int]]) -> None:
        pygame = ensure_pygame()
        dash = layout.HINT_DASH_LENGTH
        for start_cell, end_cell in zip(path, path[1:]):
            x0, y0 = self.geometry.cell_to_center(start_cell)
            x1, y1 = self.geometry.cell_to_center(end_cell)
            length = max(abs(x1 - x0), abs(y1 - y0))
            for offset in range(0, length, dash * 2):
                a = offset / length
                b = min(offset + dash, length) / length
                pygame.draw.line(
                    self.surface,
                    layout.HINT_COLOR,
                    (x0 + (x1 - x0) * a, y0 + (y1 - y0) * a),
                    (x0 + (x1 - x0) * b, y0 + (y1 - y0) * b),
                    layout.HINT_LINE_WIDTH,
                )

    def _draw_player_path(self, path: Sequence[Tuple[int, int]]) -> None:
        pygame = ensure_pygame()
        points = [self.geometry.cell_to_center(cell) for cell in path]
        if len(points) > 1:
            pygame.draw.lines(
                self.surface, layout.PLAYER_PATH_COLOR, False, points, layout.PLAYER_LINE_WIDTH
            )
        for point in points:
            pygame.draw.circle(self.surface, layout.PLAYER_PATH_COLOR, point, layout.PATH_NODE_RADIUS)

    def _draw_markers(self) -> None:
        grid = self.game.grid
        for text, cell in (("S", grid.start), ("G", grid.goal)):
            label = self.font.render(text, True, layout.TEXT_COLOR)
            rect = label.get_rect()
            rect.center = self.geometry.cell_to_center(cell)
            self.surface.blit(label, rect)


__all__ = ["PathFinderUI", "ensure_pygame"]
