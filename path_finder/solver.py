"""A* search for the optimal 4-connected path between start and goal.

Open set ordering is ``(f, h, seq)``: lowest ``f`` first, then the node
closer to the goal, then the node inserted first. With unit edge weights
and the Manhattan heuristic this yields one reproducible optimal path per
grid.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from .grid import Grid, Position, manhattan, neighbors


logger = logging.getLogger(__name__)

Path = Tuple[Position, ...]


@dataclass
class SearchNode:
    row: int
    col: int
    g: int
    h: int
    parent: Optional["SearchNode"] = None

    @property
    def f(self) -> int:
        return self.g + self.h

    @property
    def position(self) -> Position:
        return self.row, self.col


@dataclass(frozen=True)
class Solution:
    """Outcome of a search. An unreachable goal yields an empty path."""

    path: Path = field(default_factory=tuple)
    expanded: int = 0

    @property
    def reachable(self) -> bool:
        return bool(self.path)

    @property
    def steps(self) -> Optional[int]:
        if not self.path:
            return None
        return len(self.path) - 1

    def __bool__(self) -> bool:
        return self.reachable

    def __len__(self) -> int:
        return len(self.path)

    def __iter__(self):
        return iter(self.path)

    def __repr__(self) -> str:
        if self.reachable:
            return f"Solution(steps={self.steps}, expanded={self.expanded})"
        return f"Solution(unreachable, expanded={self.expanded})"


def _reconstruct(node: SearchNode) -> Path:
    path: List[Position] = []
    current: Optional[SearchNode] = node
    while current is not None:
        path.append(current.position)
        current = current.parent
    path.reverse()
    return tuple(path)


def solve(grid: Grid) -> Solution:
    """Find the shortest start-to-goal path on *grid*."""

    goal = grid.goal
    counter = itertools.count()

    start_h = manhattan(grid.start, goal)
    start_node = SearchNode(grid.start[0], grid.start[1], g=0, h=start_h)
    open_heap: List[Tuple[int, int, int, SearchNode]] = [
        (start_node.f, start_node.h, next(counter), start_node)
    ]
    open_nodes: Dict[Position, SearchNode] = {grid.start: start_node}
    closed: Set[Position] = set()
    expanded = 0

    while open_heap:
        _, _, _, current = heapq.heappop(open_heap)
        position = current.position
        if position in closed or open_nodes.get(position) is not current:
            # superseded entry
            continue
        del open_nodes[position]
        closed.add(position)
        expanded += 1

        if position == goal:
            path = _reconstruct(current)
            logger.debug(
                "solve: reached %s in %d steps after %d expansions",
                goal,
                len(path) - 1,
                expanded,
            )
            return Solution(path=path, expanded=expanded)

        for row, col in neighbors(*position):
            if (row, col) in closed or not grid.is_walkable(row, col):
                continue
            g = current.g + 1
            h = manhattan((row, col), goal)
            existing = open_nodes.get((row, col))
            if existing is not None and existing.f <= g + h:
                continue
            node = SearchNode(row, col, g=g, h=h, parent=current)
            open_nodes[(row, col)] = node
            heapq.heappush(open_heap, (node.f, node.h, next(counter), node))

    logger.debug(
        "solve: goal %s unreachable from %s after %d expansions",
        goal,
        grid.start,
        expanded,
    )
    return Solution(path=(), expanded=expanded)
