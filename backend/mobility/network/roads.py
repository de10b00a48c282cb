"""Road graph over the city lattice.

Roads form the subgraph of the grid induced by road cells with 4-neighbour
adjacency. Buildings never sit on roads, so every trip endpoint is first
snapped to its nearest road cell before the road-only search runs. Each
snapped source is searched once and its depth map answers every goal.
"""

from collections import deque
from typing import Iterable, Optional

from mobility.core.state import Cell


# Neighbour expansion order: down, up, right, left
NEIGHBOR_DELTAS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


class RoadGraph:
    """Read-only view of the road cells of a ``rows x cols`` grid."""

    def __init__(self, rows: int, cols: int, roads: Iterable):
        self.rows = rows
        self.cols = cols
        self.roads: frozenset = frozenset(Cell(r, c) for r, c in roads)
        # Snap and depth caches over the frozen road set
        self._snapped: dict[Cell, Optional[Cell]] = {}
        self._depths: dict[Cell, dict[Cell, int]] = {}

    def in_bounds(self, cell) -> bool:
        r, c = cell
        return 0 <= r < self.rows and 0 <= c < self.cols

    def is_road(self, cell) -> bool:
        return Cell(*cell) in self.roads

    def neighbors(self, cell: Cell):
        r, c = cell
        for dr, dc in NEIGHBOR_DELTAS:
            n = Cell(r + dr, c + dc)
            if self.in_bounds(n):
                yield n

    def nearest_road(self, cell) -> Optional[Cell]:
        """Nearest road cell by breadth-first expansion over the whole grid.

        Returns the cell itself when it is a road, ``None`` when the grid
        holds no road at all.
        """
        start = Cell(*cell)
        if start in self._snapped:
            return self._snapped[start]
        found = self._search_nearest_road(start)
        self._snapped[start] = found
        return found

    def _search_nearest_road(self, start: Cell) -> Optional[Cell]:
        if start in self.roads:
            return start

        queue = deque([start])
        seen = {start}
        while queue:
            cur = queue.popleft()
            for n in self.neighbors(cur):
                if n in seen:
                    continue
                if n in self.roads:
                    return n
                seen.add(n)
                queue.append(n)
        return None

    def depths_from(self, source: Cell) -> dict[Cell, int]:
        """Road steps from road cell ``source`` to every road in its component.

        One breadth-first search per source; later calls return the stored map.
        """
        source = Cell(*source)
        depth = self._depths.get(source)
        if depth is not None:
            return depth

        queue = deque([source])
        depth = {source: 0}
        while queue:
            cur = queue.popleft()
            for n in self.neighbors(cur):
                if n not in self.roads or n in depth:
                    continue
                depth[n] = depth[cur] + 1
                queue.append(n)
        self._depths[source] = depth
        return depth

    def shortest_path_length(self, a, b) -> Optional[int]:
        """Number of road steps between the roads nearest to ``a`` and ``b``.

        ``None`` means unreachable: either endpoint has no road to snap to,
        or the snapped roads lie in disconnected components.
        """
        source = self.nearest_road(a)
        goal = self.nearest_road(b)
        if source is None or goal is None:
            return None
        if source == goal:
            return 0
        return self.depths_from(source).get(goal)
