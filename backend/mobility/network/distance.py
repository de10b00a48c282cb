"""Distance oracle: road, euclidean and manhattan metres between two cells."""

import logging
import math
from typing import Optional

from mobility.core.state import Cell
from mobility.network.roads import RoadGraph

logger = logging.getLogger(__name__)


def euclidean_m(a, b, cell_size_m: float) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1]) * cell_size_m


def manhattan_m(a, b, cell_size_m: float) -> float:
    return (abs(a[0] - b[0]) + abs(a[1] - b[1])) * cell_size_m


def road_m(graph: RoadGraph, a, b, cell_size_m: float) -> Optional[float]:
    steps = graph.shortest_path_length(a, b)
    return None if steps is None else steps * cell_size_m


def distance_m(mode: str, a, b, cell_size_m: float, graph: Optional[RoadGraph] = None) -> Optional[float]:
    """Distance in metres under ``mode``; ``None`` only for an unreachable road trip."""
    if mode == "euclidean":
        return euclidean_m(a, b, cell_size_m)
    if mode == "manhattan":
        return manhattan_m(a, b, cell_size_m)
    if mode == "road":
        if graph is None:
            raise ValueError("road distance requires a road graph")
        return road_m(graph, a, b, cell_size_m)
    raise ValueError(f"unknown distance mode {mode!r}")


class DistanceOracle:
    """Memoised distance lookups for the duration of one run.

    Trip endpoints are building cells, so the table is bounded by the number
    of building pairs rather than by the population. All three metrics are
    symmetric; entries are keyed by the unordered cell pair.
    """

    def __init__(self, mode: str, cell_size_m: float, graph: Optional[RoadGraph] = None):
        if mode == "road" and graph is None:
            raise ValueError("road distance requires a road graph")
        self.mode = mode
        self.cell_size_m = cell_size_m
        self.graph = graph
        self._table: dict[tuple[Cell, Cell], Optional[float]] = {}
        self.hits = 0
        self.misses = 0

    @staticmethod
    def _key(a, b) -> tuple[Cell, Cell]:
        a, b = Cell(*a), Cell(*b)
        return (a, b) if a <= b else (b, a)

    def distance(self, a, b) -> Optional[float]:
        key = self._key(a, b)
        if key in self._table:
            self.hits += 1
            return self._table[key]
        self.misses += 1
        d = distance_m(self.mode, a, b, self.cell_size_m, self.graph)
        self._table[key] = d
        return d

    def __len__(self) -> int:
        return len(self._table)

    def log_stats(self) -> None:
        logger.debug(
            "Distance table (%s): %d entries, %d hits, %d misses",
            self.mode, len(self._table), self.hits, self.misses,
        )
