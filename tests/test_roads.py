import numpy as np
import pytest

from mobility.core.state import Cell
from mobility.network.layout import lattice_roads, manhattan_path
from mobility.network.roads import RoadGraph


def reference_distances(rows, cols, roads, source):
    """Road distances from ``source`` by relaxing every edge until nothing changes."""
    dist = {cell: float("inf") for cell in roads}
    dist[source] = 0
    changed = True
    while changed:
        changed = False
        for (r, c) in roads:
            for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1)):
                n = (r + dr, c + dc)
                if n in dist and dist[(r, c)] + 1 < dist[n]:
                    dist[n] = dist[(r, c)] + 1
                    changed = True
    return dist


def test_is_road():
    graph = RoadGraph(6, 6, [(0, 0), (0, 1)])
    assert graph.is_road((0, 1))
    assert graph.is_road(Cell(0, 0))
    assert not graph.is_road((1, 1))


def test_nearest_road_is_self_for_road_cell():
    graph = RoadGraph(6, 6, [(2, 2)])
    assert graph.nearest_road((2, 2)) == Cell(2, 2)


def test_nearest_road_searches_across_non_road_cells():
    graph = RoadGraph(6, 6, [(5, 5)])
    assert graph.nearest_road((0, 0)) == Cell(5, 5)


def test_nearest_road_none_without_roads():
    graph = RoadGraph(6, 6, [])
    assert graph.nearest_road((3, 3)) is None


def test_nearest_road_tie_break_follows_neighbor_order():
    # down before right
    assert RoadGraph(6, 6, [(3, 2), (2, 3)]).nearest_road((2, 2)) == Cell(3, 2)
    # up before right
    assert RoadGraph(6, 6, [(1, 2), (2, 3)]).nearest_road((2, 2)) == Cell(1, 2)
    # right before left
    assert RoadGraph(6, 6, [(2, 1), (2, 3)]).nearest_road((2, 2)) == Cell(2, 3)


def test_shortest_path_to_self_is_zero():
    graph = RoadGraph(6, 6, [(1, 1), (1, 2)])
    assert graph.shortest_path_length((1, 1), (1, 1)) == 0


def test_shortest_path_zero_when_both_snap_to_same_road():
    graph = RoadGraph(6, 6, [(0, 0)])
    assert graph.shortest_path_length((0, 1), (1, 0)) == 0


def test_shortest_path_along_row():
    graph = RoadGraph(6, 6, [(2, c) for c in range(6)])
    # (1,0) snaps down to (2,0); (1,5) snaps down to (2,5)
    assert graph.shortest_path_length((1, 0), (1, 5)) == 5


def test_shortest_path_follows_detour():
    # U-shaped road: down column 0, along row 4, up column 4
    roads = [(r, 0) for r in range(5)] + [(4, c) for c in range(5)] + [(r, 4) for r in range(5)]
    graph = RoadGraph(6, 6, roads)
    assert graph.shortest_path_length((0, 0), (0, 4)) == 12


def test_shortest_path_unreachable_between_components():
    graph = RoadGraph(6, 6, [(0, 0), (0, 1), (5, 5), (5, 4)])
    assert graph.shortest_path_length((0, 0), (5, 5)) is None


def test_shortest_path_unreachable_without_roads():
    graph = RoadGraph(6, 6, [])
    assert graph.shortest_path_length((0, 0), (0, 0)) is None


@pytest.mark.parametrize("seed", range(5))
def test_shortest_path_matches_reference_on_random_grids(seed):
    rng = np.random.default_rng(seed)
    rows, cols = 5, 6
    mask = rng.random((rows, cols)) < 0.6
    roads = {(r, c) for r in range(rows) for c in range(cols) if mask[r, c]}
    graph = RoadGraph(rows, cols, roads)

    for source in roads:
        expected = reference_distances(rows, cols, roads, source)
        for target in roads:
            got = graph.shortest_path_length(source, target)
            if expected[target] == float("inf"):
                assert got is None
            else:
                assert got == expected[target]


def test_one_search_per_source_serves_every_goal():
    graph = RoadGraph(6, 6, [(2, c) for c in range(6)])
    first = graph.depths_from((2, 0))

    assert graph.shortest_path_length((1, 0), (1, 5)) == 5
    assert graph.shortest_path_length((3, 0), (3, 3)) == 3
    assert graph.depths_from((2, 0)) is first
    assert first == {Cell(2, c): c for c in range(6)}


def test_depths_from_stays_inside_component():
    graph = RoadGraph(6, 6, [(0, 0), (0, 1), (5, 5), (5, 4)])
    assert set(graph.depths_from((0, 0))) == {Cell(0, 0), Cell(0, 1)}


def test_manhattan_path_goes_rows_first():
    path = manhattan_path((0, 0), (2, 3))
    assert path[:3] == [Cell(0, 0), Cell(1, 0), Cell(2, 0)]
    assert path[-1] == Cell(2, 3)
    assert set(path) == {Cell(0, 0), Cell(1, 0), Cell(2, 0), Cell(2, 1), Cell(2, 2), Cell(2, 3)}


def test_manhattan_path_handles_reverse_direction():
    path = manhattan_path((3, 3), (1, 1))
    assert set(path) == {Cell(3, 3), Cell(2, 3), Cell(1, 3), Cell(1, 2), Cell(1, 1)}


def test_lattice_roads_every_third_line():
    roads = lattice_roads(6, 6, spacing=3)
    assert len(roads) == 20
    assert Cell(0, 4) in roads and Cell(4, 3) in roads
    assert Cell(1, 1) not in roads


def test_lattice_roads_rejects_bad_spacing():
    with pytest.raises(ValueError):
        lattice_roads(6, 6, spacing=0)
