import random
import uuid

from mapgen.generators.connectivity import build_room_graph, extra_edge_limit
from mapgen.generators.layout import Rect, Room


def _row_of_rooms(count, spacing=10):
    return [Room(id=i + 1, uid=uuid.UUID(int=i + 1), bounds=Rect(i * spacing, 0, 4, 4), block_id=1)
            for i in range(count)]


def _connected(count, edges):
    parent = list(range(count))

    def find(i):
        while parent[i] != i:
            i = parent[i]
        return i

    for a, b in edges:
        parent[find(a)] = find(b)
    return len({find(i) for i in range(count)}) == 1


def test_extra_edge_limit_values():
    assert extra_edge_limit(0, 1000, 0.1) == 0
    assert extra_edge_limit(5, 10_000, 0.2) == 0
    assert extra_edge_limit(40, 100_000, 0.05) == 1
    assert extra_edge_limit(100, 1_000_000, 0.2) == 4
    # Dense maps scale the allowance down
    assert extra_edge_limit(20, 400, 0.05) == 0


def test_spanning_edges_connect_every_room():
    rooms = _row_of_rooms(8)
    graph = build_room_graph(rooms, 10_000, 3, 0.0, random.Random(1))

    assert graph.spanning_edges == 7
    assert _connected(len(rooms), graph.edges)
    assert all(degree <= 3 for degree in graph.degrees)


def test_nearest_rooms_are_joined_first():
    rooms = _row_of_rooms(4)
    graph = build_room_graph(rooms, 10_000, 3, 0.0, random.Random(1))
    assert graph.edges == [(0, 1), (1, 2), (2, 3)]


def test_degree_cap_is_waived_for_the_last_room():
    rooms = _row_of_rooms(3)
    graph = build_room_graph(rooms, 10_000, 1, 0.0, random.Random(1))
    assert graph.edges == [(0, 1), (1, 2)]
    assert graph.degrees == [1, 2, 1]


def test_spanning_phase_can_starve_under_the_degree_cap():
    rooms = _row_of_rooms(5)
    graph = build_room_graph(rooms, 10_000, 1, 0.0, random.Random(1))
    assert graph.edges == [(0, 1)]
    assert graph.spanning_edges == 1


def test_extra_edges_are_added_up_to_the_limit():
    rooms = [Room(id=i + 1, uid=uuid.UUID(int=i + 1),
                  bounds=Rect((i % 10) * 12, (i // 10) * 12, 4, 4), block_id=1)
             for i in range(40)]
    graph = build_room_graph(rooms, 100_000, 4, 0.05, random.Random(3))

    assert graph.spanning_edges == 39
    assert graph.extra_edges == extra_edge_limit(40, 100_000, 0.05)
    assert len({tuple(sorted(e)) for e in graph.edges}) == len(graph.edges)
    assert all(degree <= 4 for degree in graph.degrees)


def test_single_room_has_no_edges():
    graph = build_room_graph(_row_of_rooms(1), 10_000, 3, 0.1, random.Random(1))
    assert graph.edges == []
    assert graph.degrees == [0]
