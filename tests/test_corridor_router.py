from conftest import add_room

from mapgen.generators.connectivity import (
    CorridorRouter,
    DoorCandidate,
    astar,
    connect_graph,
    door_candidates,
    l_route,
    register_door,
)
from mapgen.generators.layout import CellType, Direction, GridMap, Rect, TRAVERSABLE_CELLS


def _open(width, height, blocked=()):
    blocked = set(blocked)

    def walkable(x, y):
        return 0 <= x < width and 0 <= y < height and (x, y) not in blocked

    return walkable


def _contiguous(path):
    return all(abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1 for a, b in zip(path, path[1:]))


def test_door_candidates_ring_the_room_without_corners(two_room_map):
    room = two_room_map.rooms[0]
    candidates = door_candidates(two_room_map, room)

    assert len(candidates) == 20
    cells = {c.cell for c in candidates}
    assert len(cells) == 20
    assert (4, 9) not in cells and (10, 15) not in cells
    assert DoorCandidate(7, 9, Direction.NORTH) in candidates
    assert DoorCandidate(10, 12, Direction.EAST) in candidates
    assert DoorCandidate(7, 9, Direction.NORTH).exit_cell == (7, 8)


def test_door_candidates_skip_walls_other_rooms_and_the_map_edge():
    grid_map = GridMap(20, 20)
    room = add_room(grid_map, 1, Rect(0, 5, 4, 4))
    add_room(grid_map, 2, Rect(4, 5, 3, 2))
    grid_map.set_cell(2, 4, CellType.WALL)
    cells = {c.cell for c in door_candidates(grid_map, room)}

    assert not any(x < 0 for x, _ in cells)
    assert (2, 4) not in cells
    assert (4, 5) not in cells and (4, 6) not in cells
    assert (4, 7) in cells


def test_register_door_is_idempotent(two_room_map):
    room = two_room_map.rooms[0]
    candidate = DoorCandidate(7, 9, Direction.NORTH)
    first = register_door(two_room_map, room, candidate)
    second = register_door(two_room_map, room, candidate)

    assert first is second
    assert len(room.doors) == 1 and len(two_room_map.doors) == 1
    assert two_room_map.get_cell(7, 9) == CellType.DOOR


def test_l_route_tries_vertical_first_bend():
    path = l_route((0, 0), (3, 2), _open(10, 10))
    assert path == [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2), (3, 2)]


def test_l_route_falls_back_to_other_bend():
    path = l_route((0, 0), (3, 2), _open(10, 10, blocked={(0, 1)}))
    assert path == [(0, 0), (1, 0), (2, 0), (3, 0), (3, 1), (3, 2)]


def test_l_route_fails_when_both_bends_are_blocked():
    assert l_route((0, 0), (3, 2), _open(10, 10, blocked={(0, 1), (1, 0)})) is None


def test_astar_routes_around_a_wall():
    wall = {(5, y) for y in range(9)}
    path = astar((0, 0), (9, 0), _open(10, 10, wall), lambda x, y: False)

    assert path[0] == (0, 0) and path[-1] == (9, 0)
    assert _contiguous(path)
    assert not wall & set(path)
    assert (5, 9) in path


def test_astar_reports_unreachable_goal():
    wall = {(5, y) for y in range(10)}
    assert astar((0, 0), (9, 0), _open(10, 10, wall), lambda x, y: False) is None


def test_astar_prefers_existing_corridor():
    corridor = {(x, 3) for x in range(10)}
    path = astar((0, 0), (9, 6), _open(10, 10), lambda x, y: (x, y) in corridor)
    assert len(corridor & set(path)) >= 5


def test_connect_rooms_carves_corridor_and_doors(two_room_map):
    router = CorridorRouter(two_room_map, 1)
    corridor = router.connect_rooms(two_room_map.rooms[0], two_room_map.rooms[1])

    assert corridor is not None
    for room in two_room_map.rooms:
        assert len(room.doors) == 1
        door = room.doors[0]
        assert two_room_map.get_cell(*door.position.as_cell()) == CellType.DOOR
        assert two_room_map.get_cell(*door.exit_cell.as_cell()) == CellType.CORRIDOR
    assert two_room_map.rooms[0].doors[0].direction == Direction.EAST
    assert two_room_map.get_cell(17, 10) == CellType.CORRIDOR
    assert corridor.points[0].as_cell() == (10, 10)
    assert corridor.points[-1].as_cell() == (24, 10)


def test_wide_corridor_is_clipped_at_the_rooms(two_room_map):
    router = CorridorRouter(two_room_map, 3)
    assert router.connect_rooms(two_room_map.rooms[0], two_room_map.rooms[1]) is not None

    for y in (9, 10, 11):
        assert all(two_room_map.get_cell(x, y) == CellType.CORRIDOR for x in range(11, 24))
    array = two_room_map.as_array()
    for room in two_room_map.rooms:
        b = room.bounds
        assert not (array[b.y:b.bottom, b.x:b.right] == CellType.CORRIDOR.value).any()


def test_gate_on_the_direct_route_is_carved_around(two_room_map):
    two_room_map.set_cell(17, 10, CellType.GATE)
    router = CorridorRouter(two_room_map, 1)
    corridor = router.connect_rooms(two_room_map.rooms[0], two_room_map.rooms[1])

    assert corridor is not None
    assert two_room_map.get_cell(17, 10) == CellType.GATE
    for room in two_room_map.rooms:
        exit_type = two_room_map.get_cell(*room.doors[0].exit_cell.as_cell())
        assert exit_type in TRAVERSABLE_CELLS


def test_carve_plan_rejects_floor_and_gates(two_room_map):
    router = CorridorRouter(two_room_map, 1)
    two_room_map.set_cell(15, 20, CellType.GATE)

    paint, _ = router.plan_carve([(14, 20), (15, 20), (16, 20)], set(), set())
    assert paint is None
    paint, _ = router.plan_carve([(11, 12), (12, 12)], set(), set())
    assert paint == [(11, 12), (12, 12)]
    paint, _ = router.plan_carve([(9, 12), (10, 12)], set(), set())
    assert paint is None


def test_walled_in_room_cannot_be_connected(two_room_map):
    room = two_room_map.rooms[0]
    for x, y in room.bounds.expand(1).cells():
        if not room.bounds.contains(x, y):
            two_room_map.set_cell(x, y, CellType.WALL)

    router = CorridorRouter(two_room_map, 1)
    assert router.connect_rooms(room, two_room_map.rooms[1]) is None
    assert room.doors == [] and two_room_map.doors == []


def test_connect_graph_counts_built_edges(two_room_map):
    assert connect_graph(two_room_map, [(0, 1)], 2) == 1
    assert len(two_room_map.corridors) == 1
    assert two_room_map.corridors[0].width == 2
