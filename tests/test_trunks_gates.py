import random

from mapgen.generators.area import build_base_area
from mapgen.generators.bsp import split_blocks
from mapgen.generators.gates import add_gate, place_gates
from mapgen.generators.layout import CellType, GateType, Point
from mapgen.generators.trunks import route_trunks, walk_trunk


def test_trunk_starts_on_left_edge_at_mid_height():
    grid_map = build_base_area(60, 40)
    trunks = route_trunks(grid_map, 1, 3, 8, 4, 0.35, random.Random(7))

    assert len(trunks) == 1
    assert trunks[0].points[0] == Point(0, 20)
    assert trunks[0].width == 3
    assert grid_map.corridors == trunks
    assert grid_map.count(CellType.CORRIDOR) > 0


def test_only_one_trunk_is_routed():
    grid_map = build_base_area(60, 40)
    assert len(route_trunks(grid_map, 3, 2, 8, 4, 0.35, random.Random(7))) == 1


def test_zero_trunks_leaves_the_map_empty():
    grid_map = build_base_area(60, 40)
    assert route_trunks(grid_map, 0, 2, 8, 4, 0.35, random.Random(7)) == []
    assert grid_map.count(CellType.CORRIDOR) == 0


def test_trunk_walk_is_axis_aligned_and_bounded():
    grid_map = build_base_area(80, 40)
    points = walk_trunk(grid_map, 20, 6, 5, 0.2, random.Random(3))
    for a, b in zip(points, points[1:]):
        assert a.x == b.x or a.y == b.y
        assert 0 <= b.x < 80 and 1 <= b.y <= 38


def test_gates_sit_on_block_boundaries():
    grid_map = build_base_area(120, 80)
    split_blocks(grid_map, 4, 16, 0.5, random.Random(2))
    gates = place_gates(grid_map, 2, 2, random.Random(5))

    assert len(gates) == 2 * len(grid_map.blocks)
    for gate in gates:
        block = grid_map.block_by_id(gate.block_id)
        b = block.bounds
        x, y = gate.position.as_cell()
        assert x in (b.x, b.right) or y in (b.y, b.bottom)
        assert grid_map.get_cell(x, y) == CellType.GATE
        assert gate in block.gates


def test_no_gates_when_range_is_zero():
    grid_map = build_base_area(120, 80)
    split_blocks(grid_map, 4, 16, 0.5, random.Random(2))
    assert place_gates(grid_map, 0, 0, random.Random(5)) == []


def test_add_gate_overrides_the_cell():
    grid_map = build_base_area(40, 40)
    split_blocks(grid_map, 1, 16, 0.5, random.Random(2))
    grid_map.set_cell(10, 2, CellType.CORRIDOR)
    gate = add_gate(grid_map, grid_map.blocks[0], Point(10, 2), GateType.VESTIBULE)
    assert gate.gate_type == GateType.VESTIBULE
    assert grid_map.get_cell(10, 2) == CellType.GATE
