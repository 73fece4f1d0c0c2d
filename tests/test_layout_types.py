import pytest

from mapgen.generators.area import build_base_area, clamp_map_size
from mapgen.generators.layout import (
    CellType,
    Corridor,
    Direction,
    Door,
    GridMap,
    LayoutConverter,
    Point,
    Rect,
    compress_path,
    footprint_radius,
    paint_polyline,
    trace_polyline,
)


def test_grid_starts_empty_and_reads_are_bounds_checked():
    grid_map = GridMap(30, 20)
    assert grid_map.cells.shape == (600,)
    assert grid_map.get_cell(0, 0) == CellType.EMPTY
    assert grid_map.get_cell(-1, 0) is None
    assert grid_map.get_cell(30, 5) is None
    assert grid_map.set_cell(30, 5, CellType.WALL) is False
    assert grid_map.index(3, 2) == 63
    with pytest.raises(IndexError):
        grid_map.index(0, 20)


def test_fill_rect_clips_to_the_map():
    grid_map = GridMap(20, 20)
    grid_map.fill_rect(Rect(-2, -2, 5, 5), CellType.FLOOR)
    assert grid_map.count(CellType.FLOOR) == 9
    assert grid_map.get_cell(2, 2) == CellType.FLOOR
    assert grid_map.get_cell(3, 3) == CellType.EMPTY


def test_occupancy_counts_floor_corridor_and_door():
    grid_map = GridMap(20, 20)
    grid_map.fill_rect(Rect(0, 0, 10, 4), CellType.FLOOR)
    grid_map.set_cell(15, 15, CellType.CORRIDOR)
    grid_map.set_cell(16, 15, CellType.DOOR)
    grid_map.set_cell(17, 15, CellType.GATE)
    grid_map.set_cell(18, 15, CellType.WALL)
    assert grid_map.occupancy() == pytest.approx(42 / 400)


def test_frozen_grid_rejects_writes():
    grid_map = GridMap(20, 20)
    grid_map.freeze()
    assert grid_map.frozen
    with pytest.raises(ValueError):
        grid_map.set_cell(1, 1, CellType.FLOOR)


def test_rect_geometry():
    a = Rect(0, 0, 4, 4)
    assert (a.right, a.bottom, a.area) == (4, 4, 16)
    assert a.center == Point(2.0, 2.0)
    assert not a.intersects(Rect(4, 0, 2, 2))
    assert a.intersects(Rect(3, 3, 2, 2))
    assert a.expand(1) == Rect(-1, -1, 6, 6)
    assert a.contains(3, 3) and not a.contains(4, 3)
    assert len(list(a.cells())) == 16


def test_door_exit_cell_is_one_step_outward():
    door = Door(room_id=1, block_id=1, position=Point(5, 3), direction=Direction.NORTH)
    assert door.exit_cell == Point(5, 2)
    assert Point(5, 3).offset(Direction.WEST) == Point(4, 3)


def test_base_area_is_clamped_with_entrance_on_left_edge():
    grid_map = build_base_area(5, 900)
    assert (grid_map.width, grid_map.height) == (20, 500)
    assert grid_map.entrance == Point(0, 250.0)
    assert clamp_map_size(77) == 77


def test_footprint_radius():
    assert [footprint_radius(w) for w in (1, 2, 3, 4, 5)] == [0, 0, 1, 1, 2]


def test_trace_and_compress_polyline():
    points = [Point(0, 0), Point(3, 0), Point(3, 2)]
    cells = trace_polyline(points)
    assert cells == [(0, 0), (1, 0), (2, 0), (3, 0), (3, 1), (3, 2)]
    assert compress_path(cells) == points


def test_paint_polyline_never_overwrites_floor():
    grid_map = GridMap(20, 20)
    grid_map.fill_rect(Rect(5, 4, 2, 3), CellType.FLOOR)
    paint_polyline(grid_map, [Point(0, 5), Point(19, 5)], 3)
    assert grid_map.get_cell(5, 5) == CellType.FLOOR
    assert grid_map.get_cell(4, 4) == CellType.CORRIDOR
    assert grid_map.get_cell(10, 6) == CellType.CORRIDOR
    assert grid_map.get_cell(10, 7) == CellType.EMPTY


def test_corridor_length():
    corridor = Corridor(points=[Point(0, 0), Point(4, 0), Point(4, 3)], width=2)
    assert corridor.length == 7


def test_ascii_view_marks_entrance():
    grid_map = build_base_area(20, 20)
    grid_map.set_cell(3, 3, CellType.DOOR)
    rows = LayoutConverter.to_ascii(grid_map).split('\n')
    assert len(rows) == 20
    assert all(len(row) == 20 for row in rows)
    assert rows[10][0] == 'E'
    assert rows[3][3] == '+'
    assert 'E' not in LayoutConverter.to_ascii(grid_map, show_entrance=False)


def test_layout_stats():
    grid_map = build_base_area(20, 20)
    grid_map.fill_rect(Rect(2, 2, 4, 5), CellType.FLOOR)
    stats = LayoutConverter.layout_stats(grid_map)
    assert stats['width'] == 20
    assert stats['floor_cells'] == 20
    assert stats['room_count'] == 0
    assert stats['occupancy'] == 0.05
