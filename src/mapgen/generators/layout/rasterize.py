"""
Grid rasterization helpers shared by trunks, corridors and the fixed layout.
"""

from typing import Iterable, List, Sequence, Tuple

from .layout_types import CellType, GridMap, Point

Cell = Tuple[int, int]


def footprint_radius(width: int) -> int:
    """Square radius of a corridor of the given width"""
    return max(0, (width - 1) // 2)


def square(cell: Cell, radius: int) -> List[Cell]:
    cx, cy = cell
    return [(cx + dx, cy + dy)
            for dy in range(-radius, radius + 1)
            for dx in range(-radius, radius + 1)]


def trace_polyline(points: Sequence[Point]) -> List[Cell]:
    """
    Walk a polyline cell by cell.

    Segments are sampled at one cell per step along their longer axis, so
    axis-aligned segments yield every cell exactly once.
    """
    if not points:
        return []
    cells: List[Cell] = []
    seen = set()
    for a, b in zip(points, points[1:] or points):
        ax, ay = a.as_cell()
        bx, by = b.as_cell()
        steps = max(abs(bx - ax), abs(by - ay))
        for s in range(steps + 1):
            t = s / steps if steps else 0.0
            cell = (int(round(ax + (bx - ax) * t)), int(round(ay + (by - ay) * t)))
            if cell not in seen:
                seen.add(cell)
                cells.append(cell)
    return cells


def compress_path(cells: Sequence[Cell]) -> List[Point]:
    """Drop the interior points of straight runs"""
    if len(cells) <= 2:
        return [Point(x, y) for x, y in cells]
    points = [Point(*cells[0])]
    for prev, cur, nxt in zip(cells, cells[1:], cells[2:]):
        if (cur[0] - prev[0], cur[1] - prev[1]) != (nxt[0] - cur[0], nxt[1] - cur[1]):
            points.append(Point(*cur))
    points.append(Point(*cells[-1]))
    return points


def paint_polyline(grid_map: GridMap, points: Sequence[Point], width: int,
                   cell_type: CellType = CellType.CORRIDOR) -> int:
    """
    Paint a polyline with a square brush, never overwriting Floor.

    Returns:
        Number of cells painted
    """
    radius = footprint_radius(width)
    painted = 0
    for cell in trace_polyline(points):
        for x, y in square(cell, radius):
            if grid_map.get_cell(x, y) in (None, CellType.FLOOR):
                continue
            grid_map.set_cell(x, y, cell_type)
            painted += 1
    return painted


def mark_cells(grid_map: GridMap, cells: Iterable[Cell], cell_type: CellType):
    for x, y in cells:
        grid_map.set_cell(x, y, cell_type)
