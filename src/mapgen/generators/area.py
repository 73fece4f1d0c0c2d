"""
Area builder: allocates the base grid of a generation attempt.
"""

from .layout.layout_types import GridMap, Point, MIN_MAP_SIZE, MAX_MAP_SIZE


def clamp_map_size(value: int) -> int:
    return max(MIN_MAP_SIZE, min(MAX_MAP_SIZE, int(value)))


def build_base_area(width: int, height: int, grid_step: float = 1.0) -> GridMap:
    """
    Allocate an all-Empty map with the entrance at the left-edge midpoint.

    Both dimensions are clamped to [20, 500].
    """
    width = clamp_map_size(width)
    height = clamp_map_size(height)
    grid_map = GridMap(width=width, height=height, grid_step=grid_step)
    grid_map.entrance = Point(0, height / 2.0)
    return grid_map
