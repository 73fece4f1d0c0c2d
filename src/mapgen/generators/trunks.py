"""
Trunk router: random-walk primary corridor across the map.
"""

import logging
import random
from typing import List

from .layout.layout_types import Corridor, GridMap, Point
from .layout.rasterize import paint_polyline

logger = logging.getLogger(__name__)


def walk_trunk(grid_map: GridMap, start_y: int, min_segment: int, max_turns: int,
               turn_penalty: float, rng: random.Random) -> List[Point]:
    """
    Random-walk a trunk polyline from the left edge.

    Horizontal runs alternate with vertical jogs; a turn happens when a draw
    exceeds ``turn_penalty`` and fewer than ``max_turns`` turns were made.
    The walk stops within two cells of the right edge or when it reaches
    the top/bottom bounds.
    """
    width, height = grid_map.width, grid_map.height
    x, y = 0, start_y
    points = [Point(x, y)]
    horizontal = True
    turns = 0

    while x < width - 2 and 1 < y < height - 2:
        length = rng.randrange(min_segment, min_segment + 8)
        if horizontal:
            x = min(width - 1, x + length)
        else:
            y = max(1, min(height - 2, y + rng.randint(-length, length)))
        points.append(Point(x, y))

        if turns < max_turns and rng.random() > turn_penalty:
            horizontal = not horizontal
            turns += 1
        else:
            horizontal = True

    return points


def route_trunks(grid_map: GridMap, trunks_count: int, trunk_width: int, min_segment: int,
                 max_turns: int, turn_penalty: float, rng: random.Random) -> List[Corridor]:
    """
    Route and paint the trunk corridors.

    Only one trunk is ever routed; further trunks are ignored.
    """
    trunks = []
    for i in range(min(trunks_count, 1)):
        points = walk_trunk(grid_map, grid_map.height // 2 + i * 2,
                            min_segment, max_turns, turn_penalty, rng)
        painted = paint_polyline(grid_map, points, trunk_width)
        trunk = Corridor(points=points, width=trunk_width)
        grid_map.corridors.append(trunk)
        trunks.append(trunk)
        logger.debug("Trunk %d: %d points, %d cells", i, len(points), painted)
    return trunks
