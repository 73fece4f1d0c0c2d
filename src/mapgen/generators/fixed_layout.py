"""
Fixed carriage layout used for train settings.

One block spans the interior, a straight corridor runs along its top with a
vestibule gate at each end, and a row of equal rooms hangs off the corridor,
each with a single door facing it.
"""

import logging

from ..settings.generation_settings import GenerationSettings
from .bsp.bsp_generator import interior_rect
from .connectivity.doors import DoorCandidate, register_door
from .context import GenerationContext
from .gates import add_gate
from .layout.layout_types import (Block, CellType, Corridor, Direction, GateType,
                                  GridMap, Point, Rect, Room, RoomType)
from .layout.rasterize import paint_polyline

logger = logging.getLogger(__name__)


ROOM_WIDTH = 5
ROOM_SPACING = 1
CORRIDOR_OFFSET = 2
TECH_ROOM_CHANCE = 0.2


def build_fixed_layout(grid_map: GridMap, settings: GenerationSettings,
                       context: GenerationContext) -> Block:
    """
    Lay out a single carriage on the map.

    Returns:
        The carriage block
    """
    rng = context.rng
    block = Block(id=1, bounds=interior_rect(grid_map))
    grid_map.blocks.append(block)
    b = block.bounds

    corridor_y = b.y + CORRIDOR_OFFSET
    start_x, end_x = b.x + 1, b.right - 2
    points = [Point(start_x, corridor_y), Point(end_x, corridor_y)]
    paint_polyline(grid_map, points, settings.corridor_width_units)
    grid_map.corridors.append(Corridor(points=points, width=settings.corridor_width_units))

    add_gate(grid_map, block, points[0], GateType.VESTIBULE)
    add_gate(grid_map, block, points[1], GateType.VESTIBULE)

    room_y = corridor_y + 2
    room_height = max(4, b.height - 6)
    x = start_x + 2
    while x + ROOM_WIDTH < end_x and room_y + room_height <= b.bottom:
        room_type = RoomType.TECH_ROOM if rng.random() < TECH_ROOM_CHANCE else RoomType.GENERIC
        room = Room(id=context.new_room_id(), uid=context.new_uid(),
                    bounds=Rect(x, room_y, ROOM_WIDTH, room_height),
                    block_id=block.id, room_type=room_type)
        grid_map.fill_rect(room.bounds, CellType.FLOOR)
        grid_map.rooms.append(room)
        block.rooms.append(room)

        door = DoorCandidate(x + ROOM_WIDTH // 2, room_y - 1, Direction.NORTH)
        register_door(grid_map, room, door)
        x += ROOM_WIDTH + ROOM_SPACING

    logger.debug("Fixed layout: %d rooms along a %d-cell corridor",
                 len(block.rooms), end_x - start_x + 1)
    return block
