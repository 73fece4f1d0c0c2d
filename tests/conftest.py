import uuid

import pytest

from mapgen.generators.layout import Block, CellType, GridMap, Rect, Room


def add_room(grid_map, room_id, bounds, block_id=1):
    room = Room(id=room_id, uid=uuid.UUID(int=room_id), bounds=bounds, block_id=block_id)
    grid_map.fill_rect(bounds, CellType.FLOOR)
    grid_map.rooms.append(room)
    block = grid_map.block_by_id(block_id)
    if block is not None:
        block.rooms.append(room)
    return room


@pytest.fixture
def two_room_map():
    """40x30 map with two 5x5 rooms side by side on the same rows"""
    grid_map = GridMap(40, 30)
    grid_map.blocks.append(Block(id=1, bounds=Rect(2, 2, 36, 26)))
    add_room(grid_map, 1, Rect(5, 10, 5, 5))
    add_room(grid_map, 2, Rect(25, 10, 5, 5))
    return grid_map
