"""
Door candidate enumeration and door registration.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..layout.layout_types import CellType, Direction, Door, GridMap, Point, Room


@dataclass(frozen=True)
class DoorCandidate:
    """A legal door cell next to a room, with its outward direction"""
    x: int
    y: int
    direction: Direction

    @property
    def cell(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def exit_cell(self) -> Tuple[int, int]:
        return (self.x + self.direction.dx, self.y + self.direction.dy)

    def manhattan(self, other: 'DoorCandidate') -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)


def _side_cells(room: Room) -> List[DoorCandidate]:
    b = room.bounds
    cells = [DoorCandidate(x, b.y - 1, Direction.NORTH) for x in range(b.x, b.right)]
    cells += [DoorCandidate(x, b.bottom, Direction.SOUTH) for x in range(b.x, b.right)]
    cells += [DoorCandidate(b.x - 1, y, Direction.WEST) for y in range(b.y, b.bottom)]
    cells += [DoorCandidate(b.right, y, Direction.EAST) for y in range(b.y, b.bottom)]
    return cells


def door_candidates(grid_map: GridMap, room: Room) -> List[DoorCandidate]:
    """
    Enumerate legal door cells around a room.

    A candidate sits one step outside a side of the room, inside the map,
    outside every other room and not on a Wall cell.
    """
    others = [r.bounds for r in grid_map.rooms if r.id != room.id]
    found: Dict[Tuple[int, int], DoorCandidate] = {}
    for candidate in _side_cells(room):
        x, y = candidate.cell
        if candidate.cell in found or not grid_map.in_bounds(x, y):
            continue
        if room.bounds.contains(x, y) or any(r.contains(x, y) for r in others):
            continue
        if grid_map.get_cell(x, y) == CellType.WALL:
            continue
        found[candidate.cell] = candidate
    return list(found.values())


def register_door(grid_map: GridMap, room: Room, candidate: DoorCandidate) -> Door:
    """Add a door to a room and the map, once per exact cell and room"""
    x, y = candidate.cell
    door = room.find_door(x, y)
    if door is None:
        door = Door(room_id=room.id, block_id=room.block_id,
                    position=Point(x, y), direction=candidate.direction)
        room.doors.append(door)
        grid_map.doors.append(door)
    grid_map.set_cell(x, y, CellType.DOOR)
    return door
