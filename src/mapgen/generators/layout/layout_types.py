#!/usr/bin/env python3
"""
Layout Types for 2D Block Map Generation

This module defines the core data structures for representing a generated
level map: the cell grid, the BSP blocks, rooms, gates, doors and corridors
placed on it.

The grid is stored as a flat numpy int8 array addressed through
``GridMap.index``; every read and write goes through bounds-checked helpers
so generation stages never index the array directly.

Author: idTech Map Generator
License: MIT
"""

from typing import List, Dict, Optional, Tuple, Iterator
from dataclasses import dataclass, field
from enum import Enum
import uuid

import numpy as np


MIN_MAP_SIZE = 20
MAX_MAP_SIZE = 500


class CellType(Enum):
    """Types of cells in the map grid"""
    EMPTY = 0       # Unused space
    WALL = 1        # Solid wall
    FLOOR = 2       # Room floor
    CORRIDOR = 3    # Corridor or trunk
    DOOR = 4        # Room door
    GATE = 5        # Block access point


# Cells a corridor or BFS walk may pass through
TRAVERSABLE_CELLS = (CellType.CORRIDOR, CellType.DOOR, CellType.GATE)


class Direction(Enum):
    """Outward direction of a door"""
    NONE = (0, 0)
    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class RoomType(Enum):
    """Room tags assigned during packing"""
    GENERIC = "generic"
    TECH_ROOM = "tech_room"
    STORAGE = "storage"
    WORKSHOP = "workshop"
    HANGAR = "hangar"
    TRANSITION = "transition"
    CORRIDOR_SPACE = "corridor_space"


class GateType(Enum):
    """Gate tags"""
    STANDARD = "standard"
    VESTIBULE = "vestibule"


@dataclass(frozen=True)
class Point:
    """Grid position (may be fractional for centers and the entrance)"""
    x: float
    y: float

    def manhattan(self, other: 'Point') -> float:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def offset(self, direction: Direction) -> 'Point':
        return Point(self.x + direction.dx, self.y + direction.dy)

    def as_cell(self) -> Tuple[int, int]:
        return (int(self.x), int(self.y))


@dataclass(frozen=True)
class Rect:
    """Axis-aligned integer rectangle; right and bottom are exclusive"""
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        """Right edge X coordinate"""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """Bottom edge Y coordinate"""
        return self.y + self.height

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2.0, self.y + self.height / 2.0)

    @property
    def area(self) -> int:
        return self.width * self.height

    def intersects(self, other: 'Rect') -> bool:
        """Check if this rectangle intersects with another"""
        return not (self.right <= other.x or self.x >= other.right or
                    self.bottom <= other.y or self.y >= other.bottom)

    def contains(self, x: int, y: int) -> bool:
        """Check if a cell is inside the rectangle"""
        return self.x <= x < self.right and self.y <= y < self.bottom

    def expand(self, amount: int) -> 'Rect':
        """Return rectangle grown by amount on all sides"""
        return Rect(self.x - amount, self.y - amount,
                    self.width + amount * 2, self.height + amount * 2)

    def cells(self) -> Iterator[Tuple[int, int]]:
        for y in range(self.y, self.bottom):
            for x in range(self.x, self.right):
                yield (x, y)


@dataclass
class Gate:
    """Single-cell access point on a block boundary"""
    block_id: int
    position: Point
    gate_type: GateType = GateType.STANDARD


@dataclass
class Door:
    """
    Single cell just outside a room, created by corridor carving.

    Attributes:
        room_id: Owning room
        block_id: Block of the owning room
        position: Door cell
        direction: Outward direction; position + direction is the exit cell
    """
    room_id: int
    block_id: int
    position: Point
    direction: Direction

    @property
    def exit_cell(self) -> Point:
        return self.position.offset(self.direction)


@dataclass
class Room:
    """Represents a packed room"""
    id: int
    uid: uuid.UUID
    bounds: Rect
    block_id: int
    room_type: RoomType = RoomType.GENERIC
    doors: List[Door] = field(default_factory=list)

    @property
    def center(self) -> Point:
        return self.bounds.center

    @property
    def is_tech(self) -> bool:
        return self.room_type == RoomType.TECH_ROOM

    def distance_to(self, other: 'Room') -> float:
        """Manhattan distance between rectangle centers"""
        return self.center.manhattan(other.center)

    def find_door(self, x: int, y: int) -> Optional[Door]:
        for door in self.doors:
            if door.position.as_cell() == (x, y):
                return door
        return None


@dataclass
class Block:
    """BSP partition scoping room placement and gates"""
    id: int
    bounds: Rect
    gates: List[Gate] = field(default_factory=list)
    rooms: List[Room] = field(default_factory=list)


@dataclass
class Corridor:
    """Polyline corridor; its cells come from rasterizing the polyline"""
    points: List[Point]
    width: int
    is_tech: bool = False

    @property
    def length(self) -> float:
        return sum(a.manhattan(b) for a, b in zip(self.points, self.points[1:]))


@dataclass
class GridMap:
    """
    Represents a generated map as a flat grid of cells plus its entities.

    Cells are addressed through ``index(x, y)``; out-of-bounds reads return
    ``None`` and out-of-bounds writes are ignored.
    """

    width: int
    height: int
    grid_step: float = 1.0
    cells: np.ndarray = field(init=False)
    blocks: List[Block] = field(default_factory=list)
    rooms: List[Room] = field(default_factory=list)
    corridors: List[Corridor] = field(default_factory=list)
    gates: List[Gate] = field(default_factory=list)
    doors: List[Door] = field(default_factory=list)
    entrance: Point = Point(0, 0)

    def __post_init__(self):
        self.cells = np.zeros(self.width * self.height, dtype=np.int8)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def index(self, x: int, y: int) -> int:
        """Flat index of a cell; raises IndexError outside the map"""
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} map")
        return y * self.width + x

    def get_cell(self, x: int, y: int) -> Optional[CellType]:
        if not self.in_bounds(x, y):
            return None
        return CellType(int(self.cells[y * self.width + x]))

    def set_cell(self, x: int, y: int, cell_type: CellType) -> bool:
        """Set a cell, returning False when it lies outside the map"""
        if not self.in_bounds(x, y):
            return False
        self.cells[y * self.width + x] = cell_type.value
        return True

    def fill_rect(self, rect: Rect, cell_type: CellType):
        """Fill the in-bounds part of a rectangle"""
        x0, y0 = max(rect.x, 0), max(rect.y, 0)
        x1, y1 = min(rect.right, self.width), min(rect.bottom, self.height)
        if x0 >= x1 or y0 >= y1:
            return
        self.as_array()[y0:y1, x0:x1] = cell_type.value

    def as_array(self) -> np.ndarray:
        """2D (height, width) view of the cell grid"""
        return self.cells.reshape((self.height, self.width))

    def count(self, *cell_types: CellType) -> int:
        values = [c.value for c in cell_types]
        return int(np.isin(self.cells, values).sum())

    @property
    def area(self) -> int:
        return self.width * self.height

    def occupancy(self) -> float:
        """Fraction of cells that are Floor, Corridor or Door"""
        if self.area == 0:
            return 0.0
        return self.count(CellType.FLOOR, CellType.CORRIDOR, CellType.DOOR) / self.area

    def room_by_id(self, room_id: int) -> Optional[Room]:
        for room in self.rooms:
            if room.id == room_id:
                return room
        return None

    def block_by_id(self, block_id: int) -> Optional[Block]:
        for block in self.blocks:
            if block.id == block_id:
                return block
        return None

    def freeze(self):
        """Make the cell grid read-only once generation has finished"""
        self.cells.setflags(write=False)

    @property
    def frozen(self) -> bool:
        return not self.cells.flags.writeable


class LayoutConverter:
    """Debug views of a generated map"""

    CHAR_MAP = {
        CellType.EMPTY: ' ',
        CellType.WALL: '#',
        CellType.FLOOR: '.',
        CellType.CORRIDOR: ',',
        CellType.DOOR: '+',
        CellType.GATE: 'G',
    }

    @staticmethod
    def to_ascii(grid_map: GridMap, show_entrance: bool = True) -> str:
        """Convert the map to an ASCII representation"""
        rows = []
        entrance = grid_map.entrance.as_cell() if show_entrance else None
        array = grid_map.as_array()
        for y in range(grid_map.height):
            row = []
            for x in range(grid_map.width):
                if entrance == (x, y):
                    row.append('E')
                else:
                    row.append(LayoutConverter.CHAR_MAP[CellType(int(array[y, x]))])
            rows.append(''.join(row))
        return '\n'.join(rows)

    @staticmethod
    def layout_stats(grid_map: GridMap) -> Dict:
        """
        Get statistics about a generated map.

        Returns:
            Dictionary with layout statistics
        """
        stats = {
            'width': grid_map.width,
            'height': grid_map.height,
            'block_count': len(grid_map.blocks),
            'room_count': len(grid_map.rooms),
            'tech_room_count': sum(1 for r in grid_map.rooms if r.is_tech),
            'corridor_count': len(grid_map.corridors),
            'gate_count': len(grid_map.gates),
            'door_count': len(grid_map.doors),
            'floor_cells': grid_map.count(CellType.FLOOR),
            'corridor_cells': grid_map.count(CellType.CORRIDOR),
            'occupancy': round(grid_map.occupancy(), 4),
            'rooms_without_doors': sum(1 for r in grid_map.rooms if not r.doors),
            'average_room_size': 0,
        }
        if grid_map.rooms:
            stats['average_room_size'] = (
                sum(r.bounds.area for r in grid_map.rooms) / len(grid_map.rooms))
        return stats
