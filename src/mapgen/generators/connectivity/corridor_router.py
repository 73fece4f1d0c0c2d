"""
Corridor router: connects two rooms door to door and carves the corridor.

For every planned edge the router tries up to ``MAX_DOOR_PAIRS`` door
pairs, closest first. Each pair is routed between the two exit cells (the
cells just outside the doors) with an L-route or A*, then carved with a
square footprint of the corridor width. A failed carve gets one A* retry
that avoids the failed footprint.
"""

import logging
from typing import List, Optional, Sequence, Set, Tuple

import numpy as np

from ..layout.layout_types import CellType, Corridor, GridMap, Room
from ..layout.rasterize import compress_path, footprint_radius, square
from .doors import DoorCandidate, door_candidates, register_door
from .pathfinding import astar, l_route

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

MAX_DOOR_PAIRS = 16

# Cell types a route may pass through
WALKABLE_CELLS = (CellType.EMPTY, CellType.CORRIDOR, CellType.GATE)
# Cell types a carve may never paint over
BLOCKING_CELLS = frozenset(c.value for c in (CellType.FLOOR, CellType.WALL,
                                             CellType.GATE, CellType.DOOR))


class CorridorRouter:
    """
    Routes and carves corridors between rooms of one map.

    The room buffer (every room grown by the footprint radius) is computed
    once; rooms must not change while the router is in use.

    Args:
        grid_map: Map being generated
        width: Corridor width in cells
    """

    def __init__(self, grid_map: GridMap, width: int):
        self.grid_map = grid_map
        self.width = width
        self.radius = footprint_radius(width)
        self._buffer = self._build_buffer()
        self._open: List[bool] = []
        self._corridor: List[bool] = []

    # ------------------------------------------------------------------
    # Grid snapshots
    # ------------------------------------------------------------------

    def _build_buffer(self) -> np.ndarray:
        gm = self.grid_map
        mask = np.zeros((gm.height, gm.width), dtype=bool)
        for room in gm.rooms:
            grown = room.bounds.expand(self.radius)
            x0, y0 = max(grown.x, 0), max(grown.y, 0)
            x1, y1 = min(grown.right, gm.width), min(grown.bottom, gm.height)
            if x0 < x1 and y0 < y1:
                mask[y0:y1, x0:x1] = True
        return mask.reshape(-1)

    def in_buffer(self, x: int, y: int) -> bool:
        return bool(self._buffer[y * self.grid_map.width + x])

    def _snapshot(self):
        """Capture walkable and corridor cells; valid until the next carve"""
        cells = self.grid_map.cells
        walkable = np.isin(cells, [c.value for c in WALKABLE_CELLS]) & ~self._buffer
        self._open = walkable.tolist()
        self._corridor = (cells == CellType.CORRIDOR.value).tolist()

    def _walkable(self, exits: Set[Cell], doors: Set[Cell], forbidden: Set[Cell] = frozenset()):
        width, height = self.grid_map.width, self.grid_map.height
        is_open = self._open

        def walkable(x: int, y: int) -> bool:
            if not (0 <= x < width and 0 <= y < height):
                return False
            cell = (x, y)
            if cell in exits:
                return True
            if cell in doors or cell in forbidden:
                return False
            return is_open[y * width + x]

        return walkable

    def _is_corridor(self, x: int, y: int) -> bool:
        return self._corridor[y * self.grid_map.width + x]

    # ------------------------------------------------------------------
    # Carving
    # ------------------------------------------------------------------

    def footprint(self, core: Sequence[Cell], doors: Set[Cell]) -> List[Cell]:
        """Square-radius cells around the core path, door cells excluded"""
        cells, seen = [], set()
        for cell in core:
            for f in square(cell, self.radius):
                if f not in seen and f not in doors:
                    seen.add(f)
                    cells.append(f)
        return cells

    def plan_carve(self, core: Sequence[Cell], doors: Set[Cell],
                   exits: Set[Cell]) -> Tuple[Optional[List[Cell]], List[Cell]]:
        """
        Check a route and list the cells to paint.

        Core cells must be inside the map and paintable; apart from the exits
        they must also lie outside the room buffer. Footprint cells inside
        the buffer are clipped, other footprint cells must be inside the map
        and paintable.

        Returns:
            Tuple of (cells to paint or None on failure, full footprint)
        """
        gm = self.grid_map
        footprint = self.footprint(core, doors)
        core_set = set(core)

        for x, y in core:
            if not gm.in_bounds(x, y) or int(gm.cells[gm.index(x, y)]) in BLOCKING_CELLS:
                return None, footprint
            if (x, y) not in exits and self.in_buffer(x, y):
                return None, footprint

        paint = []
        for x, y in footprint:
            if (x, y) in core_set:
                paint.append((x, y))
                continue
            if not gm.in_bounds(x, y):
                return None, footprint
            if self.in_buffer(x, y):
                continue
            if int(gm.cells[gm.index(x, y)]) in BLOCKING_CELLS:
                return None, footprint
            paint.append((x, y))
        return paint, footprint

    def _retry_forbidden(self, footprint: Sequence[Cell], exits: Set[Cell],
                         doors: Set[Cell]) -> Set[Cell]:
        # The exits' own squares stay open so the retry can leave the doors
        keep = set(doors)
        for cell in exits:
            keep.update(square(cell, self.radius))
        return {cell for cell in footprint if cell not in keep}

    # ------------------------------------------------------------------
    # Connection
    # ------------------------------------------------------------------

    def _exit_ok(self, cell: Cell) -> bool:
        return self.grid_map.get_cell(*cell) in (CellType.EMPTY, CellType.CORRIDOR)

    def connect_pair(self, room_a: Room, room_b: Room,
                     door_a: DoorCandidate, door_b: DoorCandidate) -> Optional[Corridor]:
        """Route, carve and register one door pair; None when it cannot be built"""
        exit_a, exit_b = door_a.exit_cell, door_b.exit_cell
        doors = {door_a.cell, door_b.cell}
        exits = {exit_a, exit_b}
        if not (self._exit_ok(exit_a) and self._exit_ok(exit_b)) or exits & doors:
            return None

        walkable = self._walkable(exits, doors)
        core = l_route(exit_a, exit_b, walkable) or astar(exit_a, exit_b, walkable, self._is_corridor)
        if core is None:
            return None

        paint, footprint = self.plan_carve(core, doors, exits)
        if paint is None:
            forbidden = self._retry_forbidden(footprint, exits, doors)
            core = astar(exit_a, exit_b, self._walkable(exits, doors, forbidden), self._is_corridor)
            if core is None:
                return None
            paint, _ = self.plan_carve(core, doors, exits)
            if paint is None:
                return None

        for x, y in paint:
            self.grid_map.set_cell(x, y, CellType.CORRIDOR)
        register_door(self.grid_map, room_a, door_a)
        register_door(self.grid_map, room_b, door_b)

        route = [door_a.cell] + list(core) + [door_b.cell]
        corridor = Corridor(points=compress_path(route), width=self.width,
                            is_tech=room_a.is_tech or room_b.is_tech)
        self.grid_map.corridors.append(corridor)
        return corridor

    def connect_rooms(self, room_a: Room, room_b: Room,
                      candidates_b: Optional[List[DoorCandidate]] = None) -> Optional[Corridor]:
        """
        Connect two rooms with the first buildable of the closest door pairs.

        Args:
            room_a: First room
            room_b: Second room
            candidates_b: Door cells to use on room_b instead of enumerating them

        Returns:
            The carved corridor, or None if every tried pair failed
        """
        candidates_a = door_candidates(self.grid_map, room_a)
        if candidates_b is None:
            candidates_b = door_candidates(self.grid_map, room_b)
        pairs = [(a, b) for a in candidates_a for b in candidates_b]
        pairs.sort(key=lambda pair: pair[0].manhattan(pair[1]))

        self._snapshot()
        for door_a, door_b in pairs[:MAX_DOOR_PAIRS]:
            corridor = self.connect_pair(room_a, room_b, door_a, door_b)
            if corridor is not None:
                return corridor

        logger.debug("No corridor between rooms %d and %d", room_a.id, room_b.id)
        return None


def connect_graph(grid_map: GridMap, edges: Sequence[Tuple[int, int]], width: int) -> int:
    """
    Carve corridors for planned edges (room index pairs).

    Returns:
        Number of edges that were built
    """
    router = CorridorRouter(grid_map, width)
    built = 0
    for a, b in edges:
        if router.connect_rooms(grid_map.rooms[a], grid_map.rooms[b]) is not None:
            built += 1
    logger.debug("Carved %d of %d planned corridors", built, len(edges))
    return built
