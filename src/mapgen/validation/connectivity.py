"""
Room reachability validation and repair.

Reachability is a breadth-first walk from the first registered door over
4-connected Corridor/Door/Gate cells. Room floors are not traversed, so a
room counts as reached only when one of its doors lies on a visited cell.
Unreached rooms are repaired by carving a corridor to a reached door of the
nearest reached room, falling back to farther reached rooms when no corridor
fits. Repair sweeps repeat while they still connect rooms.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

import numpy as np

from ..generators.connectivity.corridor_router import CorridorRouter
from ..generators.connectivity.doors import DoorCandidate
from ..generators.layout.layout_types import GridMap, Room, TRAVERSABLE_CELLS

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


@dataclass
class ConnectivityReport:
    """Result of connectivity validation."""
    room_count: int = 0
    reached_room_ids: List[int] = field(default_factory=list)
    unreachable_room_ids: List[int] = field(default_factory=list)
    repaired_room_ids: List[int] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_connected(self) -> bool:
        return not self.unreachable_room_ids

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)
        logger.warning(message)


def traversable_cells(grid_map: GridMap, start: Cell) -> Set[Cell]:
    """Cells reachable from start over 4-connected Corridor/Door/Gate cells"""
    width, height = grid_map.width, grid_map.height
    passable = np.isin(grid_map.cells, [c.value for c in TRAVERSABLE_CELLS]).tolist()

    visited = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for dx, dy in ((0, -1), (1, 0), (0, 1), (-1, 0)):
            nx, ny = x + dx, y + dy
            if (nx, ny) in visited or not (0 <= nx < width and 0 <= ny < height):
                continue
            if passable[ny * width + nx]:
                visited.add((nx, ny))
                queue.append((nx, ny))
    return visited


def reached_network(grid_map: GridMap) -> Set[Cell]:
    """Cells connected to the first registered door (empty without doors)"""
    if not grid_map.doors:
        return set()
    return traversable_cells(grid_map, grid_map.doors[0].position.as_cell())


def reachable_room_ids(grid_map: GridMap) -> Set[int]:
    """Ids of rooms with a door reachable from the first registered door"""
    network = reached_network(grid_map)
    return {door.room_id for door in grid_map.doors if door.position.as_cell() in network}


def _reached_doors(room: Room, network: Set[Cell]) -> List[DoorCandidate]:
    return [DoorCandidate(int(d.position.x), int(d.position.y), d.direction)
            for d in room.doors if d.position.as_cell() in network]


def _repair_room(router: CorridorRouter, room: Room, reached_rooms: List[Room],
                 network: Set[Cell]) -> Optional[Room]:
    """Connect room to the closest reached room that accepts a corridor; returns that room"""
    for target in sorted(reached_rooms, key=room.distance_to):
        targets = _reached_doors(target, network) or None
        if router.connect_rooms(room, target, targets) is not None:
            return target
    return None


def validate_connectivity(grid_map: GridMap, corridor_width: int,
                          auto_fix: bool = True) -> ConnectivityReport:
    """
    Check that every room is reachable and optionally repair the shortfall.

    Args:
        grid_map: Map to validate (modified when repairs are carved)
        corridor_width: Width of repair corridors
        auto_fix: Carve repair corridors for unreached rooms

    Returns:
        ConnectivityReport with reached, repaired and unreachable room ids
    """
    rooms = grid_map.rooms
    report = ConnectivityReport(room_count=len(rooms))
    if len(rooms) <= 1:
        report.reached_room_ids = [r.id for r in rooms]
        return report

    network = reached_network(grid_map)
    reached = {d.room_id for d in grid_map.doors if d.position.as_cell() in network}
    if len(reached) == len(rooms):
        report.reached_room_ids = sorted(reached)
        return report

    if grid_map.doors:
        report.add_warning(f"Room connectivity broken: reached {len(reached)} of {len(rooms)} rooms")
    else:
        report.add_warning("No doors to validate connectivity")

    if auto_fix:
        router = CorridorRouter(grid_map, corridor_width)
        if not reached:
            # Nothing is connected yet: grow the network from the first room
            reached.add(rooms[0].id)
        # Rooms that fail early may succeed once later repairs extend the network
        progress = True
        while progress:
            progress = False
            for room in rooms:
                if room.id in reached:
                    continue
                via = _repair_room(router, room, [r for r in rooms if r.id in reached], network)
                if via is None:
                    continue
                network = reached_network(grid_map)
                reached |= {d.room_id for d in grid_map.doors if d.position.as_cell() in network}
                if room.id in reached:
                    progress = True
                    report.repaired_room_ids.append(room.id)
                    logger.debug("Repaired room %d via room %d", room.id, via.id)
        reached = reachable_room_ids(grid_map)

    report.reached_room_ids = sorted(reached)
    report.unreachable_room_ids = [r.id for r in rooms if r.id not in reached]
    if report.unreachable_room_ids and auto_fix:
        report.add_warning(
            f"{len(report.unreachable_room_ids)} rooms unreachable after repair: "
            f"{report.unreachable_room_ids}")
    return report
