"""
Connectivity graph builder.

Builds a near-minimal spanning graph over the packed rooms (Prim-like growth
by Manhattan distance between room centers, with a per-room degree cap) and
then adds a bounded number of extra loop edges.
"""

import logging
import math
import random
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from ..layout.layout_types import Room

logger = logging.getLogger(__name__)


@dataclass
class RoomGraph:
    """
    Planned room connections.

    Attributes:
        edges: Pairs of room indices (into the map's room list)
        degrees: Planned connection count per room index
        spanning_edges: Number of edges added by the spanning phase
    """
    edges: List[Tuple[int, int]] = field(default_factory=list)
    degrees: List[int] = field(default_factory=list)
    spanning_edges: int = 0

    @property
    def extra_edges(self) -> int:
        return len(self.edges) - self.spanning_edges


def extra_edge_limit(room_count: int, map_area: int, extra_percent: float) -> int:
    """Number of loop edges allowed on top of the spanning structure"""
    if room_count <= 0 or map_area <= 0:
        return 0
    percent_limit = math.floor(room_count * extra_percent)
    density_scale = max(0.15, min(1.0, 1.0 - 20.0 * room_count / map_area))
    base_limit = 0 if room_count < 10 else max(1, room_count // 20)
    cap = base_limit if room_count < 10 else max(base_limit, percent_limit)
    return math.floor(min(max(1, room_count // 20), cap) * density_scale)


def build_room_graph(rooms: Sequence[Room], map_area: int, max_degree: int,
                     extra_percent: float, rng: random.Random) -> RoomGraph:
    """
    Plan the room connections.

    Args:
        rooms: Packed rooms
        map_area: Map width * height, used by the density scale
        max_degree: Connection cap per room
        extra_percent: Share of rooms that may receive extra loop edges
        rng: The run's random source (used for tie-breaks of extra edges)

    Returns:
        RoomGraph with spanning edges first, then extra edges
    """
    n = len(rooms)
    graph = RoomGraph(degrees=[0] * n)
    if n <= 1:
        return graph

    def distance(a: int, b: int) -> float:
        return rooms[a].distance_to(rooms[b])

    # Phase 1: spanning structure
    connected = [0]
    is_connected = [False] * n
    is_connected[0] = True
    while len(connected) < n:
        last_room = n - len(connected) == 1
        best = None
        best_distance = math.inf
        for a in connected:
            for b in range(n):
                if is_connected[b]:
                    continue
                if not last_room and (graph.degrees[a] >= max_degree or
                                      graph.degrees[b] >= max_degree):
                    continue
                d = distance(a, b)
                if d < best_distance:
                    best_distance = d
                    best = (a, b)
        if best is None:
            logger.debug("Spanning phase starved with %d of %d rooms", len(connected), n)
            break
        a, b = best
        graph.edges.append((a, b))
        graph.degrees[a] += 1
        graph.degrees[b] += 1
        is_connected[b] = True
        connected.append(b)
    graph.spanning_edges = len(graph.edges)

    # Phase 2: extra loop edges
    limit = extra_edge_limit(n, map_area, extra_percent)
    if limit > 0:
        existing = {tuple(sorted(edge)) for edge in graph.edges}
        candidates = []
        for a in range(n):
            for b in range(a + 1, n):
                if (a, b) not in existing:
                    candidates.append((distance(a, b), rng.random(), a, b))
        candidates.sort()
        added = 0
        for _, _, a, b in candidates:
            if added >= limit:
                break
            if graph.degrees[a] >= max_degree or graph.degrees[b] >= max_degree:
                continue
            graph.edges.append((a, b))
            graph.degrees[a] += 1
            graph.degrees[b] += 1
            added += 1

    logger.debug("Room graph: %d spanning + %d extra edges", graph.spanning_edges, graph.extra_edges)
    return graph
