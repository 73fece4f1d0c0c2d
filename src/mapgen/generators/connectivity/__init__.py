"""
Room connectivity: graph planning, door candidates, routing and carving.
"""

from .room_graph import RoomGraph, build_room_graph, extra_edge_limit
from .doors import DoorCandidate, door_candidates, register_door
from .pathfinding import l_route, astar
from .corridor_router import CorridorRouter, connect_graph, MAX_DOOR_PAIRS

__all__ = [
    'RoomGraph',
    'build_room_graph',
    'extra_edge_limit',
    'DoorCandidate',
    'door_candidates',
    'register_door',
    'l_route',
    'astar',
    'CorridorRouter',
    'connect_graph',
    'MAX_DOOR_PAIRS'
]
