"""
Passes that connect rooms: graph planning, corridor carving and
connectivity validation.
"""

import logging
from typing import List

from ...generators.connectivity.corridor_router import connect_graph
from ...generators.connectivity.room_graph import build_room_graph
from ...validation.connectivity import validate_connectivity
from ..generation_state import GenerationState
from .base import MapPass, PassConfig, PassResult

logger = logging.getLogger(__name__)


class RoomGraphPass(MapPass):
    """Plan which rooms get connected."""

    @property
    def name(self) -> str:
        return "graph"

    def execute(self, state: GenerationState, config: PassConfig) -> PassResult:
        s = state.settings
        state.graph = build_room_graph(state.grid_map.rooms, state.grid_map.area,
                                       s.max_room_degree, s.extra_connection_percent, state.rng)
        return PassResult.ok(state, planned_edges=len(state.graph.edges),
                             extra_edges=state.graph.extra_edges)


class CorridorPass(MapPass):
    """Carve a corridor for every planned edge that can be routed."""

    @property
    def name(self) -> str:
        return "corridors"

    def validate_preconditions(self, state: GenerationState) -> List[str]:
        if state.graph is None:
            return ["room graph has not been built"]
        return []

    def execute(self, state: GenerationState, config: PassConfig) -> PassResult:
        built = connect_graph(state.grid_map, state.graph.edges,
                              state.settings.corridor_width_units)
        result = PassResult(success=True, state=state)
        result.metrics['carved_edges'] = built
        # Dropped edges are left for the connectivity pass
        result.metrics['dropped_edges'] = len(state.graph.edges) - built
        return result


class ConnectivityPass(MapPass):
    """Check reachability and carve repair corridors."""

    @property
    def name(self) -> str:
        return "connectivity"

    def execute(self, state: GenerationState, config: PassConfig) -> PassResult:
        s = state.settings
        report = validate_connectivity(state.grid_map, s.corridor_width_units,
                                       auto_fix=s.auto_fix_connectivity)
        state.connectivity = report
        result = PassResult(success=True, state=state)
        for warning in report.warnings:
            result.add_warning(warning)
        result.metrics['repaired_rooms'] = len(report.repaired_room_ids)
        result.metrics['unreachable_rooms'] = len(report.unreachable_room_ids)
        return result
