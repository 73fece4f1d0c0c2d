"""
Passes that lay out the map structure: blocks, trunk, gates and rooms.
"""

import logging
from typing import List

from ...generators.bsp.bsp_generator import split_blocks
from ...generators.fixed_layout import build_fixed_layout
from ...generators.gates import place_gates
from ...generators.rooms import pack_rooms
from ...generators.trunks import route_trunks
from ..generation_state import GenerationState
from .base import MapPass, PassConfig, PassResult

logger = logging.getLogger(__name__)


class PartitionPass(MapPass):
    """Split the map interior into BSP blocks."""

    @property
    def name(self) -> str:
        return "partition"

    def execute(self, state: GenerationState, config: PassConfig) -> PassResult:
        s = state.settings
        blocks = split_blocks(state.grid_map, s.blocks_count, s.min_block_size_units,
                              s.split_bias, state.rng)
        return PassResult.ok(state, blocks=len(blocks))


class TrunkPass(MapPass):
    """Random-walk the trunk corridor."""

    @property
    def name(self) -> str:
        return "trunk"

    def execute(self, state: GenerationState, config: PassConfig) -> PassResult:
        s = state.settings
        trunks = route_trunks(state.grid_map, s.trunks_count, s.trunk_width_units,
                              s.min_segment_len_units, s.max_turns, s.turn_penalty, state.rng)
        return PassResult.ok(state, trunks=len(trunks))


class GatePass(MapPass):
    """Scatter gates on block boundaries."""

    @property
    def name(self) -> str:
        return "gates"

    def execute(self, state: GenerationState, config: PassConfig) -> PassResult:
        s = state.settings
        gates = place_gates(state.grid_map, s.gates_per_block_min, s.gates_per_block_max, state.rng)
        return PassResult.ok(state, gates=len(gates))


class RoomPackingPass(MapPass):
    """Pack rooms into the blocks."""

    @property
    def name(self) -> str:
        return "rooms"

    def execute(self, state: GenerationState, config: PassConfig) -> PassResult:
        rooms = pack_rooms(state.grid_map, state.settings, state.context)
        return PassResult.ok(state, rooms=len(rooms), tech_rooms=sum(1 for r in rooms if r.is_tech))


class FixedLayoutPass(MapPass):
    """Lay out the single-carriage train map."""

    @property
    def name(self) -> str:
        return "fixed_layout"

    def validate_preconditions(self, state: GenerationState) -> List[str]:
        if state.grid_map.blocks or state.grid_map.rooms:
            return ["fixed layout needs an empty map"]
        return []

    def execute(self, state: GenerationState, config: PassConfig) -> PassResult:
        block = build_fixed_layout(state.grid_map, state.settings, state.context)
        result = PassResult(success=True, state=state)
        result.metrics['blocks'] = 1
        result.metrics['rooms'] = len(block.rooms)
        result.metrics['tech_rooms'] = sum(1 for r in block.rooms if r.is_tech)
        return result
