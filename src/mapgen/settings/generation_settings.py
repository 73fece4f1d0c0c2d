"""
Generation settings value.

Settings are an immutable dataclass; every change goes through
``with_changes`` (or ``dataclasses.replace``) and yields a new value.
"""

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import List


class Era(Enum):
    """Technology era of the generated level"""
    NEOLITHIC = "neolithic"
    INDUSTRIAL = "industrial"
    SPACE = "space"


class Setting(Enum):
    """Kind of location being generated"""
    BUILDING = "building"
    TRAIN = "train"
    SHIP_SPACE = "ship_space"


@dataclass(frozen=True)
class GenerationSettings:
    """
    Parameters of one map generation call.

    Attributes:
        era: Technology era, used by presets
        setting: Location kind; TRAIN selects the fixed carriage layout
        grid_step: Real-world size of one grid unit
        map_width_units: Map width in cells (ignored when auto-sizing)
        map_height_units: Map height in cells (ignored when auto-sizing)
        auto_map_size: Let the occupancy-driven auto-sizer choose the size
        trunks_count: Number of trunk corridors (at most one is routed)
        trunk_width_units: Trunk corridor width
        blocks_count: Target number of BSP blocks
        gates_per_block_min: Minimum gates per block
        gates_per_block_max: Maximum gates per block
        rooms_count: Target number of rooms
        rooms_total_min: Legacy lower room bound, kept equal to rooms_count
        rooms_total_max: Legacy upper room bound, kept equal to rooms_count
        tech_rooms_min: Minimum tech room quota
        tech_rooms_max: Maximum tech room quota
        corridor_width_units: Width of carved room-to-room corridors
        seed: Default random seed
        min_block_size_units: Minimum BSP block dimension
        split_bias: Probability of a vertical split
        min_segment_len_units: Shortest trunk segment
        max_turns: Maximum trunk turns
        turn_penalty: Probability of keeping the trunk heading
        attempts_per_room: Random rectangles tried per block per round
        padding_units: Minimum clearance between rooms
        max_room_degree: Connection cap per room
        extra_connection_percent: Share of rooms that may get loop edges
        auto_size_aspect_ratio: Width/height ratio of auto-sized maps
        target_occupancy_min: Lower bound of the occupancy band
        target_occupancy_max: Upper bound of the occupancy band
        auto_size_max_attempts: Auto-size iterations
        validate_connectivity: Run the reachability validator
        auto_fix_connectivity: Let the validator carve repair corridors
    """
    era: Era = Era.INDUSTRIAL
    setting: Setting = Setting.BUILDING

    # Grid
    grid_step: float = 1.0
    map_width_units: int = 120
    map_height_units: int = 80
    auto_map_size: bool = True

    # Trunk
    trunks_count: int = 1
    trunk_width_units: int = 4
    min_segment_len_units: int = 8
    max_turns: int = 6
    turn_penalty: float = 0.35

    # Blocks
    blocks_count: int = 6
    min_block_size_units: int = 16
    split_bias: float = 0.5
    gates_per_block_min: int = 1
    gates_per_block_max: int = 2

    # Rooms
    rooms_count: int = 28
    rooms_total_min: int = 28
    rooms_total_max: int = 28
    tech_rooms_min: int = 3
    tech_rooms_max: int = 8
    corridor_width_units: int = 2
    attempts_per_room: int = 30
    padding_units: int = 1
    max_room_degree: int = 3
    extra_connection_percent: float = 0.05

    # Auto size
    auto_size_aspect_ratio: float = 4.0 / 3.0
    target_occupancy_min: float = 0.25
    target_occupancy_max: float = 0.45
    auto_size_max_attempts: int = 4

    # Validation
    validate_connectivity: bool = True
    auto_fix_connectivity: bool = True

    seed: int = 12345

    # Cost and materials, carried for downstream estimators
    cost_wall_weight: float = 1.0
    wall_height: float = 3.0
    wall_thickness: float = 0.25
    floor_thickness: float = 0.2
    price_per_m2: float = 450.0

    def with_changes(self, **changes) -> 'GenerationSettings':
        """Return a copy with the given fields replaced"""
        return replace(self, **changes)

    @property
    def is_fixed_layout(self) -> bool:
        return self.setting == Setting.TRAIN

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]
