"""
Static settings metadata for editors and documentation.

One entry per editable setting: importance, category, label, description
and the numeric range an editor should offer. Generation code never reads
this table; the normalizer owns the authoritative bounds.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional


class Importance(Enum):
    REQUIRED = "required"
    ADVANCED = "advanced"


class Category(Enum):
    GRID = "Grid"
    BLOCKS = "Blocks"
    TRUNK = "Trunk"
    ROOMS = "Rooms"
    TECH = "Tech"
    VALIDATION = "Validation"
    COST = "Cost"
    MATERIALS = "Materials"


@dataclass(frozen=True)
class SettingMetadata:
    """Display information for one setting"""
    importance: Importance
    category: Category
    label: str
    description: str
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    step: Optional[float] = None


def _meta(importance, category, label, description, minimum=None, maximum=None, step=None):
    return SettingMetadata(importance, category, label, description, minimum, maximum, step)


_R = Importance.REQUIRED
_A = Importance.ADVANCED

SETTINGS_METADATA: Dict[str, SettingMetadata] = {
    # Grid
    'grid_step': _meta(_R, Category.GRID, "Grid step", "Real-world size of one grid cell", 0.5, 2.5, 0.5),
    'map_width_units': _meta(_R, Category.GRID, "Map width", "Map width in cells", 20, 500, 1),
    'map_height_units': _meta(_R, Category.GRID, "Map height", "Map height in cells", 20, 500, 1),
    'auto_map_size': _meta(_R, Category.GRID, "Auto size", "Pick the map size from the occupancy target"),
    'auto_size_aspect_ratio': _meta(_A, Category.GRID, "Aspect ratio", "Width/height ratio of auto-sized maps", 0.5, 3.0, 0.05),
    'target_occupancy_min': _meta(_A, Category.GRID, "Occupancy min", "Lower bound of the target occupancy band", 0.1, 0.8, 0.01),
    'target_occupancy_max': _meta(_A, Category.GRID, "Occupancy max", "Upper bound of the target occupancy band", 0.1, 0.9, 0.01),
    'auto_size_max_attempts': _meta(_A, Category.GRID, "Auto-size attempts", "Resize iterations before keeping the best map", 3, 6, 1),
    'seed': _meta(_R, Category.GRID, "Seed", "Random seed", 0, 2 ** 31 - 1, 1),

    # Blocks
    'blocks_count': _meta(_R, Category.BLOCKS, "Blocks", "Target number of BSP blocks", 0, 20, 1),
    'min_block_size_units': _meta(_A, Category.BLOCKS, "Min block size", "Smallest block dimension", 8, 80, 1),
    'split_bias': _meta(_A, Category.BLOCKS, "Split bias", "Probability of a vertical split", 0.0, 1.0, 0.05),
    'gates_per_block_min': _meta(_A, Category.BLOCKS, "Gates min", "Minimum gates per block", 0, 5, 1),
    'gates_per_block_max': _meta(_A, Category.BLOCKS, "Gates max", "Maximum gates per block", 0, 8, 1),

    # Trunk
    'trunks_count': _meta(_R, Category.TRUNK, "Trunks", "Number of trunk corridors", 0, 5, 1),
    'trunk_width_units': _meta(_R, Category.TRUNK, "Trunk width", "Trunk corridor width", 1, 10, 1),
    'min_segment_len_units': _meta(_A, Category.TRUNK, "Min segment", "Shortest trunk segment", 2, 40, 1),
    'max_turns': _meta(_A, Category.TRUNK, "Max turns", "Maximum trunk turns", 0, 20, 1),
    'turn_penalty': _meta(_A, Category.TRUNK, "Turn penalty", "Probability of keeping the trunk heading", 0.0, 1.0, 0.05),

    # Rooms
    'rooms_count': _meta(_R, Category.ROOMS, "Rooms", "Target number of rooms", 0, 500, 1),
    'rooms_total_min': _meta(_A, Category.ROOMS, "Rooms min (legacy)", "Follows Rooms", 0, 500, 1),
    'rooms_total_max': _meta(_A, Category.ROOMS, "Rooms max (legacy)", "Follows Rooms", 0, 500, 1),
    'corridor_width_units': _meta(_R, Category.ROOMS, "Corridor width", "Width of room corridors", 1, 8, 1),
    'attempts_per_room': _meta(_A, Category.ROOMS, "Attempts per room", "Random placements tried per block", 1, 200, 1),
    'padding_units': _meta(_A, Category.ROOMS, "Padding", "Clearance between rooms", 0, 5, 1),
    'max_room_degree': _meta(_A, Category.ROOMS, "Max degree", "Connections per room", 1, 6, 1),
    'extra_connection_percent': _meta(_A, Category.ROOMS, "Extra connections", "Share of rooms that may get loop edges", 0.0, 0.2, 0.01),

    # Tech
    'tech_rooms_min': _meta(_R, Category.TECH, "Tech rooms min", "Minimum tech room quota", 0, 300, 1),
    'tech_rooms_max': _meta(_R, Category.TECH, "Tech rooms max", "Maximum tech room quota", 0, 300, 1),

    # Validation
    'validate_connectivity': _meta(_R, Category.VALIDATION, "Validate connectivity", "Check that every room is reachable"),
    'auto_fix_connectivity': _meta(_R, Category.VALIDATION, "Auto-fix connectivity", "Carve repair corridors for unreachable rooms"),

    # Cost
    'cost_wall_weight': _meta(_A, Category.COST, "Wall weight", "Cost weight of wall area", 0.0, 10.0, 0.1),
    'price_per_m2': _meta(_A, Category.COST, "Price per m2", "Construction price per square metre", 0, 100000, 10),

    # Materials
    'wall_height': _meta(_A, Category.MATERIALS, "Wall height", "Wall height in metres", 1.0, 10.0, 0.1),
    'wall_thickness': _meta(_A, Category.MATERIALS, "Wall thickness", "Wall thickness in metres", 0.05, 2.0, 0.05),
    'floor_thickness': _meta(_A, Category.MATERIALS, "Floor thickness", "Floor slab thickness in metres", 0.05, 2.0, 0.05),
}


def settings_by_category(category: Category) -> List[str]:
    """Setting names of one category, in table order"""
    return [name for name, meta in SETTINGS_METADATA.items() if meta.category == category]


def required_settings() -> List[str]:
    return [name for name, meta in SETTINGS_METADATA.items() if meta.importance == Importance.REQUIRED]
