"""
Settings normalizer.

``normalize_settings`` is a pure function: it returns a new clamped
settings value and the list of corrections it made. Running it on its own
output returns an equal value and no warnings.
"""

import logging
from typing import Dict, List, Tuple

from .generation_settings import GenerationSettings

logger = logging.getLogger(__name__)


GRID_STEPS = (0.5, 1.0, 1.5, 2.0, 2.5)

INT_BOUNDS: Dict[str, Tuple[int, int]] = {
    'map_width_units': (20, 500),
    'map_height_units': (20, 500),
    'trunks_count': (0, 5),
    'trunk_width_units': (1, 10),
    'blocks_count': (0, 20),
    'gates_per_block_min': (0, 5),
    'gates_per_block_max': (0, 8),
    'rooms_count': (0, 500),
    'tech_rooms_min': (0, 300),
    'tech_rooms_max': (0, 300),
    'corridor_width_units': (1, 8),
    'seed': (0, 2 ** 31 - 1),
    'min_block_size_units': (8, 80),
    'min_segment_len_units': (2, 40),
    'max_turns': (0, 20),
    'attempts_per_room': (1, 200),
    'padding_units': (0, 5),
    'max_room_degree': (1, 6),
    'auto_size_max_attempts': (3, 6),
}

FLOAT_BOUNDS: Dict[str, Tuple[float, float]] = {
    'split_bias': (0.0, 1.0),
    'turn_penalty': (0.0, 1.0),
    'extra_connection_percent': (0.0, 0.2),
    'auto_size_aspect_ratio': (0.5, 3.0),
    'target_occupancy_min': (0.1, 0.8),
    'target_occupancy_max': (0.1, 0.9),
    'cost_wall_weight': (0.0, 10.0),
    'wall_height': (1.0, 10.0),
    'wall_thickness': (0.05, 2.0),
    'floor_thickness': (0.05, 2.0),
    'price_per_m2': (0.0, 100000.0),
}

# (min field, max field); the max is raised when it falls below the min
MIN_MAX_PAIRS = (
    ('gates_per_block_min', 'gates_per_block_max'),
    ('tech_rooms_min', 'tech_rooms_max'),
    ('target_occupancy_min', 'target_occupancy_max'),
)


def snap_grid_step(value: float) -> float:
    """Nearest allowed grid step; ties resolve to the smaller step"""
    return min(GRID_STEPS, key=lambda step: (abs(step - value), step))


def normalize_settings(settings: GenerationSettings) -> Tuple[GenerationSettings, List[str]]:
    """
    Clamp settings to their legal ranges.

    Args:
        settings: Raw settings value (not modified)

    Returns:
        Tuple of (normalized settings, list of warning strings)
    """
    warnings: List[str] = []
    changes = {}

    def current(name):
        return changes.get(name, getattr(settings, name))

    def correct(name, new_value):
        old_value = current(name)
        if new_value != old_value:
            warnings.append(f"{name} corrected: {old_value} -> {new_value}")
        # Always store so int-valued floats become ints
        changes[name] = new_value

    for name, (low, high) in INT_BOUNDS.items():
        correct(name, int(max(low, min(high, current(name)))))

    for name, (low, high) in FLOAT_BOUNDS.items():
        correct(name, float(max(low, min(high, current(name)))))

    step = snap_grid_step(settings.grid_step)
    correct('grid_step', step)

    for low_name, high_name in MIN_MAX_PAIRS:
        if current(high_name) < current(low_name):
            correct(high_name, current(low_name))

    # Legacy totals follow rooms_count without a warning
    changes['rooms_total_min'] = current('rooms_count')
    changes['rooms_total_max'] = current('rooms_count')

    for message in warnings:
        logger.debug("Settings: %s", message)

    return settings.with_changes(**changes), warnings
