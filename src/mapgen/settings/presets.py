"""
Built-in settings presets per era and setting.
"""

from typing import Dict, Tuple

from .generation_settings import Era, GenerationSettings, Setting


# Overrides applied on top of the base defaults. Train presets apply to any era.
_PRESET_OVERRIDES: Dict[Tuple[Era, Setting], Dict] = {
    (Era.INDUSTRIAL, Setting.BUILDING): {
        'blocks_count': 6, 'trunks_count': 1, 'corridor_width_units': 2,
        'tech_rooms_min': 4, 'tech_rooms_max': 10, 'rooms_count': 28,
    },
    (Era.NEOLITHIC, Setting.BUILDING): {
        'blocks_count': 1, 'trunks_count': 0, 'rooms_count': 9,
        'tech_rooms_min': 0, 'tech_rooms_max': 1, 'min_block_size_units': 20,
    },
    (Era.SPACE, Setting.SHIP_SPACE): {
        'blocks_count': 8, 'trunks_count': 1,
        'gates_per_block_min': 2, 'gates_per_block_max': 3,
        'tech_rooms_min': 10, 'tech_rooms_max': 18, 'rooms_count': 34,
        'map_width_units': 140, 'map_height_units': 70,
    },
}

_TRAIN_OVERRIDES = {
    'map_width_units': 180, 'map_height_units': 36, 'trunks_count': 1,
    'blocks_count': 5, 'trunk_width_units': 3, 'min_block_size_units': 24,
    'split_bias': 0.9,
}


def default_settings(era: Era = Era.INDUSTRIAL,
                     setting: Setting = Setting.BUILDING) -> GenerationSettings:
    """
    Build the default settings for an era/setting combination.

    Unknown combinations get the base defaults tagged with era and setting.
    """
    overrides = dict(_PRESET_OVERRIDES.get((era, setting), {}))
    if setting == Setting.TRAIN:
        overrides.update(_TRAIN_OVERRIDES)
    if 'rooms_count' in overrides:
        overrides['rooms_total_min'] = overrides['rooms_count']
        overrides['rooms_total_max'] = overrides['rooms_count']
    return GenerationSettings(era=era, setting=setting, **overrides)


def list_presets():
    """Era/setting pairs with dedicated overrides"""
    presets = list(_PRESET_OVERRIDES)
    presets.extend((era, Setting.TRAIN) for era in Era)
    return presets
