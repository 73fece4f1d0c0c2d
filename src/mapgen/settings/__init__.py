"""
Generation settings: the settings value, its normalizer, presets, editor
metadata and JSON storage.
"""

from .generation_settings import GenerationSettings, Era, Setting
from .normalizer import normalize_settings, snap_grid_step, GRID_STEPS
from .presets import default_settings
from .metadata import SETTINGS_METADATA, SettingMetadata, Importance, Category
from .settings_storage import (
    settings_to_dict,
    settings_from_dict,
    save_settings,
    load_settings
)

__all__ = [
    'GenerationSettings',
    'Era',
    'Setting',
    'normalize_settings',
    'snap_grid_step',
    'GRID_STEPS',
    'default_settings',
    'SETTINGS_METADATA',
    'SettingMetadata',
    'Importance',
    'Category',
    'settings_to_dict',
    'settings_from_dict',
    'save_settings',
    'load_settings'
]
