"""
Settings persistence layer.

Handles save/load of generation settings as JSON files.
"""

from __future__ import annotations
import json
import logging
from dataclasses import fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .generation_settings import Era, GenerationSettings, Setting

logger = logging.getLogger(__name__)

_ENUM_FIELDS = {'era': Era, 'setting': Setting}


def settings_to_dict(settings: GenerationSettings) -> Dict[str, Any]:
    """Convert settings to a JSON-serializable dictionary."""
    data = {}
    for f in fields(settings):
        value = getattr(settings, f.name)
        data[f.name] = value.name.lower() if isinstance(value, Enum) else value
    return data


def settings_from_dict(data: Dict[str, Any]) -> GenerationSettings:
    """
    Create settings from a dictionary.

    Missing keys keep their defaults; unknown keys are logged and ignored.

    Raises:
        KeyError: If an era or setting name is not recognised
    """
    known = set(GenerationSettings.field_names())
    values = {}
    for key, value in data.items():
        if key not in known:
            logger.warning("Ignoring unknown setting '%s'", key)
            continue
        if key in _ENUM_FIELDS and isinstance(value, str):
            value = _ENUM_FIELDS[key][value.upper()]
        values[key] = value
    return GenerationSettings(**values)


def save_settings(settings: GenerationSettings, file_path: Union[str, Path]) -> Path:
    """
    Save settings to a JSON file.

    Args:
        settings: Settings to save
        file_path: Destination file; parent directories are created

    Returns:
        Path to the saved file
    """
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(settings_to_dict(settings), f, indent=2, ensure_ascii=False)
    logger.debug("Saved settings to %s", path)
    return path


def load_settings(file_path: Union[str, Path]) -> Optional[GenerationSettings]:
    """
    Load settings from a JSON file.

    Returns:
        GenerationSettings if found and valid, None otherwise
    """
    path = Path(file_path)
    if not path.exists():
        logger.warning("Settings file not found: %s", path)
        return None

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return settings_from_dict(data)
    except (json.JSONDecodeError, KeyError, TypeError, AttributeError) as e:
        logger.warning("Failed to load settings from %s: %s", path, e)
        return None
