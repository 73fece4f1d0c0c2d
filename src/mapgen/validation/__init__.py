"""
Validation package for generated maps.

Public API:
    - ValidationResult, ValidationIssue, Severity: Core result types
    - ValidationStage: Pipeline stage enumeration
    - ValidationError: Exception raised on FAIL issues when fail_fast=True
    - validate_connectivity(): Reachability check with corridor repair
    - check_map(): Structural checks over a finished map
    - placement_padding(): Room padding check_map should use for given settings
"""

from .core import (
    Severity,
    ValidationStage,
    ValidationIssue,
    ValidationResult,
    ValidationError,
)
from .connectivity import (
    ConnectivityReport,
    validate_connectivity,
    reachable_room_ids,
)
from .map_checks import check_map, placement_padding

__all__ = [
    # Core types
    'Severity',
    'ValidationStage',
    'ValidationIssue',
    'ValidationResult',
    'ValidationError',
    # Connectivity
    'ConnectivityReport',
    'validate_connectivity',
    'reachable_room_ids',
    # Map checks
    'check_map',
    'placement_padding',
]
