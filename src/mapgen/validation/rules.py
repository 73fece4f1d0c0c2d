"""
Validation rule definitions for generated maps.

Each rule has:
- Code: Unique identifier (e.g., "DOOR-001")
- Severity: FAIL, WARN, or INFO
- Message template: Human-readable description
- Remediation: Suggested fix

Rules are organized by category:
- DOOR: Door placement
- CORR: Corridor carving
- ROOM: Room placement
- CONN: Reachability
"""

from dataclasses import dataclass
from typing import Optional

from .core import Severity


@dataclass(frozen=True)
class ValidationRule:
    """Definition of a validation rule.

    Attributes:
        code: Unique rule code (e.g., "DOOR-001")
        severity: Default severity for this rule
        message_template: Template for error message (use {placeholders})
        remediation_template: Template for suggested fix
        description: Full description of the rule
    """
    code: str
    severity: Severity
    message_template: str
    remediation_template: Optional[str] = None
    description: Optional[str] = None

    def format_message(self, **kwargs) -> str:
        """Format the message template with provided values."""
        return self.message_template.format(**kwargs)

    def format_remediation(self, **kwargs) -> Optional[str]:
        """Format the remediation template with provided values."""
        if self.remediation_template:
            return self.remediation_template.format(**kwargs)
        return None


# =============================================================================
# DOOR RULES
# =============================================================================

DOOR_001 = ValidationRule(
    code="DOOR-001",
    severity=Severity.FAIL,
    message_template="Door at {cell} of room {room_id} opens onto {cell_type}",
    remediation_template="Carve a corridor cell in front of the door",
    description="The cell outside every door must be Corridor, Door or Gate"
)

DOOR_002 = ValidationRule(
    code="DOOR-002",
    severity=Severity.FAIL,
    message_template="Door at {cell} is not adjacent to room {room_id}",
    description="Doors sit one step outside their room"
)

# =============================================================================
# CORRIDOR RULES
# =============================================================================

CORR_001 = ValidationRule(
    code="CORR-001",
    severity=Severity.FAIL,
    message_template="{count} corridor cell(s) inside room {room_id}",
    description="Corridor cells never overlap a room footprint"
)

# =============================================================================
# ROOM RULES
# =============================================================================

ROOM_001 = ValidationRule(
    code="ROOM-001",
    severity=Severity.FAIL,
    message_template="Rooms {room_id} and {other_id} overlap within padding {padding}",
    description="Padded room rectangles never intersect"
)

ROOM_002 = ValidationRule(
    code="ROOM-002",
    severity=Severity.FAIL,
    message_template="Room {room_id} extends outside block {block_id}",
    description="Rooms lie inside their block"
)

ROOM_003 = ValidationRule(
    code="ROOM-003",
    severity=Severity.WARN,
    message_template="Room {room_id} has no doors",
    remediation_template="Increase the map size or lower the room count"
)

# =============================================================================
# REACHABILITY RULES
# =============================================================================

CONN_001 = ValidationRule(
    code="CONN-001",
    severity=Severity.WARN,
    message_template="Room {room_id} is not reachable from the first door",
    remediation_template="Enable auto_fix_connectivity or widen the map"
)
