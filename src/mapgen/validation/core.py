"""
Result types for map validation.

- Severity: How bad a finding is (INFO, WARN, FAIL)
- ValidationStage: When during generation the check ran
- ValidationIssue: One finding, optionally tied to a room and a cell
- ValidationResult: Findings of one check run; fails on any FAIL issue
- ValidationError: Raised by fail-fast checks
"""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Optional, Tuple


class Severity(Enum):
    """Validation issue severity levels.

    - INFO: Informational, doesn't affect pass/fail
    - WARN: Quality issue, the map is still usable
    - FAIL: Broken map invariant
    """
    INFO = auto()
    WARN = auto()
    FAIL = auto()

    def __str__(self) -> str:
        return self.name


class ValidationStage(Enum):
    PLACEMENT = "placement"
    CONNECTION = "connection"
    FINAL = "final"

    def __str__(self) -> str:
        return self.value


@dataclass
class ValidationIssue:
    """A single finding.

    Attributes:
        severity: Issue severity
        code: Rule code (e.g., "DOOR-001")
        message: Human-readable description
        remediation: Optional suggested fix
        room_id: Room the issue refers to, if any
        cell: Grid cell the issue refers to, if any
    """
    severity: Severity
    code: str
    message: str
    remediation: Optional[str] = None
    room_id: Optional[int] = None
    cell: Optional[Tuple[int, int]] = None

    def format(self) -> str:
        """[SEVERITY] CODE room=R cell=X,Y :: message :: fix=FIX"""
        room = '-' if self.room_id is None else self.room_id
        cell = '-' if self.cell is None else f"{self.cell[0]},{self.cell[1]}"
        return (f"[{self.severity}] {self.code} room={room} cell={cell} :: "
                f"{self.message} :: fix={self.remediation or 'N/A'}")

    def __str__(self) -> str:
        return self.format()


@dataclass
class ValidationResult:
    """Issues found by one check run."""
    issues: List[ValidationIssue] = field(default_factory=list)
    stage: Optional[ValidationStage] = None

    def _with(self, severity: Severity) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == severity]

    @property
    def errors(self) -> List[ValidationIssue]:
        return self._with(Severity.FAIL)

    @property
    def warnings(self) -> List[ValidationIssue]:
        return self._with(Severity.WARN)

    @property
    def infos(self) -> List[ValidationIssue]:
        return self._with(Severity.INFO)

    @property
    def passed(self) -> bool:
        return not self.errors

    @property
    def failed(self) -> bool:
        return not self.passed

    def add_issue(self, issue: ValidationIssue) -> None:
        self.issues.append(issue)

    def merge(self, other: 'ValidationResult') -> 'ValidationResult':
        """Append another result's issues; returns self for chaining"""
        self.issues.extend(other.issues)
        return self

    def codes(self) -> List[str]:
        return [i.code for i in self.issues]

    def code_counts(self) -> Dict[str, int]:
        return dict(Counter(self.codes()))

    def issues_for_room(self, room_id: int) -> List[ValidationIssue]:
        return [i for i in self.issues if i.room_id == room_id]

    def report(self) -> str:
        """Multi-line report, FAIL issues first."""
        if not self.issues:
            return "Validation passed: No issues found"

        stage = f" ({self.stage})" if self.stage else ""
        lines = [
            f"Validation {'PASSED' if self.passed else 'FAILED'}{stage}: "
            f"{len(self.errors)} fail, {len(self.warnings)} warn, {len(self.infos)} info",
            "-" * 60,
        ]
        for severity in (Severity.FAIL, Severity.WARN, Severity.INFO):
            lines.extend(issue.format() for issue in self._with(severity))
        return "\n".join(lines)

    def to_dict(self) -> dict:
        return {
            'passed': self.passed,
            'stage': str(self.stage) if self.stage else None,
            'counts': self.code_counts(),
            'issues': [
                {
                    'severity': str(issue.severity),
                    'code': issue.code,
                    'message': issue.message,
                    'room_id': issue.room_id,
                    'cell': list(issue.cell) if issue.cell else None,
                }
                for issue in self.issues
            ],
        }


class ValidationError(Exception):
    """Raised when a map fails a fail-fast check.

    Attributes:
        result: The failing ValidationResult
    """

    def __init__(self, result: ValidationResult):
        self.result = result
        super().__init__(result.report())
