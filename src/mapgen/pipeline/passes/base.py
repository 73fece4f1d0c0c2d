"""
Pass framework for the generation pipeline.

Each pass fills in one part of a GenerationState (blocks, trunk, rooms,
corridors, ...). The generator runs an ordered list of passes per attempt
and stops at the first failure.
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..generation_state import GenerationState

logger = logging.getLogger(__name__)


@dataclass
class PassConfig:
    """
    Per-run pass switches.

    Attributes:
        enabled: Skip the pass entirely when False
    """
    enabled: bool = True


@dataclass
class PassResult:
    """
    Outcome of one pass.

    Attributes:
        success: False when the pass could not run
        state: The (mutated) generation state
        warnings: Non-fatal decisions worth reporting to the caller
        errors: Reasons the pass failed
        metrics: Counters merged into the generation metrics
    """
    success: bool
    state: GenerationState
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, state: GenerationState, **metrics) -> 'PassResult':
        return cls(success=True, state=state, metrics=dict(metrics))

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    def add_error(self, message: str) -> None:
        self.errors.append(message)
        self.success = False


class MapPass(ABC):
    """One stage of map generation."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short name used to prefix warnings."""

    @property
    def description(self) -> str:
        return (self.__doc__ or "").strip()

    @abstractmethod
    def execute(self, state: GenerationState, config: PassConfig) -> PassResult:
        """
        Run the pass on a state whose preconditions hold.

        Args:
            state: Current generation state (mutated in place)
            config: Pass configuration

        Returns:
            PassResult carrying warnings and metrics
        """

    def validate_preconditions(self, state: GenerationState) -> List[str]:
        """Error messages for unmet preconditions; empty when the pass can run"""
        return []

    def run(self, state: GenerationState, config: Optional[PassConfig] = None) -> PassResult:
        """Check preconditions and execute, unless the pass is disabled."""
        config = config or PassConfig()
        if not config.enabled:
            logger.debug("Pass '%s' disabled", self.name)
            return PassResult.ok(state)

        problems = self.validate_preconditions(state)
        if problems:
            result = PassResult(success=False, state=state)
            for problem in problems:
                result.add_error(f"Precondition failed: {problem}")
            return result

        start = time.time()
        result = self.execute(state, config)
        logger.debug("Pass '%s' finished in %.3fs", self.name, time.time() - start)
        return result
