"""
Core Invariant Infrastructure

Non-raising counterpart of output selection, for operator reports:
- Invariant: A machine-checkable rule
- InvariantResult: Outcome of checking an invariant
- InvariantRegistry: Central registry of all invariants
- QuarantineItem: A module that failed invariants
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List


class InvariantSeverity(str, Enum):
    """How to handle invariant failures."""

    HARD = "hard"      # Module cannot be wrapped


@dataclass
class InvariantResult:
    """Result of checking an invariant."""

    passes: bool
    invariant_id: str
    message: str
    details: dict = field(default_factory=dict)
    severity: InvariantSeverity = InvariantSeverity.HARD

    def __repr__(self) -> str:
        status = "PASS" if self.passes else "FAIL"
        return f"{status} [{self.invariant_id}] {self.message}"


@dataclass
class QuarantineItem:
    """A module that failed one or more invariants."""

    module_path: str
    failures: List[InvariantResult]

    @property
    def issue_summary(self) -> str:
        """Single-line summary of issues."""
        return "; ".join(f.message for f in self.failures)


@dataclass
class Invariant:
    """A machine-checkable rule a module must pass."""

    id: str                                     # Unique identifier (e.g., "JS_OUTPUT_COUNT")
    description: str
    severity: InvariantSeverity
    check_fn: Callable[[Any], InvariantResult]

    def check(self, content: Any) -> InvariantResult:
        """Check this invariant against content."""
        result = self.check_fn(content)
        result.invariant_id = self.id
        result.severity = self.severity
        return result


class InvariantRegistry:
    """
    Central registry of all invariants.

    Usage:
        InvariantRegistry.register(my_invariant)
        result = InvariantRegistry.check("JS_OUTPUT_COUNT", module)
    """

    _invariants: dict[str, Invariant] = {}

    @classmethod
    def register(cls, invariant: Invariant) -> None:
        cls._invariants[invariant.id] = invariant

    @classmethod
    def check(cls, invariant_id: str, content: Any) -> InvariantResult:
        """Check a single invariant against content."""
        return cls._invariants[invariant_id].check(content)

    @classmethod
    def check_all(cls, content: Any, invariant_ids: List[str]) -> List[InvariantResult]:
        return [cls.check(id, content) for id in invariant_ids]

    @classmethod
    def list_all(cls) -> List[str]:
        return list(cls._invariants.keys())
