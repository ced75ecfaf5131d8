"""
Validation Module

Invariant reports for module outputs. Modules that fail go to quarantine with
explicit issues instead of aborting the report.
"""

from jsmodwrap.validation.invariants import (
    Invariant,
    InvariantRegistry,
    InvariantResult,
    InvariantSeverity,
    QuarantineItem,
)
from jsmodwrap.validation.output_invariants import (
    OUTPUT_INVARIANTS,
    check_js_line_count,
    check_js_output_count,
    check_module_outputs,
    validate_module,
    validate_modules,
)

__all__ = [
    # Core
    "Invariant",
    "InvariantRegistry",
    "InvariantResult",
    "InvariantSeverity",
    "QuarantineItem",
    # Output invariants
    "OUTPUT_INVARIANTS",
    "check_js_line_count",
    "check_js_output_count",
    "check_module_outputs",
    "validate_module",
    "validate_modules",
]
