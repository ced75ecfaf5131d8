"""
Output Invariants

Invariants a module must satisfy before it can be wrapped:
- JS_OUTPUT_COUNT: exactly one JS-family output
- JS_LINE_COUNT_FINITE: that output carries a finite line count

Same predicates as get_js_output, reported instead of raised.
"""

from typing import Any, Iterable, Optional

from jsmodwrap.core.errors import UNKNOWN_MODULE
from jsmodwrap.ir.enums import is_js_type
from jsmodwrap.selection.selector import is_finite_line_count
from jsmodwrap.selection.utils import (
    module_outputs,
    module_path,
    output_line_count,
    output_type,
)
from jsmodwrap.validation.invariants import (
    Invariant,
    InvariantRegistry,
    InvariantResult,
    InvariantSeverity,
    QuarantineItem,
)

OUTPUT_INVARIANTS = ["JS_OUTPUT_COUNT", "JS_LINE_COUNT_FINITE"]


def _js_outputs(module: Any) -> list:
    return [o for o in module_outputs(module) if is_js_type(output_type(o))]


def check_js_output_count(module: Any) -> InvariantResult:
    """
    Invariant: exactly one JS-family output.

    Examples:
        [js/module] passes
        [js/module, asset/png] passes
        [asset/png] fails (0)
        [js/module, js/script] fails (2)
    """
    count = len(_js_outputs(module))
    if count != 1:
        return InvariantResult(
            passes=False,
            invariant_id="JS_OUTPUT_COUNT",
            message=f"Expected exactly 1 JS output, found {count}",
            details={"count": count, "expected": 1},
        )
    return InvariantResult(
        passes=True,
        invariant_id="JS_OUTPUT_COUNT",
        message="Exactly one JS output",
    )


def check_js_line_count(module: Any) -> InvariantResult:
    """
    Invariant: the JS output's line count is finite.

    Only meaningful when JS_OUTPUT_COUNT passes; otherwise reported as not
    applicable so the count failure is not repeated.
    """
    js_outputs = _js_outputs(module)
    if len(js_outputs) != 1:
        return InvariantResult(
            passes=True,
            invariant_id="JS_LINE_COUNT_FINITE",
            message="Not applicable without a single JS output",
        )

    output = js_outputs[0]
    value = output_line_count(output)
    if not is_finite_line_count(value):
        return InvariantResult(
            passes=False,
            invariant_id="JS_LINE_COUNT_FINITE",
            message=f"{output_type(output)} output has lineCount {value!r}",
            details={"output_type": output_type(output), "value": value},
        )
    return InvariantResult(
        passes=True,
        invariant_id="JS_LINE_COUNT_FINITE",
        message=f"lineCount {value}",
    )


InvariantRegistry.register(Invariant(
    id="JS_OUTPUT_COUNT",
    description="Module has exactly one JS output",
    severity=InvariantSeverity.HARD,
    check_fn=check_js_output_count,
))

InvariantRegistry.register(Invariant(
    id="JS_LINE_COUNT_FINITE",
    description="JS output carries a finite line count",
    severity=InvariantSeverity.HARD,
    check_fn=check_js_line_count,
))


def check_module_outputs(module: Any) -> list[InvariantResult]:
    """Evaluate all output invariants on a module without raising."""
    return InvariantRegistry.check_all(module, OUTPUT_INVARIANTS)


def validate_module(module: Any) -> Optional[QuarantineItem]:
    """None if the module passes, a QuarantineItem otherwise."""
    failures = [r for r in check_module_outputs(module) if not r.passes]
    if not failures:
        return None
    path = module_path(module)
    return QuarantineItem(
        module_path=path if path is not None else UNKNOWN_MODULE,
        failures=failures,
    )


def validate_modules(modules: Iterable[Any]) -> tuple[list, list[QuarantineItem]]:
    """
    Split modules into those that can be wrapped and those that cannot.

    Returns:
        (passing, quarantine)
    """
    passing = []
    quarantine = []
    for module in modules:
        item = validate_module(module)
        if item is None:
            passing.append(module)
        else:
            quarantine.append(item)
    return passing, quarantine
