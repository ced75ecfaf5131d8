"""
Module Classifier — Does a module contribute JS at all?

Cheap existence check run before the stricter output selection. It accepts
any number of JS outputs and never fails; the exactly-one rule is enforced
only by get_js_output.
"""

from typing import Any

from jsmodwrap.ir.enums import is_js_type
from jsmodwrap.selection.utils import module_outputs, output_type


def is_js_output(output: Any) -> bool:
    return is_js_type(output_type(output))


def is_js_module(module: Any) -> bool:
    """True if at least one output of the module is JS-family."""
    return any(is_js_output(output) for output in module_outputs(module))
