"""
Output Selector — Pick the one compiled-JS output of a module.

A module included as executable JS must have exactly one JS output, and that
output must carry a finite line count. Anything else is a malformed transform
result and fails the caller's operation.
"""

import math
from numbers import Real
from typing import Any

from jsmodwrap.core.errors import InvalidLineCount, WrongOutputCount
from jsmodwrap.core.logging import LogChannel, get_logger
from jsmodwrap.ir.enums import is_js_type
from jsmodwrap.selection.utils import (
    module_outputs,
    module_path,
    output_line_count,
    output_type,
)

log = get_logger(LogChannel.SELECT)


def is_finite_line_count(value: Any) -> bool:
    """True for real, finite numbers. Booleans are not line counts."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


def get_js_output(module: Any) -> Any:
    """
    Return the single JS-family output of a module.

    Args:
        module: Record exposing `output` and optionally `path`

    Returns:
        The selected output, unchanged

    Raises:
        WrongOutputCount: if the module has zero or several JS outputs
        InvalidLineCount: if the output's line count is missing or not finite
    """
    path = module_path(module)
    js_outputs = [o for o in module_outputs(module) if is_js_type(output_type(o))]

    if len(js_outputs) != 1:
        raise WrongOutputCount(path, len(js_outputs))

    js_output = js_outputs[0]
    line_count = output_line_count(js_output)

    if not is_finite_line_count(line_count):
        raise InvalidLineCount(path, output_type(js_output), line_count)

    log.debug("js_output_selected", path=path, type=output_type(js_output))
    return js_output
