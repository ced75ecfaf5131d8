"""
IR — Module graph records and output tags.

The IR is what upstream stages hand to selection and wrapping.
"""

from jsmodwrap.ir.enums import (
    JS_PREFIX,
    SCRIPT_PREFIX,
    OutputFamily,
    OutputKind,
    classify_type_tag,
    is_js_type,
    is_script_type,
)
from jsmodwrap.ir.schema import Dependency, Module, Output, OutputData

__all__ = [
    # Enums
    "JS_PREFIX",
    "SCRIPT_PREFIX",
    "OutputFamily",
    "OutputKind",
    "classify_type_tag",
    "is_js_type",
    "is_script_type",
    # Schema
    "Dependency",
    "Module",
    "Output",
    "OutputData",
]
