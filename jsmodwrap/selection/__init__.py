"""
Selection — Choose and classify module outputs.
"""

from jsmodwrap.selection.classifier import is_js_module, is_js_output
from jsmodwrap.selection.selector import get_js_output, is_finite_line_count

__all__ = ["get_js_output", "is_finite_line_count", "is_js_module", "is_js_output"]
