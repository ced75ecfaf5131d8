"""
jsmodwrap — JS module output selection and wrapping

Picks the single compiled-JS output of each module, validates it, and wraps
its code with the module id, dependency ids and (in dev builds) a debug name
for the bundle's module registry.
"""

__version__ = "0.1.0"

from jsmodwrap.core.config import WrapOptions
from jsmodwrap.core.errors import (
    UNKNOWN_MODULE,
    InjectionError,
    InvalidLineCount,
    ModuleOutputError,
    WrongOutputCount,
)
from jsmodwrap.selection.classifier import is_js_module, is_js_output
from jsmodwrap.selection.selector import get_js_output
from jsmodwrap.wrap.wrapper import build_wrap_params, wrap_module

__all__ = [
    "__version__",
    "WrapOptions",
    "UNKNOWN_MODULE",
    "InjectionError",
    "InvalidLineCount",
    "ModuleOutputError",
    "WrongOutputCount",
    "build_wrap_params",
    "get_js_output",
    "is_js_module",
    "is_js_output",
    "wrap_module",
]
