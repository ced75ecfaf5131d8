"""
Wrap — Inject registry params into module code.
"""

from jsmodwrap.wrap.define_call import DefineCallInjector, add_params_to_define_call
from jsmodwrap.wrap.interfaces import ParamInjector
from jsmodwrap.wrap.wrapper import build_wrap_params, relative_module_name, wrap_module

__all__ = [
    "DefineCallInjector",
    "ParamInjector",
    "add_params_to_define_call",
    "build_wrap_params",
    "relative_module_name",
    "wrap_module",
]
