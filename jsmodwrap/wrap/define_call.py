"""
Define-Call Injector — Append literal params to a `__d(...)` style call.

Module code produced by the transformer ends with its registration call, so
the parameters go right before the last closing parenthesis.
"""

import json
from collections.abc import Sequence
from typing import Any

from jsmodwrap.core.errors import InjectionError
from jsmodwrap.wrap.interfaces import ParamInjector


def to_js_literal(param: Any) -> str:
    """Serialize one param as a compact JS literal. None becomes `undefined`."""
    if param is None:
        return "undefined"
    return json.dumps(param, separators=(",", ":"), ensure_ascii=False)


def add_params_to_define_call(code: str, *params: Any) -> str:
    """
    Insert params as trailing arguments of the last call in code.

    Raises:
        InjectionError: If the code contains no call to extend
    """
    index = code.rfind(")")
    if index == -1:
        raise InjectionError("Code has no registration call to add params to")

    literals = ",".join(to_js_literal(p) for p in params)
    return f"{code[:index]},{literals}{code[index:]}"


class DefineCallInjector(ParamInjector):
    """Default injector for define-call wrapped module code."""

    @property
    def name(self) -> str:
        return "define_call"

    def add_params(self, code: str, params: Sequence[Any]) -> str:
        return add_params_to_define_call(code, *params)
