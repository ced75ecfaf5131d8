"""
Module Processing — Filter and wrap the modules of a bundle.

Returns (module, code) pairs in input order. Concatenating them into a
bundle is the serializer's job.
"""

import uuid
from collections.abc import Mapping
from typing import Any, Callable, Iterable, Optional, Union

from jsmodwrap.core.config import WrapOptions, coerce_options
from jsmodwrap.core.logging import WrapRunLogger
from jsmodwrap.selection.classifier import is_js_module
from jsmodwrap.selection.utils import module_path
from jsmodwrap.wrap.interfaces import ParamInjector
from jsmodwrap.wrap.wrapper import wrap_module


def process_modules(
    modules: Iterable[Any],
    options: Union[WrapOptions, Mapping],
    filter_fn: Optional[Callable[[Any], bool]] = None,
    injector: Optional[ParamInjector] = None,
    run_id: Optional[str] = None,
) -> list[tuple[Any, str]]:
    """
    Wrap every JS module accepted by filter_fn.

    Args:
        modules: Module records, in bundle order
        options: Wrap options
        filter_fn: Extra predicate (default: accept all)
        injector: Parameter injector passed to wrap_module
        run_id: Id bound to log messages (generated if None)

    Raises:
        WrongOutputCount, InvalidLineCount: for the first malformed module
        InjectionError: if the injector finds no call to extend
    """
    options = coerce_options(options)
    run_log = WrapRunLogger(run_id or uuid.uuid4().hex[:12])
    wrapped = []
    status = "failed"

    try:
        for module in modules:
            path = module_path(module)
            if not is_js_module(module):
                run_log.module_skipped(path, "no_js_output")
                continue
            if filter_fn is not None and not filter_fn(module):
                run_log.module_skipped(path, "filtered")
                continue

            try:
                code = wrap_module(module, options, injector=injector)
            except Exception as e:
                run_log.module_failed(path, e)
                raise

            run_log.module_wrapped(path)
            wrapped.append((module, code))

        status = "success"
    finally:
        run_log.run_complete(status)

    return wrapped
