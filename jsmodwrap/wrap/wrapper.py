"""
Module Wrapper — Produce the final code string registered in the bundle.

Script outputs run directly at load time and are returned as-is. Every other
JS output gets its module id, its dependency ids and, in dev builds, a debug
name injected into its registration call.
"""

import os
from collections.abc import Mapping
from typing import Any, Optional, Union

from jsmodwrap.core.config import WrapOptions, coerce_options
from jsmodwrap.core.logging import LogChannel, get_logger
from jsmodwrap.ir.enums import is_script_type
from jsmodwrap.selection.selector import get_js_output
from jsmodwrap.selection.utils import (
    dependency_path,
    module_path,
    ordered_dependencies,
    output_code,
    output_type,
)
from jsmodwrap.wrap.define_call import DefineCallInjector
from jsmodwrap.wrap.interfaces import ParamInjector

log = get_logger(LogChannel.WRAP)

_default_injector = DefineCallInjector()


def relative_module_name(project_root: str, path: str) -> str:
    """Path relative to the project root, with forward slashes."""
    relative = os.path.relpath(path, project_root)
    if relative == os.curdir:
        return ""
    return relative.replace(os.sep, "/")


def build_wrap_params(module: Any, options: Union[WrapOptions, Mapping]) -> list:
    """
    Build the ordered params for a module's registration call.

    Returns:
        [module_id, dependency_ids] plus the debug name when options.dev
    """
    options = coerce_options(options)
    path = module_path(module)

    params = [
        options.create_module_id(path),
        [options.create_module_id(dependency_path(d)) for d in ordered_dependencies(module)],
    ]

    if options.dev:
        # Shown as the module's verbose name by the runtime.
        params.append(relative_module_name(options.project_root, path))

    return params


def wrap_module(
    module: Any,
    options: Union[WrapOptions, Mapping],
    injector: Optional[ParamInjector] = None,
) -> str:
    """
    Wrap a module's JS output for the bundle's module registry.

    Args:
        module: Full module record (path, output, dependencies)
        options: WrapOptions or a mapping with createModuleId/dev/projectRoot
        injector: Parameter injector (default: DefineCallInjector)

    Raises:
        WrongOutputCount, InvalidLineCount: propagated from get_js_output
    """
    output = get_js_output(module)

    if is_script_type(output_type(output)):
        log.debug("script_passthrough", path=module_path(module))
        return output_code(output)

    injector = injector or _default_injector
    params = build_wrap_params(module, options)

    log.debug(
        "module_params_built",
        path=module_path(module),
        module_id=params[0],
        dependency_count=len(params[1]),
        injector=injector.name,
    )
    return injector.add_params(output_code(output), params)
