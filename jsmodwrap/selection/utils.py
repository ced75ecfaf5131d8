"""
Record Access — Read module graph records of any shape.

Records may be the pydantic models from jsmodwrap.ir, plain objects with the
same attribute names, or mappings decoded straight from JSON (camelCase keys).
"""

from collections.abc import Mapping
from typing import Any, Optional

_MISSING = object()


def _field(record: Any, *names: str, default: Any = _MISSING) -> Any:
    """Return the first of `names` present on `record`."""
    for name in names:
        if isinstance(record, Mapping):
            if name in record:
                return record[name]
        elif hasattr(record, name):
            return getattr(record, name)
    if default is _MISSING:
        raise AttributeError(f"{type(record).__name__} record has no field {names[0]!r}")
    return default


def module_path(module: Any) -> Optional[str]:
    """The module's path, or None when the record carries none."""
    return _field(module, "path", default=None)


def module_outputs(module: Any) -> list:
    return list(_field(module, "output", default=()) or ())


def output_type(output: Any) -> str:
    return _field(output, "type")


def output_data(output: Any) -> Any:
    return _field(output, "data", default=None)


def output_code(output: Any) -> str:
    return _field(output_data(output), "code")


def output_line_count(output: Any) -> Any:
    data = output_data(output)
    if data is None:
        return None
    return _field(data, "line_count", "lineCount", default=None)


def ordered_dependencies(module: Any) -> list:
    """Dependencies in iteration order, as an explicit list."""
    deps = _field(module, "dependencies", default=None)
    if deps is None:
        return []
    if isinstance(deps, Mapping):
        return list(deps.values())
    return list(deps)


def dependency_path(dependency: Any) -> str:
    return _field(dependency, "absolute_path", "absolutePath")
