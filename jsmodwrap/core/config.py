"""
Configuration — Options recognized by the module wrapper.

Recognized keys: createModuleId, dev, projectRoot (snake_case accepted).
Unrecognized keys are ignored so callers can pass their whole serializer
options through.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field

ModuleId = Union[int, str]

_FIELD_NAMES = {"createModuleId": "create_module_id", "projectRoot": "project_root"}


class WrapOptions(BaseModel):
    """Options for wrap_module."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    create_module_id: Callable[[str], ModuleId] = Field(
        ...,
        alias="createModuleId",
        description="Allocator: absolute path -> module id",
    )
    dev: bool = Field(False, description="Development build; adds a debug name param")
    project_root: str = Field(
        ...,
        alias="projectRoot",
        description="Root the debug name is made relative to",
    )

    @classmethod
    def from_mapping(cls, options: Mapping) -> "WrapOptions":
        return cls.model_validate(dict(options))


def coerce_options(options: Union[WrapOptions, Mapping]) -> WrapOptions:
    """Accept WrapOptions or any mapping of option keys."""
    if isinstance(options, WrapOptions):
        return options
    return WrapOptions.from_mapping(options)


def load_options_file(
    path: Union[str, Path],
    create_module_id: Callable[[str], ModuleId],
    **overrides: Any,
) -> WrapOptions:
    """
    Build WrapOptions from a YAML file.

    The file provides `dev` and `projectRoot`; the allocator is never read
    from disk. Overrides with a value of None are ignored.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the document is not a mapping
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Options file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Options file must contain a mapping: {path}")

    data = {_FIELD_NAMES.get(k, k): v for k, v in data.items()}
    data.update({k: v for k, v in overrides.items() if v is not None})
    data["create_module_id"] = create_module_id
    return WrapOptions.model_validate(data)
