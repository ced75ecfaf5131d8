"""
IR Schema — Pydantic models for module graph records.

Records are produced upstream (transform + graph stages) and are read-only
here. The selection and wrap functions are duck-typed, so these models are
one valid shape among others, not a requirement.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from jsmodwrap.ir.enums import (
    OutputFamily,
    classify_type_tag,
    is_js_type,
    is_script_type,
)


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class OutputData(_Record):
    """Payload of a transform output."""

    code: str = Field(default="", description="Generated code")
    # Left untyped: malformed values must survive until output selection rejects them.
    line_count: Any = Field(default=None, alias="lineCount", description="Number of lines in code")
    map: list = Field(default_factory=list, description="Raw source map segments")


class Output(_Record):
    """One transform result attached to a module."""

    type: str = Field(..., description="Namespaced type tag, e.g. 'js/module'")
    data: OutputData = Field(default_factory=OutputData)

    @property
    def family(self) -> OutputFamily:
        return classify_type_tag(self.type)

    @property
    def is_js(self) -> bool:
        return is_js_type(self.type)

    @property
    def is_script(self) -> bool:
        return is_script_type(self.type)


class Dependency(_Record):
    """An edge to another module."""

    absolute_path: str = Field(..., alias="absolutePath")
    name: Optional[str] = Field(None, description="Specifier as written in source")


class Module(_Record):
    """A unit of source in the dependency graph, identified by absolute path."""

    path: str = Field(..., description="Absolute path, unique per graph")
    output: list[Output] = Field(default_factory=list)
    dependencies: dict[str, Dependency] = Field(
        default_factory=dict,
        description="Dependency key -> Dependency; insertion order is significant",
    )

    @field_validator("dependencies", mode="before")
    @classmethod
    def _dependencies_from_list(cls, value: Any) -> Any:
        # Graph dumps often list dependencies; key them by specifier, keeping order.
        # Colliding specifiers fall back to the absolute path, then the position,
        # so no entry is ever dropped.
        if isinstance(value, list):
            keyed = {}
            for index, dep in enumerate(value):
                if isinstance(dep, dict):
                    name = dep.get("name")
                    path = dep.get("absolutePath") or dep.get("absolute_path")
                else:
                    name, path = dep.name, dep.absolute_path
                key = name or path
                if key in keyed:
                    key = path
                if key in keyed:
                    key = f"{path}#{index}"
                keyed[key] = dep
            return keyed
        return value

    def dependency_list(self) -> list[Dependency]:
        """Dependencies as an explicit ordered list."""
        return list(self.dependencies.values())
