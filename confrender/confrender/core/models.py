"""Domain models for package layout and rendering results."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class PackageState(str, Enum):
    """Render decision for a package, from properties and template presence."""

    READY = "ready"
    EMPTY = "empty"
    MISSING_PROPERTIES = "missing_properties"


class PackageLayout(BaseModel):
    """Resolved locations inside a package directory."""

    package_dir: Path = Field(..., description="Package root directory")
    properties_path: Path = Field(..., description="Property document path")
    config_dir: Path = Field(..., description="Directory holding templates")


class TemplateFile(BaseModel):
    """A template and the file it renders to."""

    source: Path = Field(..., description="Template file path")
    output: Path = Field(..., description="Rendered output file path")

    @classmethod
    def from_source(
        cls, source: Path, template_suffix: str, output_suffix: str
    ) -> TemplateFile:
        stem = source.name[: -len(template_suffix)]
        return cls(source=source, output=source.with_name(stem + output_suffix))


class MergeOutcome(BaseModel):
    """Result of merging override properties into a package."""

    properties_path: Path
    keys: list[str] = Field(default_factory=list, description="Overridden keys")


class RenderOutcome(BaseModel):
    """Result of rendering a package's templates."""

    state: PackageState
    outputs: list[Path] = Field(default_factory=list)
