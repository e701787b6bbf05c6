"""Errors raised while merging properties and rendering templates."""

from __future__ import annotations


class PipelineError(Exception):
    """Base class for fatal pipeline failures."""


class StructuralError(PipelineError):
    """Raised when the package layout cannot be processed."""


class ParseError(PipelineError):
    """Raised when override properties or a template cannot be parsed."""


class PackageIOError(PipelineError):
    """Raised when a package file or directory cannot be read or written."""


class WriteError(PackageIOError):
    """Raised when an output or properties file cannot be written."""


class RenderError(PipelineError):
    """Raised when the template engine fails while expanding a template."""


class SettingsError(PipelineError):
    """Raised when CONFRENDER_* settings are invalid."""
