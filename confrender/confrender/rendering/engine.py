"""Template rendering engine."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Mapping

from jinja2 import Environment, TemplateError, TemplateSyntaxError, Undefined

from ..core.errors import PackageIOError, ParseError, RenderError, WriteError
from ..core.models import TemplateFile
from .io import atomic_write_text, read_text

logger = logging.getLogger(__name__)

GENERATED_BANNER = (
    "; Dynamic riemann.config file for Riemann generated by Horus\n"
    ";     DO NOT EDIT THIS FILE BY HAND -- YOUR CHANGES WILL BE OVERWRITTEN\n"
)


def _finalize(value: Any) -> Any:
    # null renders empty, booleans as config literals
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def build_environment() -> Environment:
    """Create the Jinja2 environment used for config templates.

    Undefined names and null values render as empty strings.
    """
    return Environment(
        undefined=Undefined,
        autoescape=False,
        keep_trailing_newline=True,
        finalize=_finalize,
    )


def render_text(source: str, context: Mapping[str, Any], name: str = "<template>") -> str:
    """Expand the placeholders of a template body.

    Args:
        source: Template text
        context: Resolved properties
        name: Template name used in error messages

    Returns:
        Rendered text
    """
    try:
        template = build_environment().from_string(source)
    except TemplateSyntaxError as exc:
        raise ParseError(f"Invalid template {name}: {exc}") from exc

    try:
        return template.render(dict(context))
    except TemplateError as exc:
        raise RenderError(f"Failed to render {name}: {exc}") from exc


def render_template(
    template: TemplateFile, context: Mapping[str, Any], file_mode: int = 0o644
) -> Path:
    """Render a single template to its output file.

    Args:
        template: Template to render
        context: Resolved properties
        file_mode: File permissions

    Returns:
        Output file path
    """
    logger.debug(f"Rendering template: {template.source}")

    try:
        source = read_text(template.source)
    except (OSError, UnicodeDecodeError) as exc:
        raise PackageIOError(f"Cannot read template {template.source}: {exc}") from exc

    output = GENERATED_BANNER + render_text(source, context, template.source.name)

    try:
        atomic_write_text(template.output, output, mode=file_mode)
    except OSError as exc:
        raise WriteError(f"Cannot write {template.output}: {exc}") from exc

    logger.info(f"Rendered {template.source} → {template.output}")
    return template.output


def render_all(
    templates: Iterable[TemplateFile], context: Mapping[str, Any], file_mode: int = 0o644
) -> list[Path]:
    """Render templates in order, stopping at the first failure.

    Outputs written before a failure are left in place.

    Args:
        templates: Templates in catalog order
        context: Resolved properties shared by all templates
        file_mode: File permissions

    Returns:
        List of output file paths
    """
    templates = list(templates)
    logger.info(f"Rendering {len(templates)} template(s)")

    outputs = [render_template(template, context, file_mode) for template in templates]

    logger.info(f"Successfully rendered {len(outputs)} file(s)")
    return outputs
