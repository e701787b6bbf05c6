"""Template discovery and rendering."""

from .catalog import list_templates
from .engine import GENERATED_BANNER, render_all, render_template, render_text

__all__ = [
    "GENERATED_BANNER",
    "list_templates",
    "render_all",
    "render_template",
    "render_text",
]
