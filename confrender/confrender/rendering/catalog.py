"""Template discovery within a package."""

from __future__ import annotations

import logging
import os

from ..core.errors import PackageIOError
from ..core.models import PackageLayout, TemplateFile
from ..settings import Settings

logger = logging.getLogger(__name__)


def list_templates(layout: PackageLayout, settings: Settings) -> list[TemplateFile]:
    """List the package's templates in catalog order.

    Only the top level of the config directory is scanned. A package
    without a config directory has no templates.

    Args:
        layout: Resolved package layout
        settings: Template and output suffixes

    Returns:
        Templates sorted by file name
    """
    try:
        names = os.listdir(layout.config_dir)
    except FileNotFoundError:
        logger.debug(f"No config directory at {layout.config_dir}")
        return []
    except OSError as exc:
        raise PackageIOError(f"Cannot list {layout.config_dir}: {exc}") from exc

    templates = [
        TemplateFile.from_source(
            layout.config_dir / name, settings.template_suffix, settings.output_suffix
        )
        for name in sorted(names)
        if name.endswith(settings.template_suffix)
    ]

    logger.debug(f"Found {len(templates)} template(s) in {layout.config_dir}")
    return templates
