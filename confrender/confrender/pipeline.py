"""Merge-only and render operations over a single package directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .core.errors import PipelineError, StructuralError
from .core.models import MergeOutcome, PackageLayout, PackageState, RenderOutcome
from .properties import load_properties, merge_properties, parse_override
from .rendering import list_templates, render_all
from .reporting import LoggingReporter, Reporter
from .settings import Settings, load_settings

logger = logging.getLogger(__name__)


def resolve_layout(package_dir: str | Path, settings: Settings) -> PackageLayout:
    """Validate a package directory and resolve the paths inside it.

    Args:
        package_dir: Package path, trailing separators allowed
        settings: Layout settings

    Returns:
        Resolved package layout
    """
    raw = os.fspath(package_dir)
    if not raw:
        raise StructuralError("Not a valid package directory: empty path")

    stripped = raw.rstrip("/" + os.sep) or raw
    root = Path(stripped)

    if not root.is_dir():
        raise StructuralError(f"Not a valid package directory: {stripped}")

    return PackageLayout(
        package_dir=root,
        properties_path=root / settings.properties_file,
        config_dir=root / settings.config_dir,
    )


def resolve_state(has_properties: bool, template_count: int) -> PackageState:
    """Decide what rendering a package means.

    | properties | templates | state              |
    |------------|-----------|--------------------|
    | yes        | any       | READY              |
    | no         | 0         | EMPTY              |
    | no         | >0        | MISSING_PROPERTIES |
    """
    if has_properties:
        return PackageState.READY
    if template_count == 0:
        return PackageState.EMPTY
    return PackageState.MISSING_PROPERTIES


def merge_only(
    package_dir: str | Path, properties: str, settings: Settings | None = None
) -> MergeOutcome:
    """Merge override properties into the package's property document.

    Templates are not touched.

    Args:
        package_dir: Package path
        properties: Override properties as a JSON object
        settings: Layout settings (read from the environment when omitted)

    Returns:
        Merge outcome
    """
    settings = settings or load_settings()
    layout = resolve_layout(package_dir, settings)
    override = parse_override(properties)

    merge_properties(layout.properties_path, override, file_mode=settings.file_mode)
    return MergeOutcome(properties_path=layout.properties_path, keys=list(override))


def render_package(
    package_dir: str | Path, settings: Settings | None = None
) -> RenderOutcome:
    """Render every template of a package against its property document.

    Args:
        package_dir: Package path
        settings: Layout settings (read from the environment when omitted)

    Returns:
        Render outcome with the decided state and written files
    """
    settings = settings or load_settings()
    layout = resolve_layout(package_dir, settings)

    properties = load_properties(layout.properties_path)
    templates = list_templates(layout, settings)

    state = resolve_state(properties is not None, len(templates))
    logger.debug(f"Package {layout.package_dir} is {state.value}")

    if state is PackageState.EMPTY:
        return RenderOutcome(state=state)

    if state is PackageState.MISSING_PROPERTIES:
        if layout.properties_path.is_file():
            raise StructuralError(
                f"'{settings.properties_file}' in this package is malformed "
                "although templates are defined"
            )
        raise StructuralError(
            f"Could not find '{settings.properties_file}' in this package "
            "although templates are defined"
        )

    outputs = render_all(templates, properties or {}, settings.file_mode)
    return RenderOutcome(state=state, outputs=outputs)


def run(
    package_dir: str | Path,
    properties: str | None = None,
    settings: Settings | None = None,
    reporter: Reporter | None = None,
) -> int:
    """Run the operation selected by the presence of override properties.

    Exactly one terminal message is reported.

    Returns:
        Exit code: 0 on success, 1 on any fatal error
    """
    reporter = reporter or LoggingReporter()

    try:
        if properties is not None:
            reporter.log(f"Merging properties into {package_dir}")
            outcome = merge_only(package_dir, properties, settings)
            reporter.log(f"Updated {len(outcome.keys)} key(s) in {outcome.properties_path}")
        else:
            reporter.log(f"Rendering templates of {package_dir}")
            result = render_package(package_dir, settings)
            reporter.log(f"Package {result.state.value}: {len(result.outputs)} file(s) written")
    except PipelineError as exc:
        reporter.report_error(str(exc))
        return 1

    reporter.report_success("Done")
    return 0
