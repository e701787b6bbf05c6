"""Loading, merging and persisting a package's property document."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

import yaml

from ..core.errors import PackageIOError, ParseError, WriteError
from ..rendering.io import atomic_write_text, read_text

logger = logging.getLogger(__name__)


def _read_document(path: Path) -> dict[str, Any]:
    data = yaml.safe_load(read_text(path))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ParseError(
            f"Expected a mapping in {path}, got {type(data).__name__}"
        )
    return data


def load_properties(path: Path) -> dict[str, Any] | None:
    """Load the property document at path.

    Args:
        path: Property document path

    Returns:
        The parsed mapping, or None when the document is absent or malformed
    """
    try:
        return _read_document(path)
    except FileNotFoundError:
        logger.debug(f"No property document at {path}")
        return None
    except (yaml.YAMLError, UnicodeDecodeError, ParseError) as exc:
        logger.warning(f"Ignoring malformed property document {path}: {exc}")
        return None
    except OSError as exc:
        raise PackageIOError(f"Cannot read {path}: {exc}") from exc


def dump_properties(properties: Mapping[str, Any]) -> str:
    """Serialize properties as a block-style YAML document."""
    return yaml.safe_dump(
        dict(properties),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def merge_properties(
    path: Path, override: Mapping[str, Any], file_mode: int = 0o644
) -> dict[str, Any]:
    """Merge override into the document at path and write it back.

    An existing document that cannot be read or parsed is logged and
    replaced by an empty mapping before the merge.

    Args:
        path: Property document path
        override: Properties that win over existing keys
        file_mode: File permissions (octal)

    Returns:
        The merged mapping as written

    Raises:
        WriteError: If the merged document cannot be serialized or written
    """
    try:
        merged = _read_document(path)
    except FileNotFoundError:
        logger.debug(f"No property document at {path}, starting empty")
        merged = {}
    except (OSError, yaml.YAMLError, UnicodeDecodeError, ParseError) as exc:
        # keep going with an empty base
        logger.warning(f"Discarding unreadable property document {path}: {exc}")
        merged = {}

    for key, value in override.items():
        merged[key] = value

    try:
        text = dump_properties(merged)
    except yaml.YAMLError as exc:
        raise WriteError(f"Cannot serialize properties for {path}: {exc}") from exc

    try:
        atomic_write_text(path, text, mode=file_mode)
    except OSError as exc:
        raise WriteError(f"Cannot write {path}: {exc}") from exc

    logger.info(f"Merged {len(override)} key(s) into {path}")
    return merged


def parse_override(value: str) -> dict[str, Any]:
    """Parse override properties given as a JSON object."""
    try:
        data = json.loads(value)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON properties: {e}") from e

    if not isinstance(data, dict):
        raise ParseError(
            f"Properties must be a JSON object, got {type(data).__name__}"
        )
    return data
