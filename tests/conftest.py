"""Shared fixtures for confrender tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from confrender.settings import Settings


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of CONFRENDER_* environment variables."""
    return Settings(
        properties_file="properties.yml",
        config_dir="config",
        template_suffix=".tmpl",
        output_suffix=".clj",
        file_mode=0o644,
    )


@pytest.fixture
def package_dir(tmp_path: Path) -> Path:
    """An empty package directory."""
    pkg = tmp_path / "pkg"
    pkg.mkdir()
    return pkg


@pytest.fixture
def config_dir(package_dir: Path) -> Path:
    """The package's config directory, created empty."""
    cfg = package_dir / "config"
    cfg.mkdir()
    return cfg

