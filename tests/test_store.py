"""Tests for confrender.properties.store."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import yaml

from confrender.core.errors import PackageIOError, ParseError, WriteError
from confrender.properties.store import (
    dump_properties,
    load_properties,
    merge_properties,
    parse_override,
)


EXISTING = {
    "name": "riemann",
    "port": 5555,
    "nested": {"hosts": ["a", "b"], "enabled": True},
    "keep": "untouched",
}


def _write_yaml(path: Path, data: object) -> None:
    path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")


# ── load_properties ──────────────────────────────────────────────────


class TestLoadProperties:
    def test_loads_mapping(self, tmp_path: Path):
        path = tmp_path / "properties.yml"
        _write_yaml(path, EXISTING)
        assert load_properties(path) == EXISTING

    def test_missing_file_is_absent(self, tmp_path: Path):
        assert load_properties(tmp_path / "properties.yml") is None

    def test_empty_file_is_empty_mapping(self, tmp_path: Path):
        path = tmp_path / "properties.yml"
        path.write_text("", encoding="utf-8")
        assert load_properties(path) == {}

    def test_malformed_yaml_is_absent(self, tmp_path: Path, caplog):
        path = tmp_path / "properties.yml"
        path.write_text("name: [unclosed\n", encoding="utf-8")
        with caplog.at_level(logging.WARNING):
            assert load_properties(path) is None
        assert "malformed" in caplog.text

    def test_non_mapping_is_absent(self, tmp_path: Path):
        path = tmp_path / "properties.yml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        assert load_properties(path) is None

    def test_non_utf8_is_absent(self, tmp_path: Path, caplog):
        path = tmp_path / "properties.yml"
        path.write_bytes(b"name: \xff\xfe\n")
        with caplog.at_level(logging.WARNING):
            assert load_properties(path) is None
        assert "malformed" in caplog.text

    def test_unreadable_path_raises(self, tmp_path: Path):
        path = tmp_path / "properties.yml"
        path.mkdir()
        with pytest.raises(PackageIOError):
            load_properties(path)


# ── merge_properties ─────────────────────────────────────────────────


class TestMergeProperties:
    def test_override_wins_and_other_keys_kept(self, tmp_path: Path):
        path = tmp_path / "properties.yml"
        _write_yaml(path, EXISTING)

        merged = merge_properties(path, {"port": 6000, "extra": "new"})

        expected = dict(EXISTING, port=6000, extra="new")
        assert merged == expected
        assert yaml.safe_load(path.read_text(encoding="utf-8")) == expected

    def test_override_replaces_nested_value_wholesale(self, tmp_path: Path):
        path = tmp_path / "properties.yml"
        _write_yaml(path, EXISTING)

        merge_properties(path, {"nested": {"hosts": []}})

        assert yaml.safe_load(path.read_text(encoding="utf-8"))["nested"] == {"hosts": []}

    def test_merging_twice_is_idempotent(self, tmp_path: Path):
        path = tmp_path / "properties.yml"
        _write_yaml(path, EXISTING)
        override = {"port": 6000, "extra": ["x", "y"]}

        merge_properties(path, override)
        first = path.read_text(encoding="utf-8")
        merge_properties(path, override)

        assert path.read_text(encoding="utf-8") == first

    def test_missing_document_is_created(self, tmp_path: Path):
        path = tmp_path / "properties.yml"
        merge_properties(path, {"name": "x"})
        assert yaml.safe_load(path.read_text(encoding="utf-8")) == {"name": "x"}

    def test_malformed_document_is_discarded(self, tmp_path: Path, caplog):
        path = tmp_path / "properties.yml"
        path.write_text("name: [unclosed\n", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            merged = merge_properties(path, {"name": "x"})

        assert merged == {"name": "x"}
        assert "Discarding" in caplog.text
        assert yaml.safe_load(path.read_text(encoding="utf-8")) == {"name": "x"}

    def test_non_utf8_document_is_discarded(self, tmp_path: Path, caplog):
        path = tmp_path / "properties.yml"
        path.write_bytes(b"name: \xff\xfe\n")

        with caplog.at_level(logging.WARNING):
            merged = merge_properties(path, {"port": 1})

        assert merged == {"port": 1}
        assert "Discarding" in caplog.text

    def test_symlinked_document_updates_target(self, tmp_path: Path):
        shared = tmp_path / "shared.yml"
        _write_yaml(shared, {"a": 1})
        path = tmp_path / "properties.yml"
        path.symlink_to(shared)

        merge_properties(path, {"b": 2})

        assert path.is_symlink()
        assert yaml.safe_load(shared.read_text(encoding="utf-8")) == {"a": 1, "b": 2}

    def test_unwritable_target_raises_write_error(self, tmp_path: Path):
        path = tmp_path / "properties.yml"
        path.mkdir()
        with pytest.raises(WriteError):
            merge_properties(path, {"name": "x"})

    def test_applies_file_mode(self, tmp_path: Path):
        path = tmp_path / "properties.yml"
        merge_properties(path, {"name": "x"}, file_mode=0o600)
        assert path.stat().st_mode & 0o777 == 0o600


# ── dump_properties ──────────────────────────────────────────────────


class TestDumpProperties:
    def test_preserves_key_order(self):
        text = dump_properties({"b": 1, "a": 2})
        assert text.index("b:") < text.index("a:")

    def test_block_style(self):
        text = dump_properties({"hosts": ["a", "b"]})
        assert text == "hosts:\n- a\n- b\n"

    def test_keeps_unicode(self):
        assert "café" in dump_properties({"name": "café"})


# ── parse_override ───────────────────────────────────────────────────


class TestParseOverride:
    def test_parses_object(self):
        assert parse_override('{"a": 1, "b": {"c": [true]}}') == {"a": 1, "b": {"c": [True]}}

    def test_invalid_json_raises(self):
        with pytest.raises(ParseError, match="Invalid JSON"):
            parse_override("{not json")

    @pytest.mark.parametrize("value", ["[1, 2]", '"text"', "42", "null"])
    def test_non_object_raises(self, value: str):
        with pytest.raises(ParseError, match="JSON object"):
            parse_override(value)
