# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for YAML loader utilities."""

from pathlib import Path

import pytest

from levixia_screening.core.config.yaml_loader import (
    YAMLLoadError,
    deep_merge,
    load_yaml,
)


@pytest.mark.unit
class TestLoadYaml:
    """Tests for load_yaml function."""

    def test_load_catalog_file(self, tmp_path: Path) -> None:
        """Test loading an accessibility catalog."""
        yaml_file = tmp_path / "recommendations.yaml"
        yaml_file.write_text(
            "screening:\n"
            "  accessibility:\n"
            "    general:\n"
            "      category: General\n"
            "      items: [Personalized assistant settings]\n"
        )

        result = load_yaml(yaml_file)

        assert result["screening"]["accessibility"]["general"]["items"] == [
            "Personalized assistant settings"
        ]

    def test_empty_file_returns_empty_dict(self, tmp_path: Path) -> None:
        """Test that empty or comment-only files return an empty dict."""
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("# disclaimers moved elsewhere\n")

        assert load_yaml(yaml_file) == {}

    def test_list_root_raises_error(self, tmp_path: Path) -> None:
        """Test that a list root is rejected."""
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- Reading Aids\n- General\n")

        with pytest.raises(YAMLLoadError) as exc_info:
            load_yaml(yaml_file)

        assert "expected a mapping, found list" in str(exc_info.value)

    def test_missing_file_raises_error(self, tmp_path: Path) -> None:
        """Test that a missing file raises error."""
        with pytest.raises(YAMLLoadError) as exc_info:
            load_yaml(tmp_path / "missing.yaml")

        assert "not a file" in str(exc_info.value)

    def test_directory_raises_error(self, tmp_path: Path) -> None:
        """Test that a directory path raises error."""
        with pytest.raises(YAMLLoadError) as exc_info:
            load_yaml(tmp_path)

        assert "not a file" in str(exc_info.value)

    def test_invalid_syntax_raises_error(self, tmp_path: Path) -> None:
        """Test that invalid YAML syntax raises error."""
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("disclaimer: [unclosed\n")

        with pytest.raises(YAMLLoadError) as exc_info:
            load_yaml(yaml_file)

        assert "malformed YAML" in str(exc_info.value)
        assert exc_info.value.path == yaml_file


@pytest.mark.unit
class TestDeepMerge:
    """Tests for deep_merge function."""

    def test_language_maps_merge(self) -> None:
        """Test nested language maps merge key by key."""
        base = {"disclaimer": {"en": "Screening only."}}
        override = {"disclaimer": {"tr": "Sadece tarama."}}

        result = deep_merge(base, override)

        assert result == {"disclaimer": {"en": "Screening only.", "tr": "Sadece tarama."}}

    def test_override_takes_precedence(self) -> None:
        """Test that override values replace base values."""
        result = deep_merge({"category": "General"}, {"category": "Everyday"})

        assert result == {"category": "Everyday"}

    def test_lists_are_replaced(self) -> None:
        """Test that item lists are replaced, not concatenated."""
        base = {"items": ["Letter spacing", "Line spacing"]}
        override = {"items": ["Color contrast"]}

        assert deep_merge(base, override) == {"items": ["Color contrast"]}

    def test_scalar_replaces_mapping(self) -> None:
        """Test that a scalar override replaces a nested mapping."""
        result = deep_merge({"disclaimer": {"en": "a"}}, {"disclaimer": "b"})

        assert result == {"disclaimer": "b"}

    def test_inputs_not_modified(self) -> None:
        """Test that neither input is mutated."""
        base = {"accessibility": {"general": {"items": ["x"]}}}
        override = {"accessibility": {"general": {"category": "G"}}}

        deep_merge(base, override)

        assert base == {"accessibility": {"general": {"items": ["x"]}}}
        assert override == {"accessibility": {"general": {"category": "G"}}}
