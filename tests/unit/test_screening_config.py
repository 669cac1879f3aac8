# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for screening configuration loading."""

from pathlib import Path

import pytest

import levixia_screening
from levixia_screening.core.screening.config import (
    CONFIG_DIR,
    DEFAULTS,
    get_screening_config,
    load_screening_config,
    reload_screening_config,
)


@pytest.mark.unit
class TestLoadScreeningConfig:
    """Tests for load_screening_config."""

    def test_packaged_config(self) -> None:
        """Test the packaged YAML provides all categories."""
        config = get_screening_config()

        assert set(config.accessibility) == {
            "reading_aids",
            "visual_adjustments",
            "cognitive_support",
            "general",
        }
        assert config.get_category("general").items == ("Personalized assistant settings",)

    def test_config_ships_inside_package(self) -> None:
        """Test the default config directory is package data, not a checkout path."""
        package_dir = Path(levixia_screening.__file__).parent

        assert CONFIG_DIR == package_dir / "config" / "screening"
        assert (CONFIG_DIR / "recommendations.yaml").is_file()
        assert load_screening_config(str(CONFIG_DIR)).source == CONFIG_DIR / "recommendations.yaml"

    def test_missing_directory_uses_defaults(self, tmp_path: Path) -> None:
        """Test a missing file falls back to built-in defaults."""
        config = load_screening_config(str(tmp_path / "missing"))

        assert config.get_disclaimer() == DEFAULTS["disclaimer"]["en"]
        assert config.get_category("reading_aids").category == "Reading Aids"
        assert config.source is None

    def test_invalid_yaml_uses_defaults(self, tmp_path: Path) -> None:
        """Test a broken file falls back to built-in defaults."""
        (tmp_path / "recommendations.yaml").write_text("screening: [unclosed\n")

        config = load_screening_config(str(tmp_path))

        assert config.get_personalized_feedback() == DEFAULTS["personalized_feedback"]["en"]

    def test_override_merges_over_defaults(self, tmp_path: Path) -> None:
        """Test overrides replace only the keys they name."""
        (tmp_path / "recommendations.yaml").write_text(
            "screening:\n"
            "  disclaimer:\n"
            "    tr: Bu bir tarama aracidir.\n"
            "  accessibility:\n"
            "    general:\n"
            "      items:\n"
            "        - Personalized assistant settings\n"
            "        - Reading ruler\n"
        )

        config = load_screening_config(str(tmp_path))

        assert config.get_disclaimer("tr") == "Bu bir tarama aracidir."
        assert config.source == tmp_path / "recommendations.yaml"
        assert config.get_disclaimer("en") == DEFAULTS["disclaimer"]["en"]
        general = config.get_category("general")
        assert general.category == "General"
        assert general.items == ("Personalized assistant settings", "Reading ruler")

    def test_unknown_category_raises(self) -> None:
        """Test lookups of unknown categories raise KeyError."""
        with pytest.raises(KeyError):
            get_screening_config().get_category("auditory_support")


@pytest.mark.unit
class TestScreeningConfigText:
    """Tests for localized text helpers."""

    def test_executive_summary_lowercases_severity(self) -> None:
        """Test the severity is lowercased into the summary."""
        summary = get_screening_config().get_executive_summary("Moderate")

        assert "a moderate profile" in summary

    def test_reload_returns_fresh_instance(self) -> None:
        """Test reload clears the cache."""
        first = get_screening_config()

        second = reload_screening_config()

        assert first is not second
        assert get_screening_config() is second
