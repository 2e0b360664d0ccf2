"""Tests for TemplateSettings."""

import dataclasses

import pytest

from autotemplate import TemplateSettings


class TestTemplateSettings:
    """Defaults, overlay and immutability."""

    def test_defaults(self) -> None:
        settings = TemplateSettings()
        assert settings.template_path == ""
        assert settings.enabled is True
        assert settings.template_folder is None
        assert settings.locale_code == "ja_JP"

    def test_from_mapping_overlays_defaults(self) -> None:
        settings = TemplateSettings.from_mapping({"template_path": "Templates/Daily.md"})
        assert settings.template_path == "Templates/Daily.md"
        assert settings.enabled is True

    def test_from_mapping_none(self) -> None:
        assert TemplateSettings.from_mapping(None) == TemplateSettings()

    def test_from_mapping_ignores_unknown_keys(self) -> None:
        settings = TemplateSettings.from_mapping({"enabled": False, "theme": "dark"})
        assert settings == TemplateSettings(enabled=False)

    def test_from_mapping_null_locale_keeps_default(self) -> None:
        """A stored null locale falls back to the default locale."""
        settings = TemplateSettings.from_mapping({"locale_code": None, "template_path": "T.md"})
        assert settings.locale_code == "ja_JP"
        assert settings.template_path == "T.md"

    def test_from_mapping_wrong_types_keep_defaults(self) -> None:
        settings = TemplateSettings.from_mapping(
            {"template_path": 3, "enabled": "no", "template_folder": ["Templates"]}
        )
        assert settings == TemplateSettings()

    def test_from_mapping_accepts_null_folder(self) -> None:
        settings = TemplateSettings.from_mapping({"template_folder": None})
        assert settings.template_folder is None

    def test_frozen(self) -> None:
        settings = TemplateSettings()
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.enabled = False  # type: ignore[misc]

    def test_replace(self) -> None:
        settings = TemplateSettings()
        updated = settings.replace(template_path="T.md")
        assert updated.template_path == "T.md"
        assert settings.template_path == ""
