"""Tests for settings loading."""

from map_areas.config import Settings


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("MAP_AREAS_SKIP_AREA_NAMES", raising=False)
        settings = Settings(_env_file=None)
        assert settings.log_level == "info"
        assert settings.default_dialect == "osbot"
        assert settings.skip_area_names == ["MAINLAND_EXTENSIONS", "OVERWORLD"]
        assert settings.viewport_padding == 0.0

    def test_skip_names_comma_separated(self, monkeypatch):
        monkeypatch.setenv("MAP_AREAS_SKIP_AREA_NAMES", "OVERWORLD, WILDERNESS,")
        assert Settings(_env_file=None).skip_area_names == ["OVERWORLD", "WILDERNESS"]

    def test_skip_names_json(self, monkeypatch):
        monkeypatch.setenv("MAP_AREAS_SKIP_AREA_NAMES", '["A", "B"]')
        assert Settings(_env_file=None).skip_area_names == ["A", "B"]

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("MAP_AREAS_DEFAULT_DIALECT", "runelite")
        assert Settings(_env_file=None).default_dialect == "runelite"
