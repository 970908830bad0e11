"""Tests for configuration presets."""

from config import Config


def _keep_viewport(monkeypatch):
    for key in ("WIDTH", "HEIGHT", "PADDING", "VIEWPORT_PRESET"):
        monkeypatch.setattr(Config, key, getattr(Config, key))


def test_apply_viewport_preset(monkeypatch):
    _keep_viewport(monkeypatch)
    Config.apply_viewport_preset("small")

    assert (Config.WIDTH, Config.HEIGHT, Config.PADDING) == (400, 300, 30)
    assert Config.VIEWPORT_PRESET == "small"


def test_preset_name_is_case_insensitive(monkeypatch):
    _keep_viewport(monkeypatch)
    Config.apply_viewport_preset("LARGE")
    assert Config.WIDTH == 1200


def test_unknown_preset_keeps_values(monkeypatch):
    _keep_viewport(monkeypatch)
    before = (Config.WIDTH, Config.HEIGHT, Config.PADDING)
    Config.apply_viewport_preset("poster")
    assert (Config.WIDTH, Config.HEIGHT, Config.PADDING) == before


def test_defaults_leave_room_to_plot():
    assert Config.WIDTH > 2 * Config.PADDING
    assert Config.HEIGHT > 2 * Config.PADDING
    assert Config.NUM_CLUSTERS >= 1
