import json

from deskshell import config


def test_missing_file_gives_defaults(tmp_path):
    assert config.load_settings(str(tmp_path / "nope.json")) == config.DEFAULT_SETTINGS


def test_corrupt_file_gives_defaults(tmp_path, caplog):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    assert config.load_settings(str(path)) == config.DEFAULT_SETTINGS
    assert "Could not read settings" in caplog.text


def test_invalid_values_are_ignored(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"theme": "Neon", "wallpaper_index": 7, "clamp_far_edges": "yes", "extra": 1}))
    settings = config.load_settings(str(path))
    assert settings["theme"] == "Dark"
    assert settings["wallpaper_index"] == 7 % len(config.WALLPAPERS)
    assert settings["clamp_far_edges"] is False
    assert "extra" not in settings


def test_env_var_and_save(tmp_path, monkeypatch):
    path = tmp_path / "env.json"
    monkeypatch.setenv(config.SETTINGS_ENV, str(path))
    assert config.save_settings({"theme": "Light", "wallpaper_index": 2, "clamp_far_edges": True})
    assert config.load_settings() == {"theme": "Light", "wallpaper_index": 2, "clamp_far_edges": True}


def test_save_failure_returns_false(tmp_path):
    assert not config.save_settings(config.DEFAULT_SETTINGS, str(tmp_path / "missing" / "s.json"))


def test_theme_and_wallpaper_lookup():
    assert config.theme({"theme": "Light"}) is config.THEMES["Light"]
    assert config.theme({}) is config.THEMES["Dark"]
    assert config.wallpaper({"wallpaper_index": len(config.WALLPAPERS) + 1}) == config.WALLPAPERS[1]
