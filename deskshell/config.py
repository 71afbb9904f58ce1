"""
Shared constants published by the rendering layer, plus the small JSON
settings file (theme / wallpaper / far-edge clamping).

The geometry engine reads MIN_WIDTH, MIN_HEIGHT and BODY_MARGIN from here so
its clamps always match what the window chrome draws.
"""
import json
import logging
import os

logger = logging.getLogger(__name__)


# ---------- CONFIG ----------
TITLEBAR_H = 32
RESIZE_GRIP = 6
MIN_WIDTH, MIN_HEIGHT = 220, 140
BODY_MARGIN = TITLEBAR_H
REQUIRED_VIEWPORT_WIDTH, REQUIRED_VIEWPORT_HEIGHT = 800, 600
DEFAULT_SIZE = (1280, 720)
FPS = 60

SETTINGS_FILE = "deskshell_settings.json"
SETTINGS_ENV = "DESKSHELL_SETTINGS"

# Themes / wallpapers (simple colors)
WALLPAPERS = [(18,22,36), (38,42,60), (255,204,0), (10,40,20), (60,10,30)]
THEMES = {"Dark": {"text": (235,240,245), "panel": (32,35,48), "alt": (40,44,60), "accent": (70,110,200)},
          "Light": {"text": (20,20,20), "panel": (230,230,235), "alt": (245,245,248), "accent": (90,140,230)}}

DEFAULT_SETTINGS = {"theme": "Dark", "wallpaper_index": 0, "clamp_far_edges": False}


def settings_path(path=None):
    return path or os.environ.get(SETTINGS_ENV) or SETTINGS_FILE


def load_settings(path=None):
    """Read the settings file, falling back to defaults for anything missing or broken."""
    settings = dict(DEFAULT_SETTINGS)
    path = settings_path(path)
    if not os.path.exists(path):
        return settings
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Could not read settings from %s: %s", path, e)
        return settings
    if not isinstance(data, dict):
        logger.warning("Ignoring settings in %s: expected an object", path)
        return settings

    if data.get("theme") in THEMES:
        settings["theme"] = data["theme"]
    if isinstance(data.get("wallpaper_index"), int):
        settings["wallpaper_index"] = data["wallpaper_index"] % len(WALLPAPERS)
    if isinstance(data.get("clamp_far_edges"), bool):
        settings["clamp_far_edges"] = data["clamp_far_edges"]
    return settings


def save_settings(settings, path=None):
    path = settings_path(path)
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump({k: settings[k] for k in DEFAULT_SETTINGS if k in settings}, f, indent=2)
    except OSError as e:
        logger.warning("Could not save settings to %s: %s", path, e)
        return False
    return True


def theme(settings):
    return THEMES.get(settings.get("theme"), THEMES["Dark"])


def wallpaper(settings):
    return WALLPAPERS[settings.get("wallpaper_index", 0) % len(WALLPAPERS)]
