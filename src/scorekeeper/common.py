# common.py - shared settings, fonts and widgets for the scorekeeper
import os
import json
import pygame
from typing import Optional

# Defaults (may be overridden by persisted settings)
_DEFAULT_SETTINGS = {
    "data_dir": None,          # None -> <home>/data
    "log_dir": None,           # None -> <home>/logs
    "log_level": "INFO",
    "archives_per_page": 3,
}

_CURRENT_SETTINGS = dict(_DEFAULT_SETTINGS)


def _home_dir() -> str:
    # SCOREKEEPER_HOME wins, then %APPDATA% on Windows, else ~/.bowling_scorekeeper
    override = os.environ.get("SCOREKEEPER_HOME")
    if override:
        return override
    base = os.environ.get("APPDATA")
    if base:
        return os.path.join(base, "BowlingScorekeeper")
    return os.path.join(os.path.expanduser("~"), ".bowling_scorekeeper")


def _settings_path() -> str:
    return os.path.join(_home_dir(), "settings.json")


def get_current_settings():
    return dict(_CURRENT_SETTINGS)


def load_settings():
    """Reset to defaults, then overlay whatever the settings file holds."""
    global _CURRENT_SETTINGS
    _CURRENT_SETTINGS = dict(_DEFAULT_SETTINGS)
    try:
        with open(_settings_path(), "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return get_current_settings()
    if not isinstance(data, dict):
        return get_current_settings()
    for key in ("data_dir", "log_dir"):
        if isinstance(data.get(key), str) and data[key]:
            _CURRENT_SETTINGS[key] = data[key]
    if str(data.get("log_level", "")).upper() in ("DEBUG", "INFO", "WARNING", "ERROR"):
        _CURRENT_SETTINGS["log_level"] = str(data["log_level"]).upper()
    per_page = data.get("archives_per_page")
    if isinstance(per_page, int) and not isinstance(per_page, bool) and per_page > 0:
        _CURRENT_SETTINGS["archives_per_page"] = per_page
    return get_current_settings()


def save_settings(new_values: dict):
    global _CURRENT_SETTINGS
    _CURRENT_SETTINGS.update({k: new_values[k] for k in _DEFAULT_SETTINGS if k in new_values})
    os.makedirs(_home_dir(), exist_ok=True)
    with open(_settings_path(), "w", encoding="utf-8") as f:
        json.dump(_CURRENT_SETTINGS, f, indent=2)


def data_dir() -> str:
    return _CURRENT_SETTINGS.get("data_dir") or os.path.join(_home_dir(), "data")


def log_dir() -> str:
    return _CURRENT_SETTINGS.get("log_dir") or os.path.join(_home_dir(), "logs")


def archives_per_page() -> int:
    return int(_CURRENT_SETTINGS.get("archives_per_page") or 3)


# ---------- Configuration ----------
SCREEN_W, SCREEN_H = 1280, 800
LANE_BG = (28, 24, 36)

# Fonts are initialized via setup_fonts() AFTER pygame.init() in __main__.py
FONT_NAME = None
FONT_SMALL = None
FONT_UI = None
FONT_TITLE = None
FONT_CELL = None


def setup_fonts():
    global FONT_NAME, FONT_SMALL, FONT_UI, FONT_TITLE, FONT_CELL
    FONT_NAME = pygame.font.get_default_font()
    FONT_SMALL = pygame.font.SysFont(FONT_NAME, 20, bold=True)
    FONT_UI = pygame.font.SysFont(FONT_NAME, 26, bold=True)
    FONT_TITLE = pygame.font.SysFont(FONT_NAME, 44, bold=True)
    FONT_CELL = pygame.font.SysFont(FONT_NAME, 24, bold=True)


# Colors
BLACK = (20, 20, 20)
WHITE = (245, 245, 245)
ACCENT = (238, 111, 248)     # selection / cursor
INACTIVE = (98, 98, 98)      # placeholders, help text
GOLD = (230, 190, 80)
LIGHT = (220, 220, 220)
WARN = (230, 120, 90)


# ---------- Base Scene ----------
class Scene:
    def __init__(self, app):
        self.app = app
        self.next_scene = None
    def handle_event(self, e): pass
    def update(self, dt): pass
    def draw(self, screen): pass
    def shutdown(self): pass
    def draw_top_bar(self, screen, title, extra=""):
        pygame.draw.rect(screen, (0, 0, 0, 70), (0, 0, SCREEN_W, 60))
        t = render_text(FONT_TITLE, title, WHITE)
        screen.blit(t, (20, 10))
        if extra:
            s = render_text(FONT_UI, extra, WHITE)
            screen.blit(s, (SCREEN_W - s.get_width() - 20, 60 - s.get_height() - 10))


def render_text(font: Optional["pygame.font.Font"], text: str, color) -> pygame.Surface:
    # Scenes may draw before setup_fonts() in tests; fall back to the default font
    if font is None:
        font = pygame.font.SysFont(pygame.font.get_default_font(), 24, bold=True)
    return font.render(text, True, color)
