"""
app_config.py - Loads placefinder.json.

Settings:
    - Base URL of the backend API and the request timeout
    - UI language (message catalog)
    - Weather icon and map link URL templates
    - Log level

The file is optional and read-only: missing keys keep their defaults and
the application never writes it back.
"""

import json
import logging
from pathlib import Path

log = logging.getLogger(__name__)

CONFIG_PATH = Path("placefinder.json")

DEFAULT_ICON_URL = "https://openweathermap.org/img/wn/{icon}@2x.png"
DEFAULT_MAP_URL  = "https://www.google.com/maps/search/?api=1&query={lat},{lon}"


class AppConfig:

    def __init__(self):
        self.api_base:  str = "http://localhost:8080/api"
        self.timeout:   int = 10
        self.language:  str = "en"
        self.icon_url:  str = DEFAULT_ICON_URL
        self.map_url:   str = DEFAULT_MAP_URL
        self.log_level: str = "INFO"

    # ── Load ──────────────────────────────────────────────────────────────────

    @classmethod
    def load(cls, path: Path | str = CONFIG_PATH) -> "AppConfig":
        cfg = cls()
        path = Path(path)
        if not path.exists():
            return cfg
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            cfg.api_base  = str(data.get("api_base",  cfg.api_base)).rstrip("/")
            cfg.timeout   = int(data.get("timeout",   cfg.timeout))
            cfg.language  = data.get("language",  cfg.language)
            cfg.icon_url  = data.get("icon_url",  cfg.icon_url)
            cfg.map_url   = data.get("map_url",   cfg.map_url)
            cfg.log_level = str(data.get("log_level", cfg.log_level)).upper()
        except (OSError, ValueError, TypeError, AttributeError) as e:
            log.error("[AppConfig] Load error in %s: %s", path, e)
        return cfg
