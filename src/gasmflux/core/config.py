# gasmflux/core/config.py

from dataclasses import dataclass, fields
from typing import Any, Dict

import yaml

from .logging import get_logger
from .models import BASE_URL

logger = get_logger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

@dataclass
class Settings:
    """Connection settings for the scraper."""
    base_url: str = BASE_URL
    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """
        Build settings from a mapping, ignoring keys we don't know about.

        Raises ValueError or TypeError if a known key has an unusable value.
        """
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}
        settings = cls(**values)
        for name in ("base_url", "user_agent"):
            value = getattr(settings, name)
            if not isinstance(value, str) or not value:
                raise ValueError(f"'{name}' must be a non-empty string, got {value!r}")
        settings.base_url = settings.base_url.rstrip("/")
        settings.timeout = float(settings.timeout)
        if settings.timeout <= 0:
            raise ValueError(f"'timeout' must be positive, got {settings.timeout}")
        return settings

def load_settings(filepath: str) -> Settings:
    """
    Loads scraper settings from a YAML file.

    Args:
        filepath: The path to the gasmflux.yaml file.

    Returns:
        The settings found under the file's top-level 'scraper' key.
        Returns the defaults if the file is missing, empty or unreadable.
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        logger.debug(f"No configuration file at '{filepath}', using defaults")
        return Settings()
    except yaml.YAMLError as e:
        logger.error(f"Error parsing YAML file: {e}")
        return Settings()

    # The YAML file has a top-level 'scraper' key
    if isinstance(data, dict) and isinstance(data.get("scraper"), dict):
        try:
            return Settings.from_dict(data["scraper"])
        except (TypeError, ValueError) as e:
            logger.error(f"Invalid scraper settings in '{filepath}': {e}")
    return Settings()
