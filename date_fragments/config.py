"""Configuration loader for date-fragments."""

import os
import logging
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger("date_fragments.config")

BASE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_CONFIG = os.path.join(BASE_DIR, "config", "settings.env")

DEFAULTS = {
    "DATE_FRAGMENTS_LOCALE": "en",
    "DATE_FRAGMENTS_ORDER": "dmy",
    "LOG_LEVEL": "INFO",
}


def load_env_file(filepath):
    """Load environment variables from a file."""
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            for line in f:
                line = line.strip()
                # Skip comments and empty lines
                if not line or line.startswith('#'):
                    continue
                # Split on the first equals sign
                if '=' in line:
                    key, value = line.split('=', 1)
                    os.environ[key.strip()] = value.strip()
        return True
    except OSError as e:
        logger.error(f"Error loading environment variables: {e}")
        return False


def get_env_or_default(key: str) -> str:
    return os.environ.get(key, DEFAULTS[key])


def load_config(env_file: Optional[str] = None) -> Dict[str, str]:
    """
    Load settings from an env file (if any) and the environment

    Args:
        env_file: Explicit env file; defaults to config/settings.env when present

    Returns:
        Dictionary with locale, order and log_level
    """
    if env_file:
        load_env_file(env_file)
    elif os.path.exists(DEFAULT_CONFIG):
        load_env_file(DEFAULT_CONFIG)
    else:
        logger.debug(f"Config file not found: {DEFAULT_CONFIG}, using environment")

    return {
        "locale": get_env_or_default("DATE_FRAGMENTS_LOCALE").lower(),
        "order": get_env_or_default("DATE_FRAGMENTS_ORDER").lower(),
        "log_level": get_env_or_default("LOG_LEVEL").upper(),
    }
