import logging
from typing import Optional

from .settings import Settings
from .constants import (
    LLM_CONFIG,
    CONFIDENCE_BOUNDS,
    USER_MESSAGES,
)
from exceptions import ConfigurationException

settings = Settings()

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("truthlens")

REQUIRED_KEYS = [
    "GEMINI_API_KEY",
]

def check_api_keys_on_startup() -> Optional[ConfigurationException]:
    """Check for required API keys. Returns the configuration error instead of raising it."""
    missing_keys = [key_name for key_name in REQUIRED_KEYS if not getattr(settings, key_name, None)]

    if missing_keys:
        logger.critical(
            "%s. Missing keys: %s", USER_MESSAGES.MISSING_API_KEY, ", ".join(missing_keys)
        )
        return ConfigurationException(missing_keys)

    logger.info("All required API keys are configured.")
    return None

__all__ = [
    "logger",
    "settings",
    "Settings",
    "REQUIRED_KEYS",
    "check_api_keys_on_startup",
    "LLM_CONFIG",
    "CONFIDENCE_BOUNDS",
    "USER_MESSAGES",
]
