import os
import logging
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("truthbeacon")

from .constants import (
    LLM_CONFIG,
    SCHEMA_CONFIG,
    UI_CONFIG,
)


class Settings(BaseSettings):
    """Loads all environment variables into a single, accessible object."""
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    CEREBRAS_API_KEY: Optional[str] = None
    CEREBRAS_MODEL: str = "qwen-3-32b"
    CEREBRAS_BASE_URL: str = "https://api.cerebras.ai"

    STRICT_SCHEMA: bool = True
    ALLOWED_ORIGINS: List[str] = ["*"]
    EVALUATOR_BASE_URL: str = "http://truthbeacon.local"

    @property
    def CEREBRAS_ENDPOINT(self) -> str:
        return f"{self.CEREBRAS_BASE_URL.rstrip('/')}{LLM_CONFIG.COMPLETIONS_PATH}"


REQUIRED_KEYS = [
    "CEREBRAS_API_KEY",
]

def check_api_keys_on_startup(settings: Settings) -> List[str]:
    """Check for required API keys on startup."""
    missing_keys = [key_name for key_name in REQUIRED_KEYS if not getattr(settings, key_name)]

    if missing_keys:
        logger.warning(f"Missing API keys: {', '.join(missing_keys)}. Claim evaluation will fail.")
    else:
        logger.info("All required API keys are configured.")
    return missing_keys

__all__ = [
    "logger",
    "Settings",
    "REQUIRED_KEYS",
    "check_api_keys_on_startup",
    "LLM_CONFIG",
    "SCHEMA_CONFIG",
    "UI_CONFIG",
]
