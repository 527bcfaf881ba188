import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv

APP_TITLE = "String Analyzer Service"
APP_DESCRIPTION = "Analyze strings and store their computed properties in memory"
APP_VERSION = "1.0.0"


class Settings:
    """Runtime configuration read from the environment"""

    def __init__(self, env_source: str = "environment"):
        self.env_source = env_source
        self.host = os.getenv("HOST", "0.0.0.0")
        self.port = int(os.getenv("PORT", 8000))
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.cors_origins = _split_origins(os.getenv("CORS_ORIGINS", "*"))


def _split_origins(raw: str) -> List[str]:
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


@lru_cache()
def get_settings() -> Settings:
    # Load environment variables only for local development
    if os.path.exists(".env"):
        load_dotenv()
        return Settings(env_source=".env file (local development)")
    return Settings(env_source="environment (production)")
