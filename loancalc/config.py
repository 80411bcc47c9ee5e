"""Runtime configuration for the calculator service."""

import os
from typing import List


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class Config:
    CORS_ORIGINS: List[str] = _split_origins(
        os.environ.get(
            "LOANCALC_CORS_ORIGINS",
            "http://localhost:5173,http://127.0.0.1:5173",
        )
    )
    LOG_LEVEL: str = os.environ.get("LOANCALC_LOG_LEVEL", "INFO")
    DISPLAY_LOCALE: str = "pt-BR"
    TESTING: bool = False


class TestingConfig(Config):
    TESTING = True
    LOG_LEVEL = "DEBUG"
