"""
Application settings.

Values come from environment variables, optionally loaded from a .env file in
the car-sales-platform directory.

Environment variables (all optional):
- APP_NAME: Title shown in the OpenAPI docs
- LOG_LEVEL: Root log level (DEBUG, INFO, WARNING, ...)
- CORS_ORIGINS: Comma separated list of allowed origins ("*" for any)
- SEED_DEMO_SALES: "true" to fill the store with demo sales at startup
- DEMO_SALES_COUNT: Number of demo sales to generate
- HOST / PORT: Bind address when running `python -m api.main`
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True, slots=True)
class Settings:
    app_name: str = "Car Sales Platform API"
    log_level: str = "INFO"
    cors_origins: tuple = ("*",)
    seed_demo_sales: bool = False
    demo_sales_count: int = 20
    host: str = "0.0.0.0"
    port: int = 8000


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise RuntimeError(f"Invalid value for environment variable {name}: {raw!r} (expected true/false)")


def _get_int(name: str, default: int, minimum: Optional[int] = None) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"Invalid value for environment variable {name}: {raw!r} (expected an integer)") from None
    if minimum is not None and value < minimum:
        raise RuntimeError(f"Invalid value for environment variable {name}: must be >= {minimum}")
    return value


def _get_list(name: str, default: tuple) -> tuple:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    items: List[str] = [item.strip() for item in raw.split(",") if item.strip()]
    return tuple(items)


def load_settings() -> Settings:
    """Read settings from the environment, falling back to defaults."""

    defaults = Settings()

    log_level = os.getenv("LOG_LEVEL", defaults.log_level).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise RuntimeError(f"Invalid value for environment variable LOG_LEVEL: {log_level!r}")

    return Settings(
        app_name=os.getenv("APP_NAME", defaults.app_name),
        log_level=log_level,
        cors_origins=_get_list("CORS_ORIGINS", defaults.cors_origins),
        seed_demo_sales=_get_bool("SEED_DEMO_SALES", defaults.seed_demo_sales),
        demo_sales_count=_get_int("DEMO_SALES_COUNT", defaults.demo_sales_count, minimum=0),
        host=os.getenv("HOST", defaults.host),
        port=_get_int("PORT", defaults.port, minimum=1),
    )


__all__ = ["Settings", "load_settings"]
