from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

_REPO_ROOT = Path(__file__).resolve().parent.parent
_ENV_LOADED = False
_ENV_FILES = (
    _REPO_ROOT / ".env.local",
    _REPO_ROOT / ".env",
)

DEFAULT_BASE_URL = "https://app.getmainline.com"
DEFAULT_API_KEY_HEADER = "Api-Key"
DEFAULT_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _load_env_file(path: Path) -> None:
    """Best-effort `.env` loader that respects already-set variables."""
    if not path.exists():
        return
    try:
        content = path.read_text(encoding="utf-8")
    except OSError:
        return
    for raw in content.splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if (value.startswith('"') and value.endswith('"')) or (value.startswith("'") and value.endswith("'")):
            value = value[1:-1]
        if key and key not in os.environ:
            os.environ[key] = value


def load_environment() -> None:
    """Load environment files once, preferring explicitly exported values."""
    global _ENV_LOADED
    if _ENV_LOADED:
        return
    for candidate in _ENV_FILES:
        _load_env_file(candidate)
    _ENV_LOADED = True


def _get_env(*keys: str) -> Optional[str]:
    for key in keys:
        value = os.getenv(key)
        if value:
            return value
    return None


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        parsed = float(value)
    except ValueError:
        return None
    return parsed if parsed > 0 else None


@dataclass(frozen=True)
class Settings:
    mainline_api_key: Optional[str]
    mainline_base_url: str
    mainline_api_key_header: str
    request_timeout: float
    log_level: str


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached project settings sourced from env variables."""
    load_environment()

    mainline_api_key = _get_env("MAINLINE_API_KEY")
    mainline_base_url = (os.getenv("MAINLINE_BASE_URL") or DEFAULT_BASE_URL).rstrip("/")
    mainline_api_key_header = os.getenv("MAINLINE_API_KEY_HEADER") or DEFAULT_API_KEY_HEADER
    request_timeout = _optional_float(os.getenv("MAINLINE_TIMEOUT")) or DEFAULT_TIMEOUT
    log_level = (os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    if log_level not in LOG_LEVELS:
        log_level = DEFAULT_LOG_LEVEL

    return Settings(
        mainline_api_key=mainline_api_key,
        mainline_base_url=mainline_base_url,
        mainline_api_key_header=mainline_api_key_header,
        request_timeout=request_timeout,
        log_level=log_level,
    )


def secrets_from_settings(settings: Settings) -> Dict[str, str]:
    """Build the secret map handed to the keyword check."""
    secrets: Dict[str, str] = {}
    if settings.mainline_api_key:
        secrets["apiKey"] = settings.mainline_api_key
    return secrets


__all__ = ["Settings", "get_settings", "load_environment", "secrets_from_settings"]
