"""Client configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path


DEFAULT_HOST = "api.youtu.qq.com"
DEFAULT_TIMEOUT = 5.0


def _load_env_file(path: str | Path = ".env") -> None:
    """Export ``KEY=value`` lines from a local env file without overriding the environment."""

    env_path = Path(path)
    if not env_path.is_file():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        key, sep, value = raw_line.strip().partition("=")
        if not sep or key.startswith("#"):
            continue
        os.environ.setdefault(key.strip(), value.strip().strip("\"'"))


@dataclass(frozen=True, slots=True)
class Settings:
    """Youtu credentials and transport settings."""

    app_id: int = 0
    secret_id: str = ""
    secret_key: str = field(default="", repr=False)
    expired: int = 0
    user_id: str = ""

    host: str = DEFAULT_HOST
    request_timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"


def _build_settings() -> Settings:
    _load_env_file()

    return Settings(
        app_id=int(os.getenv("YOUTU_APP_ID", "0")),
        secret_id=os.getenv("YOUTU_SECRET_ID", ""),
        secret_key=os.getenv("YOUTU_SECRET_KEY", ""),
        expired=int(os.getenv("YOUTU_EXPIRED", "0")),
        user_id=os.getenv("YOUTU_USER_ID", ""),
        host=os.getenv("YOUTU_HOST", DEFAULT_HOST),
        request_timeout=float(os.getenv("YOUTU_REQUEST_TIMEOUT", str(DEFAULT_TIMEOUT))),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance to avoid re-reading configuration."""

    return _build_settings()
