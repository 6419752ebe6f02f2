from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    api_auth_mode: str
    api_auth_token: str | None
    api_debug_log: bool
    cors_origins: tuple[str, ...]


def load_settings() -> Settings:
    api_auth_mode = os.environ.get("API_AUTH_MODE", "none").strip().lower()
    api_auth_token = os.environ.get("API_AUTH_TOKEN")
    api_debug_log = os.environ.get("API_DEBUG_LOG", "false").lower() == "true"
    raw_origins = os.environ.get("CORS_ORIGINS", "")
    cors_origins = tuple(o.strip() for o in raw_origins.split(",") if o.strip())
    return Settings(
        api_auth_mode=api_auth_mode,
        api_auth_token=api_auth_token,
        api_debug_log=api_debug_log,
        cors_origins=cors_origins,
    )
