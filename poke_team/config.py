"""Environment-driven settings for the PokeAPI client and services."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load default .env first, then overlay .env.local so user-specific values win.
load_dotenv()
load_dotenv(".env.local", override=True)

DEFAULT_BASE_URL = "https://pokeapi.co/api/v2"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    timeout: int = 10
    cache_ttl: int = 600
    max_workers: int = 4
    user_agent: str = "poke-team/0.1 (+https://github.com/)"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            base_url=os.getenv("POKEAPI_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            timeout=_env_int("POKEAPI_TIMEOUT", 10),
            cache_ttl=_env_int("POKEAPI_CACHE_TTL", 600),
            max_workers=max(1, _env_int("POKE_TEAM_MAX_WORKERS", 4)),
        )
