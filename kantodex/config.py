"""Environment driven settings for the Pokédex service."""
from __future__ import annotations

import os
from typing import Optional

DEFAULT_POKEAPI_BASE_URL = "https://pokeapi.co/api/v2"
DEFAULT_POKEDEX_LIMIT = 999
DEFAULT_POKEAPI_TIMEOUT: Optional[float] = None


def _coerce_int(value: Optional[str], default: int) -> int:
    if value is None:
        return default
    try:
        parsed = int(str(value).strip() or default)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _coerce_float(value: Optional[str], default: Optional[float]) -> Optional[float]:
    if not value:
        return default
    cleaned = value.strip().lower()
    if cleaned.endswith("s"):
        cleaned = cleaned[:-1]
    try:
        parsed = float(cleaned)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _coerce_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    cleaned = value.strip().lower()
    if cleaned in {"1", "true", "yes", "on"}:
        return True
    if cleaned in {"0", "false", "no", "off"}:
        return False
    return default


def _normalize_base_url(raw: Optional[str]) -> str:
    if not raw:
        return DEFAULT_POKEAPI_BASE_URL
    cleaned = raw.strip()
    return cleaned.rstrip("/") or DEFAULT_POKEAPI_BASE_URL


POKEAPI_BASE_URL = _normalize_base_url(os.getenv("POKEAPI_BASE_URL"))
POKEDEX_LIMIT = _coerce_int(os.getenv("POKEDEX_LIMIT"), DEFAULT_POKEDEX_LIMIT)
POKEAPI_TIMEOUT = _coerce_float(os.getenv("POKEAPI_TIMEOUT"), DEFAULT_POKEAPI_TIMEOUT)
POKEDEX_LOAD_ON_STARTUP = _coerce_bool(os.getenv("POKEDEX_LOAD_ON_STARTUP"), True)
LOG_LEVEL = (os.getenv("LOG_LEVEL") or "INFO").strip().upper() or "INFO"

__all__ = [
    "POKEAPI_BASE_URL",
    "POKEDEX_LIMIT",
    "POKEAPI_TIMEOUT",
    "POKEDEX_LOAD_ON_STARTUP",
    "LOG_LEVEL",
]
