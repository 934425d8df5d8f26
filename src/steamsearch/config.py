"""Environment variable configuration for the storefront client.

Settings are loaded in priority order:
  1. Shell environment variables (highest priority)
  2. .env file in current directory
  3. ~/.steamsearch/.env (persistent config, set via `steamsearch env set`)

Every setting has a default pointing at the public Steam endpoints, so nothing
needs to be configured for normal use.

Run `steamsearch env` to see which settings are overridden.
Run `steamsearch env set KEY value` to save a setting persistently.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from steamsearch.errors import ConfigurationError

# Persistent config location
STEAMSEARCH_DIR = Path.home() / ".steamsearch"
PERSISTENT_ENV = STEAMSEARCH_DIR / ".env"

# Load in reverse priority order (later loads don't overwrite existing)
if PERSISTENT_ENV.exists():
    load_dotenv(PERSISTENT_ENV)

load_dotenv()


DEFAULT_SEARCH_URL = "https://steamcommunity.com/actions/SearchApps"
DEFAULT_DETAILS_URL = "https://store.steampowered.com/api/appdetails"
DEFAULT_REVIEWS_URL = "https://store.steampowered.com/appreviews"
STORE_APP_URL = "https://store.steampowered.com/app"

DEFAULT_TIMEOUT = 15

# Ambiguous matches list the first 21 candidate names (indices 0..20).
MAX_LISTED_MATCHES = 21


# --- Persistent config ---

def save_setting(name: str, value: str) -> Path:
    """Save a setting to ~/.steamsearch/.env for persistent use."""
    STEAMSEARCH_DIR.mkdir(parents=True, exist_ok=True)

    lines: list[str] = []
    replaced = False
    if PERSISTENT_ENV.exists():
        for line in PERSISTENT_ENV.read_text().splitlines():
            if line.startswith(f"{name}="):
                lines.append(f"{name}={value}")
                replaced = True
            else:
                lines.append(line)

    if not replaced:
        lines.append(f"{name}={value}")

    PERSISTENT_ENV.write_text("\n".join(lines) + "\n")

    # Also set in current process
    os.environ[name] = value

    return PERSISTENT_ENV


# --- Accessors ---

def _url(var: str, default: str) -> str:
    return (os.getenv(var) or default).rstrip("/")


def _positive_int(var: str, default: int) -> int:
    raw = os.getenv(var, "")
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{var} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ConfigurationError(f"{var} must be at least 1, got {value}")
    return value


def get_search_url() -> str:
    return _url("STEAMSEARCH_SEARCH_URL", DEFAULT_SEARCH_URL)


def get_details_url() -> str:
    return _url("STEAMSEARCH_DETAILS_URL", DEFAULT_DETAILS_URL)


def get_reviews_url() -> str:
    return _url("STEAMSEARCH_REVIEWS_URL", DEFAULT_REVIEWS_URL)


def get_timeout() -> int:
    """Per-request timeout in seconds."""
    return _positive_int("STEAMSEARCH_TIMEOUT", DEFAULT_TIMEOUT)


def get_max_listed_matches() -> int:
    return _positive_int("STEAMSEARCH_MAX_LISTED_MATCHES", MAX_LISTED_MATCHES)


# --- Status check ---

ENV_VARS = {
    "STEAMSEARCH_SEARCH_URL": {
        "default": DEFAULT_SEARCH_URL,
        "description": "App search endpoint (name -> candidate apps)",
    },
    "STEAMSEARCH_DETAILS_URL": {
        "default": DEFAULT_DETAILS_URL,
        "description": "App details endpoint (content descriptors, platforms, ...)",
    },
    "STEAMSEARCH_REVIEWS_URL": {
        "default": DEFAULT_REVIEWS_URL,
        "description": "App reviews endpoint (aggregate review statistics)",
    },
    "STEAMSEARCH_TIMEOUT": {
        "default": str(DEFAULT_TIMEOUT),
        "description": "Per-request timeout in seconds",
    },
    "STEAMSEARCH_MAX_LISTED_MATCHES": {
        "default": str(MAX_LISTED_MATCHES),
        "description": "How many candidate names an ambiguous match lists",
    },
}

VALID_KEYS = set(ENV_VARS)


def check_env() -> list[tuple[str, bool, dict]]:
    """Return list of (var_name, is_overridden, info) for all known settings."""
    result = []
    for var, info in ENV_VARS.items():
        is_set = bool(os.getenv(var))
        result.append((var, is_set, info))
    return result
