"""
Environment configuration.

Values are read once at import time. A `.env` file at the project root is
loaded first (python-dotenv does not override variables already set).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=ROOT_DIR / ".env")


def _get_env(*keys: str, default: str = "") -> str:
    for key in keys:
        value = os.environ.get(key)
        if value is not None and value.strip() != "":
            return value.strip()
    return default


def _get_int(*keys: str, default: int) -> int:
    value = _get_env(*keys)
    if not value:
        return default
    return int(value)


# Airtable (catalog source). Credentials are opaque secrets.
AIRTABLE_API_KEY = _get_env("AIRTABLE_API_KEY")
AIRTABLE_BASE_ID = _get_env("AIRTABLE_BASE_ID")
AIRTABLE_TABLE = _get_env("AIRTABLE_TABLE", default="Vêtements")
AIRTABLE_VIEW = _get_env("AIRTABLE_VIEW", default="Grid view")
AIRTABLE_API_URL = _get_env("AIRTABLE_API_URL", default="https://api.airtable.com/v0")

# Upstash Redis (cart storage, catalog cache)
UPSTASH_REDIS_REST_URL = _get_env("UPSTASH_REDIS_REST_URL")
UPSTASH_REDIS_REST_TOKEN = _get_env("UPSTASH_REDIS_REST_TOKEN")

# Checkout handoff
WHATSAPP_PHONE = _get_env("WHATSAPP_PHONE", default="212696044246")
CURRENCY_LABEL = _get_env("CURRENCY_LABEL", default="DH")

# UI language for catalog defaults and the checkout message
STORE_LANGUAGE = _get_env("STORE_LANGUAGE", default="fr")

CATALOG_CACHE_TTL = _get_int("CATALOG_CACHE_TTL", default=60)

# Logging
LOG_LEVEL = _get_env("LOG_LEVEL", default="INFO").upper()
ON_VERCEL = _get_env("VERCEL") == "1"
