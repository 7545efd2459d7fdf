# -*- coding: utf-8 -*-
"""
Settings: environment variables with defaults.

Every path can be overridden one by one, or all at once through DATA_DIR.
"""
import os

from bilingual.errors import ConfigError


def _get(k, default=""):
    return os.environ.get(k) or default


def int_setting(name: str, default: int) -> int:
    raw = _get(name, str(default))
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ConfigError(f"{name} must not be negative, got {value}")
    return value


DATA_DIR = _get("DATA_DIR", "data")

GENEALOGY_EN_PATH = _get("GENEALOGY_EN_PATH", os.path.join(DATA_DIR, "genealogy-min.json"))
GENEALOGY_TE_PATH = _get("GENEALOGY_TE_PATH", os.path.join(DATA_DIR, "genealogy_telu-min.json"))
GENEALOGY_BILINGUAL_PATH = _get("GENEALOGY_BILINGUAL_PATH", os.path.join(DATA_DIR, "genealogy-bilingual.json"))
BOOK_DETAILS_PATH = _get("BOOK_DETAILS_PATH", os.path.join(DATA_DIR, "book-details.json"))

MERGE_POLICY = _get("MERGE_POLICY", "telugu-primary")
DISPLAY_LANGUAGE = _get("DISPLAY_LANGUAGE", "en")


def search_max_results() -> int:
    return int_setting("SEARCH_MAX_RESULTS", 0)


# bak | backup | timestamp, see utils.json_store
BACKUP_STYLE = _get("BACKUP_STYLE", "bak")
LOG_LEVEL = _get("LOG_LEVEL", "INFO").upper()
