# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-14
# Updated: 2026-10-02
# Description: settings.py
# -----------------------------------------------------------------------------
import os
from typing import Dict


def _env(name: str, default: str = "") -> str:
    """Read env var safely and strip whitespace."""
    return (os.getenv(name) or default).strip()


def _env_int(name: str, default: int) -> int:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return int(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be an int, got {v!r}") from e


def _env_float(name: str, default: float) -> float:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return float(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be a float, got {v!r}") from e


def _env_bool(name: str, default: bool) -> bool:
    v = _env(name, "")
    if v == "":
        return default
    v = v.lower()
    if v in ("1", "true", "t", "yes", "y", "on"):
        return True
    if v in ("0", "false", "f", "no", "n", "off"):
        return False
    raise RuntimeError(f"Env var {name} must be a boolean, got {v!r}")


# -----------------------------------------------------------------------------
# Vector storage (one Chroma collection per record kind)
# -----------------------------------------------------------------------------
COLLECTIONS: Dict[str, str] = {
    "person": _env("SLATE_COLLECTION_PERSON", "person"),
    "organization": _env("SLATE_COLLECTION_ORGANIZATION", "organization"),
    "location": _env("SLATE_COLLECTION_LOCATION", "location"),
    "production": _env("SLATE_COLLECTION_PRODUCTION", "production"),
}


# -----------------------------------------------------------------------------
# Search path tuning (env-controlled)
# -----------------------------------------------------------------------------
# Seconds a single per-kind lookup may take before that kind is reported failed
LOOKUP_TIMEOUT_SECONDS = _env_float("SLATE_SEARCH_LOOKUP_TIMEOUT", 5.0)

# Threads per record kind for blocking store lookups (kept apart from the inference pool)
SEARCH_IO_WORKERS = _env_int("SLATE_SEARCH_IO_WORKERS", 2)

# Records embedded per model call on the indexing path
INDEX_BATCH_SIZE = _env_int("SLATE_INDEX_BATCH_SIZE", 32)


# -----------------------------------------------------------------------------
# Sanity checks (tunable)
# -----------------------------------------------------------------------------
for _kind, _name in COLLECTIONS.items():
    if not _name:
        raise RuntimeError(f"Collection name for '{_kind}' resolved to empty value")

if len(set(COLLECTIONS.values())) != len(COLLECTIONS):
    raise RuntimeError(f"Collection names must be distinct per kind, got {COLLECTIONS}")

if LOOKUP_TIMEOUT_SECONDS <= 0:
    raise RuntimeError("SLATE_SEARCH_LOOKUP_TIMEOUT must be > 0")

if SEARCH_IO_WORKERS < 1 or INDEX_BATCH_SIZE < 1:
    raise RuntimeError("SLATE_SEARCH_IO_WORKERS and SLATE_INDEX_BATCH_SIZE must be >= 1")
