# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-15
# Description: record_ids.py
# -----------------------------------------------------------------------------
from records.types import RecordKind


def format_record_id(kind: RecordKind, key: str) -> str:
    """
    Render a record id as "table:key", e.g. "person:jdoe".
    Keys that already carry the kind prefix are returned unchanged.
    """
    key = str(key).strip()
    if not key:
        raise ValueError("record key must not be empty")

    prefix = f"{kind.value}:"
    if key.startswith(prefix):
        return key
    return f"{prefix}{key}"

