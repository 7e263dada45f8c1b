"""Record counting for a persisted catalog."""

from __future__ import annotations
from pathlib import Path

from .loader import load_document, records_or_none


def count_records(path: str | Path) -> int:
    records = records_or_none(load_document(path), path)
    if records is None:
        return 0
    return len(records)
