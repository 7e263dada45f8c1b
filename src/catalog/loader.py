"""Load the persisted catalog document."""

from __future__ import annotations
import json
from pathlib import Path
from typing import Any, List, Optional
import logging

LOGGER = logging.getLogger(__name__)

UNEXPECTED_FORMAT = "Unexpected JSON format: root is not an array"


def load_document(path: str | Path) -> Any:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"catalog json not found: {p}")
    # utf-8-sig: feeds may start with a BOM. Trailing commas are rejected by json.
    with p.open("r", encoding="utf-8-sig") as f:
        data = json.load(f)
    return data


def records_or_none(data: Any, path: str | Path) -> Optional[List[Any]]:
    """Return the record array, or None (with a warning) for any other root."""
    if isinstance(data, list):
        return data
    LOGGER.warning(f"{UNEXPECTED_FORMAT} ({path}: {type(data).__name__})")
    return None


__all__ = ["load_document", "records_or_none", "UNEXPECTED_FORMAT"]
