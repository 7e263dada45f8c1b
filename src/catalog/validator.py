"""Length validation for the catalog's long-text field."""

from __future__ import annotations
import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .loader import load_document, records_or_none

LOGGER = logging.getLogger(__name__)

MAX_LONG_TEXT_LENGTH = 60000
LONG_TEXT_FIELD = "l_description"

# <img ... src="data:image/...;base64,..." ...>
_ATTR = r"""(?:[^>"']|"[^"]*"|'[^']*')"""
RE_INLINE_IMAGE = re.compile(
    rf"""<img\b{_ATTR}*?\bsrc\s*=\s*["']data:image[^"']*["']{_ATTR}*>""", re.IGNORECASE
)


@dataclass
class OversizedRecord:
    product_id: str
    product_name: str
    length: int
    filtered_length: Optional[int] = None

    @property
    def key(self) -> str:
        return f"{self.product_id};{self.product_name}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "product_id": self.product_id,
            "product_name": self.product_name,
            "length": self.length,
            "filtered_length": self.filtered_length,
        }


@dataclass
class ValidationReport:
    max_length: int = MAX_LONG_TEXT_LENGTH
    scanned: int = 0
    skipped: int = 0
    oversized: List[OversizedRecord] = field(default_factory=list)

    @property
    def keys(self) -> List[str]:
        return [r.key for r in self.oversized]

    def __len__(self) -> int:
        return len(self.oversized)


def strip_inline_images(text: str) -> str:
    """Remove <img> tags whose src is an inline data:image URI."""
    return RE_INLINE_IMAGE.sub("", text)


def text_length(value: Any) -> int:
    """Length of a field value; missing/null counts as empty, non-strings by their JSON text."""
    if value is None:
        return 0
    if isinstance(value, str):
        return len(value)
    return len(json.dumps(value, ensure_ascii=False))


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


def check_record(
    entry: Dict[str, Any],
    max_length: int = MAX_LONG_TEXT_LENGTH,
    field_name: str = LONG_TEXT_FIELD,
    strip_images: bool = False,
) -> Optional[OversizedRecord]:
    value = entry.get(field_name)
    length = text_length(value)
    if length <= max_length:
        return None
    filtered_length = None
    if strip_images and isinstance(value, str):
        filtered_length = len(strip_inline_images(value))
        if filtered_length <= max_length:
            return None
    return OversizedRecord(
        product_id=_as_text(entry.get("product_id")),
        product_name=_as_text(entry.get("product_name")),
        length=length,
        filtered_length=filtered_length,
    )


def validate_records(
    records: List[Any],
    max_length: int = MAX_LONG_TEXT_LENGTH,
    field_name: str = LONG_TEXT_FIELD,
    strip_images: bool = False,
) -> ValidationReport:
    report = ValidationReport(max_length=max_length)
    for idx, entry in enumerate(records):
        if not isinstance(entry, dict):
            LOGGER.warning(f"Record at index {idx} is not an object, skipping")
            report.skipped += 1
            continue
        report.scanned += 1
        hit = check_record(entry, max_length, field_name, strip_images)
        if hit is not None:
            report.oversized.append(hit)
    return report


def validate_catalog_file(
    path: str | Path,
    max_length: int = MAX_LONG_TEXT_LENGTH,
    field_name: str = LONG_TEXT_FIELD,
    strip_images: bool = False,
) -> ValidationReport:
    records = records_or_none(load_document(path), path)
    if records is None:
        return ValidationReport(max_length=max_length)
    report = validate_records(records, max_length, field_name, strip_images)
    LOGGER.info(
        f"Checked '{field_name}' on {report.scanned} records: {len(report)} over {max_length} characters"
    )
    return report


__all__ = [
    "MAX_LONG_TEXT_LENGTH",
    "LONG_TEXT_FIELD",
    "OversizedRecord",
    "ValidationReport",
    "strip_inline_images",
    "text_length",
    "check_record",
    "validate_records",
    "validate_catalog_file",
]
