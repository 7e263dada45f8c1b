"""Catalog document reading, counting & validation."""

from .counter import count_records  # noqa: F401
from .loader import load_document, UNEXPECTED_FORMAT  # noqa: F401
from .validator import (  # noqa: F401
    MAX_LONG_TEXT_LENGTH,
    OversizedRecord,
    ValidationReport,
    strip_inline_images,
    validate_catalog_file,
)

__all__ = [
    "count_records",
    "load_document",
    "UNEXPECTED_FORMAT",
    "MAX_LONG_TEXT_LENGTH",
    "OversizedRecord",
    "ValidationReport",
    "strip_inline_images",
    "validate_catalog_file",
]
