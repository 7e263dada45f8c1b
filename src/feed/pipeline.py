"""Fetch → persist → count → validate, once per run."""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from catalog import count_records, validate_catalog_file
from catalog.report import export_report_csv, print_report
from catalog.validator import ValidationReport
from utils import elapsed_ms

from .client import fetch_catalog, save_response
from .config import FeedConfig

LOGGER = logging.getLogger(__name__)


@dataclass
class RunResult:
    fetch_skipped: bool = False
    bytes_written: int = 0
    record_count: Optional[int] = None
    report: Optional[ValidationReport] = None
    error: Optional[str] = None
    elapsed_ms: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None


def download(config: FeedConfig) -> int:
    """Fetch the feed and write it to config.output_path. Returns bytes written."""
    LOGGER.info(f"Calling {config.environment.value} catalog API: {config.url}")
    resp = fetch_catalog(config.url, config.timeout_seconds)
    LOGGER.info(f"Catalog fetched, writing {config.output_path}...")
    return save_response(resp, config.output_path)


def validate(config: FeedConfig, report_csv=None) -> ValidationReport:
    report = validate_catalog_file(
        config.output_path,
        max_length=config.max_length,
        field_name=config.long_text_field,
        strip_images=config.strip_inline_images,
    )
    print_report(report, config.long_text_field)
    if report_csv:
        rows = export_report_csv(report, report_csv)
        LOGGER.info(f"Exported {rows} oversized records to {report_csv}")
    return report


def run(config: FeedConfig, report_csv=None) -> RunResult:
    result = RunResult()
    started = time.perf_counter()
    try:
        if config.skip_fetch_if_exists and Path(config.output_path).exists():
            LOGGER.info(f"{config.output_path} already exists, skipping download")
            result.fetch_skipped = True
        else:
            result.bytes_written = download(config)
            LOGGER.info("File written, counting records...")
            result.record_count = count_records(config.output_path)
            LOGGER.info(f"Records in file: {result.record_count}")
        result.report = validate(config, report_csv)
    except Exception as e:
        result.error = str(e)
        LOGGER.error(f"Error: {e}")
    finally:
        result.elapsed_ms = elapsed_ms(started)
        LOGGER.info(f"Elapsed time: {result.elapsed_ms} ms")
    return result
