"""HTTP download of the product feed."""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable

import requests

LOGGER = logging.getLogger(__name__)

CHUNK_SIZE = 8192


def fetch_catalog(url: str, timeout: float) -> requests.Response:
    """GET the feed without buffering the body.

    Raises requests.HTTPError on a non-success status; the response is closed
    before raising.
    """
    resp = requests.get(url, timeout=timeout, stream=True)
    LOGGER.info(f"Fetched {url}, status {resp.status_code}")
    try:
        resp.raise_for_status()
    except requests.HTTPError:
        resp.close()
        raise
    return resp


def write_stream_to_file(chunks: Iterable[bytes], path: str | Path) -> int:
    """Copy raw chunks into path, truncating it first. Returns bytes written."""
    written = 0
    with open(path, "wb") as f:
        for chunk in chunks:
            if not chunk:
                continue
            f.write(chunk)
            written += len(chunk)
    return written


def save_response(resp: requests.Response, path: str | Path) -> int:
    try:
        written = write_stream_to_file(resp.iter_content(chunk_size=CHUNK_SIZE), path)
    finally:
        resp.close()
    LOGGER.info(f"Wrote {written} bytes to {path}")
    return written


__all__ = ["fetch_catalog", "write_stream_to_file", "save_response", "CHUNK_SIZE"]
