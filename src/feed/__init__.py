"""Catalog feed download and run orchestration."""

from .config import Environment, FeedConfig  # noqa: F401
from .pipeline import RunResult, run  # noqa: F401

__all__ = ["Environment", "FeedConfig", "RunResult", "run"]
