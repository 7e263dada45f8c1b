"""
Catalog feed configuration and settings.
"""

import os
from enum import Enum
from typing import Optional


class Environment(Enum):
    """Catalog endpoints, one per deployment."""

    STAGE = "stage"
    PRODUCTION = "production"

    @property
    def url(self) -> str:
        return ENDPOINTS[self]

    @classmethod
    def parse(cls, value) -> "Environment":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(e.value for e in cls)
            raise ValueError(f"Unknown environment '{value}' (expected one of: {choices})") from None


ENDPOINTS = {
    Environment.STAGE: "https://marais-stage.com/line_shopping/product_full",
    Environment.PRODUCTION: "https://www.storemarais.com/line_shopping/product_full",
}

DEFAULT_OUTPUT_PATH = "result.json"
DEFAULT_TIMEOUT_SECONDS = 600
DEFAULT_MAX_LENGTH = 60000
DEFAULT_LONG_TEXT_FIELD = "l_description"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _to_bool(value, key: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {key}: {value!r}")


class FeedConfig:
    """Configuration for one fetch/count/validate run."""

    def __init__(
        self,
        environment="stage",
        url: Optional[str] = None,
        output_path: str = DEFAULT_OUTPUT_PATH,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        skip_fetch_if_exists: bool = False,
        strip_inline_images: bool = False,
        max_length: int = DEFAULT_MAX_LENGTH,
        long_text_field: str = DEFAULT_LONG_TEXT_FIELD,
    ):
        self.environment = Environment.parse(environment)
        self.url_override = url or None
        self.output_path = str(output_path)
        self.timeout_seconds = float(timeout_seconds)
        self.skip_fetch_if_exists = skip_fetch_if_exists
        self.strip_inline_images = strip_inline_images
        self.max_length = int(max_length)
        self.long_text_field = long_text_field
        self.validate()

    def validate(self) -> "FeedConfig":
        """Raise ValueError for out-of-range settings; returns self."""
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        if self.max_length < 0:
            raise ValueError("max_length must not be negative")
        if not self.long_text_field:
            raise ValueError("long_text_field must not be empty")
        return self

    @property
    def url(self) -> str:
        return self.url_override or self.environment.url

    @classmethod
    def from_env(cls) -> "FeedConfig":
        """Create config from environment variables."""
        return cls(
            environment=os.getenv("CATALOG_ENV", "stage"),
            url=os.getenv("CATALOG_URL"),
            output_path=os.getenv("CATALOG_OUTPUT", DEFAULT_OUTPUT_PATH),
            timeout_seconds=float(os.getenv("CATALOG_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS))),
            skip_fetch_if_exists=_to_bool(
                os.getenv("CATALOG_SKIP_EXISTING", "false"), "CATALOG_SKIP_EXISTING"
            ),
            strip_inline_images=_to_bool(
                os.getenv("CATALOG_STRIP_IMAGES", "false"), "CATALOG_STRIP_IMAGES"
            ),
            max_length=int(os.getenv("CATALOG_MAX_LENGTH", str(DEFAULT_MAX_LENGTH))),
            long_text_field=os.getenv("CATALOG_TEXT_FIELD", DEFAULT_LONG_TEXT_FIELD),
        )

    @classmethod
    def from_config_file(cls, config_path: str = "catalog.conf") -> "FeedConfig":
        """Create config from configuration file."""
        config = {}
        if os.path.exists(config_path):
            with open(config_path, "r", encoding="utf-8") as f:
                for line in f:
                    line = line.strip()
                    if line and not line.startswith("#"):
                        key, value = line.split("=", 1)
                        config[key.strip()] = value.strip()

        return cls(
            environment=config.get("environment", "stage"),
            url=config.get("url"),
            output_path=config.get("output_path", DEFAULT_OUTPUT_PATH),
            timeout_seconds=float(config.get("timeout_seconds", str(DEFAULT_TIMEOUT_SECONDS))),
            skip_fetch_if_exists=_to_bool(
                config.get("skip_fetch_if_exists", "false"), "skip_fetch_if_exists"
            ),
            strip_inline_images=_to_bool(
                config.get("strip_inline_images", "false"), "strip_inline_images"
            ),
            max_length=int(config.get("max_length", str(DEFAULT_MAX_LENGTH))),
            long_text_field=config.get("long_text_field", DEFAULT_LONG_TEXT_FIELD),
        )

    def __repr__(self) -> str:
        return (
            f"FeedConfig(environment={self.environment.value!r}, url={self.url!r}, "
            f"output_path={self.output_path!r}, skip_fetch_if_exists={self.skip_fetch_if_exists}, "
            f"strip_inline_images={self.strip_inline_images}, max_length={self.max_length})"
        )
