"""TCMB-specific constants shared across the package."""

from __future__ import annotations

from typing import Final

TCMB_BASE_URL: Final[str] = "https://www.tcmb.gov.tr/kurlar"
LATEST_LOCATOR: Final[str] = "today"
REFERENCE_CURRENCY: Final[str] = "TRY"

DEFAULT_TIMEOUT: Final[int] = 10
DEFAULT_USER_AGENT: Final[str] = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

DATE_INPUT_FORMAT: Final[str] = "%d-%m-%Y"
DATE_OUTPUT_FORMAT: Final[str] = "%d.%m.%Y"


__all__ = [
    "TCMB_BASE_URL",
    "LATEST_LOCATOR",
    "REFERENCE_CURRENCY",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "DATE_INPUT_FORMAT",
    "DATE_OUTPUT_FORMAT",
]
