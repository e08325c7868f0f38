"""Exception hierarchy raised by the tcmb_rates package."""

from __future__ import annotations


class TCMBError(Exception):
    """Base class for every error raised by this package."""


class InvalidDateFormatError(TCMBError, ValueError):
    """Raised when a requested date is not a valid ``dd-mm-YYYY`` calendar date."""

    def __init__(self, value: object) -> None:
        super().__init__(
            f"Invalid date {value!r}. Expected format: day-month-year (e.g. 25-01-2023)"
        )
        self.value = value


class FetchFailedError(TCMBError, RuntimeError):
    """Raised when the rate document could not be downloaded."""

    def __init__(self, locator: str, url: str | None = None, reason: str | None = None) -> None:
        message = f"Unable to load TCMB rates for {locator!r}"
        if url:
            message += f" from {url}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.locator = locator
        self.url = url


class ParseFailedError(TCMBError, ValueError):
    """Raised when a downloaded document is not a well-formed TCMB rate table."""


class RateUnavailableError(TCMBError, LookupError):
    """Raised when a currency has no published rate for the requested side/class."""

    def __init__(self, code: str, side: str, rate_class: str) -> None:
        super().__init__(f"No {rate_class} {side} rate published for {code}")
        self.code = code
        self.side = side
        self.rate_class = rate_class


__all__ = [
    "TCMBError",
    "InvalidDateFormatError",
    "FetchFailedError",
    "ParseFailedError",
    "RateUnavailableError",
]
