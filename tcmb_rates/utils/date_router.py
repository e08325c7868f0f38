"""Map requested dates onto TCMB archive locators."""

from __future__ import annotations

from datetime import date, datetime

from tcmb_rates.errors import InvalidDateFormatError
from tcmb_rates.utils.tcmb import DATE_INPUT_FORMAT, LATEST_LOCATOR, TCMB_BASE_URL


def parse_date(value: str | date) -> date:
    """Parse a ``dd-mm-YYYY`` string into :class:`date`.

    Calendar-invalid input such as ``31-02-2024`` is rejected rather than
    rolled over into the following month.
    """

    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDateFormatError(value)
    try:
        return datetime.strptime(value.strip(), DATE_INPUT_FORMAT).date()
    except ValueError as exc:
        raise InvalidDateFormatError(value) from exc


def resolve_locator(requested: str | date | None = None) -> str:
    """Return the archive locator for ``requested`` or the latest table.

    TCMB files historical bulletins as ``YYYYmm/ddmmYYYY.xml``; the latest
    bulletin always lives at ``today.xml``.
    """

    if requested is None:
        return LATEST_LOCATOR
    day = parse_date(requested)
    year, month, dom = f"{day.year:04d}", f"{day.month:02d}", f"{day.day:02d}"
    return f"{year}{month}/{dom}{month}{year}"


def locator_url(locator: str, base_url: str = TCMB_BASE_URL) -> str:
    """Resolve a locator into the absolute XML URL."""

    return f"{base_url.rstrip('/')}/{locator}.xml"


__all__ = ["parse_date", "resolve_locator", "locator_url"]
