"""Public interface for the tcmb_rates package."""

from __future__ import annotations

from datetime import date as _date
from importlib import metadata as importlib_metadata
from typing import TYPE_CHECKING, Dict, Iterable

from tcmb_rates.conversion import ConversionEngine
from tcmb_rates.errors import (
    FetchFailedError,
    InvalidDateFormatError,
    ParseFailedError,
    RateUnavailableError,
    TCMBError,
)
from tcmb_rates.ingestion.models import RateClass, RateEntry
from tcmb_rates.ingestion.strategy import DocumentFetcher
from tcmb_rates.ingestion.tcmb_xml import TCMBXMLParser
from tcmb_rates.rate_table import RateTable
from tcmb_rates.utils.date_router import resolve_locator
from tcmb_rates.utils.logger import get_logger

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from tcmb_rates.ingestion.tcmb_requests import TCMBRequestsClient

__all__ = [
    "__version__",
    "TCMBExchangeRates",
    "load_rate_table",
    "ConversionEngine",
    "DocumentFetcher",
    "RateClass",
    "RateEntry",
    "RateTable",
    "TCMBXMLParser",
    "TCMBError",
    "InvalidDateFormatError",
    "FetchFailedError",
    "ParseFailedError",
    "RateUnavailableError",
]

try:
    __version__ = importlib_metadata.version("tcmb-rates")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"

LOGGER = get_logger(__name__)


def _default_fetcher() -> "TCMBRequestsClient":
    from tcmb_rates.ingestion.tcmb_requests import TCMBRequestsClient

    return TCMBRequestsClient()


def load_rate_table(
    date: str | _date | None = None,
    *,
    fetcher: DocumentFetcher | None = None,
    parser: TCMBXMLParser | None = None,
) -> RateTable:
    """Fetch and parse the bulletin for ``date`` (``dd-mm-YYYY``) or the latest one.

    Raises :class:`InvalidDateFormatError` before any network access when the
    date is malformed, :class:`FetchFailedError` when the download fails and
    :class:`ParseFailedError` when the document is not a valid bulletin.
    """

    locator = resolve_locator(date)
    if fetcher is None:
        with _default_fetcher() as client:
            content = client.fetch(locator)
    else:
        content = fetcher.fetch(locator)
    return (parser or TCMBXMLParser()).parse(content, requested_date=date)


class TCMBExchangeRates:
    """Package facade over a single TCMB bulletin.

    Construction fetches and parses the bulletin once. Failures at that stage
    are captured rather than raised: ``has_error()`` reports them and every
    query then returns an empty result. Per-query misses (unknown currency,
    unpublished rate) also return ``None`` so callers can tell "the table did
    not load" apart from "this lookup has no data".
    """

    __slots__ = ("table", "error", "_engine")

    def __init__(
        self,
        date: str | _date | None = None,
        *,
        fetcher: DocumentFetcher | None = None,
        parser: TCMBXMLParser | None = None,
    ) -> None:
        self.table: RateTable | None = None
        self.error: TCMBError | None = None
        self._engine: ConversionEngine | None = None
        try:
            self.table = load_rate_table(date, fetcher=fetcher, parser=parser)
        except (InvalidDateFormatError, FetchFailedError, ParseFailedError) as exc:
            LOGGER.warning("Unable to load TCMB rates: %s", exc)
            self.error = exc
        else:
            self._engine = ConversionEngine(self.table)

    def has_error(self) -> bool:
        return self.error is not None

    @property
    def error_message(self) -> str | None:
        return str(self.error) if self.error is not None else None

    def get_all_currencies(self) -> Dict[str, RateEntry]:
        if self.table is None:
            return {}
        return dict(self.table.entries)

    def get_currency(self, code: str) -> RateEntry | None:
        if self.table is None:
            return None
        return self.table.lookup(code)

    def get_selling_rate(self, code: str, rate_class: RateClass | str = RateClass.FOREX) -> float | None:
        if self.table is None:
            return None
        try:
            return self.table.selling_rate(code, rate_class)
        except ValueError:
            return None

    def get_buying_rate(self, code: str, rate_class: RateClass | str = RateClass.FOREX) -> float | None:
        if self.table is None:
            return None
        try:
            return self.table.buying_rate(code, rate_class)
        except ValueError:
            return None

    def convert(
        self,
        amount: float,
        from_code: str,
        to_code: str,
        rate_class: RateClass | str = RateClass.FOREX,
    ) -> float | None:
        """Convert ``amount`` or return ``None`` when a required rate is missing.

        Converting a currency into itself returns ``amount`` even when the
        bulletin failed to load.
        """

        if str(from_code).strip().upper() == str(to_code).strip().upper():
            return amount
        if self._engine is None:
            return None
        try:
            return self._engine.convert(amount, from_code, to_code, rate_class)
        except (RateUnavailableError, ValueError) as exc:
            LOGGER.debug("Conversion %s -> %s unavailable: %s", from_code, to_code, exc)
            return None

    def get_date(self) -> str | None:
        if self.table is None:
            return None
        return self.table.effective_date()

    def get_selected_currencies(self, codes: Iterable[str]) -> Dict[str, RateEntry]:
        if self.table is None:
            return {}
        return self.table.selected_currencies(codes)
