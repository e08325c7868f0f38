"""Parse TCMB ``today.xml``-style bulletins into :class:`RateTable` objects."""

from __future__ import annotations

from datetime import date
from typing import Any

from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup
from lxml import etree

from tcmb_rates.errors import ParseFailedError
from tcmb_rates.ingestion.models import RateEntry
from tcmb_rates.rate_table import RateTable
from tcmb_rates.utils.logger import get_logger
from tcmb_rates.utils.tcmb import DATE_INPUT_FORMAT

LOGGER = get_logger(__name__)

ROOT_ELEMENT = "Tarih_Date"
CURRENCY_ELEMENT = "Currency"


def parse_decimal(value: str | None) -> float | None:
    """Convert TCMB decimal text (``"34,5012"`` or ``"34.5012"``) into a float.

    Blank text means the figure was not published and yields ``None``.
    """

    if value is None:
        return None
    cleaned = value.strip()
    if not cleaned:
        return None
    try:
        return float(cleaned.replace(",", "."))
    except ValueError as exc:
        raise ParseFailedError(f"Invalid decimal value {value!r}") from exc


def _parse_unit(raw: str, code: str) -> int:
    try:
        unit = int(raw.strip())
    except ValueError as exc:
        raise ParseFailedError(f"Invalid or missing Unit for {code}: {raw!r}") from exc
    if unit <= 0:
        raise ParseFailedError(f"Unit for {code} must be positive, got {unit}")
    return unit


class TCMBXMLParser:
    """Convert raw TCMB XML documents into immutable rate tables."""

    def __init__(self, *, features: str = "xml") -> None:
        self.features = features

    def parse(
        self,
        content: bytes | str | None,
        *,
        requested_date: str | date | None = None,
    ) -> RateTable:
        root = self._load_root(content)
        entries: dict[str, RateEntry] = {}
        for element in root.find_all(CURRENCY_ELEMENT, recursive=False):
            entry = self._parse_currency(element)
            if entry.code in entries:
                raise ParseFailedError(f"Duplicate currency code {entry.code} in document")
            entries[entry.code] = entry
        LOGGER.debug("Parsed %s currencies from TCMB bulletin", len(entries))

        if isinstance(requested_date, date):
            requested_date = requested_date.strftime(DATE_INPUT_FORMAT)
        return RateTable(
            entries=entries,
            document_date=self._attribute(root, "Date"),
            requested_date=requested_date,
            bulletin_no=self._attribute(root, "Bulten_No"),
        )

    def _load_root(self, content: bytes | str | None) -> Tag:
        if content is None or not content.strip():
            raise ParseFailedError("Document is empty")
        self._check_well_formed(content)
        try:
            soup = BeautifulSoup(content, self.features)
        except (ParserRejectedMarkup, ValueError, TypeError) as exc:
            raise ParseFailedError(f"XML parsing error: {exc}") from exc
        root = next((child for child in soup.children if isinstance(child, Tag)), None)
        if root is None:
            raise ParseFailedError("XML parsing error: no root element found")
        if root.name != ROOT_ELEMENT and root.find(CURRENCY_ELEMENT, recursive=False) is None:
            raise ParseFailedError(f"Unexpected document root <{root.name}>")
        return root

    @staticmethod
    def _check_well_formed(content: bytes | str) -> None:
        """Reject truncated or malformed XML that the soup builder would recover from."""

        raw = content.encode("utf-8") if isinstance(content, str) else content
        parser = etree.XMLParser(recover=False, resolve_entities=False, no_network=True)
        try:
            etree.fromstring(raw, parser)
        except etree.XMLSyntaxError as exc:
            raise ParseFailedError(f"XML parsing error: {exc}") from exc

    def _parse_currency(self, element: Tag) -> RateEntry:
        code = self._attribute(element, "CurrencyCode") or self._attribute(element, "Kod") or ""
        code = code.upper()
        if not code:
            raise ParseFailedError("Currency element without CurrencyCode attribute")

        return RateEntry(
            code=code,
            name=self._child_text(element, "CurrencyName"),
            local_name=self._child_text(element, "Isim") or None,
            unit=_parse_unit(self._child_text(element, "Unit"), code),
            forex_buying=parse_decimal(self._child_text(element, "ForexBuying")),
            forex_selling=parse_decimal(self._child_text(element, "ForexSelling")),
            banknote_buying=parse_decimal(self._child_text(element, "BanknoteBuying")),
            banknote_selling=parse_decimal(self._child_text(element, "BanknoteSelling")),
            cross_rate_usd=self._child_text(element, "CrossRateUSD"),
            cross_rate_other=self._child_text(element, "CrossRateOther"),
        )

    @staticmethod
    def _child_text(element: Tag, name: str) -> str:
        child = element.find(name, recursive=False)
        if child is None:
            return ""
        return child.get_text(strip=True)

    @staticmethod
    def _attribute(element: Tag, name: str) -> str | None:
        value: Any = element.get(name)
        if value is None:
            return None
        return str(value).strip() or None


__all__ = ["TCMBXMLParser", "parse_decimal", "ROOT_ELEMENT", "CURRENCY_ELEMENT"]
