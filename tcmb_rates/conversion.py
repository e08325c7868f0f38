"""Currency conversion over a TCMB rate table, pivoting through TRY."""

from __future__ import annotations

from typing import Literal

from tcmb_rates.errors import RateUnavailableError
from tcmb_rates.ingestion.models import RateClass
from tcmb_rates.rate_table import RateTable
from tcmb_rates.utils.tcmb import REFERENCE_CURRENCY


def normalize_currency(code: str) -> str:
    """Normalize a currency code to canonical uppercase form."""

    if not code or not str(code).strip():
        raise ValueError("Currency code cannot be blank.")
    return str(code).strip().upper()


class ConversionEngine:
    """Convert amounts between currencies quoted in a single :class:`RateTable`.

    TCMB quotes every currency against TRY, so a foreign-to-foreign conversion
    sells the source currency for TRY and then buys the target currency with
    it. Buying and selling rates differ, so a round trip loses the spread.
    Rates are applied exactly as published, without scaling by ``unit``, and
    results are not rounded.
    """

    def __init__(self, table: RateTable, *, reference_currency: str = REFERENCE_CURRENCY) -> None:
        self.table = table
        self.reference_currency = normalize_currency(reference_currency)

    def convert(
        self,
        amount: float,
        from_code: str,
        to_code: str,
        rate_class: RateClass | str = RateClass.FOREX,
    ) -> float:
        source = normalize_currency(from_code)
        target = normalize_currency(to_code)

        # Identity holds even for currencies without a full set of rates.
        if source == target:
            return amount

        resolved = RateClass.parse(rate_class)

        if source == self.reference_currency:
            return amount / self._published_rate(target, "buying", resolved)

        if target == self.reference_currency:
            return amount * self._published_rate(source, "selling", resolved)

        amount_in_reference = amount * self._published_rate(source, "selling", resolved)
        return amount_in_reference / self._published_rate(target, "buying", resolved)

    def _published_rate(
        self, code: str, side: Literal["buying", "selling"], rate_class: RateClass
    ) -> float:
        """Return the published TRY rate for ``code``, quoted per its ``unit``."""

        entry = self.table.lookup(code)
        rate = entry.rate(side, rate_class) if entry is not None else None
        if entry is None or rate is None or rate == 0:
            raise RateUnavailableError(code, side, rate_class.value)
        return rate


__all__ = ["ConversionEngine", "normalize_currency"]
