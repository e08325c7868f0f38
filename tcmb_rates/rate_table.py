"""Immutable in-memory view of a single TCMB bulletin."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, Iterable, Iterator, Mapping

from tcmb_rates.ingestion.models import RateClass, RateEntry
from tcmb_rates.utils.tcmb import DATE_OUTPUT_FORMAT

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    import pandas as pd


@dataclass(frozen=True)
class RateTable:
    """All currencies TCMB published for one bulletin.

    Instances are read-only once built; fetch a new bulletin to get new data.
    Lookups never raise for unknown codes, they return ``None`` instead.
    """

    entries: Mapping[str, RateEntry] = field(default_factory=dict)
    document_date: str | None = None
    requested_date: str | None = None
    bulletin_no: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def lookup(self, code: str) -> RateEntry | None:
        """Return the entry for ``code`` (case-insensitive) or ``None``."""

        if not isinstance(code, str):
            return None
        return self.entries.get(code.strip().upper())

    def selling_rate(self, code: str, rate_class: RateClass | str = RateClass.FOREX) -> float | None:
        entry = self.lookup(code)
        if entry is None:
            return None
        return entry.rate("selling", rate_class)

    def buying_rate(self, code: str, rate_class: RateClass | str = RateClass.FOREX) -> float | None:
        entry = self.lookup(code)
        if entry is None:
            return None
        return entry.rate("buying", rate_class)

    def selected_currencies(self, codes: Iterable[str]) -> Dict[str, RateEntry]:
        """Return the requested entries that exist, keyed by the code as given."""

        selected: Dict[str, RateEntry] = {}
        for code in codes:
            entry = self.lookup(code)
            if entry is not None:
                selected[code] = entry
        return selected

    def effective_date(self) -> str:
        """Return the bulletin date, the requested date, or today's date.

        The fallback to today is evaluated on every call and may not match the
        bulletin actually served (weekend tables carry over Friday's rates).
        """

        if self.document_date:
            return self.document_date
        if self.requested_date:
            return self.requested_date
        return date.today().strftime(DATE_OUTPUT_FORMAT)

    def codes(self) -> list[str]:
        return list(self.entries)

    def as_dict(self) -> Dict[str, Dict[str, Any]]:
        return {code: entry.as_dict() for code, entry in self.entries.items()}

    def to_frame(self) -> "pd.DataFrame":
        """Return the bulletin as a DataFrame indexed by currency code."""

        import pandas as pd

        columns = [
            "code",
            "name",
            "unit",
            "forex_buying",
            "forex_selling",
            "banknote_buying",
            "banknote_selling",
        ]
        rows = [{column: row[column] for column in columns} for row in self.as_dict().values()]
        return pd.DataFrame(rows, columns=columns).set_index("code")

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.lookup(code) is not None

    def __iter__(self) -> Iterator[RateEntry]:
        return iter(self.entries.values())


__all__ = ["RateTable"]
