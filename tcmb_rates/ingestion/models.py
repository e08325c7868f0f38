"""Data models shared across ingestion modules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Literal


class RateClass(str, Enum):
    """Quotation families published by TCMB."""

    FOREX = "forex"
    BANKNOTE = "banknote"

    @classmethod
    def parse(cls, value: "RateClass | str") -> "RateClass":
        """Normalise user input into a :class:`RateClass`."""

        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError("rate_class must be one of 'forex' or 'banknote'") from None


@dataclass(frozen=True, slots=True)
class RateEntry:
    """Representation of a single ``Currency`` element of a TCMB bulletin.

    Rates are quoted in TRY per ``unit`` units of the foreign currency. A rate
    of ``None`` means TCMB did not publish that figure, which is common for the
    banknote side of less traded currencies.
    """

    code: str
    name: str
    unit: int
    forex_buying: float | None = None
    forex_selling: float | None = None
    banknote_buying: float | None = None
    banknote_selling: float | None = None
    cross_rate_usd: str = ""
    cross_rate_other: str = ""
    local_name: str | None = None

    def rate(
        self,
        side: Literal["buying", "selling"],
        rate_class: RateClass | str = RateClass.FOREX,
    ) -> float | None:
        """Return the rate for ``side`` within ``rate_class``."""

        if side not in {"buying", "selling"}:
            raise ValueError("side must be one of 'buying' or 'selling'")
        resolved = RateClass.parse(rate_class)
        return getattr(self, f"{resolved.value}_{side}")

    def as_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "name": self.name,
            "forex_buying": self.forex_buying,
            "forex_selling": self.forex_selling,
            "banknote_buying": self.banknote_buying,
            "banknote_selling": self.banknote_selling,
            "unit": self.unit,
            "cross_rate": self.cross_rate_usd,
            "cross_rate_other": self.cross_rate_other,
        }


__all__ = ["RateClass", "RateEntry"]
