"""Abstractions for pluggable document fetchers."""

from __future__ import annotations

from typing import Protocol


class DocumentFetcher(Protocol):
    """Contract for retrieving raw TCMB bulletins.

    Implementations receive a locator produced by
    :func:`tcmb_rates.utils.date_router.resolve_locator` and return the raw
    document bytes. Transport failures must surface as
    :class:`tcmb_rates.errors.FetchFailedError`; timeouts, headers and any
    retry behaviour are the implementation's own concern.
    """

    def fetch(self, locator: str) -> bytes:
        ...  # pragma: no cover - protocol definition


__all__ = ["DocumentFetcher"]
