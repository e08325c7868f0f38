"""requests-based downloader for TCMB daily exchange-rate bulletins."""

from __future__ import annotations

from typing import Optional

import requests

from tcmb_rates.errors import FetchFailedError
from tcmb_rates.utils.date_router import locator_url
from tcmb_rates.utils.logger import get_logger
from tcmb_rates.utils.tcmb import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, TCMB_BASE_URL

LOGGER = get_logger(__name__)


class TCMBRequestsClient:
    """Fetch TCMB XML bulletins over HTTP.

    A single attempt is made per locator; callers wanting retries should wrap
    the client themselves.
    """

    def __init__(
        self,
        *,
        base_url: str = TCMB_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "User-Agent": user_agent,
                "Accept": "application/xml,text/xml;q=0.9,*/*;q=0.8",
            }
        )

    def url_for(self, locator: str) -> str:
        return locator_url(locator, self.base_url)

    def fetch(self, locator: str) -> bytes:
        """Download the bulletin identified by ``locator``."""

        url = self.url_for(locator)
        LOGGER.info("Fetching TCMB rates from %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            LOGGER.warning("Request to %s failed: %s", url, exc)
            raise FetchFailedError(locator, url, str(exc)) from exc
        self._raise_with_context(response, locator, url)
        return response.content

    @staticmethod
    def _raise_with_context(response: requests.Response, locator: str, url: str) -> None:
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = response.status_code
            reason = f"HTTP {status}"
            if status == 404:
                reason += " (TCMB does not publish bulletins on weekends or public holidays)"
            LOGGER.warning("TCMB responded with %s for %s", reason, url)
            raise FetchFailedError(locator, url, reason) from exc

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "TCMBRequestsClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = ["TCMBRequestsClient"]
