from __future__ import annotations

import pytest

from tcmb_rates.errors import FetchFailedError

SAMPLE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<?xml-stylesheet type="text/xsl" href="isokur.xsl"?>
<Tarih_Date Tarih="15.03.2024" Date="03/15/2024" Bulten_No="2024/53">
    <Currency CrossOrder="0" Kod="USD" CurrencyCode="USD">
        <Unit>1</Unit>
        <Isim>ABD DOLARI</Isim>
        <CurrencyName>US DOLLAR</CurrencyName>
        <ForexBuying>32.0000</ForexBuying>
        <ForexSelling>32.2000</ForexSelling>
        <BanknoteBuying>31.9000</BanknoteBuying>
        <BanknoteSelling>32.3000</BanknoteSelling>
        <CrossRateUSD/>
        <CrossRateOther/>
    </Currency>
    <Currency CrossOrder="9" Kod="EUR" CurrencyCode="EUR">
        <Unit>1</Unit>
        <Isim>EURO</Isim>
        <CurrencyName>EURO</CurrencyName>
        <ForexBuying>35,0000</ForexBuying>
        <ForexSelling>35,2000</ForexSelling>
        <BanknoteBuying>34,9000</BanknoteBuying>
        <BanknoteSelling>35,3000</BanknoteSelling>
        <CrossRateUSD/>
        <CrossRateOther>1.0930</CrossRateOther>
    </Currency>
    <Currency CrossOrder="12" Kod="JPY" CurrencyCode="JPY">
        <Unit>100</Unit>
        <Isim>JAPON YENI</Isim>
        <CurrencyName>JAPENESE YEN</CurrencyName>
        <ForexBuying>21.5000</ForexBuying>
        <ForexSelling>21.6500</ForexSelling>
        <BanknoteBuying>21.4000</BanknoteBuying>
        <BanknoteSelling>21.7500</BanknoteSelling>
        <CrossRateUSD>148.90</CrossRateUSD>
        <CrossRateOther/>
    </Currency>
    <Currency CrossOrder="18" Kod="XDR" CurrencyCode="XDR">
        <Unit>1</Unit>
        <Isim>OZEL CEKME HAKKI (SDR)</Isim>
        <CurrencyName>SPECIAL DRAWING RIGHT (SDR)</CurrencyName>
        <ForexBuying></ForexBuying>
        <ForexSelling>42.7000</ForexSelling>
        <BanknoteBuying/>
        <BanknoteSelling/>
        <CrossRateUSD>1.3345</CrossRateUSD>
        <CrossRateOther/>
    </Currency>
</Tarih_Date>
"""


class FakeFetcher:
    """In-memory DocumentFetcher recording every locator it was asked for."""

    def __init__(self, content: bytes | str | None = SAMPLE_XML, *, fail: bool = False) -> None:
        self.content = content
        self.fail = fail
        self.locators: list[str] = []

    def fetch(self, locator: str) -> bytes:
        self.locators.append(locator)
        if self.fail:
            raise FetchFailedError(locator, f"https://example.test/{locator}.xml", "HTTP 404")
        if isinstance(self.content, str):
            return self.content.encode("utf-8")
        return self.content  # type: ignore[return-value]


@pytest.fixture
def sample_xml() -> str:
    return SAMPLE_XML


@pytest.fixture
def fake_fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture
def rate_table():
    from tcmb_rates.ingestion.tcmb_xml import TCMBXMLParser

    return TCMBXMLParser().parse(SAMPLE_XML.encode("utf-8"))


@pytest.fixture
def fetcher_cls() -> type[FakeFetcher]:
    return FakeFetcher
