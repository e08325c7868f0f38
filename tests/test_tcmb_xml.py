from __future__ import annotations

from datetime import date

import pytest

from tcmb_rates.errors import ParseFailedError
from tcmb_rates.ingestion.tcmb_xml import TCMBXMLParser, parse_decimal


def _document(currency_body: str, root_attrs: str = 'Date="03/15/2024"') -> bytes:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f"<Tarih_Date {root_attrs}>{currency_body}</Tarih_Date>"
    ).encode("utf-8")


def test_parse_extracts_every_currency(sample_xml: str) -> None:
    table = TCMBXMLParser().parse(sample_xml.encode("utf-8"))

    assert table.codes() == ["USD", "EUR", "JPY", "XDR"]
    assert table.document_date == "03/15/2024"
    assert table.bulletin_no == "2024/53"

    usd = table.lookup("USD")
    assert usd is not None
    assert usd.name == "US DOLLAR"
    assert usd.local_name == "ABD DOLARI"
    assert (usd.forex_buying, usd.forex_selling) == (32.0, 32.2)
    assert (usd.banknote_buying, usd.banknote_selling) == (31.9, 32.3)
    assert usd.unit == 1

    jpy = table.lookup("JPY")
    assert jpy is not None
    assert jpy.unit == 100
    assert jpy.cross_rate_usd == "148.90"


def test_parse_accepts_comma_decimals(sample_xml: str) -> None:
    table = TCMBXMLParser().parse(sample_xml)

    eur = table.lookup("EUR")
    assert eur is not None
    assert eur.forex_buying == pytest.approx(35.0)
    assert eur.banknote_selling == pytest.approx(35.3)
    assert eur.cross_rate_other == "1.0930"


def test_empty_fields_are_absent_not_zero(sample_xml: str) -> None:
    table = TCMBXMLParser().parse(sample_xml)

    xdr = table.lookup("XDR")
    assert xdr is not None
    assert xdr.forex_buying is None
    assert xdr.banknote_buying is None
    assert xdr.banknote_selling is None
    assert xdr.forex_selling == 42.7


def test_currency_code_is_uppercased_and_falls_back_to_kod() -> None:
    content = _document(
        '<Currency CurrencyCode="usd"><Unit>1</Unit><ForexBuying>1</ForexBuying></Currency>'
        '<Currency Kod="gbp"><Unit>1</Unit><ForexBuying>2</ForexBuying></Currency>'
    )

    table = TCMBXMLParser().parse(content)

    assert table.codes() == ["USD", "GBP"]


def test_requested_date_is_kept() -> None:
    content = _document('<Currency CurrencyCode="USD"><Unit>1</Unit></Currency>', root_attrs="")

    table = TCMBXMLParser().parse(content, requested_date="05-03-2024")
    assert table.document_date is None
    assert table.requested_date == "05-03-2024"

    table = TCMBXMLParser().parse(content, requested_date=date(2024, 3, 5))
    assert table.requested_date == "05-03-2024"


@pytest.mark.parametrize("content", [None, b"", b"   ", "   "])
def test_empty_document_fails(content) -> None:
    with pytest.raises(ParseFailedError, match="empty"):
        TCMBXMLParser().parse(content)


def test_unexpected_root_fails() -> None:
    html = b"<html><body><h1>Bakim calismasi</h1></body></html>"

    with pytest.raises(ParseFailedError, match="Unexpected document root"):
        TCMBXMLParser().parse(html)


def test_plain_text_fails() -> None:
    with pytest.raises(ParseFailedError):
        TCMBXMLParser().parse(b"this is not xml at all")


@pytest.mark.parametrize("unit", ["", "abc", "0", "-1"])
def test_invalid_unit_fails(unit: str) -> None:
    content = _document(f'<Currency CurrencyCode="USD"><Unit>{unit}</Unit></Currency>')

    with pytest.raises(ParseFailedError, match="Unit"):
        TCMBXMLParser().parse(content)


def test_missing_unit_element_fails() -> None:
    content = _document('<Currency CurrencyCode="USD"><ForexBuying>1</ForexBuying></Currency>')

    with pytest.raises(ParseFailedError, match="Unit"):
        TCMBXMLParser().parse(content)


def test_duplicate_codes_fail() -> None:
    content = _document(
        '<Currency CurrencyCode="USD"><Unit>1</Unit></Currency>'
        '<Currency CurrencyCode="usd"><Unit>1</Unit></Currency>'
    )

    with pytest.raises(ParseFailedError, match="Duplicate"):
        TCMBXMLParser().parse(content)


def test_missing_currency_code_fails() -> None:
    content = _document("<Currency><Unit>1</Unit></Currency>")

    with pytest.raises(ParseFailedError, match="CurrencyCode"):
        TCMBXMLParser().parse(content)


def test_non_numeric_rate_fails() -> None:
    content = _document(
        '<Currency CurrencyCode="USD"><Unit>1</Unit><ForexBuying>n/a</ForexBuying></Currency>'
    )

    with pytest.raises(ParseFailedError, match="decimal"):
        TCMBXMLParser().parse(content)


def test_parse_decimal() -> None:
    assert parse_decimal("34,5012") == pytest.approx(34.5012)
    assert parse_decimal(" 34.5012 ") == pytest.approx(34.5012)
    assert parse_decimal("") is None
    assert parse_decimal(None) is None
    assert parse_decimal("0") == 0.0


def test_truncated_document_fails() -> None:
    content = (
        b'<?xml version="1.0" encoding="UTF-8"?>'
        b'<Tarih_Date Date="03/15/2024">'
        b'<Currency CurrencyCode="USD"><Unit>1</Unit><ForexBuying>32.0</ForexBuying></Currency>'
        b'<Currency CurrencyCode="EUR"><Unit>1</Unit><ForexBuy'
    )

    with pytest.raises(ParseFailedError, match="XML parsing error"):
        TCMBXMLParser().parse(content)


def test_mismatched_tags_fail() -> None:
    content = _document('<Currency CurrencyCode="USD"><Unit>1</Currency></Unit>')

    with pytest.raises(ParseFailedError, match="XML parsing error"):
        TCMBXMLParser().parse(content)
