"""Command-line access to TCMB exchange rates."""

from __future__ import annotations

import argparse
from typing import Sequence

from tcmb_rates import TCMBExchangeRates
from tcmb_rates.ingestion.models import RateClass
from tcmb_rates.utils.logger import get_logger

LOGGER = get_logger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--date",
        dest="date",
        help="Bulletin date in dd-mm-YYYY format (defaults to the latest bulletin)",
    )
    parser.add_argument(
        "--currencies",
        dest="currencies",
        help="Comma separated currency codes to list, e.g. USD,EUR",
    )
    parser.add_argument(
        "--convert",
        dest="convert",
        nargs=3,
        metavar=("AMOUNT", "FROM", "TO"),
        help="Convert AMOUNT from one currency to another",
    )
    parser.add_argument(
        "--rate-class",
        dest="rate_class",
        choices=[member.value for member in RateClass],
        default=RateClass.FOREX.value,
        help="Quotation family used for rates and conversions",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    rates = TCMBExchangeRates(args.date)
    if rates.has_error():
        print(rates.error_message)
        return 1

    if args.convert:
        raw_amount, from_code, to_code = args.convert
        try:
            amount = float(raw_amount.replace(",", "."))
        except ValueError:
            print(f"Invalid amount: {raw_amount}")
            return 1
        result = rates.convert(amount, from_code, to_code, args.rate_class)
        if result is None:
            print(f"No {args.rate_class} rate available to convert {from_code} to {to_code}")
            return 1
        print(f"{amount:g} {from_code.upper()} = {result:.4f} {to_code.upper()} ({rates.get_date()})")
        return 0

    if rates.table is None:
        print("No TCMB rate table loaded")
        return 1
    frame = rates.table.to_frame()
    if args.currencies:
        codes = [code.strip() for code in args.currencies.split(",") if code.strip()]
        selected = rates.get_selected_currencies(codes)
        found = list(dict.fromkeys(entry.code for entry in selected.values()))
        frame = frame.loc[found]
    print(f"TCMB rates for {rates.get_date()}")
    print(frame.to_string())
    return 0


__all__ = ["main", "parse_args"]
