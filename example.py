from tcmb_rates import TCMBExchangeRates, __version__

print(__version__)  # 0.1.0

# Latest bulletin
rates = TCMBExchangeRates()
if rates.has_error():
    raise SystemExit(rates.error_message)

print(rates.get_date())
print(rates.get_currency("USD"))
print(rates.get_selling_rate("EUR"))
print(rates.get_buying_rate("GBP", "banknote"))

# 100 USD -> EUR, triangulated through TRY
print(rates.convert(100, "USD", "EUR"))

# Subset of currencies; unknown codes are skipped
print(rates.get_selected_currencies(["USD", "EUR", "GBP", "ZZZ"]))

# Historical bulletin (dd-mm-YYYY)
historical = TCMBExchangeRates("25-01-2023")
print(historical.get_date(), historical.get_selling_rate("USD"))

# The whole table as a DataFrame
print(rates.table.to_frame())
