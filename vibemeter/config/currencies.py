"""
Currency Reference Data

Display symbols for the currencies offered in settings.
"""

BASE_CURRENCY = "USD"

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "AUD": "A$",
    "CAD": "C$",
    "CHF": "CHF ",
    "CNY": "¥",
    "SEK": "kr ",
    "NZD": "NZ$",
    "INR": "₹",
    "BRL": "R$",
    "KRW": "₩",
    "MXN": "MX$",
    "NOK": "kr ",
    "DKK": "kr ",
    "PLN": "zł ",
    "SGD": "S$",
    "HKD": "HK$",
    "ZAR": "R ",
}


def get_symbol(currency_code: str) -> str:
    """Symbol for a currency code, falling back to the code itself."""
    code = currency_code.upper()
    return CURRENCY_SYMBOLS.get(code, f"{code} ")
