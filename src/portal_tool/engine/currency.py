"""
Currency helpers - symbol lookup, comparison and amount formatting.
"""
from types import MappingProxyType
from typing import Optional


# Display symbols keyed by upper-case ISO 4217 code.
# Codes missing here are displayed as the code itself.
CURRENCY_SYMBOLS = MappingProxyType({
    'USD': '$',
    'EUR': '€',
    'GBP': '£',
    'JPY': '¥',
    'CNY': 'CN¥',
    'INR': '₹',
    'AUD': 'A$',
    'CAD': 'CA$',
    'NZD': 'NZ$',
    'HKD': 'HK$',
    'SGD': 'SGD',
    'MXN': 'MX$',
    'BRL': 'R$',
    'KRW': '₩',
    'ILS': '₪',
    'VND': '₫',
    'TWD': 'NT$',
    'PHP': '₱',
    'THB': 'THB',
    'NGN': 'NGN',
    'CHF': 'CHF',
    'SEK': 'SEK',
    'NOK': 'NOK',
    'DKK': 'DKK',
    'PLN': 'PLN',
    'XAF': 'FCFA',
    'XOF': 'F CFA',
    'XCD': 'EC$',
})


def _code(currency) -> Optional[str]:
    """Currency codes that are not strings are treated as missing."""
    if isinstance(currency, str) and currency:
        return currency
    return None


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def get_currency_symbol(currency: Optional[str]) -> str:
    """Return the display symbol for a currency code, or the upper-cased code."""
    code = _code(currency)
    if code is None:
        return ""
    code = code.upper()
    return CURRENCY_SYMBOLS.get(code, code)


def is_same_currency(currency1: Optional[str], currency2: Optional[str]) -> bool:
    """Case-insensitive currency comparison."""
    code1, code2 = _code(currency1), _code(currency2)
    if code1 is None or code2 is None:
        return code1 is None and code2 is None
    return code1.lower() == code2.lower()


def format_number(amount) -> str:
    """
    Format a major-unit amount with thousands separators.

    Keeps at most two decimals and drops trailing zeros, so 5.0 -> "5"
    and 1234.5 -> "1,234.5".
    """
    if not _is_number(amount):
        return ""
    text = f"{float(amount):,.2f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def format_price(amount: Optional[int], currency: Optional[str]) -> str:
    """Format minor units as a display price, e.g. (550, "usd") -> "$5.5"."""
    if not _is_number(amount):
        return ""
    return f"{get_currency_symbol(currency)}{format_number(amount / 100)}"
