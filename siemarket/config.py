"""
Pricing constants and presentation configuration.

The discount rule is fixed: orders strictly above DISCOUNT_THRESHOLD get
DISCOUNT_RATE off. Every monetary result is rounded to CURRENCY_QUANTUM
with CURRENCY_ROUNDING (half away from zero).
"""

from decimal import Decimal, ROUND_HALF_UP

DISCOUNT_THRESHOLD = Decimal("500")
DISCOUNT_RATE = Decimal("0.10")

CURRENCY_QUANTUM = Decimal("0.01")
CURRENCY_ROUNDING = ROUND_HALF_UP


def create_currency_format_configuration(
    currency_symbol: str = "$",
    thousands_separator: str = ",",
    decimal_separator: str = ".",
) -> dict:
    """
    Get currency formatting configuration

    Args:
        currency_symbol: Symbol printed before the amount
        thousands_separator: Separator between groups of three digits
        decimal_separator: Separator before the cents

    Returns:
        Dictionary with currency format configuration
    """
    return {
        'currency_symbol': currency_symbol,
        'thousands_separator': thousands_separator,
        'decimal_separator': decimal_separator,
    }
