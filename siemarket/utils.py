"""Utility functions."""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Iterable, Optional, Union

from .config import (
    CURRENCY_QUANTUM,
    CURRENCY_ROUNDING,
    DISCOUNT_RATE,
    create_currency_format_configuration,
)

if TYPE_CHECKING:
    from .models import LineItem, Order

SUMMARY_RULE = "-" * 45


def calculate_total(items: Iterable["LineItem"]) -> Decimal:
    """Calculate the sum of line item subtotals."""
    return sum((item.subtotal for item in items), Decimal("0"))


def round_currency(amount: Union[Decimal, int]) -> Decimal:
    """Round an amount to cents, half away from zero."""
    return Decimal(amount).quantize(CURRENCY_QUANTUM, rounding=CURRENCY_ROUNDING)


def format_currency(amount: Union[Decimal, int, float], currency_format: Optional[dict] = None) -> str:
    """Format amount as currency string."""
    if currency_format is None:
        currency_format = create_currency_format_configuration()
    if isinstance(amount, float):
        amount = Decimal(str(amount))
    rounded = round_currency(amount)
    digits = f"{abs(rounded):,.2f}".translate(str.maketrans({
        ',': currency_format['thousands_separator'],
        '.': currency_format['decimal_separator'],
    }))
    sign = "-" if rounded < 0 else ""
    return f"{sign}{currency_format['currency_symbol']}{digits}"


def format_order_date(order_date: datetime) -> str:
    """Format an order date as dd/mm/yyyy."""
    return order_date.strftime("%d/%m/%Y")


def format_order_summary(order: "Order", currency_format: Optional[dict] = None) -> str:
    """Render the printable summary block of an order."""
    def money(amount):
        return format_currency(amount, currency_format)

    lines = [
        f"Order #{order.order_id} | {format_order_date(order.order_date)}",
        f"Customer: {order.customer_name} ({order.customer_country})",
        SUMMARY_RULE,
    ]
    for item in order.items:
        lines.append(
            f"  {item.product_name:<20} x{item.quantity}  "
            f"{money(item.unit_price):>8}  = {money(item.subtotal):>9}"
        )
    lines.append(SUMMARY_RULE)
    lines.append(f"  {'Subtotal:':<30} {money(order.total_before_discount):>9}")
    if order.is_eligible_for_discount:
        label = f"Discount ({DISCOUNT_RATE * 100:.0f}%):"
        lines.append(f"  {label:<30} -{money(order.discount_amount):>8}")
    lines.append(f"  {'TOTAL:':<30} {money(order.total_after_discount):>9}")
    return "\n".join(lines)


def format_popularity(popularity: dict[str, int]) -> list[str]:
    """Render one line per product of a popularity ranking."""
    return [f"{product_name:<20} x{quantity} sold" for product_name, quantity in popularity.items()]

