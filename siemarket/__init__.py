"""Order models and sales reporting."""

from .errors import EmptyInput, InvalidArgument, SieMarketError
from .models import LineItem, Order
from .aggregator import find_top_spender, get_customer_totals, get_product_popularity
from .utils import calculate_total, format_currency, format_order_summary, format_popularity

__all__ = [
    "EmptyInput",
    "InvalidArgument",
    "SieMarketError",
    "LineItem",
    "Order",
    "find_top_spender",
    "get_customer_totals",
    "get_product_popularity",
    "calculate_total",
    "format_currency",
    "format_order_summary",
    "format_popularity",
]
