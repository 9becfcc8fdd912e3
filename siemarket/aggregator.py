"""
Order Aggregator
Customer spending totals, top spender and product popularity over a
snapshot of orders.

Groups keep the order in which their key was first seen. Rankings use a
stable sort over that order, so ties go to whichever key appeared first.
"""

from collections.abc import Iterable
from decimal import Decimal
import logging

from .errors import EmptyInput
from .models import Order

logger = logging.getLogger(__name__)


def get_customer_totals(orders: Iterable[Order]) -> dict[str, Decimal]:
    """
    Sum final order prices per customer

    Args:
        orders: Orders to aggregate

    Returns:
        Dictionary of customer name to total spent, in first-seen order
    """
    orders = list(orders)
    customer_totals: dict[str, Decimal] = {}
    for order in orders:
        customer_totals[order.customer_name] = (
            customer_totals.get(order.customer_name, Decimal("0")) + order.calculate_final_price()
        )
    logger.debug(f"Aggregated {len(orders)} orders into {len(customer_totals)} customers")
    return customer_totals


def find_top_spender(orders: Iterable[Order]) -> str:
    """
    Find the customer with the highest summed final prices

    Args:
        orders: Orders to aggregate

    Returns:
        Name of the top spender; on equal totals the customer seen first

    Raises:
        EmptyInput: If no orders were given
    """
    orders = list(orders)
    if not orders:
        logger.warning("Top spender requested for an empty order list")
        raise EmptyInput("cannot find a top spender without orders")

    customer_totals = get_customer_totals(orders)
    top_spender, total_spent = max(customer_totals.items(), key=lambda entry: entry[1])
    logger.debug(f"Top spender is {top_spender} with {total_spent}")
    return top_spender


def get_product_popularity(orders: Iterable[Order]) -> dict[str, int]:
    """
    Rank products by total quantity sold

    Args:
        orders: Orders to aggregate

    Returns:
        Dictionary of product name to quantity sold, by descending quantity;
        equal quantities keep first-seen order
    """
    orders = list(orders)
    quantities_sold: dict[str, int] = {}
    for order in orders:
        for item in order.items:
            quantities_sold[item.product_name] = quantities_sold.get(item.product_name, 0) + item.quantity

    ranked_products = sorted(quantities_sold.items(), key=lambda entry: entry[1], reverse=True)
    logger.debug(f"Ranked {len(ranked_products)} products from {len(orders)} orders")
    return dict(ranked_products)
