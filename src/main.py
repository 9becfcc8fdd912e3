"""Print the sales report for the sample orders."""

import logging

from siemarket import (
    LineItem,
    Order,
    find_top_spender,
    format_currency,
    format_order_summary,
    format_popularity,
    get_product_popularity,
)

logger = logging.getLogger(__name__)


def build_sample_orders() -> list[Order]:
    """Build the three sample orders."""
    order1 = Order(order_id=1001, customer_name="Utiu Dalia", customer_country="Romania")
    order1.add_item(LineItem("Keyboard", 2, "69.99"))
    order1.add_item(LineItem("Monitor", 1, "549.00"))
    order1.add_item(LineItem("Mouse", 3, "39.99"))

    order2 = Order(order_id=1002, customer_name="pers2", customer_country="Portugal")
    order2.add_item(LineItem("Laptop", 1, "1200.00"))
    order2.add_item(LineItem("Keyboard", 3, "69.99"))

    order3 = Order(order_id=1003, customer_name="pers3", customer_country="Romania")
    order3.add_item(LineItem("Mouse", 2, "39.99"))
    order3.add_item(LineItem("Monitor", 1, "549.00"))

    return [order1, order2, order3]


def build_report(orders: list[Order]) -> list[str]:
    """Render the full report as a list of lines."""
    lines = []
    for order in orders:
        lines.append(format_order_summary(order))
        lines.append("")

    lines.append("=== Final Prices (after discount) ===")
    for order in orders:
        lines.append(f"  Order #{order.order_id}: {format_currency(order.calculate_final_price())}")

    lines.append("")
    lines.append("=== Top Spender ===")
    lines.append(f"  {find_top_spender(orders)}")

    lines.append("")
    lines.append("=== Product Popularity ===")
    lines.extend(f"  {line}" for line in format_popularity(get_product_popularity(orders)))
    return lines


def main():
    """Entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    orders = build_sample_orders()
    logger.info(f"Building report for {len(orders)} orders")
    for line in build_report(orders):
        print(line)


if __name__ == "__main__":
    main()
