"""Order models."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from .config import DISCOUNT_RATE, DISCOUNT_THRESHOLD
from .errors import InvalidArgument
from .utils import calculate_total, round_currency

Amount = Union[Decimal, int, float, str]


def _to_decimal(value: Amount) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float, str)):
        raise InvalidArgument(f"unit price must be a number, got {value!r}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise InvalidArgument(f"unit price must be a number, got {value!r}") from None
    if not amount.is_finite():
        raise InvalidArgument(f"unit price must be finite, got {value!r}")
    return amount


@dataclass(frozen=True)
class LineItem:
    """A single product line of an order."""
    product_name: str
    quantity: int
    unit_price: Decimal

    def __post_init__(self):
        if not isinstance(self.product_name, str) or not self.product_name.strip():
            raise InvalidArgument("product name must be a non-empty string")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidArgument(f"quantity must be an integer, got {self.quantity!r}")
        if self.quantity < 0:
            raise InvalidArgument(f"quantity must not be negative, got {self.quantity}")
        unit_price = _to_decimal(self.unit_price)
        if unit_price < 0:
            raise InvalidArgument(f"unit price must not be negative, got {unit_price}")
        object.__setattr__(self, "unit_price", unit_price)

    @property
    def subtotal(self) -> Decimal:
        """Quantity times unit price, unrounded."""
        return self.quantity * self.unit_price


@dataclass
class Order:
    """
    A customer's order.

    Items are appended only through add_item; `items` is a read-only view.
    All totals are derived from the current items on every access and never
    stored.
    """
    order_id: int
    customer_name: str
    customer_country: str
    order_date: Optional[datetime] = None
    _items: list[LineItem] = field(default_factory=list, init=False)

    def __post_init__(self):
        if self.order_date is None:
            self.order_date = datetime.now()

    def add_item(self, item: LineItem) -> None:
        """Append a line item to the order."""
        if not isinstance(item, LineItem):
            raise InvalidArgument(f"expected a LineItem, got {type(item).__name__}")
        self._items.append(item)

    @property
    def items(self) -> tuple[LineItem, ...]:
        return tuple(self._items)

    @property
    def total_before_discount(self) -> Decimal:
        """Sum of item subtotals."""
        return calculate_total(self.items)

    @property
    def is_eligible_for_discount(self) -> bool:
        """True when the order total is strictly above the threshold."""
        return self.total_before_discount > DISCOUNT_THRESHOLD

    @property
    def discount_amount(self) -> Decimal:
        """Discount owed on this order, unrounded."""
        if self.is_eligible_for_discount:
            return self.total_before_discount * DISCOUNT_RATE
        return Decimal("0")

    @property
    def total_after_discount(self) -> Decimal:
        return self.total_before_discount - self.discount_amount

    def calculate_final_price(self) -> Decimal:
        """Total after discount, rounded to cents."""
        return round_currency(self.total_after_discount)
