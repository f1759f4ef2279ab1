"""
Domain Entities - Rich business objects with identity and lifecycle.

Entities differ from value objects in that they have:
- Identity (tracked by ID, not by value)
- Mutable state (can change over time)
- Business logic (methods that enforce invariants)

SalesOrder is an aggregate root - it owns its SalesOrderItems.
Customer lives in its own lifecycle; orders only hold the customer ID.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from enum import Enum
from typing import List, Optional, Tuple, Union

from sales_workflow.core.identifiers import default_id_generator
from sales_workflow.core.interfaces import IClock, IIdentifierGenerator
from sales_workflow.domain.exceptions import IllegalStateTransitionError, InvalidArgumentError
from sales_workflow.domain.value_objects import AmountLike, Currency, DateTime, Money

logger = logging.getLogger(__name__)


class SalesOrderState(str, Enum):
    """
    Lifecycle of a sales order.

        PENDING -> CONFIRMED -> SHIPPED
           |           |
           +-----------+--> CANCELLED
    """

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    CANCELLED = "CANCELLED"

    def is_terminal(self) -> bool:
        """Check if this state is terminal (no further transitions)."""
        return self in {SalesOrderState.SHIPPED, SalesOrderState.CANCELLED}

    def accepts_items(self) -> bool:
        """Items may be appended in any non-terminal state (including CONFIRMED)."""
        return not self.is_terminal()

    def can_transition_to(self, new_state: "SalesOrderState") -> bool:
        """
        Check if transition to new state is valid.

        Args:
            new_state: Target state

        Returns:
            True if transition is allowed
        """
        return new_state in _VALID_TRANSITIONS[self]

    def __str__(self) -> str:
        return self.value


_VALID_TRANSITIONS = {
    SalesOrderState.PENDING: {SalesOrderState.CONFIRMED, SalesOrderState.CANCELLED},
    SalesOrderState.CONFIRMED: {SalesOrderState.SHIPPED, SalesOrderState.CANCELLED},
    SalesOrderState.SHIPPED: set(),
    SalesOrderState.CANCELLED: set(),
}


@dataclass(frozen=True)
class SalesOrderItem:
    """
    Line item entity - part of SalesOrder aggregate.

    Created once by SalesOrder.add_item() and never modified afterwards.
    order_id is a back-reference only; the order owns the item, not the
    other way around.
    """

    id: str
    order_id: str
    product_id: str
    quantity: int
    unit_price: Money

    def __post_init__(self):
        object.__setattr__(self, "product_id", _require_text(self.product_id, "Product ID"))
        _require_positive_quantity(self.quantity)
        if not isinstance(self.unit_price, Money):
            raise InvalidArgumentError("Unit price must be Money", field="unit_price")

    def calculate_item_price(self) -> Money:
        """Subtotal for this line (unit price x quantity)"""
        return self.unit_price.multiply(self.quantity)

    def __repr__(self) -> str:
        return (
            f"SalesOrderItem(id={self.id}, product={self.product_id}, "
            f"qty={self.quantity}, unit_price={self.unit_price})"
        )


class SalesOrder:
    """
    Sales order aggregate root.

    Invariants (business rules enforced by domain model):
    1. customer_id is non-empty and trimmed
    2. ordered_at is never in the future
    3. Items are append-only and only while the state is PENDING or CONFIRMED
    4. Every unit price is in the order's currency
    5. State only moves along PENDING -> CONFIRMED -> SHIPPED,
       or to CANCELLED from PENDING/CONFIRMED

    Each operation validates fully before mutating, so a failed call leaves
    the order exactly as it was.
    """

    ID_PREFIX = "ord"
    ITEM_ID_PREFIX = "itm"

    def __init__(
        self,
        customer_id: str,
        currency: Currency,
        ordered_at: Union[None, str, date, datetime] = None,
        *,
        id_generator: Optional[IIdentifierGenerator] = None,
        clock: Optional[IClock] = None,
    ):
        """
        Create a new order in PENDING state with no items.

        Args:
            customer_id: ID of the customer placing the order
            currency: Currency for every price in this order
            ordered_at: When the order was placed (defaults to now)
            id_generator: Identifier source (defaults to random UUID-based IDs)
            clock: Source of "now" for timestamp validation

        Raises:
            InvalidArgumentError: If customer_id is blank, currency is not a
                Currency, or ordered_at is invalid or in the future
        """
        self._customer_id = _require_text(customer_id, "Customer ID")
        if not isinstance(currency, Currency):
            raise InvalidArgumentError(
                f"Currency must be a Currency, got {type(currency).__name__}",
                field="currency",
            )
        self._ordered_at = DateTime.parse(ordered_at, clock=clock)
        self._currency = currency
        self._id_generator = id_generator or default_id_generator
        self._id = self._id_generator.new_id(self.ID_PREFIX)
        self._items: List[SalesOrderItem] = []
        self._state = SalesOrderState.PENDING

        logger.info(
            f"Created order {self._id} for customer {self._customer_id} "
            f"({self._currency})"
        )

    @classmethod
    def create(
        cls,
        customer_id: str,
        currency: Currency,
        ordered_at: Union[None, str, date, datetime] = None,
        *,
        id_generator: Optional[IIdentifierGenerator] = None,
        clock: Optional[IClock] = None,
    ) -> "SalesOrder":
        """Factory alias for the constructor"""
        return cls(
            customer_id,
            currency,
            ordered_at,
            id_generator=id_generator,
            clock=clock,
        )

    @property
    def id(self) -> str:
        return self._id

    @property
    def customer_id(self) -> str:
        return self._customer_id

    @property
    def currency(self) -> Currency:
        return self._currency

    @property
    def ordered_at(self) -> DateTime:
        return self._ordered_at

    @property
    def state(self) -> SalesOrderState:
        return self._state

    @property
    def items(self) -> Tuple[SalesOrderItem, ...]:
        """Read-only snapshot of the item lines, in insertion order"""
        return tuple(self._items)

    @property
    def item_count(self) -> int:
        return len(self._items)

    # Business logic methods

    def add_item(
        self,
        product_id: str,
        quantity: int,
        unit_price_amount: AmountLike,
    ) -> SalesOrderItem:
        """
        Append a line item priced in the order's currency.

        Args:
            product_id: ID of the product being ordered
            quantity: Number of units (positive integer)
            unit_price_amount: Price per unit

        Returns:
            The new SalesOrderItem

        Raises:
            InvalidArgumentError: If product_id is blank or quantity is not positive
            IllegalStateTransitionError: If the order is SHIPPED or CANCELLED
        """
        product_id = _require_text(product_id, "Product ID")
        _require_positive_quantity(quantity)
        if not self._state.accepts_items():
            raise IllegalStateTransitionError(
                self._state,
                "add items",
                f"Cannot add items to a {self._state.value} order",
            )

        unit_price = Money(unit_price_amount, self._currency)
        item = SalesOrderItem(
            id=self._id_generator.new_id(self.ITEM_ID_PREFIX),
            order_id=self._id,
            product_id=product_id,
            quantity=quantity,
            unit_price=unit_price,
        )
        self._items.append(item)

        logger.debug(
            f"Order {self._id}: added {quantity} x {product_id} @ {unit_price}"
        )
        return item

    def calculate_total_price(self) -> Money:
        """
        Sum of every item's subtotal, in the order's currency.

        Raises:
            CurrencyMismatchError: If any item is priced in another currency
        """
        total = Money.zero(self._currency)
        for item in self._items:
            total = total.add(item.calculate_item_price())
        return total

    def get_formatted_ordered_at(self, tz: Optional[tzinfo] = None) -> str:
        """Order date as a human-readable string (e.g. "May 15, 2023, 10:30 AM UTC")"""
        return self._ordered_at.format(tz)

    def confirm(self) -> None:
        """PENDING -> CONFIRMED"""
        self._transition(SalesOrderState.CONFIRMED, "confirm")

    def ship(self) -> None:
        """CONFIRMED -> SHIPPED"""
        self._transition(SalesOrderState.SHIPPED, "ship")

    def cancel(self) -> None:
        """PENDING or CONFIRMED -> CANCELLED"""
        self._transition(SalesOrderState.CANCELLED, "cancel")

    def _transition(self, target: SalesOrderState, action: str) -> None:
        if not self._state.can_transition_to(target):
            raise IllegalStateTransitionError(self._state, action)
        previous, self._state = self._state, target
        logger.info(f"Order {self._id}: {previous.value} -> {target.value}")

    def __repr__(self) -> str:
        return (
            f"SalesOrder(id={self._id}, customer={self._customer_id}, "
            f"state={self._state.value}, items={self.item_count})"
        )


@dataclass
class Customer:
    """
    Customer entity.

    last_order_price is a plain field the caller updates after pricing an
    order; the customer does not track its orders.
    """

    id: str
    name: str
    last_order_price: Optional[Money] = None

    ID_PREFIX = "cus"

    def __post_init__(self):
        self.name = _require_text(self.name, "Customer name")
        if not self.id:
            raise InvalidArgumentError("Customer ID cannot be empty", field="id")

    @classmethod
    def create(
        cls,
        name: str,
        id_generator: Optional[IIdentifierGenerator] = None,
    ) -> "Customer":
        """
        Register a new customer with a generated ID.

        Raises:
            InvalidArgumentError: If name is blank
        """
        name = _require_text(name, "Customer name")
        generator = id_generator or default_id_generator
        return cls(id=generator.new_id(cls.ID_PREFIX), name=name)

    def __repr__(self) -> str:
        return f"Customer(id={self.id}, name={self.name})"


def _require_text(value: str, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(
            f"{label} cannot be empty",
            field=label.lower().replace(" ", "_"),
        )
    return value.strip()


def _require_positive_quantity(quantity: int) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise InvalidArgumentError(
            f"Quantity must be an integer, got {quantity!r}",
            field="quantity",
        )
    if quantity <= 0:
        raise InvalidArgumentError(
            "Quantity must be greater than zero",
            field="quantity",
        )
