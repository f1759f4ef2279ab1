"""
Domain layer - Business logic and domain models.

This layer contains:
- Value objects (immutable, self-validating)
- Domain entities (with business rules)
- Domain exceptions

No dependencies on infrastructure or frameworks.
"""

from sales_workflow.domain.entities import (
    Customer,
    SalesOrder,
    SalesOrderItem,
    SalesOrderState,
)
from sales_workflow.domain.exceptions import (
    CurrencyMismatchError,
    DomainError,
    IllegalStateTransitionError,
    InvalidArgumentError,
)
from sales_workflow.domain.value_objects import Currency, DateTime, Money

__all__ = [
    "Customer",
    "SalesOrder",
    "SalesOrderItem",
    "SalesOrderState",
    "CurrencyMismatchError",
    "DomainError",
    "IllegalStateTransitionError",
    "InvalidArgumentError",
    "Currency",
    "DateTime",
    "Money",
]
