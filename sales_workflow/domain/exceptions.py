"""
Domain exceptions for the sales order workflow.

All business rule violations raise a subclass of DomainError so callers
can catch the whole family in one place (see cli/run_demo.py).

- InvalidArgumentError: bad input (blank ids, non-positive quantity, bad timestamp)
- IllegalStateTransitionError: operation not allowed in the order's current state
- CurrencyMismatchError: money arithmetic across different currencies
"""

from typing import Optional


class DomainError(Exception):
    """Base exception for domain layer errors"""
    pass


class InvalidArgumentError(DomainError, ValueError):
    """Raised when an argument violates a business rule"""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class IllegalStateTransitionError(DomainError):
    """
    Raised when an operation is attempted in a state that forbids it.

    The message always names the attempted action and the current state.
    """

    def __init__(self, state, action: str, message: Optional[str] = None):
        self.state = state
        self.action = action
        super().__init__(
            message or f"Cannot {action} an order that is {_state_name(state)}"
        )


class CurrencyMismatchError(DomainError, ValueError):
    """Raised when money arithmetic mixes currencies"""

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Currency mismatch: expected {expected}, got {actual}"
        )


def _state_name(state) -> str:
    return getattr(state, "value", str(state))
