"""
Core interfaces for the sales order workflow.

The domain depends on these abstractions instead of calling uuid4() or
datetime.now() directly, so tests can inject deterministic implementations.
"""
from abc import ABC, abstractmethod
from datetime import datetime


class IIdentifierGenerator(ABC):
    """Interface for opaque identifier generation (orders, items, customers)"""

    @abstractmethod
    def new_id(self, prefix: str) -> str:
        """
        Generate a new unique identifier.

        Args:
            prefix: Entity prefix (e.g. 'ord', 'itm', 'cus')

        Returns:
            Identifier string like 'ord_89baed550ed9'
        """
        pass


class IClock(ABC):
    """Interface for the current time"""

    @abstractmethod
    def now(self) -> datetime:
        """Current time as timezone-aware UTC datetime"""
        pass
