"""Core module containing interfaces and their default implementations."""

from sales_workflow.core.interfaces import IClock, IIdentifierGenerator

__all__ = ["IClock", "IIdentifierGenerator"]
