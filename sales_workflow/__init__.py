"""
Sales order workflow.

A small domain model: a customer, a sales order aggregate with item lines
and a four-state lifecycle, and money/currency/date value objects.
"""

from sales_workflow.version import __version__

__all__ = ["__version__"]
