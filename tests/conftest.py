"""
Pytest configuration and shared fixtures.
"""
from datetime import datetime, timezone

import pytest

from sales_workflow.core.clock import FixedClock
from sales_workflow.core.identifiers import SequentialIdentifierGenerator
from sales_workflow.domain.entities import SalesOrder
from sales_workflow.domain.value_objects import Currency

NOW = datetime(2025, 4, 9, 17, 30, tzinfo=timezone.utc)


@pytest.fixture
def ids():
    """Deterministic identifiers: ord_0001, itm_0001, ..."""
    return SequentialIdentifierGenerator()


@pytest.fixture
def clock():
    """Clock frozen at 2025-04-09 17:30 UTC"""
    return FixedClock(NOW)


@pytest.fixture
def usd():
    return Currency("USD")


@pytest.fixture
def pen():
    return Currency("PEN")


@pytest.fixture
def order(usd, ids, clock):
    """
    Fresh PENDING order in USD.

    Uses deterministic IDs and a fixed clock so assertions can name them.
    """
    return SalesOrder("cus_0001", usd, id_generator=ids, clock=clock)
