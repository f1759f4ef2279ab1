"""
Identifier generators.

Format: {prefix}_{suffix}
Example: ord_89baed550ed9, itm_2d32237c32c7, cus_0001
"""
import uuid
from collections import defaultdict
from typing import Dict

from sales_workflow.core.interfaces import IIdentifierGenerator


class UUIDIdentifierGenerator(IIdentifierGenerator):
    """Random identifiers backed by uuid4 (default for production code)"""

    def new_id(self, prefix: str) -> str:
        return f"{prefix}_{uuid.uuid4().hex[:12]}"


class SequentialIdentifierGenerator(IIdentifierGenerator):
    """
    Deterministic identifiers, numbered per prefix.

    Usage:
        ids = SequentialIdentifierGenerator()
        ids.new_id("ord")  # 'ord_0001'
        ids.new_id("itm")  # 'itm_0001'
        ids.new_id("ord")  # 'ord_0002'
    """

    def __init__(self):
        self._counters: Dict[str, int] = defaultdict(int)

    def new_id(self, prefix: str) -> str:
        self._counters[prefix] += 1
        return f"{prefix}_{self._counters[prefix]:04d}"


default_id_generator = UUIDIdentifierGenerator()
