"""
Tests for the sales order workflow

Tests are organized by functionality:
- test_sales_order.py: SalesOrder state machine, item lines and totals
- test_value_objects.py: Currency, Money and DateTime
- test_customer.py: Customer entity
- test_core.py: Identifier generators and clocks
- test_config.py: Environment-driven settings
- test_run_demo.py: Demonstration CLI
"""
