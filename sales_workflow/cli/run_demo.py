#!/usr/bin/env python3
"""
CLI tool that walks a customer through two sales orders.

Usage:
    python -m sales_workflow.cli.run_demo
    python -m sales_workflow.cli.run_demo --customer "Jane Roe" --currency EUR --locale de-DE

Scenarios:
    1. Real-time order in --currency, dated now: two items, confirmed
    2. Manual order in --past-currency, dated --past-date: one item, confirmed and shipped
    3. A second confirm() on the shipped order, which must be rejected
"""
import argparse
import logging
import sys
from datetime import timezone, tzinfo
from typing import List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from sales_workflow.config import settings
from sales_workflow.core.identifiers import SequentialIdentifierGenerator, default_id_generator
from sales_workflow.domain.entities import Customer, SalesOrder
from sales_workflow.domain.exceptions import DomainError, IllegalStateTransitionError
from sales_workflow.domain.value_objects import Currency
from sales_workflow.logging_config import configure_logging

logger = logging.getLogger(__name__)

DEFAULT_PAST_DATE = "2023-05-15T10:30:00Z"


def _resolve_timezone(name: str) -> tzinfo:
    if name.strip().upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def run_demo(
    customer_name: str,
    currency_code: str,
    past_currency_code: str,
    past_date: str,
    locale: str,
    tz: tzinfo,
    deterministic_ids: bool = False,
) -> None:
    """
    Run both order scenarios and the illegal transition check.

    Raises:
        DomainError: If any step other than the final confirm() fails
    """
    ids = SequentialIdentifierGenerator() if deterministic_ids else default_id_generator
    customer = Customer.create(customer_name, id_generator=ids)

    # Scenario 1: real-time order with current date
    real_time_order = SalesOrder(customer.id, Currency(currency_code), id_generator=ids)
    real_time_order.add_item("P001", 2, 100)
    real_time_order.add_item("P002", 20, 50)
    real_time_order.confirm()
    customer.last_order_price = real_time_order.calculate_total_price()
    print(
        f"Real-time Order - Customer: {customer.name}, ID: {customer.id}, "
        f"Ordered At: {real_time_order.get_formatted_ordered_at(tz)}, "
        f"State: {real_time_order.state}, "
        f"Total: {customer.last_order_price.format(settings.default_locale)}"
    )

    # Scenario 2: manual order with a past date
    manual_order = SalesOrder(
        customer.id, Currency(past_currency_code), past_date, id_generator=ids
    )
    manual_order.add_item("P003", 1, 150)
    manual_order.confirm()
    manual_order.ship()
    customer.last_order_price = manual_order.calculate_total_price()
    print(
        f"Manual Order - Customer: {customer.name}, ID: {customer.id}, "
        f"Ordered At: {manual_order.get_formatted_ordered_at(tz)}, "
        f"State: {manual_order.state}, "
        f"Total: {customer.last_order_price.format(locale)}"
    )

    # Shipped orders cannot be confirmed again
    manual_order.confirm()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Run the sales order workflow demonstration',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default scenarios (USD now, PEN in 2023)
  %(prog)s

  # Different customer and currencies
  %(prog)s --customer "Jane Roe" --currency EUR --past-currency GBP --locale en-GB
        """
    )

    parser.add_argument(
        '--customer',
        default="John Doe",
        help='Customer name (default: John Doe)'
    )

    parser.add_argument(
        '--currency',
        default=settings.default_currency,
        help='Currency code for the real-time order (default: DEFAULT_CURRENCY)'
    )

    parser.add_argument(
        '--past-currency',
        default="PEN",
        help='Currency code for the manual order (default: PEN)'
    )

    parser.add_argument(
        '--past-date',
        default=DEFAULT_PAST_DATE,
        help=f'ISO 8601 date for the manual order (default: {DEFAULT_PAST_DATE})'
    )

    parser.add_argument(
        '--locale',
        default="es-PE",
        help='Locale used to format the manual order total (default: es-PE)'
    )

    parser.add_argument(
        '--timezone',
        default=settings.display_timezone,
        help='IANA timezone for displayed dates (default: DISPLAY_TIMEZONE)'
    )

    parser.add_argument(
        '--deterministic-ids',
        action='store_true',
        help='Use sequential IDs (cus_0001, ord_0001, ...) instead of random ones'
    )

    args = parser.parse_args(argv)

    configure_logging()

    try:
        tz = _resolve_timezone(args.timezone)
    except (ZoneInfoNotFoundError, ValueError):
        print(f"❌ Error: Unknown timezone '{args.timezone}'")
        return 2

    try:
        run_demo(
            customer_name=args.customer,
            currency_code=args.currency,
            past_currency_code=args.past_currency,
            past_date=args.past_date,
            locale=args.locale,
            tz=tz,
            deterministic_ids=args.deterministic_ids,
        )
    except IllegalStateTransitionError as e:
        if e.action != "confirm":
            logger.error(f"Demo failed: {e}")
            print(f"❌ Error: {e}")
            return 1
        logger.info(f"Illegal transition rejected as expected: {e}")
        print(f"Error: {e}")
        return 0
    except DomainError as e:
        logger.error(f"Demo failed: {e}")
        print(f"❌ Error: {e}")
        return 1

    logger.error("Shipped order accepted a second confirm()")
    print("❌ Error: shipped order accepted a second confirm()")
    return 1


if __name__ == '__main__':
    sys.exit(main())
