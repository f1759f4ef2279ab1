"""
Tests for the Currency, Money and DateTime value objects.
"""
import locale
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from sales_workflow.core.clock import FixedClock
from sales_workflow.domain.exceptions import CurrencyMismatchError, InvalidArgumentError
from sales_workflow.domain.value_objects import Currency, DateTime, Money


# ============================================
# Currency
# ============================================

def test_currency_code_is_normalized():
    """Test that codes are trimmed and upper-cased"""
    assert Currency(" usd ") == Currency("USD")
    assert str(Currency("pen")) == "PEN"


@pytest.mark.parametrize("code", ["", "  ", "US", "USDD", "U5D", "€UR"])
def test_invalid_currency_code_rejected(code):
    """Test that only three ASCII letters are accepted"""
    with pytest.raises(InvalidArgumentError):
        Currency(code)


def test_known_currency_metadata():
    """Test symbol and minor units for known currencies"""
    assert Currency("USD").symbol == "$"
    assert Currency("PEN").symbol == "S/"
    assert Currency("JPY").minor_units == 0
    assert Currency("USD").is_known


def test_unknown_currency_uses_code_as_symbol():
    """Test that well-formed but unlisted codes still work"""
    currency = Currency("XYZ")

    assert not currency.is_known
    assert currency.symbol == "XYZ"
    assert currency.minor_units == 2


def test_currency_is_immutable():
    """Test that Currency is frozen"""
    with pytest.raises(AttributeError):
        Currency("USD").code = "EUR"


# ============================================
# Money
# ============================================

def test_money_amount_is_decimal():
    """Test that int, float and str amounts become Decimal"""
    usd = Currency("USD")

    assert Money(10, usd).amount == Decimal("10")
    assert Money(0.1, usd).amount == Decimal("0.1")
    assert Money("19.99", usd).amount == Decimal("19.99")


@pytest.mark.parametrize("amount", ["abc", "", "NaN", "Infinity", True, None])
def test_invalid_money_amount_rejected(amount):
    """Test that non-numeric and non-finite amounts are rejected"""
    with pytest.raises(InvalidArgumentError):
        Money(amount, Currency("USD"))


def test_money_requires_currency_object():
    """Test that a plain string currency is rejected"""
    with pytest.raises(InvalidArgumentError):
        Money(10, "USD")


def test_money_equality_by_value():
    """Test that equal amounts in the same currency are equal"""
    usd = Currency("USD")

    assert Money(1200, usd) == Money("1200.00", usd)
    assert Money(10, usd) != Money(10, Currency("EUR"))


def test_money_add_same_currency():
    """Test Money.add"""
    usd = Currency("USD")

    assert Money(200, usd).add(Money(1000, usd)) == Money(1200, usd)
    assert Money(1, usd) + Money(2, usd) == Money(3, usd)


def test_money_add_currency_mismatch():
    """Test that adding different currencies fails instead of converting"""
    with pytest.raises(CurrencyMismatchError) as exc_info:
        Money(10, Currency("USD")).add(Money(10, Currency("PEN")))

    assert exc_info.value.expected == Currency("USD")
    assert exc_info.value.actual == Currency("PEN")
    assert "USD" in str(exc_info.value) and "PEN" in str(exc_info.value)


def test_money_add_non_money():
    """Test that adding a bare number raises TypeError"""
    with pytest.raises(TypeError):
        Money(10, Currency("USD")).add(5)


def test_money_multiply():
    """Test Money.multiply keeps currency"""
    pen = Currency("PEN")

    assert Money(50, pen).multiply(20) == Money(1000, pen)
    assert Money("0.10", pen) * 3 == Money("0.30", pen)


@pytest.mark.parametrize(
    "amount, code, locale, expected",
    [
        (1200, "USD", None, "$1,200.00"),
        (1200, "USD", "en-US", "$1,200.00"),
        (150, "PEN", "es-PE", "S/ 150.00"),
        ("1234.5", "EUR", "de-DE", "1.234,50 €"),
        ("1234.5", "EUR", "es-ES", "1.234,50 €"),
        ("1234567.891", "BRL", "pt-BR", "R$ 1.234.567,89"),
        (1500, "JPY", "ja-JP", "¥1,500"),
        (99, "GBP", "en_GB", "£99.00"),
    ],
)
def test_money_format(amount, code, locale, expected):
    """Test locale-aware formatting"""
    assert Money(amount, Currency(code)).format(locale) == expected


def test_money_format_rounds_half_up():
    """Test that display rounding is half-up to minor units"""
    usd = Currency("USD")

    assert Money("2.345", usd).format() == "$2.35"
    assert Money("2.344", usd).format() == "$2.34"


def test_money_format_negative():
    """Test that negative amounts get a leading minus"""
    assert Money(-5, Currency("USD")).format() == "-$5.00"


def test_money_format_locale_fallback():
    """Test fallback from region to language, and from language to en-US"""
    usd = Currency("USD")

    assert Money(10, usd).format("es-MX") == "10,00 $"
    assert Money(10, usd).format("xx-YY") == "$10.00"


# ============================================
# DateTime
# ============================================

@pytest.fixture
def frozen_clock():
    return FixedClock(datetime(2025, 4, 9, 17, 30, tzinfo=timezone.utc))


def test_parse_none_uses_clock(frozen_clock):
    """Test that no input means now"""
    assert DateTime.parse(None, clock=frozen_clock).value == frozen_clock.now()


def test_parse_iso_string_with_z(frozen_clock):
    """Test ISO 8601 with trailing Z"""
    parsed = DateTime.parse("2023-05-15T10:30:00Z", clock=frozen_clock)
    assert parsed.value == datetime(2023, 5, 15, 10, 30, tzinfo=timezone.utc)


def test_parse_iso_string_with_offset(frozen_clock):
    """Test ISO 8601 with explicit offset"""
    parsed = DateTime.parse("2023-05-15T05:30:00-05:00", clock=frozen_clock)
    assert parsed.value == datetime(2023, 5, 15, 10, 30, tzinfo=timezone.utc)


def test_parse_date_only(frozen_clock):
    """Test that dates become midnight UTC"""
    parsed = DateTime.parse(date(2023, 5, 15), clock=frozen_clock)
    assert parsed.value == datetime(2023, 5, 15, tzinfo=timezone.utc)


def test_parse_naive_datetime_is_utc(frozen_clock):
    """Test that naive datetimes are taken as UTC"""
    parsed = DateTime.parse(datetime(2023, 5, 15, 10, 30), clock=frozen_clock)
    assert parsed.value.tzinfo is not None
    assert parsed.value == datetime(2023, 5, 15, 10, 30, tzinfo=timezone.utc)


def test_parse_exactly_now_allowed(frozen_clock):
    """Test that the current moment is not considered future"""
    assert DateTime.parse(frozen_clock.now(), clock=frozen_clock).value == frozen_clock.now()


def test_parse_future_rejected(frozen_clock):
    """Test that timestamps after now are rejected"""
    with pytest.raises(InvalidArgumentError) as exc_info:
        DateTime.parse(frozen_clock.now() + timedelta(seconds=1), clock=frozen_clock)

    assert "future" in str(exc_info.value)
    assert exc_info.value.field == "ordered_at"


@pytest.mark.parametrize("raw", ["", "yesterday", "2023-13-01", "15/05/2023", 1684146600])
def test_parse_invalid_rejected(raw, frozen_clock):
    """Test that unparseable input is rejected"""
    with pytest.raises(InvalidArgumentError):
        DateTime.parse(raw, clock=frozen_clock)


def test_format_default_utc():
    """Test human-readable formatting"""
    moment = DateTime(datetime(2023, 5, 15, 10, 30, tzinfo=timezone.utc))
    assert moment.format() == "May 15, 2023, 10:30 AM UTC"


def test_format_noon_and_midnight():
    """Test 12-hour clock edges"""
    noon = DateTime(datetime(2025, 4, 9, 12, 0, tzinfo=timezone.utc))
    after_midnight = DateTime(datetime(2025, 4, 9, 0, 15, tzinfo=timezone.utc))

    assert noon.format() == "April 9, 2025, 12:00 PM UTC"
    assert after_midnight.format() == "April 9, 2025, 12:15 AM UTC"


def test_format_in_other_timezone():
    """Test rendering in a fixed-offset timezone"""
    lima = timezone(timedelta(hours=-5), "PET")
    moment = DateTime(datetime(2023, 5, 15, 10, 30, tzinfo=timezone.utc))

    assert moment.format(lima) == "May 15, 2023, 5:30 AM PET"


# ============================================
# Large amounts
# ============================================

def test_money_add_is_exact_beyond_default_precision():
    """Test that sums wider than 28 digits are not rounded"""
    usd = Currency("USD")
    total = Money("12345678901234567890123456789", usd).add(Money(3, usd))

    assert total.amount == Decimal("12345678901234567890123456792")


def test_money_multiply_is_exact_beyond_default_precision():
    """Test that products wider than 28 digits are not rounded"""
    usd = Currency("USD")
    product = Money("12345678901234567890123456789", usd).multiply(7)

    assert product.amount == Decimal("86419752308641975230864197523")


def test_money_add_beyond_supported_precision_rejected():
    """Test that a sum that cannot be represented exactly is rejected"""
    usd = Currency("USD")

    with pytest.raises(InvalidArgumentError) as exc_info:
        Money("1e70", usd).add(Money(1, usd))

    assert exc_info.value.field == "amount"


def test_money_multiply_beyond_supported_precision_rejected():
    """Test that a product that cannot be represented exactly is rejected"""
    with pytest.raises(InvalidArgumentError):
        Money("1" * 40, Currency("USD")).multiply("1" * 40)


def test_money_format_large_amount():
    """Test that amounts past the default context still format"""
    assert Money("1e27", Currency("USD")).format() == "$1" + ",000" * 9 + ".00"


def test_money_format_too_large_amount_rejected():
    """Test that an amount too wide to display raises a domain error"""
    with pytest.raises(InvalidArgumentError) as exc_info:
        Money("1e70", Currency("USD")).format()

    assert "too large" in str(exc_info.value)


# ============================================
# Locale independence
# ============================================

@pytest.mark.parametrize(
    "month, name",
    [(1, "January"), (2, "February"), (6, "June"), (9, "September"), (12, "December")],
)
def test_format_month_names(month, name):
    """Test English month names for the whole year"""
    moment = DateTime(datetime(2024, month, 3, 22, 5, tzinfo=timezone.utc))
    assert moment.format() == f"{name} 3, 2024, 10:05 PM UTC"


def test_format_ignores_process_locale():
    """Test that LC_TIME does not change month names or AM/PM"""
    previous = locale.setlocale(locale.LC_TIME)
    try:
        locale.setlocale(locale.LC_TIME, "de_DE.UTF-8")
    except locale.Error:
        pytest.skip("de_DE.UTF-8 locale not installed")
    try:
        moment = DateTime(datetime(2023, 3, 15, 22, 30, tzinfo=timezone.utc))
        assert moment.format() == "March 15, 2023, 10:30 PM UTC"
    finally:
        locale.setlocale(locale.LC_TIME, previous)
