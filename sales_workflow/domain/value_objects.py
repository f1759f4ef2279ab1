"""
Value Objects for money, currency and timestamps.

Value objects are immutable, self-validating, and compared by value.
They keep the sales aggregate free of raw floats and naive datetimes:
- Currency: validated ISO-4217 style code (USD, PEN, ...)
- Money: Decimal amount bound to a Currency
- DateTime: timezone-aware timestamp that is never in the future
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timezone, tzinfo
from decimal import (
    Context,
    Decimal,
    DivisionByZero,
    Inexact,
    InvalidOperation,
    Overflow,
    ROUND_HALF_UP,
    localcontext,
)
from typing import Optional, Union

from sales_workflow.core.clock import system_clock
from sales_workflow.core.interfaces import IClock
from sales_workflow.domain.exceptions import CurrencyMismatchError, InvalidArgumentError

AmountLike = Union[int, float, str, Decimal]

DEFAULT_LOCALE = "en-US"

# Arithmetic must be exact: results that need more digits raise Inexact
_MONEY_PRECISION = 60
_EXACT_CONTEXT = Context(
    prec=_MONEY_PRECISION,
    rounding=ROUND_HALF_UP,
    traps=[InvalidOperation, DivisionByZero, Overflow, Inexact],
)
# Display rounding is allowed to be inexact
_DISPLAY_CONTEXT = Context(
    prec=_MONEY_PRECISION,
    rounding=ROUND_HALF_UP,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)

_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# code -> (symbol, minor units)
_KNOWN_CURRENCIES = {
    "USD": ("$", 2),
    "EUR": ("€", 2),
    "GBP": ("£", 2),
    "PEN": ("S/", 2),
    "JPY": ("¥", 0),
    "MXN": ("MX$", 2),
    "BRL": ("R$", 2),
    "CLP": ("CLP$", 0),
    "COP": ("COL$", 2),
    "ARS": ("AR$", 2),
    "CAD": ("CA$", 2),
    "AUD": ("A$", 2),
    "CHF": ("CHF", 2),
    "CNY": ("CN¥", 2),
    "INR": ("₹", 2),
}

# locale -> (group separator, decimal separator, pattern)
_LOCALE_FORMATS = {
    "en-US": (",", ".", "{symbol}{amount}"),
    "en-GB": (",", ".", "{symbol}{amount}"),
    "es-PE": (",", ".", "{symbol} {amount}"),
    "es-ES": (".", ",", "{amount} {symbol}"),
    "de-DE": (".", ",", "{amount} {symbol}"),
    "fr-FR": (" ", ",", "{amount} {symbol}"),
    "pt-BR": (".", ",", "{symbol} {amount}"),
    "ja-JP": (",", ".", "{symbol}{amount}"),
}

_LANGUAGE_FALLBACKS = {
    "en": "en-US",
    "es": "es-ES",
    "de": "de-DE",
    "fr": "fr-FR",
    "pt": "pt-BR",
    "ja": "ja-JP",
}


@dataclass(frozen=True)
class Currency:
    """
    Currency code value object.

    Format: three ASCII letters, upper-cased on construction.
    Example: Currency("usd") == Currency("USD")
    """

    code: str

    def __post_init__(self):
        if not isinstance(self.code, str) or not self.code.strip():
            raise InvalidArgumentError("Currency code cannot be empty", field="currency")
        normalized = self.code.strip().upper()
        if len(normalized) != 3 or not (normalized.isascii() and normalized.isalpha()):
            raise InvalidArgumentError(
                f"Invalid currency code: {self.code}. "
                f"Must be a three-letter ISO 4217 code.",
                field="currency",
            )
        object.__setattr__(self, "code", normalized)

    @property
    def symbol(self) -> str:
        return _KNOWN_CURRENCIES.get(self.code, (self.code, 2))[0]

    @property
    def minor_units(self) -> int:
        """Number of decimal places used when displaying amounts"""
        return _KNOWN_CURRENCIES.get(self.code, (self.code, 2))[1]

    @property
    def is_known(self) -> bool:
        return self.code in _KNOWN_CURRENCIES

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"Currency('{self.code}')"


@dataclass(frozen=True)
class Money:
    """
    Monetary amount in a specific currency.

    Arithmetic never mixes currencies: add() raises CurrencyMismatchError
    instead of converting.
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self):
        if not isinstance(self.currency, Currency):
            raise InvalidArgumentError(
                f"Money currency must be a Currency, got {type(self.currency).__name__}",
                field="currency",
            )
        object.__setattr__(self, "amount", _to_decimal(self.amount, field="amount"))

    @classmethod
    def zero(cls, currency: Currency) -> "Money":
        return cls(Decimal("0"), currency)

    def add(self, other: "Money") -> "Money":
        """
        Add two amounts of the same currency.

        Raises:
            CurrencyMismatchError: If currencies differ
            TypeError: If other is not Money
            InvalidArgumentError: If the exact sum exceeds the supported precision
        """
        if not isinstance(other, Money):
            raise TypeError(f"Cannot add Money and {type(other).__name__}")
        if other.currency != self.currency:
            raise CurrencyMismatchError(self.currency, other.currency)
        try:
            with localcontext(_EXACT_CONTEXT):
                amount = self.amount + other.amount
        except Inexact:
            raise InvalidArgumentError(
                f"Sum of {self.amount} and {other.amount} exceeds "
                f"{_MONEY_PRECISION} significant digits",
                field="amount",
            )
        return Money(amount, self.currency)

    def multiply(self, scalar: AmountLike) -> "Money":
        """
        Scale the amount, keeping the currency.

        Raises:
            InvalidArgumentError: If the exact product exceeds the supported precision
        """
        factor = _to_decimal(scalar, field="scalar")
        try:
            with localcontext(_EXACT_CONTEXT):
                amount = self.amount * factor
        except Inexact:
            raise InvalidArgumentError(
                f"Product of {self.amount} and {factor} exceeds "
                f"{_MONEY_PRECISION} significant digits",
                field="amount",
            )
        return Money(amount, self.currency)

    def format(self, locale: Optional[str] = None) -> str:
        """
        Render for display, e.g. "$1,200.00" (en-US) or "S/ 150.00" (es-PE).

        Args:
            locale: BCP 47 tag; unknown regions fall back to their language,
                unknown languages to en-US

        Returns:
            Amount rounded half-up to the currency's minor units

        Raises:
            InvalidArgumentError: If the amount is too large to display
        """
        group_sep, decimal_sep, pattern = _resolve_locale(locale)
        places = self.currency.minor_units
        quantum = Decimal(1).scaleb(-places)
        try:
            with localcontext(_DISPLAY_CONTEXT):
                rounded = self.amount.quantize(quantum)
                digits = f"{abs(rounded):,.{places}f}"
        except InvalidOperation:
            raise InvalidArgumentError(
                f"Amount {self.amount} is too large to format "
                f"(more than {_MONEY_PRECISION} digits)",
                field="amount",
            )
        digits = digits.replace(",", "\0").replace(".", decimal_sep).replace("\0", group_sep)

        text = pattern.format(symbol=self.currency.symbol, amount=digits)
        return f"-{text}" if rounded < 0 else text

    def __add__(self, other: "Money") -> "Money":
        return self.add(other)

    def __mul__(self, scalar: AmountLike) -> "Money":
        return self.multiply(scalar)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def __repr__(self) -> str:
        return f"Money('{self.amount}', {self.currency!r})"


@dataclass(frozen=True)
class DateTime:
    """
    Timezone-aware timestamp value object.

    Use DateTime.parse() to build one from user input; it rejects
    unparseable values and moments in the future.
    """

    value: datetime

    def __post_init__(self):
        if not isinstance(self.value, datetime):
            raise InvalidArgumentError(
                f"DateTime requires a datetime, got {type(self.value).__name__}",
                field="ordered_at",
            )
        if self.value.tzinfo is None:
            object.__setattr__(self, "value", self.value.replace(tzinfo=timezone.utc))

    @classmethod
    def parse(
        cls,
        raw: Union[None, str, date, datetime] = None,
        clock: Optional[IClock] = None,
    ) -> "DateTime":
        """
        Build a DateTime from optional input.

        Args:
            raw: None (now), datetime, date, or ISO 8601 string
                like "2023-05-15T10:30:00Z". Naive values are taken as UTC.
            clock: Source of "now" (defaults to the system clock)

        Returns:
            DateTime instance

        Raises:
            InvalidArgumentError: If raw is unparseable or in the future
        """
        clock = clock or system_clock
        now = clock.now()

        if raw is None:
            return cls(now)

        if isinstance(raw, datetime):
            moment = raw
        elif isinstance(raw, date):
            moment = datetime.combine(raw, time.min)
        elif isinstance(raw, str):
            moment = _parse_iso(raw)
        else:
            raise InvalidArgumentError(
                f"Invalid date: {raw!r}. Expected datetime, date or ISO 8601 string.",
                field="ordered_at",
            )

        result = cls(moment)
        if result.value > now:
            raise InvalidArgumentError(
                f"Date cannot be in the future: {result.value.isoformat()}",
                field="ordered_at",
            )
        return result

    def format(self, tz: Optional[tzinfo] = None) -> str:
        """Human-readable form, e.g. "May 15, 2023, 10:30 AM UTC" """
        moment = self.value.astimezone(tz or timezone.utc)
        hour = moment.hour % 12 or 12
        meridiem = "AM" if moment.hour < 12 else "PM"
        return (
            f"{_MONTH_NAMES[moment.month - 1]} {moment.day}, {moment.year}, "
            f"{hour}:{moment.minute:02d} {meridiem} {moment.tzname()}"
        )

    def __str__(self) -> str:
        return self.value.isoformat()

    def __repr__(self) -> str:
        return f"DateTime('{self.value.isoformat()}')"


def _to_decimal(value: AmountLike, field: str) -> Decimal:
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Invalid {field}: {value!r}", field=field)
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise InvalidArgumentError(f"Invalid {field}: {value!r}", field=field)
    if not result.is_finite():
        raise InvalidArgumentError(f"Invalid {field}: {value!r} is not finite", field=field)
    return result


def _parse_iso(raw: str) -> datetime:
    text = raw.strip()
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise InvalidArgumentError(
            f"Invalid date: {raw!r}. Expected ISO 8601 format.",
            field="ordered_at",
        )


def _resolve_locale(locale: Optional[str]):
    tag = (locale or DEFAULT_LOCALE).strip().replace("_", "-")
    for known, fmt in _LOCALE_FORMATS.items():
        if known.lower() == tag.lower():
            return fmt
    language = tag.split("-")[0].lower()
    return _LOCALE_FORMATS[_LANGUAGE_FALLBACKS.get(language, DEFAULT_LOCALE)]
