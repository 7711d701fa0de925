"""
Currency Module

Currency codes with display symbol and precision, and the immutable Money
value used for every balance and amount. Floats are converted through str()
and never used in arithmetic.
"""

from decimal import Decimal, ROUND_HALF_UP, getcontext
from dataclasses import dataclass
from enum import Enum

# Set global decimal context for financial precision
getcontext().prec = 28


class Currency(Enum):
    """ISO 4217 currency codes with display symbol and precision"""
    BRL = ("BRL", "R$", 2)   # Brazilian Real
    USD = ("USD", "US$", 2)  # US Dollar
    EUR = ("EUR", "€", 2)    # Euro
    JPY = ("JPY", "¥", 0)    # Japanese Yen

    def __init__(self, code: str, symbol: str, precision: int):
        self.code = code
        self.symbol = symbol
        self.precision = precision


@dataclass(frozen=True)
class Money:
    """
    Immutable money representation with currency.

    The amount is kept exact; rounding to the currency precision happens
    only for display, through rounded() and to_string().
    """
    amount: Decimal
    currency: Currency = Currency.BRL

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))

    @classmethod
    def zero(cls, currency: Currency = Currency.BRL) -> 'Money':
        return cls(Decimal('0'), currency)

    def _check_currency(self, other: 'Money', verb: str) -> None:
        if self.currency != other.currency:
            raise ValueError(f"Cannot {verb} {self.currency.code} and {other.currency.code}")

    def __add__(self, other: 'Money') -> 'Money':
        self._check_currency(other, "add")
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: 'Money') -> 'Money':
        self._check_currency(other, "subtract")
        return Money(self.amount - other.amount, self.currency)

    def __mul__(self, multiplier: Decimal) -> 'Money':
        if not isinstance(multiplier, Decimal):
            multiplier = Decimal(str(multiplier))
        return Money(self.amount * multiplier, self.currency)

    def __neg__(self) -> 'Money':
        return Money(-self.amount, self.currency)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Money):
            return False
        return self.amount == other.amount and self.currency == other.currency

    def __hash__(self) -> int:
        return hash((self.amount, self.currency))

    def __lt__(self, other: 'Money') -> bool:
        self._check_currency(other, "compare")
        return self.amount < other.amount

    def __le__(self, other: 'Money') -> bool:
        self._check_currency(other, "compare")
        return self.amount <= other.amount

    def __gt__(self, other: 'Money') -> bool:
        self._check_currency(other, "compare")
        return self.amount > other.amount

    def __ge__(self, other: 'Money') -> bool:
        self._check_currency(other, "compare")
        return self.amount >= other.amount

    def is_zero(self) -> bool:
        """Check if amount is exactly zero"""
        return self.amount == Decimal('0')

    def is_positive(self) -> bool:
        """Check if amount is positive"""
        return self.amount > Decimal('0')

    def is_negative(self) -> bool:
        """Check if amount is negative"""
        return self.amount < Decimal('0')

    def rounded(self) -> 'Money':
        """Amount rounded half-up to the currency precision"""
        return Money(
            self.amount.quantize(Decimal('0.1') ** self.currency.precision, rounding=ROUND_HALF_UP),
            self.currency
        )

    def to_string(self) -> str:
        """Format for statements: symbol, space, fixed decimals, no grouping"""
        return f"{self.currency.symbol} {self.rounded().amount:.{self.currency.precision}f}"


def to_money(value, currency: Currency = Currency.BRL) -> Money:
    """
    Coerce a Money, Decimal, int, float or numeric string into Money

    Floats go through str() first, so 0.1 becomes Decimal('0.1').

    Args:
        value: Amount to convert
        currency: Currency used when value carries none

    Returns:
        Money in the given currency

    Raises:
        ValueError: If value cannot be parsed or is not finite (NaN, Infinity)
    """
    if isinstance(value, Money):
        money = value
    else:
        try:
            money = Money(Decimal(str(value)), currency)
        except ArithmeticError:
            raise ValueError(f"Cannot convert {value!r} to Money")

    if not money.amount.is_finite():
        raise ValueError(f"Amount must be finite, got {value!r}")
    return money
