"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date

from bookstore.domain.exceptions import InvalidParameterError


@dataclass(frozen=True)
class Money:
    """Monetary amount in the smallest currency unit (cents).

    Catalog prices, cart subtotals and order totals are all integers,
    so this only wraps an int for arithmetic and display.
    """

    cents: int

    def __post_init__(self) -> None:
        if not isinstance(self.cents, int):
            raise TypeError(
                f"Money must be an integer number of cents, got {type(self.cents).__name__}"
            )

    def __add__(self, other: Money) -> Money:
        return Money(self.cents + other.cents)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.cents * factor)

    def __str__(self) -> str:
        sign = "-" if self.cents < 0 else ""
        dollars, cents = divmod(abs(self.cents), 100)
        return f"{sign}${dollars}.{cents:02d}"


@dataclass(frozen=True, order=True)
class CardExpiry:
    """Year and month a credit card expires, ordered chronologically."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise InvalidParameterError(f"Invalid expiry month: {self.month}")
        if not MINYEAR <= self.year <= MAXYEAR:
            raise InvalidParameterError(f"Invalid expiry year: {self.year}")

    @staticmethod
    def parse(month: str, year: str) -> CardExpiry:
        """Build from the raw form strings."""
        try:
            return CardExpiry(year=int(year), month=int(month))
        except ValueError as exc:
            raise InvalidParameterError(
                f"Invalid expiry date: {month!r}/{year!r}"
            ) from exc

    @staticmethod
    def current(today: date | None = None) -> CardExpiry:
        today = today or date.today()
        return CardExpiry(year=today.year, month=today.month)

    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    def __str__(self) -> str:
        return f"{self.month:02d}/{self.year}"
