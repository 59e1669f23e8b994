"""Price point models shared by the series, the adapters and the CLI."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

ZERO = Decimal("0")


def _to_decimal(v: Any) -> Any:
    """Route floats through str() so 101.1 stays 101.1 and not its binary expansion."""
    if isinstance(v, float):
        return Decimal(str(v))
    return v


class PricePoint(BaseModel):
    """A single price observation for one calendar day.

    Points order by ``date`` only; the price plays no part in ``<``/``>``.
    Field equality (``==``) still compares both fields, so two points for
    the same day with different prices are ordered as equal but are not
    equal objects.
    """

    model_config = ConfigDict(frozen=True)

    date: date
    price: Decimal

    @field_validator("price", mode="before")
    @classmethod
    def price_from_float(cls, v: Any) -> Any:
        return _to_decimal(v)

    @field_validator("price")
    @classmethod
    def price_is_finite(cls, v: Decimal) -> Decimal:
        if not v.is_finite():
            raise ValueError(f"price must be finite, got {v}")
        return v

    @classmethod
    def zero(cls, at: date) -> PricePoint:
        """Return the zero-valued placeholder used when nothing is known."""
        return cls(date=at, price=ZERO)

    @property
    def is_zero(self) -> bool:
        return self.price == ZERO

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PricePoint):
            return NotImplemented
        return self.date < other.date

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PricePoint):
            return NotImplemented
        return self.date <= other.date

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PricePoint):
            return NotImplemented
        return self.date > other.date

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, PricePoint):
            return NotImplemented
        return self.date >= other.date


class LatestPrice(PricePoint):
    """The most recently fetched quote, kept apart from archived history.

    Besides the quote itself a feed usually reports the trading range of
    the day, the previous close and the traded volume; all of them are
    optional.
    """

    high: Decimal | None = None
    low: Decimal | None = None
    previous_close: Decimal | None = None
    volume: int | None = None

    @field_validator("high", "low", "previous_close", mode="before")
    @classmethod
    def detail_from_float(cls, v: Any) -> Any:
        return _to_decimal(v)

    @field_validator("volume")
    @classmethod
    def volume_non_negative(cls, v: int | None) -> int | None:
        if v is not None and v < 0:
            raise ValueError(f"volume must be >= 0, got {v}")
        return v
