"""Tests for pricebook.prices.models."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from pricebook.prices.models import LatestPrice, PricePoint


class TestPricePoint:
    def test_create_valid(self):
        p = PricePoint(date=date(2024, 1, 15), price=Decimal("186.50"))
        assert p.date == date(2024, 1, 15)
        assert p.price == Decimal("186.50")

    def test_float_price_keeps_decimal_text(self):
        p = PricePoint(date=date(2024, 1, 15), price=101.1)
        assert p.price == Decimal("101.1")

    def test_string_price_accepted(self):
        p = PricePoint(date=date(2024, 1, 15), price="42.125")
        assert p.price == Decimal("42.125")

    def test_non_finite_price_rejected(self):
        with pytest.raises(ValidationError):
            PricePoint(date=date(2024, 1, 15), price=Decimal("NaN"))

    def test_frozen(self):
        p = PricePoint(date=date(2024, 1, 15), price=Decimal("1"))
        with pytest.raises(ValidationError):
            p.price = Decimal("2")  # type: ignore[misc]

    def test_zero(self):
        p = PricePoint.zero(date(2020, 1, 1))
        assert p.date == date(2020, 1, 1)
        assert p.price == 0
        assert p.is_zero

    def test_non_zero(self):
        assert not PricePoint(date=date(2020, 1, 1), price=Decimal("0.01")).is_zero


class TestPricePointOrdering:
    def test_orders_by_date(self):
        early = PricePoint(date=date(2020, 1, 2), price=Decimal("500"))
        late = PricePoint(date=date(2020, 1, 3), price=Decimal("1"))
        assert early < late
        assert late > early
        assert sorted([late, early]) == [early, late]

    def test_price_ignored_for_ordering(self):
        a = PricePoint(date=date(2020, 1, 2), price=Decimal("100"))
        b = PricePoint(date=date(2020, 1, 2), price=Decimal("200"))
        assert a <= b
        assert b <= a
        assert not a < b
        assert not b < a

    def test_equality_compares_price(self):
        a = PricePoint(date=date(2020, 1, 2), price=Decimal("100"))
        b = PricePoint(date=date(2020, 1, 2), price=Decimal("200"))
        assert a != b
        assert a == PricePoint(date=date(2020, 1, 2), price=Decimal("100"))

    def test_compare_with_other_type_fails(self):
        p = PricePoint(date=date(2020, 1, 2), price=Decimal("100"))
        with pytest.raises(TypeError):
            p < date(2020, 1, 3)  # noqa: B015

    def test_hashable(self):
        p = PricePoint(date=date(2020, 1, 2), price=Decimal("100"))
        assert p in {p}


class TestLatestPrice:
    def test_is_a_price_point(self, live_quote):
        assert isinstance(live_quote, PricePoint)
        assert live_quote.high == Decimal("111.5")
        assert live_quote.volume == 1_250_000

    def test_detail_optional(self):
        q = LatestPrice(date=date(2024, 1, 15), price=Decimal("10"))
        assert q.high is None
        assert q.low is None
        assert q.previous_close is None
        assert q.volume is None

    def test_float_detail_converted(self):
        q = LatestPrice(date=date(2024, 1, 15), price=10, high=10.3)
        assert q.high == Decimal("10.3")

    def test_negative_volume_rejected(self):
        with pytest.raises(ValidationError, match="volume must be >= 0"):
            LatestPrice(date=date(2024, 1, 15), price=Decimal("10"), volume=-1)

    def test_orders_against_history_points(self):
        q = LatestPrice(date=date(2024, 1, 15), price=Decimal("10"))
        p = PricePoint(date=date(2024, 1, 14), price=Decimal("99"))
        assert p < q
