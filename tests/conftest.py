"""Shared pytest fixtures for pricebook."""

import pytest
from datetime import date
from decimal import Decimal

from pricebook.core.models import AssetClass
from pricebook.prices.models import LatestPrice, PricePoint
from pricebook.prices.series import PriceSeries
from pricebook.securities.security import Security


@pytest.fixture
def two_day_series() -> PriceSeries:
    """History [(2020-01-02, 100), (2020-01-03, 105)], no live quote."""
    series = PriceSeries("ACME")
    series.insert(PricePoint(date=date(2020, 1, 2), price=Decimal("100")))
    series.insert(PricePoint(date=date(2020, 1, 3), price=Decimal("105")))
    return series


@pytest.fixture
def live_quote() -> LatestPrice:
    return LatestPrice(
        date=date(2020, 1, 5),
        price=Decimal("110"),
        high=Decimal("111.5"),
        low=Decimal("108.25"),
        previous_close=Decimal("105"),
        volume=1_250_000,
    )


@pytest.fixture
def sample_security() -> Security:
    security = Security(
        name="Apple Inc.",
        isin="US0378331005",
        ticker_symbol="AAPL",
        asset_class=AssetClass.EQUITY,
        industry_classification="Technology Hardware",
        feed="yahoo",
    )
    security.add_price(PricePoint(date=date(2024, 1, 15), price=Decimal("185.92")))
    security.add_price(PricePoint(date=date(2024, 1, 16), price=Decimal("183.63")))
    return security


@pytest.fixture
def prices_csv(tmp_path):
    """A small CSV export with an unsorted row and a weekend gap."""
    csv_file = tmp_path / "acme.csv"
    csv_file.write_text(
        "date,open,high,low,close,volume\n"
        "2024-01-12,101.0,102.5,100.0,102.0,1000\n"
        "2024-01-10,99.0,100.5,98.0,100.0,1200\n"
        "2024-01-11,100.0,101.5,99.5,101.0,900\n"
        "2024-01-15,102.0,104.0,101.0,103.5,1500\n"
    )
    return csv_file
