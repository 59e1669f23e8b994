"""The security record and its owned price series."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from functools import cmp_to_key

from pricebook.core.models import AssetClass, FeedName, Isin, SecurityName, TickerSymbol
from pricebook.prices.models import LatestPrice, PricePoint
from pricebook.prices.series import PriceSeries
from pricebook.securities.ledger import (
    AccountTransaction,
    Client,
    PortfolioTransaction,
    security_transactions,
)


@dataclass(eq=False)
class Security:
    """A tradable instrument together with its price history.

    Securities compare by identity: two records with the same name are
    still two securities. The price series is owned exclusively; use the
    delegating methods or ``price_series`` directly, never share a series
    between securities (``deep_copy`` gives each copy its own).
    """

    name: SecurityName | None = None
    isin: Isin | None = None
    ticker_symbol: TickerSymbol | None = None
    asset_class: AssetClass | None = None
    industry_classification: str | None = None
    feed: FeedName | None = None
    price_series: PriceSeries = field(default=None, repr=False)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.price_series is None:
            self.price_series = PriceSeries(self.ticker_symbol or self.name)

    # --- Prices ---

    @property
    def prices(self) -> tuple[PricePoint, ...]:
        """Archived prices, oldest first (read-only snapshot)."""
        return self.price_series.history

    @property
    def latest(self) -> LatestPrice | None:
        return self.price_series.live

    @latest.setter
    def latest(self, quote: LatestPrice | None) -> None:
        self.price_series.set_live(quote)

    def add_price(self, point: PricePoint) -> None:
        self.price_series.insert(point)

    def remove_price(self, point: PricePoint | date) -> None:
        self.price_series.remove(point)

    def remove_all_prices(self) -> None:
        self.price_series.clear()

    def get_price(self, at: date) -> PricePoint:
        """Price in effect on ``at``; a zero price means none is known."""
        return self.price_series.query(at)

    # --- Ledger ---

    def get_transactions(self, client: Client) -> list[AccountTransaction | PortfolioTransaction]:
        """Income and position transactions of this security across ``client``."""
        return security_transactions(self, client)

    # --- Copying ---

    def deep_copy(self) -> Security:
        """Copy with an independent price archive and the same live quote."""
        return Security(
            name=self.name,
            isin=self.isin,
            ticker_symbol=self.ticker_symbol,
            asset_class=self.asset_class,
            industry_classification=self.industry_classification,
            feed=self.feed,
            price_series=self.price_series.deep_copy(),
        )

    def __str__(self) -> str:
        return self.name or ""


def compare_by_name(a: Security | None, b: Security | None) -> int:
    """Three-way comparison by name with None first.

    Total and symmetric: a missing security sorts before any security, and
    a security without a name sorts before any named one.
    """
    if a is None or b is None:
        return (a is not None) - (b is not None)
    if a.name is None or b.name is None:
        return (a.name is not None) - (b.name is not None)
    return (a.name > b.name) - (a.name < b.name)


def sort_by_name(securities: Iterable[Security | None]) -> list[Security | None]:
    """Return a new list ordered by ``compare_by_name``."""
    return sorted(securities, key=cmp_to_key(compare_by_name))
