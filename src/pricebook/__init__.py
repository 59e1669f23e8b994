"""pricebook: daily price history and as-of price lookups for securities."""

__version__ = "0.1.0"

from pricebook.prices import LatestPrice, PricePoint, PriceSeries
from pricebook.securities import Security, compare_by_name, sort_by_name

__all__ = [
    "LatestPrice",
    "PricePoint",
    "PriceSeries",
    "Security",
    "compare_by_name",
    "sort_by_name",
]
