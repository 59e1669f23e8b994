"""Price history and as-of price resolution.

Key abstractions:

- ``PricePoint``: One day's price; orders by date only.
- ``LatestPrice``: The live quote kept outside the archived history.
- ``PriceSeries``: Date-ordered archive plus live overlay, with as-of
  ``query``/``find`` lookups.

Loading:

- ``CSVPriceAdapter``: Parses CSV rows into PricePoints.
- ``load_csv_prices``: Builds a PriceSeries from a CSV file.
"""

from pricebook.prices.csv_adapter import CSVPriceAdapter, load_csv_prices
from pricebook.prices.models import LatestPrice, PricePoint
from pricebook.prices.series import PriceSeries

__all__ = [
    # Models
    "PricePoint",
    "LatestPrice",
    # Series
    "PriceSeries",
    # CSV
    "CSVPriceAdapter",
    "load_csv_prices",
]
