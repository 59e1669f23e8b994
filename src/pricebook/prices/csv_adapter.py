"""CSV price adapter — populates a price series from a CSV file.

The adapter only turns rows into ``PricePoint`` records; building the
series is plain repeated ``PriceSeries.insert``, so a file may list days
in any order and a later row for the same day wins.
"""

from __future__ import annotations

import csv
import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

from pricebook.core.exceptions import PriceDataError
from pricebook.prices.models import PricePoint
from pricebook.prices.series import PriceSeries

logger = logging.getLogger(__name__)

# Common column name mappings for auto-detection
_DATE_ALIASES = ("date", "Date", "DATE", "timestamp", "Timestamp")
_PRICE_ALIASES = ("close", "Close", "CLOSE", "price", "Price", "adj_close", "Adj Close")


def _find_column(headers: list[str], aliases: tuple[str, ...]) -> str | None:
    """Return the first alias present in headers; earlier aliases win."""
    for alias in aliases:
        if alias in headers:
            return alias
    return None


class CSVPriceAdapter:
    """Transforms CSV rows into PricePoint records.

    Parameters
    ----------
    date_col : str | None
        Name of the date column. Auto-detected if None.
    price_col : str | None
        Name of the price column. Auto-detected if None, preferring
        close over price over adjusted close.
    date_format : str
        strptime format used when a date is not ISO-8601.
    """

    def __init__(
        self,
        date_col: str | None = None,
        price_col: str | None = None,
        date_format: str = "%Y-%m-%d",
    ) -> None:
        self._date_col = date_col
        self._price_col = price_col
        self._date_format = date_format

    def _resolve_columns(self, headers: list[str]) -> dict[str, str | None]:
        return {
            "date": self._date_col or _find_column(headers, _DATE_ALIASES),
            "price": self._price_col or _find_column(headers, _PRICE_ALIASES),
        }

    def _parse_date(self, raw: str) -> date | None:
        try:
            return date.fromisoformat(raw)
        except ValueError:
            pass
        try:
            return datetime.strptime(raw, self._date_format).date()
        except ValueError:
            return None

    def adapt(self, raw_data: Any, source: str = "csv") -> list[PricePoint]:
        """Parse CSV rows (list of dicts) into PricePoints.

        Parameters
        ----------
        raw_data : list[dict[str, str]]
            Rows from csv.DictReader. Each dict maps column name → value.
        source : str
            Name of the data origin, used in error context.

        Returns
        -------
        list[PricePoint]
            One point per parseable row, sorted by date ascending.

        Raises
        ------
        PriceDataError
            If the date or price column cannot be found, or a price is
            not a number.
        """
        if not raw_data:
            return []

        headers = list(raw_data[0].keys())
        cols = self._resolve_columns(headers)

        for role in ("date", "price"):
            if cols[role] is None or cols[role] not in headers:
                raise PriceDataError(
                    f"Cannot find {role} column in headers: {headers}",
                    context={"source": source, "column": role},
                )

        points: list[PricePoint] = []
        for row_no, row in enumerate(raw_data, start=1):
            raw_date = (row.get(cols["date"]) or "").strip()
            point_date = self._parse_date(raw_date)
            if point_date is None:
                logger.warning("Skipping row %d with unparseable date: %r", row_no, raw_date)
                continue

            raw_price = (row.get(cols["price"]) or "").strip()
            try:
                price = Decimal(raw_price)
            except InvalidOperation as e:
                raise PriceDataError(
                    f"Unparseable price {raw_price!r} on row {row_no}",
                    context={"source": source, "row": row_no, "column": cols["price"]},
                ) from e
            if not price.is_finite():
                raise PriceDataError(
                    f"Non-finite price {raw_price!r} on row {row_no}",
                    context={"source": source, "row": row_no, "column": cols["price"]},
                )

            points.append(PricePoint(date=point_date, price=price))

        return sorted(points)


def load_csv_prices(
    filepath: str,
    label: str | None = None,
    delimiter: str = ",",
    **adapter_kwargs: Any,
) -> PriceSeries:
    """Convenience function: build a price series from a CSV file.

    Parameters
    ----------
    filepath : str
        Path to the CSV file.
    label : str | None
        Label for the series. Defaults to the file stem.
    delimiter : str
        Field separator.
    **adapter_kwargs
        Passed to CSVPriceAdapter constructor.

    Returns
    -------
    PriceSeries
        Series holding one point per distinct date in the file.
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"CSV file not found: {filepath}")

    with open(path, newline="") as f:
        reader = csv.DictReader(f, delimiter=delimiter)
        rows = list(reader)

    adapter = CSVPriceAdapter(**adapter_kwargs)
    points = adapter.adapt(rows, source=str(path))

    series = PriceSeries(label or path.stem)
    for point in points:
        series.insert(point)

    logger.info("Loaded %d price(s) from %s into %s", len(series), path, series)
    return series
