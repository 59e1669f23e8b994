"""Date-ordered price history with a live quote overlay.

A ``PriceSeries`` holds the archived prices of one security, at most one
per calendar day and always sorted by date, plus an optional live quote
that is never merged into the archive. ``query`` answers "what was the
price on day X" with as-of semantics:

- an exact day returns that day's point;
- a day between two points returns the earlier one;
- a day before the first point returns the first point;
- a day after the last point returns the live quote when it is at least
  as recent as the last archived point, otherwise the last point.

An empty archive answers with the live quote, or with a zero-priced point
when there is no live quote either (``find`` returns None instead).
"""

from __future__ import annotations

import logging
import threading
from bisect import bisect_left, bisect_right
from collections.abc import Iterator
from datetime import date, datetime
from operator import attrgetter

import pandas as pd

from pricebook.prices.models import LatestPrice, PricePoint

logger = logging.getLogger(__name__)

_by_date = attrgetter("date")


def _as_day(at: date) -> date:
    if isinstance(at, datetime):
        return at.date()
    return at


class PriceSeries:
    """Archived daily prices plus an optional live quote.

    Parameters
    ----------
    label : str | None
        Name used in log messages and as the name of ``to_series()``.
        Usually the owning security's name or ticker.

    All public methods take the same re-entrant lock, so one series can be
    shared between threads.
    """

    def __init__(self, label: str | None = None) -> None:
        self._label = label
        self._history: list[PricePoint] = []
        self._live: LatestPrice | None = None
        self._lock = threading.RLock()

    # --- Accessors ---

    @property
    def label(self) -> str | None:
        return self._label

    @property
    def history(self) -> tuple[PricePoint, ...]:
        """Snapshot of the archived points, oldest first."""
        with self._lock:
            return tuple(self._history)

    @property
    def live(self) -> LatestPrice | None:
        return self._live

    @live.setter
    def live(self, quote: LatestPrice | None) -> None:
        self.set_live(quote)

    @property
    def first(self) -> PricePoint | None:
        with self._lock:
            return self._history[0] if self._history else None

    @property
    def last(self) -> PricePoint | None:
        with self._lock:
            return self._history[-1] if self._history else None

    # --- Mutators ---

    def insert(self, point: PricePoint) -> None:
        """Add a point, replacing whatever point already sits on its date."""
        with self._lock:
            idx = bisect_left(self._history, point.date, key=_by_date)
            if idx < len(self._history) and self._history[idx].date == point.date:
                self._history[idx] = point
                logger.debug("%s: replaced price on %s with %s", self, point.date, point.price)
            else:
                self._history.insert(idx, point)
                logger.debug("%s: added price %s on %s", self, point.price, point.date)

    def remove(self, point: PricePoint | date) -> None:
        """Drop the point on the given point's date. Absent dates are ignored."""
        day = point.date if isinstance(point, PricePoint) else _as_day(point)
        with self._lock:
            idx = self._index_of(day)
            if idx is None:
                return
            del self._history[idx]
            logger.debug("%s: removed price on %s", self, day)

    def clear(self) -> None:
        """Drop all archived points. The live quote is kept."""
        with self._lock:
            count = len(self._history)
            self._history.clear()
        logger.debug("%s: cleared %d price(s)", self, count)

    def set_live(self, quote: LatestPrice | None) -> None:
        """Replace or clear the live quote."""
        with self._lock:
            self._live = quote
        if quote is None:
            logger.debug("%s: cleared live quote", self)
        else:
            logger.debug("%s: live quote %s on %s", self, quote.price, quote.date)

    # --- Queries ---

    def get(self, at: date) -> PricePoint | None:
        """Return the archived point dated exactly ``at``, if any."""
        with self._lock:
            idx = self._index_of(_as_day(at))
            return None if idx is None else self._history[idx]

    def find(self, at: date) -> PricePoint | None:
        """Resolve the price in effect on ``at``; None when nothing is known."""
        at = _as_day(at)
        with self._lock:
            if not self._history:
                return self._live

            if self._live is not None:
                last = self._history[-1]
                if last.date < at:
                    return self._live if self._live.date >= last.date else last

            # entries up to and including ``at``; clamp to the first one
            idx = bisect_right(self._history, at, key=_by_date)
            return self._history[max(idx - 1, 0)]

    def query(self, at: date) -> PricePoint:
        """Resolve the price in effect on ``at``.

        Same as ``find`` except that a series with neither history nor a
        live quote answers with a zero-priced point dated ``at``. Callers
        must read a zero price as "no data".
        """
        point = self.find(at)
        if point is None:
            return PricePoint.zero(_as_day(at))
        return point

    def between(self, start: date | None = None, end: date | None = None) -> tuple[PricePoint, ...]:
        """Archived points with ``start <= date <= end``; open bounds when None."""
        with self._lock:
            lo = 0 if start is None else bisect_left(self._history, _as_day(start), key=_by_date)
            hi = len(self._history) if end is None else bisect_right(self._history, _as_day(end), key=_by_date)
            return tuple(self._history[lo:hi])

    # --- Copying / export ---

    def deep_copy(self) -> PriceSeries:
        """Independent archive, shared live quote.

        Points are immutable, so copying the list is enough to make the
        two archives independent.
        """
        with self._lock:
            answer = PriceSeries(self._label)
            answer._history = list(self._history)
            answer._live = self._live
        return answer

    def to_series(self) -> pd.Series:
        """Archived prices as a Decimal-valued ``pd.Series`` indexed by date."""
        points = self.history
        index = pd.to_datetime([p.date for p in points])
        return pd.Series([p.price for p in points], index=index, name=self._label, dtype=object)

    # --- Internals ---

    def _index_of(self, day: date) -> int | None:
        idx = bisect_left(self._history, day, key=_by_date)
        if idx < len(self._history) and self._history[idx].date == day:
            return idx
        return None

    def __len__(self) -> int:
        return len(self._history)

    def __bool__(self) -> bool:
        return bool(self._history)

    def __iter__(self) -> Iterator[PricePoint]:
        return iter(self.history)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, PricePoint):
            item = item.date
        if not isinstance(item, date):
            return False
        return self.get(item) is not None

    def __str__(self) -> str:
        return self._label or "PriceSeries"

    def __repr__(self) -> str:
        return f"PriceSeries(label={self._label!r}, points={len(self._history)}, live={self._live!r})"
