"""Trailing-window slicing and summary statistics."""
from typing import Sequence, Tuple
import logging

from marketplace_backend.domain.entities import (
    AggregateResult, DailyRecord, TimeSeries, WindowSelector,
)
from marketplace_backend.domain.errors import EmptySeriesError
from marketplace_backend.services.history_synthesizer import round_half_up

logger = logging.getLogger(__name__)


class WindowAggregator:
    """Stateless reducer over the trailing days of a series."""

    @staticmethod
    def trailing(series: Sequence[DailyRecord], days: int) -> TimeSeries:
        """Last ``days`` records, or the whole series if it is shorter."""
        if days <= 0:
            return ()
        return tuple(series[-days:])

    def aggregate(
        self, series: Sequence[DailyRecord], selector: WindowSelector
    ) -> Tuple[TimeSeries, AggregateResult]:
        """Slice the trailing window for ``selector`` and summarize it.

        Raises EmptySeriesError for an empty series; there is no sentinel
        result since average and maximum are undefined.
        """
        if not series:
            raise EmptySeriesError("Cannot aggregate an empty series")

        window = self.trailing(series, WindowSelector(selector).days)
        result = AggregateResult(
            average_price=round_half_up(sum(r.price for r in window) / len(window)),
            total_units_sold=sum(r.units_sold for r in window),
            peak_active_sellers=max(r.active_sellers for r in window),
        )
        return window, result
