"""Synthetic daily history generation."""
from datetime import date, timedelta
from typing import Optional
import logging
import math
import random

from marketplace_backend.domain.entities import DailyRecord, SeedParameters, TimeSeries
from marketplace_backend.domain.errors import InvalidSeedError

logger = logging.getLogger(__name__)

HORIZON_DAYS = 365
PRICE_FLOOR_RATIO = 0.5
DEMAND_SCALE = 10000.0
DEMAND_NOISE = (0.8, 1.2)
SPIKE_PERIOD = 7
SPIKE_FACTOR = 1.5
BASE_SELLERS = 5
SELLER_NOISE = 10.0
UNITS_PER_SELLER = 10


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def validate_seed(seed: SeedParameters) -> None:
    """Raise InvalidSeedError if the seed cannot drive a price walk."""
    for name in ("base_price", "volatility", "trend"):
        value = getattr(seed, name)
        if not math.isfinite(value):
            raise InvalidSeedError(f"{name} must be a finite number, got {value}")
    if not seed.base_price > 0:
        raise InvalidSeedError(f"base_price must be positive, got {seed.base_price}")
    if not seed.volatility >= 0:
        raise InvalidSeedError(f"volatility must be non-negative, got {seed.volatility}")


class HistorySynthesizer:
    """Generates a daily price/demand random walk ending at a reference date.

    Each day the price moves by a uniform draw in ``[-volatility/2,
    volatility/2]`` plus the constant ``trend``, and is held at or above half
    of the base price. Demand is inversely proportional to price, scaled by
    uniform noise in ``[0.8, 1.2]`` and boosted by 1.5 on every seventh day
    counted back from the reference date. Seller count grows with demand.

    The random source is injected so a seeded ``random.Random`` (or any object
    with a compatible ``uniform(a, b)``) reproduces a series exactly.
    """

    def __init__(self, rng: Optional[random.Random] = None, horizon_days: int = HORIZON_DAYS):
        self._rng = rng if rng is not None else random.Random()
        self._horizon_days = horizon_days

    @property
    def horizon_days(self) -> int:
        return self._horizon_days

    def generate(
        self,
        seed: SeedParameters,
        reference_date: Optional[date] = None,
        rng: Optional[random.Random] = None,
    ) -> TimeSeries:
        """Generate ``horizon_days + 1`` records, oldest first, ending at ``reference_date``.

        ``rng`` overrides the synthesizer's own random source for this call.
        """
        validate_seed(seed)
        rng = rng if rng is not None else self._rng
        end = reference_date or date.today()
        floor_price = seed.base_price * PRICE_FLOOR_RATIO
        current_price = float(seed.base_price)
        records = []

        for offset in range(self._horizon_days, -1, -1):
            change = rng.uniform(-seed.volatility / 2, seed.volatility / 2)
            current_price += change + seed.trend
            if not math.isfinite(current_price):
                raise InvalidSeedError(f"price walk overflowed for seed {seed}")
            if current_price < floor_price:
                current_price = floor_price

            units_base = DEMAND_SCALE / current_price
            noise = rng.uniform(*DEMAND_NOISE)
            spike = SPIKE_FACTOR if offset % SPIKE_PERIOD == 0 else 1.0
            units_sold = max(0, math.floor(units_base * noise * spike))

            sellers = math.floor(
                BASE_SELLERS
                + rng.uniform(0, SELLER_NOISE)
                + units_sold / UNITS_PER_SELLER
            )
            price = round_half_up(current_price)

            records.append(DailyRecord(
                date=end - timedelta(days=offset),
                price=price,
                units_sold=units_sold,
                active_sellers=sellers,
                revenue=round_half_up(price * units_sold),
            ))

        logger.debug(
            f"Generated {len(records)} records ending {end.isoformat()} "
            f"(base={seed.base_price}, vol={seed.volatility}, trend={seed.trend})"
        )
        return tuple(records)
