"""
Consumption Generator - produces random hourly readings for a calendar day
"""
from typing import List, Optional
from models.daily_consumption import BANDS, HOURS_PER_DAY, DailyConsumption, band_for_hour
import random
import logging

logger = logging.getLogger(__name__)


class ConsumptionGenerator:
    """Generates hourly consumption using the reading range of each band"""

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        """
        Args:
            rng: Random source to draw from. Takes precedence over seed.
            seed: Seed for a new random source when rng is not given.
        """
        self.rng = rng if rng is not None else random.Random(seed)

    def generate_hours(self) -> List[int]:
        """
        Draw one reading per hour.
        Each value is uniform over the inclusive range of the hour's band.
        """
        return [self._simulate_hour(hour) for hour in range(HOURS_PER_DAY)]

    def generate_day(self, month: str, day: int) -> DailyConsumption:
        """Generate a full day of readings"""
        hours = self.generate_hours()
        logger.debug(
            f"Generated {month}-{day}: "
            + ", ".join(f"{b.name}={sum(hours[b.start_hour:b.end_hour + 1])}" for b in BANDS)
        )
        return DailyConsumption(month=month, day=day, hours=tuple(hours))

    def _simulate_hour(self, hour: int) -> int:
        band = band_for_hour(hour)
        return self.rng.randint(band.min_kwh, band.max_kwh)
