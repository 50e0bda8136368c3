"""
Consumption Store - lazily generated, cached daily consumption per (month, day)
"""
from typing import Dict, List, Optional, Tuple
from models.daily_consumption import DailyConsumption, band_sum
from simulation.consumption_generator import ConsumptionGenerator
import logging

logger = logging.getLogger(__name__)

__all__ = ["ConsumptionStore", "band_sum"]


class ConsumptionStore:
    """
    In-memory mapping from (month name, day number) to a DailyConsumption.
    A day is generated on first lookup and returned unchanged afterwards.
    Nothing is evicted or persisted.
    """

    def __init__(self, generator: Optional[ConsumptionGenerator] = None, seed: Optional[int] = None):
        self.generator = generator or ConsumptionGenerator(seed=seed)
        self.data: Dict[Tuple[str, int], DailyConsumption] = {}

    def get_or_generate(self, month: str, day: int) -> DailyConsumption:
        """
        Return the stored day, generating and storing it first if missing.
        Month and day are not validated here.
        """
        key = (month, day)
        if key in self.data:
            return self.data[key]

        consumption = self.generator.generate_day(month, day)
        self.data[key] = consumption
        logger.debug(f"Stored {month}-{day} ({consumption.total} kWh). Cached days: {len(self.data)}")
        return consumption

    def get(self, month: str, day: int) -> Optional[DailyConsumption]:
        """Get a day only if it was already generated"""
        return self.data.get((month, day))

    def get_all_keys(self) -> List[Tuple[str, int]]:
        """Get all generated keys in generation order"""
        return list(self.data.keys())

    def __contains__(self, key) -> bool:
        return key in self.data

    def __len__(self) -> int:
        return len(self.data)

    def __repr__(self):
        return f"ConsumptionStore(days={len(self.data)})"
