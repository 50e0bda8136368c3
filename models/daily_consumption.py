"""
Data models for daily electricity consumption and billing bands
"""
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

HOURS_PER_DAY = 24


@dataclass(frozen=True)
class Band:
    """Fixed hour-of-day range with its reading range and tariff"""
    name: str
    start_hour: int
    end_hour: int  # inclusive
    min_kwh: int
    max_kwh: int
    tariff: int  # COP per kWh

    @property
    def label(self) -> str:
        return f"{self.name} ({self.start_hour:02d}-{self.end_hour:02d})"

    def contains(self, hour: int) -> bool:
        return self.start_hour <= hour <= self.end_hour


BANDS = (
    Band("Band 1", 0, 6, 100, 300, 200),
    Band("Band 2", 7, 17, 300, 600, 300),
    Band("Band 3", 18, 23, 601, 999, 500),
)


def band_for_hour(hour: int) -> Band:
    """Get the band an hour of the day belongs to"""
    for band in BANDS:
        if band.contains(hour):
            return band
    raise ValueError(f"Hour out of range: {hour}")


def band_sum(sequence: Sequence[int], start_hour: int, end_hour: int) -> int:
    """Sum the readings of the inclusive hour range [start_hour, end_hour]"""
    return sum(sequence[start_hour:end_hour + 1])


@dataclass(frozen=True)
class DailyConsumption:
    """Hourly electricity consumption (kWh) for one calendar day"""
    month: str
    day: int
    hours: Tuple[int, ...]  # 24 readings, index = hour of day

    def __post_init__(self):
        if len(self.hours) != HOURS_PER_DAY:
            raise ValueError(f"Expected {HOURS_PER_DAY} hourly readings, got {len(self.hours)}")

    @property
    def key(self) -> Tuple[str, int]:
        return (self.month, self.day)

    @property
    def total(self) -> int:
        return sum(self.hours)

    def band_totals(self) -> List[int]:
        """Consumption per band, in band order"""
        return [band_sum(self.hours, b.start_hour, b.end_hour) for b in BANDS]

    def cost(self) -> int:
        """Amount to pay for this day, each band at its own tariff"""
        return sum(total * band.tariff for total, band in zip(self.band_totals(), BANDS))

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization"""
        return {
            "month": self.month,
            "day": self.day,
            "hours": list(self.hours),
            "bands": self.band_totals(),
            "total": self.total,
        }

    @classmethod
    def from_dict(cls, data: Dict):
        """Create from dictionary"""
        return cls(
            month=data["month"],
            day=data["day"],
            hours=tuple(data["hours"]),
        )


@dataclass(frozen=True)
class MonthlySummary:
    """Lowest/highest consumption days and amount to pay for a month"""
    month: str
    days: int
    min_day: int
    min_total: int
    max_day: int
    max_total: int
    monetary_total: int  # COP

    def as_tuple(self) -> Tuple[int, int, int, int, int]:
        return (self.min_day, self.min_total, self.max_day, self.max_total, self.monetary_total)

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization"""
        return {
            "month": self.month,
            "days": self.days,
            "min_day": self.min_day,
            "min_total": self.min_total,
            "max_day": self.max_day,
            "max_total": self.max_total,
            "monetary_total": self.monetary_total,
        }
