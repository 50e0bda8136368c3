"""
Monthly query - lowest/highest consumption day and amount to pay
"""
from models.calendar_month import days_in_month, month_index
from models.daily_consumption import BANDS, MonthlySummary, band_sum
from storage.consumption_store import ConsumptionStore
import logging

logger = logging.getLogger(__name__)


def summarize_month(store: ConsumptionStore, month: str) -> MonthlySummary:
    """
    Aggregate every day of a month, generating the days not seen yet.

    Ties keep the earliest day, since comparisons are strict.
    """
    days = days_in_month(month_index(month))

    min_total = None
    max_total = None
    min_day = max_day = -1
    monetary_total = 0

    for day in range(1, days + 1):
        consumption = store.get_or_generate(month, day)
        total = consumption.total

        if min_total is None or total < min_total:
            min_total = total
            min_day = day
        if max_total is None or total > max_total:
            max_total = total
            max_day = day

        for band in BANDS:
            monetary_total += band_sum(consumption.hours, band.start_hour, band.end_hour) * band.tariff

    logger.info(
        f"{month}: min day {min_day} ({min_total} kWh), max day {max_day} ({max_total} kWh), "
        f"total {monetary_total} COP"
    )

    return MonthlySummary(
        month=month,
        days=days,
        min_day=min_day,
        min_total=min_total,
        max_day=max_day,
        max_total=max_total,
        monetary_total=monetary_total,
    )
