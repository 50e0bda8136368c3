"""
Plain-text reports for a day and for a month
"""
from models.daily_consumption import BANDS, DailyConsumption, MonthlySummary


def format_day_report(consumption: DailyConsumption) -> str:
    """Band totals, day total and the 24 hourly readings"""
    lines = [f"Day {consumption.day} of {consumption.month}"]
    for band, total in zip(BANDS, consumption.band_totals()):
        lines.append(f"{band.label}: {total} kWh")
    lines.append(f"Total consumption: {consumption.total} kWh")
    lines.append("")
    lines.append("Consumption per hour:")
    for hour, kwh in enumerate(consumption.hours):
        lines.append(f"Hour {hour:02d}: {kwh} kWh")
    return "\n".join(lines)


def format_month_report(summary: MonthlySummary) -> str:
    lines = [
        f"Summary for {summary.month}:",
        f"Lowest consumption day: {summary.min_day} ({summary.min_total} kWh)",
        f"Highest consumption day: {summary.max_day} ({summary.max_total} kWh)",
        f"Total to pay for the month: {summary.monetary_total} COP",
    ]
    return "\n".join(lines)
