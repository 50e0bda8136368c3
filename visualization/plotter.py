"""
Matplotlib-based visualization for daily and monthly electricity consumption.
"""

import os
import logging
from typing import List, Optional
import matplotlib
matplotlib.use('Agg')  # Non-interactive backend, charts go to files
import matplotlib.pyplot as plt
from matplotlib.patches import Patch
import pandas as pd
import numpy as np

from models.daily_consumption import BANDS, DailyConsumption, MonthlySummary, band_for_hour

logger = logging.getLogger(__name__)

BAND_COLORS = ['#3498db', '#f1c40f', '#e74c3c']


def extreme_day_labels(summary: MonthlySummary) -> List[tuple]:
    """(day, label) pairs for the lowest and highest day, merged when they coincide"""
    if summary.min_day == summary.max_day:
        return [(summary.min_day, 'min/max')]
    return [(summary.min_day, 'min'), (summary.max_day, 'max')]


class CalendarPlotter:
    """Creates charts for one day or one month of consumption."""

    def __init__(self, output_dir: str = "plots"):
        """
        Initialize plotter.

        Args:
            output_dir: Directory to save plot files
        """
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        # Set style
        plt.style.use('seaborn-v0_8-darkgrid')

    def plot_day(self, consumption: DailyConsumption, filename: Optional[str] = None) -> str:
        """
        Bar chart of the 24 hourly readings, coloured by band.

        Args:
            consumption: Day to plot
            filename: Output filename, defaults to day_<month>_<day>.png
        """
        if filename is None:
            filename = f"day_{consumption.month.lower()}_{consumption.day:02d}.png"

        # Clear any existing figures to prevent clipping
        plt.close('all')

        hours = list(range(len(consumption.hours)))
        band_index = [BANDS.index(band_for_hour(h)) for h in hours]
        colors = [BAND_COLORS[i] for i in band_index]

        fig, ax = plt.subplots(figsize=(14, 7))
        ax.bar(hours, consumption.hours, color=colors, alpha=0.85,
               edgecolor='black', linewidth=1.0)

        ax.set_xlabel('Hour of Day', fontsize=12, fontweight='bold')
        ax.set_ylabel('Consumption (kWh)', fontsize=12, fontweight='bold')
        ax.set_title(f'Hourly Consumption - {consumption.month} {consumption.day} '
                     f'({consumption.total} kWh)',
                     fontsize=14, fontweight='bold', pad=20)
        ax.set_xticks(hours)
        ax.set_xticklabels([f"{h:02d}" for h in hours])
        ax.grid(True, alpha=0.3, axis='y')

        handles = [
            Patch(color=BAND_COLORS[i], label=f"{band.label}: {total} kWh")
            for i, (band, total) in enumerate(zip(BANDS, consumption.band_totals()))
        ]
        ax.legend(handles=handles, loc='upper left', framealpha=0.9)

        return self._save(fig, filename, "daily consumption plot")

    def plot_month_totals(self,
                          days: List[DailyConsumption],
                          summary: Optional[MonthlySummary] = None,
                          filename: Optional[str] = None) -> Optional[str]:
        """
        Daily totals for a month, with the lowest and highest day highlighted.

        Args:
            days: Days of the month in day order
            summary: Monthly summary used to mark min/max days
            filename: Output filename
        """
        if not days:
            logger.warning("No consumption data to plot")
            return None

        month = days[0].month
        if filename is None:
            filename = f"month_{month.lower()}_totals.png"

        plt.close('all')

        day_numbers = [d.day for d in days]
        totals = [d.total for d in days]
        colors = ['#95a5a6'] * len(days)
        if summary is not None:
            for i, day in enumerate(day_numbers):
                if day == summary.min_day:
                    colors[i] = '#27ae60'
                elif day == summary.max_day:
                    colors[i] = '#c0392b'

        fig, ax = plt.subplots(figsize=(14, 7))
        ax.bar(day_numbers, totals, color=colors, alpha=0.85,
               edgecolor='black', linewidth=1.0)
        ax.axhline(np.mean(totals), linestyle='--', color='#34495e', alpha=0.7,
                   label=f'Mean: {np.mean(totals):.0f} kWh')

        ax.set_xlabel('Day', fontsize=12, fontweight='bold')
        ax.set_ylabel('Total Consumption (kWh)', fontsize=12, fontweight='bold')
        title = f'Daily Consumption - {month}'
        if summary is not None:
            title += f' (total to pay: {summary.monetary_total:,} COP)'
        ax.set_title(title, fontsize=14, fontweight='bold', pad=20)
        ax.set_xticks(day_numbers)
        ax.set_ylim(min(totals) * 0.95, max(totals) * 1.03)
        ax.grid(True, alpha=0.3, axis='y')
        ax.legend(loc='best', framealpha=0.9)

        # Label only the marked days
        if summary is not None:
            for day, label in extreme_day_labels(summary):
                total = totals[day_numbers.index(day)]
                ax.text(day, total, f'{label}\n{total}', ha='center', va='bottom',
                        fontweight='bold', fontsize=9)

        return self._save(fig, filename, "monthly totals plot")

    def plot_month_heatmap(self,
                           days: List[DailyConsumption],
                           filename: Optional[str] = None) -> Optional[str]:
        """
        Heatmap of consumption by day of month and hour.

        Args:
            days: Days of the month
            filename: Output filename
        """
        if not days:
            logger.warning("No consumption data for heatmap")
            return None

        month = days[0].month
        if filename is None:
            filename = f"month_{month.lower()}_heatmap.png"

        plt.close('all')

        # Convert to DataFrame
        df = pd.DataFrame([
            {'day': d.day, 'hour': hour, 'consumption': kwh}
            for d in days
            for hour, kwh in enumerate(d.hours)
        ])

        # Pivot table: days x hours
        pivot = df.pivot_table(values='consumption',
                               index='day',
                               columns='hour',
                               aggfunc='sum')

        fig, ax = plt.subplots(figsize=(14, 10))

        im = ax.imshow(pivot.values, cmap='YlOrRd', aspect='auto', interpolation='nearest')

        ax.set_xticks(np.arange(len(pivot.columns)))
        ax.set_yticks(np.arange(len(pivot.index)))
        ax.set_xticklabels([f"{int(h):02d}:00" for h in pivot.columns])
        ax.set_yticklabels(pivot.index)

        ax.set_xlabel('Hour of Day', fontsize=12, fontweight='bold')
        ax.set_ylabel('Day', fontsize=12, fontweight='bold')
        ax.set_title(f'Consumption Heatmap - {month}',
                     fontsize=14, fontweight='bold', pad=20)

        cbar = plt.colorbar(im, ax=ax)
        cbar.set_label('Consumption (kWh)', fontsize=11, fontweight='bold')

        plt.setp(ax.get_xticklabels(), rotation=45, ha="right")

        return self._save(fig, filename, "consumption heatmap")

    def _save(self, fig, filename: str, description: str) -> str:
        fig.tight_layout(pad=2.0)
        output_path = os.path.join(self.output_dir, filename)
        fig.savefig(output_path, dpi=150, facecolor='white', edgecolor='white', pad_inches=0.5)
        plt.close(fig)
        plt.close('all')

        logger.info(f"Saved {description} to {output_path}")
        return output_path
