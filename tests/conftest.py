"""Shared fixtures for the consumption calendar tests"""
import pytest
from models.daily_consumption import DailyConsumption


class FixedGenerator:
    """Generator stand-in returning a constant reading per day"""

    def __init__(self, value_for_day=None, default=10):
        self.value_for_day = value_for_day or {}
        self.default = default
        self.calls = []

    def generate_day(self, month, day):
        self.calls.append((month, day))
        value = self.value_for_day.get(day, self.default)
        return DailyConsumption(month=month, day=day, hours=tuple([value] * 24))


@pytest.fixture
def flat_day():
    """A day where every hour reads 10 kWh"""
    return DailyConsumption(month="January", day=1, hours=tuple([10] * 24))


@pytest.fixture
def fixed_generator():
    return FixedGenerator()


@pytest.fixture
def make_generator():
    """Factory for generators with per-day constant readings"""
    return FixedGenerator
