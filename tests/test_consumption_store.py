import random

from simulation.consumption_generator import ConsumptionGenerator
from storage.consumption_store import ConsumptionStore, band_sum


class UpperBoundRandom(random.Random):
    """Always draws the top of the requested range"""

    def randint(self, a, b):
        return b


class LowerBoundRandom(random.Random):
    def randint(self, a, b):
        return a


def test_get_or_generate_is_idempotent():
    store = ConsumptionStore(seed=7)
    first = store.get_or_generate("March", 3)
    second = store.get_or_generate("March", 3)
    assert first is second
    assert first.hours == second.hours
    assert len(store) == 1


def test_generated_readings_fall_in_band_ranges():
    for seed in range(20):
        store = ConsumptionStore(seed=seed)
        for day in range(1, 32):
            hours = store.get_or_generate("January", day).hours
            assert len(hours) == 24
            assert all(100 <= kwh <= 300 for kwh in hours[0:7])
            assert all(300 <= kwh <= 600 for kwh in hours[7:18])
            assert all(601 <= kwh <= 999 for kwh in hours[18:24])


def test_range_bounds_are_inclusive():
    high = ConsumptionGenerator(rng=UpperBoundRandom()).generate_hours()
    low = ConsumptionGenerator(rng=LowerBoundRandom()).generate_hours()
    assert high == [300] * 7 + [600] * 11 + [999] * 6
    assert low == [100] * 7 + [300] * 11 + [601] * 6


def test_same_seed_same_readings():
    a = ConsumptionStore(seed=42)
    b = ConsumptionStore(seed=42)
    assert a.get_or_generate("July", 14).hours == b.get_or_generate("July", 14).hours


def test_keys_are_month_and_day():
    store = ConsumptionStore(seed=1)
    store.get_or_generate("May", 1)
    store.get_or_generate("June", 1)
    store.get_or_generate("May", 2)
    assert store.get_all_keys() == [("May", 1), ("June", 1), ("May", 2)]
    assert ("June", 1) in store
    assert store.get("June", 2) is None
    assert repr(store) == "ConsumptionStore(days=3)"


def test_injected_generator_used_once_per_key(fixed_generator):
    store = ConsumptionStore(generator=fixed_generator)
    for _ in range(3):
        store.get_or_generate("August", 9)
    assert fixed_generator.calls == [("August", 9)]


def test_band_sum_matches_total():
    day = ConsumptionStore(seed=3).get_or_generate("October", 30)
    hours = day.hours
    assert band_sum(hours, 0, 6) + band_sum(hours, 7, 17) + band_sum(hours, 18, 23) == sum(hours)
    assert day.total == sum(hours)
