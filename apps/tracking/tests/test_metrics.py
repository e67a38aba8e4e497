"""
Unit tests for the metrics service.

Pure functions, no database.
"""

import pytest
from decimal import Decimal

from apps.tracking.services.metrics import (
    round_half_up,
    cost_per_unit,
    time_per_unit,
    cost_per_hour,
    units_per_hour,
    efficiency_score,
)


class TestCostPerUnit:

    def test_basic(self):
        assert cost_per_unit(100, 10) == Decimal('10')
        assert cost_per_unit(Decimal('50.50'), 5) == Decimal('10.10')

    def test_rounds_to_two_places(self):
        assert cost_per_unit(10, 3) == Decimal('3.33')
        assert cost_per_unit(20, 3) == Decimal('6.67')
        assert cost_per_unit(100, 7) == Decimal('14.29')
        assert cost_per_unit(10, 7) == Decimal('1.43')

    def test_negative_values_keep_sign(self):
        assert cost_per_unit(-100, 10) == Decimal('-10')

    def test_very_small_values(self):
        assert cost_per_unit(0.01, 1) == Decimal('0.01')
        assert cost_per_unit(0.001, 1) == Decimal('0')

    def test_very_large_values(self):
        assert cost_per_unit(10000000, 1000000) == Decimal('10')

    def test_accepts_floats(self):
        assert cost_per_unit(25.5, 2) == Decimal('12.75')

    def test_infinity_passes_through(self):
        assert cost_per_unit(float('inf'), 1) == Decimal('Infinity')

    def test_nan_passes_through(self):
        assert cost_per_unit(float('nan'), 10).is_nan()


class TestTimePerUnit:

    def test_basic(self):
        assert time_per_unit(120, 10) == Decimal('12')
        assert time_per_unit(65, 5) == Decimal('13')

    def test_rounding(self):
        assert time_per_unit(100, 3) == Decimal('33.33')

    def test_fractional_minutes(self):
        assert time_per_unit(1.5, 3) == Decimal('0.5')


class TestCostPerHour:

    def test_basic(self):
        assert cost_per_hour(100, 60) == Decimal('100')
        assert cost_per_hour(50, 30) == Decimal('100')

    def test_converts_minutes_to_hours(self):
        assert cost_per_hour(120, 120) == Decimal('60')
        assert cost_per_hour(200, 240) == Decimal('50')

    def test_rounding(self):
        assert cost_per_hour(100, 90) == Decimal('66.67')

    def test_fractional_values(self):
        assert cost_per_hour(25.50, 30) == Decimal('51')


class TestUnitsPerHour:

    def test_basic(self):
        assert units_per_hour(10, 60) == Decimal('10')
        assert units_per_hour(5, 30) == Decimal('10')
        assert units_per_hour(20, 120) == Decimal('10')

    def test_rounding(self):
        assert units_per_hour(10, 90) == Decimal('6.67')

    def test_fast_rates(self):
        assert units_per_hour(100, 10) == Decimal('600')


class TestZeroGuard:
    """A zero denominator always gives exactly 0."""

    @pytest.mark.parametrize('value', [100, 0, -25, Decimal('33.33'), 0.5])
    def test_zero_denominators(self, value):
        assert cost_per_unit(value, 0) == 0
        assert time_per_unit(value, 0) == 0
        assert cost_per_hour(value, 0) == 0
        assert units_per_hour(value, 0) == 0


class TestEfficiencyScore:

    def test_documented_example(self):
        # (10/100)*100 + (10/1h)*10 + 8 = 10 + 100 + 8
        assert efficiency_score(10, 100, 60, 8) == Decimal('118')

    def test_all_zero(self):
        assert efficiency_score(0, 0, 0, 0) == Decimal('0')

    def test_no_units_returns_rating(self):
        assert efficiency_score(0, 100, 60, 5) == Decimal('5')

    def test_no_spend_and_no_time_returns_rating(self):
        assert efficiency_score(10, 0, 0, Decimal('7.5')) == Decimal('7.5')

    def test_rounds_once_at_the_end(self):
        result = efficiency_score(7, 33, 45, 6.5)
        # 21.2121... + 93.3333... + 6.5 = 121.0454...
        assert result == Decimal('121.05')

    def test_units_per_money_dominates(self):
        assert efficiency_score(100, 10, 100, 5) > efficiency_score(10, 100, 100, 5)

    def test_throughput_counts(self):
        assert efficiency_score(10, 100, 30, 5) > efficiency_score(10, 100, 120, 5)


class TestRoundHalfUp:

    def test_half_rounds_up(self):
        assert round_half_up(Decimal('2.675')) == Decimal('2.68')
        assert round_half_up(Decimal('0.005')) == Decimal('0.01')

    def test_half_rounds_away_from_zero_for_negatives(self):
        assert round_half_up(Decimal('-2.675')) == Decimal('-2.68')

    def test_result_has_two_places(self):
        assert round_half_up(Decimal('1')).as_tuple().exponent == -2
