"""
Metrics service - derived ratios over raw totals.

Pure functions, no database access. Inputs may be int, float or Decimal;
results are Decimal rounded half-up to 2 places. Rounding happens once,
on the final value, through round_half_up().

A zero denominator yields 0 rather than raising, which callers read as
"no data yet".
"""

from decimal import Decimal, ROUND_HALF_UP

TWO_PLACES = Decimal('0.01')
MINUTES_PER_HOUR = Decimal('60')

# Efficiency score weights
UNITS_PER_MONEY_WEIGHT = Decimal('100')
UNITS_PER_HOUR_WEIGHT = Decimal('10')


def _to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_up(value) -> Decimal:
    """
    Round to 2 decimal places, halves away from zero.

    NaN and infinities are returned unchanged.

    Example:
        >>> round_half_up(Decimal('2.675'))
        Decimal('2.68')
    """
    value = _to_decimal(value)
    if not value.is_finite():
        return value
    return value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def _ratio(numerator, denominator) -> Decimal:
    """Unrounded numerator / denominator, 0 when the denominator is 0."""
    denominator = _to_decimal(denominator)
    if denominator == 0:
        return Decimal('0')
    return _to_decimal(numerator) / denominator


def _hours(total_minutes) -> Decimal:
    return _to_decimal(total_minutes) / MINUTES_PER_HOUR


def cost_per_unit(total_spent, total_units) -> Decimal:
    """Money spent per unit, e.g. cost_per_unit(10, 3) == Decimal('3.33')."""
    return round_half_up(_ratio(total_spent, total_units))


def time_per_unit(total_minutes, total_units) -> Decimal:
    """Minutes per unit."""
    return round_half_up(_ratio(total_minutes, total_units))


def cost_per_hour(total_spent, total_minutes) -> Decimal:
    """Money spent per hour of logged time."""
    return round_half_up(_ratio(total_spent, _hours(total_minutes)))


def units_per_hour(total_units, total_minutes) -> Decimal:
    """Units per hour of logged time."""
    return round_half_up(_ratio(total_units, _hours(total_minutes)))


def efficiency_score(total_units, total_spent, total_minutes, rating) -> Decimal:
    """
    Composite efficiency score.

        (units / spent) * 100 + (units / hours) * 10 + rating

    Each ratio term is 0 when its denominator is 0, so with no spend and
    no time the score is just the rating.

    Example:
        >>> efficiency_score(10, 100, 60, 8)
        Decimal('118.00')
    """
    units_per_money = _ratio(total_units, total_spent)
    throughput = _ratio(total_units, _hours(total_minutes))

    score = (
        units_per_money * UNITS_PER_MONEY_WEIGHT
        + throughput * UNITS_PER_HOUR_WEIGHT
        + _to_decimal(rating)
    )
    return round_half_up(score)
