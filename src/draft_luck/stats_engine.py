"""Population statistics used to normalise member draft outcomes."""

import logging
from typing import Sequence

import pandas as pd

from src.draft_luck.models import MemberDeviation

logger = logging.getLogger(__name__)


def _as_series(values: Sequence[float]) -> pd.Series:
    """Wrap *values* in a float Series, rejecting empty input."""
    series = pd.Series(list(values), dtype="float64")
    if series.empty:
        raise ValueError("Cannot compute statistics of an empty population")
    return series


def get_mean(values: Sequence[float]) -> float:
    """Arithmetic mean of *values*.

    Raises:
        ValueError: if *values* is empty.
    """
    return float(_as_series(values).mean())


def get_standard_deviation(values: Sequence[float]) -> float:
    """Population standard deviation (divides by N, not N - 1).

    A population whose values are all identical has a deviation of exactly
    0.0; floating point summation would otherwise leave a tiny residue.

    Raises:
        ValueError: if *values* is empty.
    """
    series = _as_series(values)
    if series.nunique() <= 1:
        return 0.0
    return float(series.std(ddof=0))


def get_member_deviation(
    member_value: float,
    population: Sequence[float],
) -> MemberDeviation:
    """Standard score of *member_value* against *population*.

    Formula::

        deviation = (mean(population) - member_value) / stddev(population)

    The subtraction is mean minus value, so a value *below* the population
    mean gives a *positive* deviation. When every value in the population is
    the same (stddev 0) the member is treated as sitting on the mean and the
    deviation is 0.0.

    Returns:
        :class:`MemberDeviation` holding the population standard deviation
        and the member's deviation.
    """
    mean = get_mean(population)
    standard_deviation = get_standard_deviation(population)

    if standard_deviation == 0:
        logger.debug(
            "Degenerate population of %d (all %.1f); deviation set to 0",
            len(population), mean,
        )
        return MemberDeviation(standard_deviation=0.0, member_deviation=0.0)

    member_deviation = (mean - member_value) / standard_deviation
    return MemberDeviation(
        standard_deviation=standard_deviation,
        member_deviation=member_deviation,
    )
