# contract_cost/engines/progression.py
"""
Engine for projecting salary steps forward under a raise schedule.

Year 1 holds the base salary and each later year compounds the previous
year's value by that year's raise. With raise_first_year=True the first raise
is already applied in year 1, matching the legacy per-year-list calculator.
"""

import logging
from typing import Sequence, Union

import numpy as np
import pandas as pd

from contract_cost.exceptions import InvalidConfiguration
from contract_cost.utils.columns import year_labels

logger = logging.getLogger(__name__)

RaiseSchedule = Union[float, int, Sequence[float]]


def _as_schedule(raise_pct: RaiseSchedule) -> list:
    if isinstance(raise_pct, (int, float)):
        return [float(raise_pct)]
    return [float(r) for r in raise_pct]


def yearly_raise_rates(raise_pct: RaiseSchedule, count: int) -> np.ndarray:
    """
    Expand a raise schedule to exactly `count` percentages.

    A flat number repeats every year; a list is used in order and its last
    value is held once it runs out. An empty list means no raises.
    """
    schedule = _as_schedule(raise_pct)
    if not schedule:
        return np.zeros(count)
    rates = [schedule[k] if k < len(schedule) else schedule[-1] for k in range(count)]
    return np.asarray(rates, dtype=float)


def _validate_years(years: int) -> None:
    if isinstance(years, bool) or not isinstance(years, (int, np.integer)) or years < 1:
        raise InvalidConfiguration(f"years must be a positive integer, got {years!r}")


def project(
    base_values: Sequence[float],
    raise_pct: RaiseSchedule,
    years: int,
    raise_first_year: bool = False,
) -> pd.DataFrame:
    """
    Project each base salary across the contract years.

    Args:
        base_values: Base salaries, one per step, in step order.
        raise_pct: Flat raise percentage (3 means 3%) or a per-year list.
        years: Number of contract years (>= 1).
        raise_first_year: Apply the first raise in year 1 instead of year 2.

    Returns:
        DataFrame with one row per base value (same order, index 0..n-1) and
        one column per year labeled "Year 1".."Year N".

    Raises:
        InvalidConfiguration: If years is not a positive integer.
    """
    _validate_years(years)
    base = np.asarray(list(base_values), dtype=float)
    columns = year_labels(years)

    raise_steps = years if raise_first_year else years - 1
    rates = yearly_raise_rates(raise_pct, raise_steps)
    factors = 1 + rates / 100

    values = np.empty((len(base), years), dtype=float)
    if raise_first_year:
        values[:, 0] = base * factors[0]
        step_factors = factors[1:]
    else:
        values[:, 0] = base
        step_factors = factors

    for y in range(1, years):
        values[:, y] = values[:, y - 1] * step_factors[y - 1]

    logger.debug(
        f"Projected {len(base)} steps over {years} years "
        f"(rates={rates.tolist()}, raise_first_year={raise_first_year})"
    )
    return pd.DataFrame(values, columns=columns)
