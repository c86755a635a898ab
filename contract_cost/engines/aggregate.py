# contract_cost/engines/aggregate.py
"""
Headcount-weighted cost totals per group and grand totals across groups.
"""

import logging
from typing import Dict, Iterable, Sequence

import numpy as np
import pandas as pd

from contract_cost.utils.columns import PROPOSALS, year_labels

logger = logging.getLogger(__name__)


def aggregate(step_progressions: pd.DataFrame, headcounts: Sequence[float]) -> pd.Series:
    """
    Weighted total cost per year for one group and one proposal.

    For each year column, sums progression value times headcount over all
    steps. Steps with zero headcount contribute nothing. The caller
    guarantees one headcount per progression row.

    Args:
        step_progressions: One row per step, one column per year.
        headcounts: Headcount per step, in the same order as the rows.

    Returns:
        Series indexed by the year labels of step_progressions.
    """
    weights = np.asarray(list(headcounts), dtype=float)
    values = step_progressions.to_numpy(dtype=float)
    totals = weights @ values
    return pd.Series(totals, index=step_progressions.columns, dtype=float)


def sum_across_groups(group_totals: Iterable[pd.Series], years: int) -> pd.Series:
    """
    Element-wise sum of per-year totals across groups for one proposal.

    Args:
        group_totals: One weighted-total series per group.
        years: Contract length, so an empty group list still yields a
            zero series of the right length.

    Returns:
        Series indexed "Year 1".."Year N".
    """
    index = year_labels(years)
    grand = pd.Series(np.zeros(years), index=index, dtype=float)
    for totals in group_totals:
        grand = grand + totals.reindex(index, fill_value=0.0)
    return grand


def grand_totals(per_group: Sequence[Dict[str, pd.Series]], years: int) -> Dict[str, pd.Series]:
    """Run sum_across_groups once per proposal type (Union, Mgmt, Last)."""
    result = {
        proposal: sum_across_groups((g[proposal] for g in per_group), years)
        for proposal in PROPOSALS
    }
    for proposal, series in result.items():
        logger.debug(f"Grand total {proposal}: {series.round(2).tolist()}")
    return result
