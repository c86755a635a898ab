# contract_cost/calculator.py
"""
Runs one contract cost calculation end to end:

    step text -> parsed steps -> progressions (Union / Mgmt / Last)
    -> weighted totals per group -> grand totals -> report tables

Everything is recomputed from the request on every call; nothing is kept
between calls.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd

from contract_cost.config.models import CalculationRequest, GroupInput, build_request
from contract_cost.data.readers import parse_step_rows
from contract_cost.engines.aggregate import aggregate, grand_totals
from contract_cost.engines.progression import project
from contract_cost.exceptions import EmptyInput, InvalidConfiguration
from contract_cost.logging_config import CALCULATION_LOGGER
from contract_cost.reporting.tables import ReportTable, build_cost_table, build_step_table
from contract_cost.utils.columns import (
    HEADCOUNT,
    MGMT_STEP,
    PROPOSAL_LAST,
    PROPOSAL_MGMT,
    PROPOSAL_UNION,
    UNION_STEP,
)

logger = logging.getLogger(__name__)
calc_logger = logging.getLogger(CALCULATION_LOGGER)


@dataclass
class GroupResult:
    """Intermediate and final figures for one group."""

    name: str
    steps: pd.DataFrame
    progressions: Dict[str, pd.DataFrame]
    totals: Dict[str, pd.Series]
    group_id: Optional[str] = None


@dataclass
class CalculationResult:
    """Output of one calculation: per-group figures, grand totals and tables."""

    years: int
    groups: List[GroupResult] = field(default_factory=list)
    grand_totals: Dict[str, pd.Series] = field(default_factory=dict)
    cost_table: ReportTable = field(default_factory=ReportTable)
    step_table: ReportTable = field(default_factory=ReportTable)


def _require_finite(values, group_name: str, proposal: str, what: str) -> None:
    if not np.isfinite(np.asarray(values, dtype=float)).all():
        logger.error(f"Group '{group_name}': {proposal} {what} overflowed")
        raise InvalidConfiguration(
            f"Group '{group_name}': {proposal} {what} are too large to represent; "
            f"check the salaries and raise percentages"
        )


def calculate_group(
    group: GroupInput,
    years: int,
    last_raise: float,
    raise_first_year: bool = False,
    step_column: bool = False,
) -> GroupResult:
    """
    Parse one group's steps and project all three proposals.

    Union progressions start from the union base salaries; Mgmt and Last
    both start from the management base salaries, Last using the last
    contract's flat raise.

    Raises:
        InvalidConfiguration: If a progression or total overflows to infinity.
    """
    steps = parse_step_rows(group.steps, step_column=step_column)
    headcounts = steps[HEADCOUNT]

    with np.errstate(over="ignore", invalid="ignore"):
        progressions = {
            PROPOSAL_UNION: project(steps[UNION_STEP], group.union_raise, years, raise_first_year),
            PROPOSAL_MGMT: project(steps[MGMT_STEP], group.mgmt_raise, years, raise_first_year),
            PROPOSAL_LAST: project(steps[MGMT_STEP], last_raise, years, raise_first_year),
        }
        totals = {
            proposal: aggregate(progression, headcounts)
            for proposal, progression in progressions.items()
        }

    for proposal in progressions:
        _require_finite(progressions[proposal], group.name, proposal, "salaries")
        _require_finite(totals[proposal], group.name, proposal, "totals")

    if steps.empty:
        logger.warning(f"Group '{group.name}' has no valid step rows; totals will be zero")
    else:
        logger.debug(
            f"Group '{group.name}': {len(steps)} steps, headcount {headcounts.sum():g}"
        )

    return GroupResult(
        name=group.name,
        steps=steps,
        progressions=progressions,
        totals=totals,
        group_id=group.group_id,
    )


def calculate(request: CalculationRequest) -> CalculationResult:
    """
    Run the full calculation for a validated request.

    Args:
        request: Groups, contract parameters and report options.

    Returns:
        CalculationResult holding per-group results, grand totals and both
        report tables.

    Raises:
        EmptyInput: If the request has no groups.
        InvalidConfiguration: If the contract parameters are unusable.
    """
    if not isinstance(request, CalculationRequest):
        raise InvalidConfiguration(
            f"Expected a CalculationRequest, got {type(request).__name__}"
        )
    if not request.groups:
        logger.error("Calculation requested with no groups")
        raise EmptyInput("At least one group is required")

    years = request.contract.years
    last_raise = request.contract.last_raise
    options = request.options

    calc_logger.info(
        f"Calculating {len(request.groups)} groups over {years} years "
        f"(last contract raise {last_raise}%)"
    )

    group_results = [
        calculate_group(
            group,
            years,
            last_raise,
            raise_first_year=options.raise_first_year,
            step_column=options.step_column,
        )
        for group in request.groups
    ]

    with np.errstate(over="ignore", invalid="ignore"):
        grand = grand_totals([g.totals for g in group_results], years)
    for proposal, series in grand.items():
        _require_finite(series, "Grand Total", proposal, "totals")

    cost_table = build_cost_table(
        [(g.name, g.totals) for g in group_results],
        grand=grand if options.include_grand_total else None,
    )
    step_table = build_step_table(
        [(g.name, g.progressions[PROPOSAL_UNION], g.progressions[PROPOSAL_MGMT]) for g in group_results]
    )

    final_year = grand[PROPOSAL_UNION].index[-1]
    calc_logger.info(
        f"{final_year} grand totals: Union {grand[PROPOSAL_UNION].iloc[-1]:,.2f}, "
        f"Mgmt {grand[PROPOSAL_MGMT].iloc[-1]:,.2f}, Last {grand[PROPOSAL_LAST].iloc[-1]:,.2f}"
    )

    return CalculationResult(
        years=years,
        groups=group_results,
        grand_totals=grand,
        cost_table=cost_table,
        step_table=step_table,
    )


def calculate_costs(groups: List[Any], years: Any, last_raise: Any, **options: Any) -> CalculationResult:
    """
    Validate raw inputs and run the calculation in one call.

    Args:
        groups: GroupInput instances or dicts (name, union_raise, mgmt_raise,
            steps, optional group_id).
        years: Contract length as supplied by the caller (int or string).
        last_raise: Last contract raise percentage (number or string).
        **options: include_grand_total, raise_first_year, step_column.

    Raises:
        InvalidConfiguration: If years, last_raise or a group raise is invalid.
        EmptyInput: If no groups are supplied.
    """
    request = build_request(groups, years, last_raise, **options)
    return calculate(request)
