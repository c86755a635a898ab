# contract_cost/reporting/tables.py
"""
Builds the two report tables handed to renderers and exporters:

- the cost comparison table (per group, then optionally a grand total block)
- the per-step salary progression table

Tables are plain rows of typed cells. Money cells are Decimals rounded to
cents; nothing here knows about HTML, terminals or files.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional, Sequence, Tuple, Union

import pandas as pd

from contract_cost.utils.columns import (
    COST_HEADERS,
    GRAND_TOTAL_LABEL,
    PROGRESSION_TITLE_SUFFIX,
    PROPOSAL_LAST,
    PROPOSAL_MGMT,
    PROPOSAL_UNION,
    ROW_DATA,
    ROW_HEADER,
    ROW_TITLE,
    STEP_HEADER,
    TYPE_HEADER,
)
from contract_cost.utils.decimal_helpers import to_money

logger = logging.getLogger(__name__)

Cell = Union[str, int, Decimal]

UNION_MINUS_MGMT = "Union - Mgmt"
UNION_MINUS_LAST = "Union - Last"


@dataclass
class ReportRow:
    """One table row: a title, a column header or a data row."""

    kind: str
    cells: List[Cell] = field(default_factory=list)


@dataclass
class ReportTable:
    """Ordered rows ready for an external renderer."""

    rows: List[ReportRow] = field(default_factory=list)

    def add(self, kind: str, cells: Sequence[Cell]) -> None:
        self.rows.append(ReportRow(kind=kind, cells=list(cells)))

    def rows_of_kind(self, kind: str) -> List[ReportRow]:
        return [row for row in self.rows if row.kind == kind]

    def titles(self) -> List[str]:
        return [row.cells[0] for row in self.rows_of_kind(ROW_TITLE)]

    def __len__(self) -> int:
        return len(self.rows)


def cost_comparison_frame(totals: Dict[str, pd.Series]) -> pd.DataFrame:
    """
    Line up the three proposals' yearly totals with their differences.

    Args:
        totals: Mapping of proposal type to a year-indexed series.

    Returns:
        DataFrame indexed by year label with columns Union, Mgmt, Last,
        "Union - Mgmt" and "Union - Last" (unrounded).
    """
    frame = pd.DataFrame(
        {
            PROPOSAL_UNION: totals[PROPOSAL_UNION],
            PROPOSAL_MGMT: totals[PROPOSAL_MGMT],
            PROPOSAL_LAST: totals[PROPOSAL_LAST],
        }
    )
    frame[UNION_MINUS_MGMT] = frame[PROPOSAL_UNION] - frame[PROPOSAL_MGMT]
    frame[UNION_MINUS_LAST] = frame[PROPOSAL_UNION] - frame[PROPOSAL_LAST]
    return frame


def _add_cost_block(table: ReportTable, title: str, totals: Dict[str, pd.Series]) -> None:
    table.add(ROW_TITLE, [title])
    table.add(ROW_HEADER, COST_HEADERS)
    frame = cost_comparison_frame(totals)
    for year, row in frame.iterrows():
        table.add(ROW_DATA, [year] + [to_money(v) for v in row.tolist()])


def build_cost_table(
    group_totals: Sequence[Tuple[str, Dict[str, pd.Series]]],
    grand: Optional[Dict[str, pd.Series]] = None,
) -> ReportTable:
    """
    Assemble the cost comparison table.

    Each group contributes a title row with its name, the column header row
    and one data row per contract year: year label, Union, Mgmt and Last
    weighted totals, then Union - Mgmt and Union - Last. Money is rounded
    to two places.

    Args:
        group_totals: (group name, totals by proposal) in group input order.
        grand: Grand totals by proposal. When given, a "Grand Total" block
            is appended after the groups.

    Returns:
        The populated ReportTable.
    """
    table = ReportTable()
    for name, totals in group_totals:
        _add_cost_block(table, name, totals)
    if grand is not None:
        _add_cost_block(table, GRAND_TOTAL_LABEL, grand)
    logger.debug(f"Built cost table with {len(table)} rows for {len(group_totals)} groups")
    return table


def _add_step_rows(table: ReportTable, progression: pd.DataFrame, step_type: str) -> None:
    for position, values in enumerate(progression.itertuples(index=False), start=1):
        table.add(ROW_DATA, [position] + [to_money(v) for v in values] + [step_type])


def build_step_table(
    group_progressions: Sequence[Tuple[str, pd.DataFrame, pd.DataFrame]],
) -> ReportTable:
    """
    Assemble the per-step salary progression table.

    For every group: a title row "<name> Salary Progression Per Step", a
    header row (Step, Year 1..Year N, Type), the Union rows and then the Mgmt
    rows. Steps are numbered from 1 by position within each block. Zero
    headcount steps are included.

    Args:
        group_progressions: (group name, union progression, mgmt progression)
            in group input order.
    """
    table = ReportTable()
    for name, union_progression, mgmt_progression in group_progressions:
        table.add(ROW_TITLE, [f"{name} {PROGRESSION_TITLE_SUFFIX}"])
        table.add(ROW_HEADER, [STEP_HEADER] + list(union_progression.columns) + [TYPE_HEADER])
        _add_step_rows(table, union_progression, PROPOSAL_UNION)
        _add_step_rows(table, mgmt_progression, PROPOSAL_MGMT)
    return table
