# contract_cost/utils/columns.py

from typing import List

# Parsed step columns
HEADCOUNT = "headcount"
UNION_STEP = "union_step"
MGMT_STEP = "mgmt_step"
STEP_COLUMNS = [HEADCOUNT, UNION_STEP, MGMT_STEP]

# Proposal types
PROPOSAL_UNION = "Union"
PROPOSAL_MGMT = "Mgmt"
PROPOSAL_LAST = "Last"
PROPOSALS = [PROPOSAL_UNION, PROPOSAL_MGMT, PROPOSAL_LAST]

# Report labels
DEFAULT_GROUP_NAME = "Unnamed Group"
GRAND_TOTAL_LABEL = "Grand Total"
PROGRESSION_TITLE_SUFFIX = "Salary Progression Per Step"
STEP_HEADER = "Step"
TYPE_HEADER = "Type"
YEAR_HEADER = "Year"
COST_HEADERS = [
    YEAR_HEADER,
    "Union Total",
    "Mgmt Total",
    "Last Raise Total",
    "Union - Mgmt",
    "Union - Last",
]

# Report row kinds
ROW_TITLE = "title"
ROW_HEADER = "header"
ROW_DATA = "data"


def year_label(year: int) -> str:
    """Column label for a 1-based contract year."""
    return f"Year {year}"


def year_labels(years: int) -> List[str]:
    return [year_label(y) for y in range(1, years + 1)]
