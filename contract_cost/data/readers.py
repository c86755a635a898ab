# contract_cost/data/readers.py
"""
Functions for reading salary step tables pasted as tab-separated text or
stored in step files.
"""

import logging
import math
import re
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from contract_cost.exceptions import DataReadError
from contract_cost.utils.columns import HEADCOUNT, MGMT_STEP, STEP_COLUMNS, UNION_STEP

logger = logging.getLogger(__name__)

# Plain decimal numbers only: no inf/nan, no digit separators
NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")
CURRENCY_CHARS_RE = re.compile(r"[$,]")

FIELD_SEPARATOR = "\t"


def parse_number(field: str) -> Optional[float]:
    """
    Convert one pasted field to a float.

    Leading/trailing whitespace and currency decoration ("$", ",") are removed
    first. Returns None when what is left is not a plain number, or when it
    overflows a float (e.g. "1e400").
    """
    cleaned = CURRENCY_CHARS_RE.sub("", field.strip())
    if not NUMBER_RE.match(cleaned):
        return None
    value = float(cleaned)
    if not math.isfinite(value):
        return None
    return value


def _parse_row(line: str, step_column: bool) -> Optional[List[float]]:
    parts = line.split(FIELD_SEPARATOR)
    expected = 4 if step_column else 3
    if len(parts) != expected:
        return None

    values = [parse_number(part) for part in parts]
    if any(v is None for v in values):
        return None

    # The step number only has to be numeric; output numbering is positional
    if step_column:
        values = values[1:]

    if any(v < 0 for v in values):
        return None
    return values


def parse_step_rows(raw_text: str, step_column: bool = False) -> pd.DataFrame:
    """
    Parse a block of tab-separated salary steps.

    Each line must split on tabs into exactly three fields: headcount, union
    base salary and management base salary. With step_column=True a leading
    step number field is expected as well (four fields). A row is kept only if
    every field parses to a non-negative number; otherwise the whole row is
    dropped. Accepted rows keep their source order.

    Args:
        raw_text: The pasted step table.
        step_column: Whether rows carry a leading step number.

    Returns:
        DataFrame with columns headcount, union_step and mgmt_step, indexed
        0..n-1 in source row order. Empty (but with those columns) when no
        row is accepted.
    """
    lines = (raw_text or "").split("\n")
    rows = []
    dropped = 0
    for line in lines:
        line = line.rstrip("\r")
        if not line.strip():
            continue
        values = _parse_row(line, step_column)
        if values is None:
            dropped += 1
            continue
        rows.append(values)

    if dropped:
        logger.debug(f"Dropped {dropped} malformed step rows out of {len(rows) + dropped}")

    steps = pd.DataFrame(rows, columns=STEP_COLUMNS, dtype=float)
    logger.debug(f"Parsed {len(steps)} step rows")
    return steps


def read_steps_text(file_path: Union[str, Path]) -> str:
    """
    Read the raw text of a tab-separated step file.

    Raises:
        DataReadError: If the file does not exist or cannot be decoded.
    """
    if not isinstance(file_path, Path):
        file_path = Path(file_path)

    logger.info(f"Reading step table from: {file_path}")
    if not file_path.is_file():
        logger.error(f"Step file not found: {file_path}")
        raise DataReadError(f"Step file not found: {file_path}")

    try:
        text = file_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading step file {file_path}: {e}")
        raise DataReadError(f"Error reading step file {file_path}") from e

    return text


def read_steps_file(file_path: Union[str, Path], step_column: bool = False) -> pd.DataFrame:
    """Read a step file and parse it with parse_step_rows."""
    return parse_step_rows(read_steps_text(file_path), step_column=step_column)


def step_arrays(steps: pd.DataFrame):
    """Split a parsed step frame into (headcounts, union_steps, mgmt_steps) lists."""
    return (
        steps[HEADCOUNT].tolist(),
        steps[UNION_STEP].tolist(),
        steps[MGMT_STEP].tolist(),
    )
