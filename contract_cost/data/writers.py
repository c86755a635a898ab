# contract_cost/data/writers.py
"""
Functions for exporting report tables as comma-separated files.
"""

import csv
import io
import logging
from decimal import Decimal
from pathlib import Path
from typing import List, Union

from contract_cost.exceptions import DataWriteError
from contract_cost.reporting.tables import Cell, ReportTable

logger = logging.getLogger(__name__)


def display_text(cell: Cell) -> str:
    """Text shown for a cell; money always carries two decimals."""
    if isinstance(cell, Decimal):
        return f"{cell:.2f}"
    return str(cell)


def table_to_rows(table: ReportTable) -> List[List[str]]:
    return [[display_text(cell) for cell in row.cells] for row in table.rows]


def table_to_csv(table: ReportTable) -> str:
    """
    Serialize a report table to CSV text.

    Every cell is quoted and rows keep their own length, so title rows stay a
    single cell wide.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerows(table_to_rows(table))
    return buffer.getvalue()


def write_table_csv(table: ReportTable, output_path: Union[str, Path]) -> Path:
    """
    Write a report table to a CSV file.

    Args:
        table: The table to export.
        output_path: Destination file. Parent directories are created.

    Returns:
        The path written.

    Raises:
        DataWriteError: If writing fails.
    """
    if not isinstance(output_path, Path):
        output_path = Path(output_path)

    logger.info(f"Writing {len(table)} rows to {output_path}")
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(table_to_csv(table), encoding="utf-8")
    except OSError as e:
        logger.exception(f"Failed to write table to {output_path}")
        raise DataWriteError(f"Failed to write table to {output_path}") from e
    return output_path
