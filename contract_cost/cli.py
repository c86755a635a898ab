# contract_cost/cli.py
"""
Command-line entry point: load a YAML scenario, run the calculation and
export the report tables as CSV (and optionally a chart).
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import numpy as np
import pandas as pd

from contract_cost.calculator import CalculationResult, calculate
from contract_cost.config.loaders import load_scenario
from contract_cost.data.writers import write_table_csv
from contract_cost.exceptions import ContractCostError, InvalidConfiguration
from contract_cost.logging_config import CALCULATION_LOGGER, ERROR_LOGGER, setup_logging
from contract_cost.reporting.plots import plot_cost_comparison

logger = logging.getLogger(__name__)

LOG_DIR = Path("output/logs")
OUTPUT_DIR = Path("output")

COST_TABLE_FILENAME = "contract_costs.csv"
STEP_TABLE_FILENAME = "step_progression.csv"
PLOT_FILENAME = "cost_comparison.png"


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Compare union and management contract raise proposals."
    )

    # Required arguments
    parser.add_argument(
        "--config",
        type=str,
        required=True,
        help="Path to the YAML scenario file."
    )

    # Optional arguments
    parser.add_argument(
        "--output-dir",
        type=str,
        default=str(OUTPUT_DIR),
        help=f"Directory to save report files (default: {OUTPUT_DIR})"
    )
    parser.add_argument(
        "--grand-total",
        action="store_true",
        default=None,
        help="Append a grand total block to the cost table (overrides the scenario)."
    )
    parser.add_argument(
        "--plot",
        action="store_true",
        help="Also save a chart of the grand totals per proposal."
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=str(LOG_DIR),
        help=f"Directory to store log files (default: {LOG_DIR})"
    )

    return parser.parse_args(argv)


def initialize_logging(debug: bool = False, log_dir: Path = LOG_DIR) -> None:
    """Initialize the logging configuration.

    Args:
        debug: Whether to enable debug logging
        log_dir: Directory to store log files
    """
    setup_logging(log_dir=log_dir, debug=debug)

    logger.info("Starting contract cost calculation")
    logger.info(f"Command line arguments: {sys.argv}")
    logger.info(f"Python version: {sys.version}")
    logger.info(f"Pandas version: {pd.__version__}")
    logger.info(f"NumPy version: {np.__version__}")

    if debug:
        logger.debug("Debug logging enabled")


def write_reports(result: CalculationResult, output_path: Path, plot: bool = False) -> List[Path]:
    """Write both report tables (and the chart when requested) to output_path."""
    written = [
        write_table_csv(result.cost_table, output_path / COST_TABLE_FILENAME),
        write_table_csv(result.step_table, output_path / STEP_TABLE_FILENAME),
    ]
    if plot:
        written.append(plot_cost_comparison(result.grand_totals, output_path / PLOT_FILENAME))
    return written


def run(args: argparse.Namespace) -> List[Path]:
    """Load the scenario, calculate and write the reports.

    Raises:
        ContractCostError: For any configuration, input or output failure.
    """
    calc_logger = logging.getLogger(CALCULATION_LOGGER)

    logger.info(f"Loading scenario from: {args.config}")
    request = load_scenario(args.config)
    if args.grand_total is not None:
        request.options.include_grand_total = args.grand_total

    result = calculate(request)

    output_path = Path(args.output_dir)
    written = write_reports(result, output_path, plot=args.plot)
    calc_logger.info(f"Wrote {len(written)} report files to {output_path}")
    return written


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the contract cost CLI."""
    err_logger = logging.getLogger(ERROR_LOGGER)

    args = parse_arguments(argv)
    initialize_logging(debug=args.debug, log_dir=Path(args.log_dir))

    try:
        written = run(args)
    except InvalidConfiguration as e:
        err_logger.error(f"Invalid configuration: {e}")
        return 1
    except ContractCostError as e:
        err_logger.error(f"Calculation failed: {e}", exc_info=args.debug)
        return 1

    for path in written:
        print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
