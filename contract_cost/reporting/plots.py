# contract_cost/reporting/plots.py
"""
Chart of the grand-total cost series for each proposal.
"""

import logging
from pathlib import Path
from typing import Dict

import pandas as pd

# To prevent GUI errors on headless servers
import matplotlib
matplotlib.use('Agg')  # Use a non-interactive backend
import matplotlib.pyplot as plt
import matplotlib.ticker as mtick

from contract_cost.exceptions import DataWriteError
from contract_cost.utils.columns import PROPOSAL_LAST, PROPOSAL_MGMT, PROPOSAL_UNION

logger = logging.getLogger(__name__)

PROPOSAL_STYLES = {
    PROPOSAL_UNION: {"color": "tab:blue", "marker": "o", "linestyle": "-"},
    PROPOSAL_MGMT: {"color": "tab:red", "marker": "s", "linestyle": "-"},
    PROPOSAL_LAST: {"color": "tab:gray", "marker": "x", "linestyle": "--"},
}


def plot_cost_comparison(grand_totals: Dict[str, pd.Series], output_path: Path) -> Path:
    """
    Plot the yearly grand totals of the three proposals as lines.

    Args:
        grand_totals: Mapping of proposal type to year-indexed totals.
        output_path: PNG file to write.

    Returns:
        The path written.

    Raises:
        DataWriteError: If the figure cannot be saved.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    logger.info(f"Plotting cost comparison to {output_path}")

    fig, ax = plt.subplots(figsize=(10, 6))
    try:
        for proposal, style in PROPOSAL_STYLES.items():
            series = grand_totals[proposal]
            ax.plot(list(series.index), series.to_numpy(), label=proposal, **style)

        ax.set_xlabel('Contract Year')
        ax.set_ylabel('Total Cost')
        ax.yaxis.set_major_formatter(mtick.StrMethodFormatter('${x:,.0f}'))
        ax.legend()
        ax.set_title('Contract Cost Comparison: Grand Totals')
        fig.tight_layout()
        fig.savefig(output_path)
    except OSError as e:
        logger.error(f"Error saving cost comparison plot: {e}", exc_info=True)
        raise DataWriteError(f"Failed to save plot to {output_path}") from e
    finally:
        plt.close(fig)  # Close the figure to free memory

    logger.info(f"Saved cost comparison plot to {output_path}")
    return output_path
