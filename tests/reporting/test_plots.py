import pandas as pd

from contract_cost.reporting.plots import plot_cost_comparison


def test_plot_cost_comparison_writes_png(tmp_path):
    index = ["Year 1", "Year 2", "Year 3"]
    grand = {
        "Union": pd.Series([200.0, 220.0, 242.0], index=index),
        "Mgmt": pd.Series([180.0, 189.0, 198.45], index=index),
        "Last": pd.Series([180.0, 180.0, 180.0], index=index),
    }
    out = plot_cost_comparison(grand, tmp_path / "charts" / "cost.png")
    assert out.exists()
    assert out.read_bytes()[:4] == b"\x89PNG"
