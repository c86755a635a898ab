import numpy as np
import pytest

from contract_cost.engines.progression import project, yearly_raise_rates
from contract_cost.exceptions import InvalidConfiguration


@pytest.mark.parametrize("base", [0.0, 45000.0, 83500.0, 121345.67])
@pytest.mark.parametrize("raise_pct", [0, 1.5, 3, 10])
@pytest.mark.parametrize("years", [1, 2, 5])
def test_year_one_is_base_and_each_year_compounds(base, raise_pct, years):
    row = project([base], raise_pct, years).iloc[0].tolist()
    assert len(row) == years
    assert row[0] == base
    for y in range(1, years):
        assert row[y] == row[y - 1] * (1 + raise_pct / 100)


def test_zero_raise_is_constant():
    result = project([50000, 60000], 0, 4)
    assert result.to_numpy().tolist() == [[50000] * 4, [60000] * 4]


def test_columns_are_year_labels_and_rows_keep_order():
    result = project([3, 1, 2], 0, 3)
    assert list(result.columns) == ["Year 1", "Year 2", "Year 3"]
    assert result["Year 1"].tolist() == [3, 1, 2]


def test_empty_base_values_give_empty_frame():
    result = project([], 3, 3)
    assert result.shape == (0, 3)


def test_flat_raise_example():
    row = project([100000], 10, 3).iloc[0]
    assert np.allclose(row, [100000, 110000, 121000])


def test_schedule_holds_last_value():
    # 3% then 2% then 2% held
    row = project([100.0], [3, 2], 4).iloc[0]
    assert np.allclose(row, [100.0, 103.0, 105.06, 107.1612])


def test_raise_first_year_applies_first_raise_in_year_one():
    row = project([100.0], [3, 2, 2], 3, raise_first_year=True).iloc[0]
    assert np.allclose(row, [103.0, 105.06, 107.1612])


def test_empty_schedule_means_no_raise():
    row = project([100.0], [], 3).iloc[0]
    assert row.tolist() == [100.0, 100.0, 100.0]


@pytest.mark.parametrize("years", [0, -1, 2.5, "3", None, True])
def test_invalid_years_rejected(years):
    with pytest.raises(InvalidConfiguration):
        project([100.0], 3, years)


def test_yearly_raise_rates():
    assert yearly_raise_rates(3, 2).tolist() == [3.0, 3.0]
    assert yearly_raise_rates([3, 2], 4).tolist() == [3.0, 2.0, 2.0, 2.0]
    assert yearly_raise_rates([3, 2, 1], 2).tolist() == [3.0, 2.0]
    assert yearly_raise_rates([], 2).tolist() == [0.0, 0.0]
    assert yearly_raise_rates(3, 0).tolist() == []
