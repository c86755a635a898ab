import pytest

from contract_cost.data.readers import (
    parse_number,
    parse_step_rows,
    read_steps_file,
    step_arrays,
)
from contract_cost.exceptions import DataReadError
from contract_cost.utils.columns import HEADCOUNT, MGMT_STEP, STEP_COLUMNS, UNION_STEP


def test_parses_currency_decorated_row():
    steps = parse_step_rows("5\t$80,000\t$75,500.25")
    assert len(steps) == 1
    assert steps.loc[0, HEADCOUNT] == 5
    assert steps.loc[0, UNION_STEP] == 80000
    assert steps.loc[0, MGMT_STEP] == 75500.25


def test_step_arrays_are_parallel_and_ordered(attorney_steps_text):
    headcounts, union_steps, mgmt_steps = step_arrays(parse_step_rows(attorney_steps_text))
    assert headcounts == [3, 0, 4]
    assert union_steps == [83500, 85500, 88666]
    assert mgmt_steps == [80659.71, 82782.34, 84904.96]


@pytest.mark.parametrize(
    "line",
    [
        "5\t$80,000",                      # too few fields
        "5\t$80,000\t$75,000\t$1",         # too many fields
        "5 $80,000 $75,000",               # spaces, not tabs
        "five\t$80,000\t$75,000",          # non-numeric headcount
        "5\t\t$75,000",                    # blank salary
        "5\t$80,000\tn/a",                 # non-numeric mgmt salary
        "5\tnan\t$75,000",                 # nan is not a salary
        "-1\t$80,000\t$75,000",            # negative headcount
        "5\t$80,000\t-$75,000",            # negative salary
        "5\t1e400\t$75,000",               # overflows to infinity
        "1e400\t$80,000\t$75,000",         # overflowing headcount
    ],
)
def test_malformed_row_is_dropped_from_all_columns(line):
    text = f"1\t$10\t$9\n{line}\n2\t$20\t$19"
    steps = parse_step_rows(text)
    headcounts, union_steps, mgmt_steps = step_arrays(steps)
    assert headcounts == [1, 2]
    assert union_steps == [10, 20]
    assert mgmt_steps == [9, 19]


def test_zero_headcount_row_is_kept():
    steps = parse_step_rows("0\t$85,500\t$82,782.34")
    assert steps[HEADCOUNT].tolist() == [0]


def test_whitespace_and_crlf_are_tolerated():
    steps = parse_step_rows(" 3 \t $83,500 \t$80,659.71 \r\n4\t88666\t84904.96\r\n")
    assert steps[HEADCOUNT].tolist() == [3, 4]
    assert steps[UNION_STEP].tolist() == [83500, 88666]


def test_empty_text_gives_empty_frame_with_columns():
    for text in ("", "\n\n", None):
        steps = parse_step_rows(text)
        assert steps.empty
        assert list(steps.columns) == STEP_COLUMNS


def test_step_column_layout_drops_leading_step_number():
    text = "1\t3\t$83,500\t$80,659.71\n2\t0\t$85,500\t$82,782.34\nx\t1\t$1\t$1"
    steps = parse_step_rows(text, step_column=True)
    assert steps[HEADCOUNT].tolist() == [3, 0]
    assert steps[UNION_STEP].tolist() == [83500, 85500]


def test_step_column_layout_rejects_three_field_rows():
    assert parse_step_rows("3\t$83,500\t$80,659.71", step_column=True).empty


def test_four_field_rows_rejected_by_default():
    assert parse_step_rows("1\t3\t$83,500\t$80,659.71").empty


def test_parse_number():
    assert parse_number(" $1,234.50 ") == 1234.5
    assert parse_number("1e3") == 1000.0
    assert parse_number("") is None
    assert parse_number("inf") is None
    assert parse_number("1e400") is None
    assert parse_number("-1e400") is None
    assert parse_number("1_000") is None


def test_read_steps_file(tmp_path, attorney_steps_text):
    f = tmp_path / "steps.tsv"
    f.write_text(attorney_steps_text, encoding="utf-8")
    steps = read_steps_file(f)
    assert steps[HEADCOUNT].tolist() == [3, 0, 4]


def test_read_steps_file_missing(tmp_path):
    with pytest.raises(DataReadError):
        read_steps_file(tmp_path / "nope.tsv")
