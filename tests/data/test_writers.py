from decimal import Decimal

import pytest

from contract_cost.data.writers import display_text, table_to_csv, write_table_csv
from contract_cost.exceptions import DataWriteError
from contract_cost.reporting.tables import ReportTable
from contract_cost.utils.columns import ROW_DATA, ROW_HEADER, ROW_TITLE


@pytest.fixture
def small_table():
    table = ReportTable()
    table.add(ROW_TITLE, ["Attorneys"])
    table.add(ROW_HEADER, ["Year", "Union Total"])
    table.add(ROW_DATA, ["Year 1", Decimal("200000")])
    table.add(ROW_DATA, ["Year 2", Decimal("1234.5")])
    return table


def test_display_text():
    assert display_text(Decimal("200000")) == "200000.00"
    assert display_text(Decimal("0.10")) == "0.10"
    assert display_text(3) == "3"
    assert display_text("Union") == "Union"


def test_table_to_csv_quotes_every_cell_without_padding(small_table):
    assert table_to_csv(small_table) == (
        '"Attorneys"\n'
        '"Year","Union Total"\n'
        '"Year 1","200000.00"\n'
        '"Year 2","1234.50"\n'
    )


def test_embedded_quotes_are_escaped():
    table = ReportTable()
    table.add(ROW_TITLE, ['The "A" Team'])
    assert table_to_csv(table) == '"The ""A"" Team"\n'


def test_commas_and_quotes_stay_inside_one_cell():
    table = ReportTable()
    table.add(ROW_TITLE, ['Smith, "Jr" Salary Progression Per Step'])
    table.add(ROW_DATA, ["Year 1", Decimal("1000"), 'a,b'])
    assert table_to_csv(table) == (
        '"Smith, ""Jr"" Salary Progression Per Step"\n'
        '"Year 1","1000.00","a,b"\n'
    )


def test_write_table_csv_creates_parent_dirs(tmp_path, small_table):
    out = write_table_csv(small_table, tmp_path / "nested" / "costs.csv")
    assert out.read_text(encoding="utf-8") == table_to_csv(small_table)


def test_write_table_csv_failure(tmp_path, small_table):
    blocker = tmp_path / "file.txt"
    blocker.write_text("x")
    with pytest.raises(DataWriteError):
        write_table_csv(small_table, blocker / "costs.csv")
