import pandas as pd
import pytest

from swiftcma.config import settings as settings_mod
from swiftcma.errors import EmptyTableError, TableParseError, TableTooLargeError
from swiftcma.ingest import decode_bytes, parse_csv_text, read_table, read_table_bytes


def test_read_csv_file(sample_csv):
    table = read_table(sample_csv)
    assert table.headers[0] == "Property Address"
    assert len(table.rows) == 4
    assert table.rows[0]["Sold Price"] == "$300,000"


def test_semicolon_delimited():
    table = parse_csv_text("Address;Sold Price;SqFt\n1 Main;300000;1500\n")
    assert table.headers == ["Address", "Sold Price", "SqFt"]
    assert table.rows == [{"Address": "1 Main", "Sold Price": "300000", "SqFt": "1500"}]


def test_bom_and_blank_lines_skipped():
    table = read_table_bytes("\ufeffAddress,DOM\n\n1 Main,4\n,\n".encode("utf-8"), "x.csv")
    assert table.headers == ["Address", "DOM"]
    assert table.rows == [{"Address": "1 Main", "DOM": "4"}]


def test_short_rows_leave_cells_absent():
    table = parse_csv_text("Address,Beds,Baths\n1 Main,3\n")
    assert table.rows == [{"Address": "1 Main", "Beds": "3"}]


def test_non_utf8_bytes_are_decoded():
    text = decode_bytes("Address,DOM\nCafé Row,4\n".encode("latin-1"))
    assert text.startswith("Address,DOM")


def test_header_only_csv_fails():
    with pytest.raises(EmptyTableError):
        parse_csv_text("Address,Sold Price\n")


def test_empty_text_fails():
    with pytest.raises(EmptyTableError):
        parse_csv_text("")


def test_row_cap(monkeypatch):
    monkeypatch.setenv("SWIFTCMA_MAX_ROWS", "1")
    settings_mod.reset_settings()
    with pytest.raises(TableTooLargeError):
        parse_csv_text("Address\n1 Main\n2 Main\n")


def test_read_xlsx(tmp_path):
    path = tmp_path / "comps.xlsx"
    pd.DataFrame(
        {"Property Address": ["1 Main", "2 Main"], "Sold Price": [300000, 310000], "Status": ["Sold", ""]}
    ).to_excel(path, index=False)
    table = read_table(path)
    assert table.headers == ["Property Address", "Sold Price", "Status"]
    assert table.rows[0] == {"Property Address": "1 Main", "Sold Price": "300000", "Status": "Sold"}
    assert table.rows[1]["Status"] == ""


def test_bad_xlsx_falls_back_to_csv(tmp_path):
    path = tmp_path / "export.xlsx"
    path.write_text("Address,DOM\n1 Main,4\n", encoding="utf-8")
    table = read_table(path)
    assert table.rows == [{"Address": "1 Main", "DOM": "4"}]


def test_unreadable_legacy_xls_fails_instead_of_parsing_binary():
    data = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1" + b"\x00" * 24 + b"Address,Sold\x00junk\n1,2\n"
    with pytest.raises(TableParseError):
        read_table_bytes(data, "comps.xls")


def test_xlsx_saved_with_xls_extension(tmp_path):
    path = tmp_path / "comps.xlsx"
    pd.DataFrame({"Address": ["1 Main"], "DOM": [4]}).to_excel(path, index=False)
    table = read_table_bytes(path.read_bytes(), "comps.xls")
    assert table.rows == [{"Address": "1 Main", "DOM": "4"}]
