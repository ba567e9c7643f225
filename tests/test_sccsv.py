import pytest

from sctoolkit.sccsv import CsvError, CsvTable, parse_csv, read_csv


def test_simple_table():
    table = parse_csv("id,name\n1,alpha\n2,beta\n")
    assert (table.rows, table.columns) == (3, 2)
    assert table.get(0, 1) == "name"
    assert table.get(2, 0) == "2"
    assert list(table) == [("id", "name"), ("1", "alpha"), ("2", "beta")]


def test_quoted_comma_and_doubled_quote():
    table = parse_csv('"a,b","say ""hi"""\n')
    assert list(table) == [("a,b", 'say "hi"')]


def test_text_after_closing_quote_joins_field():
    assert parse_csv('"ab"cd,e\n').get(0, 0) == "abcd"


def test_quoted_newline_kept():
    table = parse_csv('"line1\nline2",x\n')
    assert table.rows == 1
    assert table.get(0, 0) == "line1\nline2"


def test_carriage_returns_dropped():
    table = parse_csv("a,b\r\nc,d\r\n")
    assert list(table) == [("a", "b"), ("c", "d")]


def test_empty_fields():
    table = parse_csv(",\n,\n")
    assert table.cells == ("", "", "", "")


def test_unterminated_tail_ignored():
    table = parse_csv("a,b\nc")
    assert list(table) == [("a", "b")]


def test_uneven_rows_raise():
    with pytest.raises(CsvError):
        parse_csv("a,b\nc\n")


def test_no_newline_raises():
    with pytest.raises(CsvError):
        parse_csv("a,b")


def test_unterminated_quote_raises():
    with pytest.raises(CsvError):
        parse_csv('"open,field\n')


def test_quote_closed_at_end_of_input_raises():
    with pytest.raises(CsvError):
        parse_csv('a\n"b"')


@pytest.mark.parametrize("row,column", [(-1, 0), (0, -1), (2, 0), (0, 2)])
def test_get_out_of_range(row, column):
    table = parse_csv("a,b\nc,d\n")
    with pytest.raises(IndexError):
        table.get(row, column)


def test_table_equality():
    assert parse_csv("x\n") == CsvTable(rows=1, columns=1, cells=("x",))


def test_read_csv_prints_every_cell(tmp_path):
    path = tmp_path / "onetime.csv"
    path.write_bytes(b'day,count\r\nmonday,3\r\n"tue,wed",4\r\n')
    table = read_csv(path)
    seen = {
        (row, column): table.get(row, column)
        for row in range(table.rows)
        for column in range(table.columns)
    }
    assert seen == {
        (0, 0): "day",
        (0, 1): "count",
        (1, 0): "monday",
        (1, 1): "3",
        (2, 0): "tue,wed",
        (2, 1): "4",
    }


def test_read_csv_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_csv(tmp_path / "missing.csv")