import pytest

from cramer.inputs import MatrixParseError, format_matrix, load_matrix_file, parse_matrix_text


def test_parse_rows_and_columns():
    assert parse_matrix_text("1,1,3\n1,-1,1\n") == [[1.0, 1.0, 3.0], [1.0, -1.0, 1.0]]


def test_parse_accepts_decimals_whitespace_and_exponents():
    text = "  2.5 , -0.75, 1e2\n\n-3,  4.0 ,5E-1\n"
    assert parse_matrix_text(text) == [[2.5, -0.75, 100.0], [-3.0, 4.0, 0.5]]


def test_parse_returns_floats():
    matrix = parse_matrix_text("2,10")
    assert all(isinstance(value, float) for value in matrix[0])


def test_parse_empty_text_gives_empty_matrix():
    assert parse_matrix_text("") == []
    assert parse_matrix_text("\n   \n") == []


def test_non_numeric_field_reports_line():
    with pytest.raises(MatrixParseError) as excinfo:
        parse_matrix_text("1,2,3\n4,five,6\n")
    assert excinfo.value.line_number == 2
    assert "five" in str(excinfo.value)


def test_empty_field_is_rejected():
    with pytest.raises(MatrixParseError):
        parse_matrix_text("1,,3")


def test_ragged_rows_are_rejected():
    with pytest.raises(MatrixParseError, match="expected 3 values, found 2") as excinfo:
        parse_matrix_text("1,1,3\n\n1,-1\n")
    assert excinfo.value.line_number == 3


def test_load_matrix_file(tmp_path):
    path = tmp_path / "system.txt"
    path.write_text("1,1,1,6\n0,2,5,-4\n2,5,-1,27\n", encoding="utf-8")

    matrix = load_matrix_file(path)
    assert len(matrix) == 3
    assert matrix[2] == [2.0, 5.0, -1.0, 27.0]


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_matrix_file(tmp_path / "missing.txt")


def test_format_matrix():
    assert format_matrix([[1.0, -2.5, 3.0], [1e-7, 0.0, 100.0]]) == ["1 -2.5 3", "1e-07 0 100"]
