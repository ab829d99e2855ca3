import io

from cramer.config import SystemConfiguration
from cramer.examples import singular_example, three_by_three_example
from cramer.export import CramerExcelExporter, _sheet_name, export_to_excel, matrix_frame


def test_matrix_frame_columns():
    df = matrix_frame([[1.0, 1.0, 3.0], [1.0, -1.0, 1.0]], ["x", "y"])

    assert list(df.columns) == ["Equation", "x", "y", "RHS"]
    assert list(df["Equation"]) == ["Eq 1", "Eq 2"]
    assert list(df["RHS"]) == [3.0, 1.0]


def test_sheet_names_are_excel_safe():
    assert _sheet_name(1, "a/b:c") == "1_a-b-c"
    assert _sheet_name(2, "") == "System_2"
    assert len(_sheet_name(3, "x" * 60)) == 31


def test_exporter_writes_workbook_with_non_finite_values():
    regular = three_by_three_example()
    singular = singular_example()
    singular.singular_policy = "propagate"

    exporter = CramerExcelExporter()
    exporter.add_case(regular, regular.solve())
    exporter.add_case(singular, singular.solve())
    output = exporter.close()

    assert isinstance(output, io.BytesIO)
    assert output.getvalue()[:2] == b"PK"


def test_export_to_excel_creates_parent_directories(tmp_path):
    config = SystemConfiguration(matrix=[[2.0, 10.0]], label="single")
    target = tmp_path / "nested" / "report.xlsx"

    path = export_to_excel(target, [(config, config.solve())])

    assert path == target
    assert target.exists()
