"""
Excel export for solved linear systems.
Writes a summary sheet plus one sheet per system with the augmented matrix
and the Cramer's Rule determinants.
"""
import io
import math
import numbers
import re
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import pandas as pd
import xlsxwriter

from cramer.config import SystemConfiguration
from cramer.model import SystemSolution

MAX_COLUMN_WIDTH = 50
_SHEET_NAME_INVALID = re.compile(r"[\[\]:*?/\\]")

SolvedCase = Tuple[SystemConfiguration, SystemSolution]


def _sheet_name(index: int, label: str) -> str:
    safe_label = _SHEET_NAME_INVALID.sub("-", str(label).strip()).replace(" ", "_")
    name = f"{index}_{safe_label}" if safe_label else f"System_{index}"
    return name[:31]


def matrix_frame(matrix: Sequence[Sequence[float]], variables: Sequence[str]) -> pd.DataFrame:
    """Return the augmented matrix as a DataFrame with an ``RHS`` column."""

    columns = list(variables) + ["RHS"]
    df = pd.DataFrame([list(row) for row in matrix], columns=columns)
    df.insert(0, "Equation", [f"Eq {i + 1}" for i in range(len(df))])
    return df


class CramerExcelExporter:
    def __init__(self, cases: Optional[List[SolvedCase]] = None):
        self.cases: List[SolvedCase] = list(cases or [])
        self.output = io.BytesIO()
        self.workbook = xlsxwriter.Workbook(
            self.output, {"in_memory": True, "nan_inf_to_errors": True}
        )

        self.fmt_header = self.workbook.add_format({
            "bold": True, "bg_color": "#D9E1F2", "border": 1,
            "align": "center", "valign": "vcenter", "text_wrap": True,
        })
        self.fmt_header_main = self.workbook.add_format({
            "bold": True, "font_size": 12, "bg_color": "#4472C4",
            "font_color": "white", "border": 1,
        })
        self.fmt_num = self.workbook.add_format({"num_format": "0.000000", "border": 1})
        self.fmt_sci = self.workbook.add_format({"num_format": "0.00E+00", "border": 1})
        self.fmt_text = self.workbook.add_format({"border": 1, "align": "left"})
        self.fmt_bad = self.workbook.add_format({
            "border": 1, "bg_color": "#FFC7CE", "font_color": "#9C0006",
        })

    def add_case(self, config: SystemConfiguration, solution: SystemSolution):
        self.cases.append((config, solution))

    def close(self) -> io.BytesIO:
        self._write_summary_sheet()
        for index, (config, solution) in enumerate(self.cases, start=1):
            self._write_case_sheet(index, config, solution)
        self.workbook.close()
        self.output.seek(0)
        return self.output

    def _write_table(self, worksheet, start_row: int, title: str, df: pd.DataFrame) -> int:
        """Write a DataFrame with a title bar and header formats; return the next free row."""
        if df.empty:
            return start_row

        if len(df.columns) > 1:
            worksheet.merge_range(start_row, 0, start_row, len(df.columns) - 1, title, self.fmt_header_main)
        else:
            worksheet.write(start_row, 0, title, self.fmt_header_main)
        row = start_row + 1

        col_widths = [len(str(col)) for col in df.columns]
        for col_num, value in enumerate(df.columns):
            worksheet.write(row, col_num, value, self.fmt_header)
        row += 1

        for _, record in df.iterrows():
            for col_num, col_name in enumerate(df.columns):
                val = record[col_name]
                col_widths[col_num] = max(col_widths[col_num], min(len(str(val)), MAX_COLUMN_WIDTH))

                if isinstance(val, numbers.Real) and not isinstance(val, bool):
                    if not math.isfinite(val):
                        cell_fmt = self.fmt_bad
                    elif "Det" in col_name or "Residual" in col_name:
                        cell_fmt = self.fmt_sci
                    else:
                        cell_fmt = self.fmt_num
                    worksheet.write_number(row, col_num, float(val), cell_fmt)
                else:
                    worksheet.write(row, col_num, val, self.fmt_text)
            row += 1

        for i, width in enumerate(col_widths):
            worksheet.set_column(i, i, width + 2)

        return row + 2

    def _write_summary_sheet(self):
        ws = self.workbook.add_worksheet("Summary")
        ws.write(0, 0, "Cramer's Rule Report", self.fmt_header_main)
        ws.write(1, 0, f"Date: {pd.Timestamp.now().strftime('%Y-%m-%d %H:%M')}")

        data = [
            {
                "System": config.label or f"System {index}",
                "Unknowns": solution.size,
                "Denominator Det": solution.denominator,
                "Status": "OK" if solution.is_finite else "No unique solution",
                "Max Residual": solution.max_residual,
            }
            for index, (config, solution) in enumerate(self.cases, start=1)
        ]
        self._write_table(ws, 3, "Systems", pd.DataFrame(data))

    def _write_case_sheet(self, index: int, config: SystemConfiguration, solution: SystemSolution):
        ws = self.workbook.add_worksheet(_sheet_name(index, config.label))
        ws.write(0, 0, config.label or f"System {index}", self.fmt_header_main)
        ws.write(1, 0, f"Desc: {config.description}")
        ws.write(2, 0, f"Singular policy: {config.singular_policy}")

        row = self._write_table(ws, 4, "Augmented Matrix", matrix_frame(config.matrix, solution.variables))
        self._write_table(ws, row, "Solution", pd.DataFrame(solution.unknowns_as_dicts()))


def export_to_excel(
    target: Union[str, Path],
    cases: List[SolvedCase],
) -> Path:
    """Write an Excel report for ``cases`` to ``target`` and return the path."""

    path = Path(target)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = CramerExcelExporter(cases).close()
    path.write_bytes(payload.getvalue())
    return path


__all__ = [
    "CramerExcelExporter",
    "export_to_excel",
    "matrix_frame",
]
