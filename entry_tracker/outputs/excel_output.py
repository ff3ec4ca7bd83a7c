# entry_tracker/outputs/excel_output.py

"""Excel output module backed by XlsxWriter.

The workbook has an ``Entries`` worksheet laid out like the spreadsheet
view (one row per entry with separate income and expense columns) and a
``ByDate`` worksheet with one row per date group, its income, expense and
net totals, plus a column chart of the net amount per date.
"""

from __future__ import annotations

import logging
import os
import xlsxwriter

from entry_tracker.outputs.base import BaseOutput
from entry_tracker.utils import group_by_date, record_label

logger = logging.getLogger(__name__)


class ExcelOutput(BaseOutput):
    """Generate a local Excel workbook of ledger entries."""

    FILENAME = "entries.xlsx"
    ENTRIES = "Entries"
    BY_DATE = "ByDate"

    def __init__(self, config: dict):
        self.config = config
        self.output_dir = config.get("output_dir", "data")
        os.makedirs(self.output_dir, exist_ok=True)

    def write(self, entries):
        out_path = os.path.join(self.output_dir, self.FILENAME)
        workbook = xlsxwriter.Workbook(out_path)
        amount_fmt = workbook.add_format({"num_format": "#,##0.00"})

        ws = workbook.add_worksheet(self.ENTRIES)
        ws.freeze_panes(1, 0)
        headers = ["id", "date", "description", "income", "expense"]
        ws.write_row(0, 0, headers)
        for row_idx, rec in enumerate(entries, start=1):
            ws.write_number(row_idx, 0, rec.id or 0)
            ws.write_string(row_idx, 1, record_label(rec))
            ws.write_string(row_idx, 2, rec.description)
            col = 4 if rec.is_expense else 3
            ws.write_number(row_idx, col, float(rec.amount), amount_fmt)
        ws.set_column(3, 4, None, amount_fmt)
        if entries:
            ws.add_table(0, 0, len(entries), 4, {
                "columns": [{"header": h} for h in headers]
            })

        table = self._build_date_table(entries)
        by_date_ws = workbook.add_worksheet(self.BY_DATE)
        by_date_ws.freeze_panes(1, 0)
        by_date_ws.set_column(1, 3, None, amount_fmt)
        for offset, row in enumerate(table):
            by_date_ws.write_row(offset, 0, row)

        if len(table) > 1:
            chart = workbook.add_chart({"type": "column"})
            chart.add_series({
                "categories": [by_date_ws.name, 1, 0, len(table) - 1, 0],
                "values": [by_date_ws.name, 1, 3, len(table) - 1, 3],
                "name": "Net by date",
            })
            chart.set_title({"name": "Net by date"})
            chart.set_legend({"position": "bottom"})
            by_date_ws.insert_chart(0, 5, chart, {"x_offset": 0, "y_offset": 0})

        workbook.close()
        logger.info("Written Excel workbook %s", out_path)
        return out_path

    def _build_date_table(self, entries):
        rows = [["Date", "Income", "Expense", "Net"]]
        for group in group_by_date(entries):
            income = sum(r.amount for r in group.members if not r.is_expense)
            expense = sum(r.amount for r in group.members if r.is_expense)
            rows.append([group.label, income, expense, group.total])
        return rows
