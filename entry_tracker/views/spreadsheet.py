# entry_tracker/views/spreadsheet.py
from entry_tracker.views.base import EMPTY, BaseView, format_amount

HEADERS = ["id", "date", "description", "income", "expense"]


class SpreadsheetView(BaseView):
    """Fixed-width grid with income and expense columns and a totals row."""

    def rows(self, entries):
        rows = []
        for rec in entries:
            income = format_amount(rec.amount) if not rec.is_expense else ""
            expense = format_amount(rec.amount) if rec.is_expense else ""
            rows.append([str(rec.id), self.label(rec), rec.description, income, expense])
        return rows

    def render(self, state):
        if not state.entries:
            return EMPTY
        rows = self.rows(state.entries)
        income_total = sum(r.amount for r in state.entries if not r.is_expense)
        expense_total = sum(r.amount for r in state.entries if r.is_expense)
        rows.append(["", "", "TOTAL", format_amount(income_total), format_amount(expense_total)])

        widths = [
            max(len(HEADERS[col]), *(len(row[col]) for row in rows))
            for col in range(len(HEADERS))
        ]

        def fmt(row):
            cells = []
            for col, cell in enumerate(row):
                # amounts right-aligned
                if col >= 3:
                    cells.append(cell.rjust(widths[col]))
                else:
                    cells.append(cell.ljust(widths[col]))
            return " | ".join(cells).rstrip()

        rule = "-+-".join("-" * w for w in widths)
        out = [fmt(HEADERS), rule]
        out.extend(fmt(row) for row in rows[:-1])
        out.append(rule)
        out.append(fmt(rows[-1]))
        return "\n".join(out)
