# entry_tracker/views/flat_list.py
from entry_tracker.views.base import EMPTY, BaseView, entry_kind, format_amount


class FlatListView(BaseView):
    """One line per entry, in collection order."""

    def render(self, state):
        if not state.entries:
            return EMPTY
        lines = []
        for rec in state.entries:
            lines.append(
                f"#{rec.id}  {self.label(rec)}  {entry_kind(rec):<7}  "
                f"{rec.description}  {format_amount(rec.amount)}"
            )
        return "\n".join(lines)
