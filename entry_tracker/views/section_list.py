# entry_tracker/views/section_list.py
from entry_tracker.utils import group_by_date, sort_groups_chronologically
from entry_tracker.views.base import EMPTY, BaseView, entry_kind, format_amount


class SectionListView(BaseView):
    """
    Entries under one heading per date, in the order each date first appears.
    Pass ``chronological=True`` in the config to sort headings by date instead.
    """

    def render(self, state):
        if not state.entries:
            return EMPTY
        groups = group_by_date(state.entries)
        if self.config.get('chronological'):
            groups = sort_groups_chronologically(groups)

        lines = []
        for group in groups:
            lines.append(f"{group.label}  (net {format_amount(group.total)})")
            for rec in group.members:
                lines.append(
                    f"  #{rec.id}  Income?: {'No' if rec.is_expense else 'Yes'}  "
                    f"Description: {rec.description}  Amount: {format_amount(rec.amount)}"
                )
        return "\n".join(lines)
