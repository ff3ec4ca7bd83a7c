# entry_tracker/manual.py
import yaml

from entry_tracker.errors import ValidationError
from entry_tracker.utils import parse_entry_date

EXPENSE_STRINGS = {
    'true': True, 'yes': True, 'expense': True,
    'false': False, 'no': False, 'income': False,
}


def _parse_expense(value, entry):
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in EXPENSE_STRINGS:
        return EXPENSE_STRINGS[value.strip().lower()]
    raise ValidationError(f"Invalid 'expense' in manual entry, expected true/false: {entry}")


def load_manual_entries(path):
    """Load unsaved entries from a YAML list of date/description/amount mappings.

    Dates use DD/MM/YYYY or YYYY-MM-DD with one-based months. ``expense``
    defaults to false.
    """
    with open(path) as f:
        try:
            data = yaml.safe_load(f) or []
        except (yaml.YAMLError, ValueError) as exc:
            # PyYAML raises ValueError for timestamps like 2021-02-30
            raise ValidationError(f"Cannot read entries from {path}: {exc}") from exc
    if not isinstance(data, list):
        raise ValidationError(f"Expected a list of entries in {path}")

    entries = []
    for entry in data:
        if not isinstance(entry, dict):
            raise ValidationError(f"Manual entry must be a mapping: {entry!r}")
        date_value = entry.get('date')
        if not date_value:
            raise ValidationError(f"Missing 'date' in manual entry: {entry}")
        day, month, year = parse_entry_date(date_value)
        try:
            amount = abs(float(entry.get('amount', 0.0)))
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid 'amount' in manual entry: {entry}") from exc
        entries.append({
            'day': day,
            'month': month,
            'year': year,
            'description': str(entry.get('description', '')),
            'amount': amount,
            'is_expense': _parse_expense(entry.get('expense', False), entry),
        })
    return entries
