# entry_tracker/utils.py
from datetime import date, datetime

from entry_tracker.core.models import DateGroup
from entry_tracker.errors import ValidationError

LABEL_FORMAT = "%d/%m/%Y"


def _require_int(value, name):
    if value is None:
        raise ValidationError(f"Missing '{name}' date component")
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"'{name}' must be an integer, got {value!r}")
    return value


def to_date(day, month, year):
    """
    Build a calendar date from entry components. ``month`` is zero-based.
    """
    day = _require_int(day, 'day')
    month = _require_int(month, 'month')
    year = _require_int(year, 'year')
    try:
        return date(year, month + 1, day)
    except ValueError as exc:
        raise ValidationError(
            f"Invalid date components day={day} month={month} year={year}: {exc}"
        ) from exc


def date_label(day, month, year):
    """
    Return the DD/MM/YYYY label for zero-based date components.
    """
    d = to_date(day, month, year)
    return f"{d.day:02d}/{d.month:02d}/{d.year:04d}"


def normalize_month(human_month):
    """
    Convert a one-based month (1-12) to the zero-based month stored on entries.
    """
    month = _require_int(human_month, 'month')
    if not 1 <= month <= 12:
        raise ValidationError(f"Month must be between 1 and 12, got {month}")
    return month - 1


def parse_entry_date(text):
    """
    Parse DD/MM/YYYY or ISO YYYY-MM-DD into (day, zero-based month, year).
    """
    if isinstance(text, date):
        return text.day, text.month - 1, text.year
    if not text or not isinstance(text, str):
        raise ValidationError(f"Missing or malformed date: {text!r}")
    raw = text.strip()
    for fmt in (LABEL_FORMAT, "%Y-%m-%d"):
        try:
            parsed = datetime.strptime(raw, fmt).date()
        except ValueError:
            continue
        return parsed.day, parsed.month - 1, parsed.year
    raise ValidationError(f"Unrecognized date '{text}', expected DD/MM/YYYY or YYYY-MM-DD")


def record_label(record):
    return date_label(record.day, record.month, record.year)


def group_by_date(records):
    """
    Group records by their derived date label.

    Groups come out in the order each label is first seen, and members keep
    their relative input order. The input is not modified.
    """
    groups = {}
    for record in records:
        label = record_label(record)
        group = groups.get(label)
        if group is None:
            group = groups[label] = DateGroup(label=label)
        group.members.append(record)
    return list(groups.values())


def sort_groups_chronologically(groups):
    return sorted(groups, key=lambda g: datetime.strptime(g.label, LABEL_FORMAT))
