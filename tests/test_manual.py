import pytest

from entry_tracker.errors import ValidationError
from entry_tracker.manual import load_manual_entries


def test_load_manual_entries(tmp_path):
    path = tmp_path / "entries.yaml"
    path.write_text(
        """\
- date: 2025-05-04
  description: Farmers Market
  amount: 10
  expense: true
- date: "01/02/2025"
  description: Refund
  amount: -4.5
"""
    )
    entries = load_manual_entries(path)
    assert entries == [
        {"day": 4, "month": 4, "year": 2025, "description": "Farmers Market", "amount": 10.0, "is_expense": True},
        {"day": 1, "month": 1, "year": 2025, "description": "Refund", "amount": 4.5, "is_expense": False},
    ]


def test_load_manual_entries_missing_date(tmp_path):
    path = tmp_path / "entries.yaml"
    path.write_text("- description: nothing\n  amount: 1\n")
    with pytest.raises(ValidationError):
        load_manual_entries(path)


def test_load_manual_entries_empty_file(tmp_path):
    path = tmp_path / "entries.yaml"
    path.write_text("")
    assert load_manual_entries(path) == []


def test_load_manual_entries_rejects_non_mapping_items(tmp_path):
    path = tmp_path / "entries.yaml"
    path.write_text("- just a string\n")
    with pytest.raises(ValidationError):
        load_manual_entries(path)


def test_load_manual_entries_impossible_timestamp(tmp_path):
    path = tmp_path / "entries.yaml"
    path.write_text("- date: 2021-02-30\n  description: x\n  amount: 1\n")
    with pytest.raises(ValidationError):
        load_manual_entries(path)


def test_load_manual_entries_invalid_yaml(tmp_path):
    path = tmp_path / "entries.yaml"
    path.write_text("- date: [unclosed\n")
    with pytest.raises(ValidationError):
        load_manual_entries(path)


def test_load_manual_entries_expense_strings(tmp_path):
    path = tmp_path / "entries.yaml"
    path.write_text(
        """\
- date: "01/01/2021"
  description: a
  amount: 1
  expense: "false"
- date: "01/01/2021"
  description: b
  amount: 1
  expense: "no"
- date: "01/01/2021"
  description: c
  amount: 1
  expense: "Yes"
"""
    )
    assert [e["is_expense"] for e in load_manual_entries(path)] == [False, False, True]


def test_load_manual_entries_rejects_unknown_expense_value(tmp_path):
    path = tmp_path / "entries.yaml"
    path.write_text('- date: "01/01/2021"\n  description: a\n  amount: 1\n  expense: "maybe"\n')
    with pytest.raises(ValidationError):
        load_manual_entries(path)
    path.write_text('- date: "01/01/2021"\n  description: a\n  amount: 1\n  expense: 1\n')
    with pytest.raises(ValidationError):
        load_manual_entries(path)
