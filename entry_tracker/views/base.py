# entry_tracker/views/base.py
from abc import ABC, abstractmethod

from entry_tracker.utils import record_label

EMPTY = "No entries."


def entry_kind(record):
    return "expense" if record.is_expense else "income"


def format_amount(value):
    return f"{value:,.2f}"


class BaseView(ABC):
    def __init__(self, config=None):
        self.config = config or {}

    @abstractmethod
    def render(self, state):
        """Return the entries in ``state`` as printable text."""
        pass

    @staticmethod
    def label(record):
        return record_label(record)
