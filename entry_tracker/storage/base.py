# entry_tracker/storage/base.py
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import List, Mapping

from entry_tracker.core.models import TransactionRecord
from entry_tracker.errors import NotFound, ValidationError
from entry_tracker.utils import to_date

ENTRY_FIELDS = ('day', 'month', 'year', 'description', 'amount', 'is_expense')


def build_record(data) -> TransactionRecord:
    """Turn a mapping or an unsaved record into a validated, id-less record."""
    if isinstance(data, TransactionRecord):
        record = replace(data, id=None)
    elif isinstance(data, Mapping):
        missing = [f for f in ENTRY_FIELDS[:5] if f not in data]
        if missing:
            raise ValidationError(f"Missing field(s) {', '.join(missing)} in entry: {data}")
        try:
            amount = float(data['amount'])
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid 'amount' in entry: {data}") from exc
        record = TransactionRecord(
            day=data['day'],
            month=data['month'],
            year=data['year'],
            description=str(data['description']),
            amount=amount,
            is_expense=bool(data.get('is_expense', False)),
        )
    else:
        raise ValidationError(f"Cannot build an entry from {data!r}")
    to_date(record.day, record.month, record.year)
    return record


class BaseRepository(ABC):
    @classmethod
    def from_config(cls, config):
        return cls()

    @abstractmethod
    def create(self, data) -> TransactionRecord:
        """Persist a new entry and return it with its assigned id."""

    @abstractmethod
    def list(self) -> List[TransactionRecord]:
        """Return every persisted entry."""

    @abstractmethod
    def delete_by_id(self, entry_id: int) -> bool:
        """Remove an entry. Returns False when nothing had that id."""

    def get(self, entry_id: int) -> TransactionRecord:
        for record in self.list():
            if record.id == entry_id:
                return record
        raise NotFound(entry_id)
