# entry_tracker/storage/memory.py
from dataclasses import replace
from itertools import count

from entry_tracker.storage.base import BaseRepository, build_record


class InMemoryRepository(BaseRepository):
    """Dict-backed store. Ids are never reused within one instance."""

    def __init__(self):
        self._rows = {}
        self._ids = count(1)

    def create(self, data):
        record = replace(build_record(data), id=next(self._ids))
        self._rows[record.id] = record
        return record

    def list(self):
        return list(self._rows.values())

    def delete_by_id(self, entry_id):
        return self._rows.pop(entry_id, None) is not None
