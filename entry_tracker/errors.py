# entry_tracker/errors.py


class DaybookError(Exception):
    """Base class for errors raised by the ledger."""


class ValidationError(DaybookError, ValueError):
    """Malformed entry data, e.g. date components that are not a real date."""


class PersistenceError(DaybookError):
    """The storage backend could not be reached or refused a write."""


class NotFound(DaybookError, KeyError):
    """No entry exists with the requested id."""

    def __init__(self, entry_id):
        super().__init__(entry_id)
        self.entry_id = entry_id

    def __str__(self):
        return f"No entry with id {self.entry_id}"
