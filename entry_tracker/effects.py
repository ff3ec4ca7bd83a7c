# entry_tracker/effects.py
"""Async persistence tasks.

Each task runs one blocking repository call on a worker thread and resolves
to a state action. Storage failures are logged and resolved to
``PersistenceFailed`` so the state keeps its last known good entries.
"""

from __future__ import annotations

import logging
from functools import partial

import anyio

from entry_tracker.errors import PersistenceError
from entry_tracker.state import (
    EntriesLoaded,
    EntryCreated,
    EntryDeleted,
    PersistenceFailed,
)

logger = logging.getLogger(__name__)


async def load_entries(repo):
    try:
        entries = await anyio.to_thread.run_sync(repo.list)
    except PersistenceError as exc:
        logger.error("Could not load entries: %s", exc)
        return PersistenceFailed(f"Could not load entries: {exc}")
    return EntriesLoaded(tuple(entries))


async def create_entry(repo, data):
    try:
        entry = await anyio.to_thread.run_sync(partial(repo.create, data))
    except PersistenceError as exc:
        logger.error("Could not save entry: %s", exc)
        return PersistenceFailed(f"Could not save entry: {exc}")
    logger.info("Created entry %s", entry.id)
    return EntryCreated(entry)


async def delete_entry(repo, entry_id):
    try:
        deleted = await anyio.to_thread.run_sync(partial(repo.delete_by_id, entry_id))
    except PersistenceError as exc:
        logger.error("Could not delete entry %s: %s", entry_id, exc)
        return PersistenceFailed(f"Could not delete entry {entry_id}: {exc}")
    if not deleted:
        logger.debug("Entry %s not found; nothing deleted", entry_id)
    return EntryDeleted(entry_id)
