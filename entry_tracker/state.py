# entry_tracker/state.py
"""Application state and the reducer that advances it.

State is immutable. Every change goes through :func:`reduce`, which takes the
current :class:`AppState` and an action and returns the next state. Async
persistence work lives in :mod:`entry_tracker.effects` and resolves to one of
the actions defined here.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Awaitable, Callable, List, Tuple

from entry_tracker.core.models import (
    DEFAULT_DISPLAY_OPTION,
    DateGroup,
    DisplayOption,
    TransactionRecord,
)
from entry_tracker.utils import group_by_date


@dataclass(frozen=True)
class AppState:
    entries: Tuple[TransactionRecord, ...] = ()
    on_add_entry: bool = False
    on_settings: bool = False
    display_option: DisplayOption = DEFAULT_DISPLAY_OPTION
    notices: Tuple[str, ...] = ()

    @property
    def groups(self) -> List[DateGroup]:
        return group_by_date(self.entries)


@dataclass(frozen=True)
class EntriesLoaded:
    entries: Tuple[TransactionRecord, ...]


@dataclass(frozen=True)
class EntryCreated:
    entry: TransactionRecord


@dataclass(frozen=True)
class EntryDeleted:
    entry_id: int


@dataclass(frozen=True)
class AddEntryToggled:
    open: bool


@dataclass(frozen=True)
class SettingsToggled:
    open: bool


@dataclass(frozen=True)
class DisplayOptionChanged:
    option: DisplayOption


@dataclass(frozen=True)
class PersistenceFailed:
    message: str


@dataclass(frozen=True)
class NoticesCleared:
    pass


def _without(entries, entry_id):
    index = next((i for i, e in enumerate(entries) if e.id == entry_id), None)
    if index is None:
        return entries
    return entries[:index] + entries[index + 1:]


def reduce(state: AppState, action) -> AppState:
    if isinstance(action, EntriesLoaded):
        return replace(state, entries=tuple(action.entries))
    if isinstance(action, EntryCreated):
        entries = tuple(e for e in state.entries if e.id != action.entry.id)
        return replace(state, entries=entries + (action.entry,), on_add_entry=False)
    if isinstance(action, EntryDeleted):
        return replace(state, entries=_without(state.entries, action.entry_id))
    if isinstance(action, AddEntryToggled):
        return replace(state, on_add_entry=action.open)
    if isinstance(action, SettingsToggled):
        return replace(state, on_settings=action.open)
    if isinstance(action, DisplayOptionChanged):
        return replace(state, display_option=DisplayOption(action.option), on_settings=False)
    if isinstance(action, PersistenceFailed):
        return replace(state, notices=state.notices + (action.message,))
    if isinstance(action, NoticesCleared):
        return replace(state, notices=())
    raise TypeError(f"Unknown action {action!r}")


@dataclass
class Store:
    """Holds the current state and applies actions to it."""

    state: AppState = field(default_factory=AppState)
    listeners: List[Callable[[AppState], None]] = field(default_factory=list)

    def dispatch(self, action) -> AppState:
        self.state = reduce(self.state, action)
        for listener in self.listeners:
            listener(self.state)
        return self.state

    def subscribe(self, listener: Callable[[AppState], None]) -> None:
        self.listeners.append(listener)

    async def run(self, effect: Awaitable) -> AppState:
        """Await an effect and dispatch the action it resolves to."""
        action = await effect
        return self.dispatch(action)
