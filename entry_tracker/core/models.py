# entry_tracker/core/models.py
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional


@dataclass(frozen=True)
class TransactionRecord:
    day: int
    month: int  # zero-based, 0 = January
    year: int
    description: str
    amount: float
    is_expense: bool = False
    id: Optional[int] = None

    @property
    def signed_amount(self) -> float:
        return -self.amount if self.is_expense else self.amount


@dataclass
class DateGroup:
    label: str
    members: List[TransactionRecord] = field(default_factory=list)

    @property
    def total(self) -> float:
        return sum(r.signed_amount for r in self.members)


class DisplayOption(IntEnum):
    SECTION_LIST_BY_DATE = 1
    FLAT_LIST = 2
    SPREADSHEET = 3

    @classmethod
    def from_name(cls, name: str) -> "DisplayOption":
        return DISPLAY_NAMES[name.lower()]


DISPLAY_NAMES = {
    "grouped": DisplayOption.SECTION_LIST_BY_DATE,
    "flat": DisplayOption.FLAT_LIST,
    "spreadsheet": DisplayOption.SPREADSHEET,
}

DEFAULT_DISPLAY_OPTION = DisplayOption.SECTION_LIST_BY_DATE
