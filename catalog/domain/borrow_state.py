from __future__ import annotations

from enum import Enum


class BorrowState(Enum):
    """Borrow status of a book as reported by the catalog.

    Semantics (intentionally centralized):
    - True  -> BORROWED
    - False -> AVAILABLE
    - anything else (None, unset) -> UNKNOWN

    An UNKNOWN book is never lent out: only an explicit AVAILABLE state
    permits a borrow, and only an explicit BORROWED state permits a return.
    """

    AVAILABLE = "available"
    BORROWED = "borrowed"
    UNKNOWN = "unknown"

    @classmethod
    def from_flag(cls, flag: bool | None) -> BorrowState:
        # Identity checks: truthy or falsy non-bool values are UNKNOWN.
        if flag is True:
            return cls.BORROWED
        if flag is False:
            return cls.AVAILABLE
        return cls.UNKNOWN

    @property
    def can_borrow(self) -> bool:
        return self is BorrowState.AVAILABLE

    @property
    def can_return(self) -> bool:
        return self is BorrowState.BORROWED
