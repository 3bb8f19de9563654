from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.borrow_state import BorrowState
from catalog.errors import BookAlreadyBorrowedError, BookNotBorrowedError


@dataclass(slots=True)
class Book:
    isbn: str
    title: str
    author: str
    is_borrowed: bool | None = False

    @property
    def borrow_state(self) -> BorrowState:
        return BorrowState.from_flag(self.is_borrowed)

    def borrow(self) -> None:
        """Mark the book as borrowed."""
        if not self.borrow_state.can_borrow:
            raise BookAlreadyBorrowedError(f"Book {self.isbn} is already borrowed")
        self.is_borrowed = True

    def return_book(self) -> None:
        """Mark the book as returned."""
        if not self.borrow_state.can_return:
            raise BookNotBorrowedError(f"Book {self.isbn} is not borrowed")
        self.is_borrowed = False
