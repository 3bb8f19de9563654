"""Contracts the catalog core depends on.

Concrete stores, review providers and notification transports live outside
this package; the service only ever sees these protocols.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class NotificationService(Protocol):
    def notify_user(self, user_id: str, message: str) -> None:
        """Deliver a message. Raises NotificationError on failure."""
        ...


class BookRef(Protocol):
    isbn: str
    title: str
    author: str
    is_borrowed: bool | None

    def borrow(self) -> None: ...

    def return_book(self) -> None: ...


class UserRef(Protocol):
    id: str | None
    name: str
    notification_service: NotificationService | None

    def send_notification(self, message: str) -> None:
        """Deliver a message to this user. Raises NotificationError on failure."""
        ...


class CatalogStore(Protocol):
    """System of record for books, users and borrow associations."""

    def get_book_by_isbn(self, isbn: str) -> BookRef | None: ...

    def add_book(self, isbn: str, book: BookRef) -> None: ...

    def get_user_by_id(self, user_id: str) -> UserRef | None: ...

    def register_user(self, user_id: str, user: UserRef) -> None: ...

    def borrow_book(self, isbn: str, user_id: str) -> None: ...

    def return_book(self, isbn: str) -> None: ...


class ReviewSource(Protocol):
    """Transient provider of review text. Must be closed after use."""

    def get_reviews_for_book(self, isbn: str) -> Sequence[str]: ...

    def close(self) -> None:
        """Release the underlying resource. Safe to call more than once."""
        ...
