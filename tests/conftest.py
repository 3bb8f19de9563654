from unittest.mock import MagicMock

import pytest

from catalog.interfaces import (
    BookRef,
    CatalogStore,
    NotificationService,
    ReviewSource,
    UserRef,
)
from catalog.services.library import LibraryService

VALID_ISBN = "9780306406157"
VALID_USER_ID = "123456789012"


@pytest.fixture(scope="function")
def store() -> MagicMock:
    """Catalog store double. Empty by default: every lookup misses."""
    store = MagicMock(spec=CatalogStore)
    store.get_book_by_isbn.return_value = None
    store.get_user_by_id.return_value = None
    return store


@pytest.fixture(scope="function")
def reviews() -> MagicMock:
    """Review source double returning a single review."""
    reviews = MagicMock(spec=ReviewSource)
    reviews.get_reviews_for_book.return_value = ["Great book!"]
    return reviews


@pytest.fixture(scope="function")
def notification_service() -> MagicMock:
    return MagicMock(spec=NotificationService)


@pytest.fixture(scope="function")
def library(store: MagicMock, reviews: MagicMock) -> LibraryService:
    return LibraryService(store, reviews, max_notification_attempts=5)


@pytest.fixture(scope="function")
def book() -> MagicMock:
    """A valid, available book."""
    book = MagicMock(spec=BookRef)
    book.isbn = VALID_ISBN
    book.title = "Some Title"
    book.author = "John Smith"
    book.is_borrowed = False
    return book


@pytest.fixture(scope="function")
def user(notification_service: MagicMock) -> MagicMock:
    """A valid user with a notification service attached."""
    user = MagicMock(spec=UserRef)
    user.id = VALID_USER_ID
    user.name = "Alice"
    user.notification_service = notification_service
    return user


@pytest.fixture(scope="function")
def stocked_store(store: MagicMock, book: MagicMock, user: MagicMock) -> MagicMock:
    """Catalog store that knows the book and the user fixtures."""
    store.get_book_by_isbn.side_effect = lambda isbn: book if isbn == VALID_ISBN else None
    store.get_user_by_id.side_effect = (
        lambda user_id: user if user_id == VALID_USER_ID else None
    )
    return store
