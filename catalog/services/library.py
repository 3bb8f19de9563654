import logging

from catalog.core.config import settings
from catalog.domain.borrow_state import BorrowState
from catalog.domain.review_digest import format_review_digest
from catalog.domain.validation import (
    is_valid_isbn,
    is_valid_name,
    is_valid_title,
    is_valid_user_id,
)
from catalog.errors import (
    BookAlreadyBorrowedError,
    BookNotBorrowedError,
    BookNotFoundError,
    DomainError,
    InvalidArgumentError,
    NoReviewsFoundError,
    ReviewServiceUnavailableError,
    UserNotRegisteredError,
)
from catalog.interfaces import BookRef, CatalogStore, ReviewSource, UserRef
from catalog.services.notification import deliver_with_retry

logger = logging.getLogger(__name__)


def _invalid(message: str) -> InvalidArgumentError:
    logger.debug("Rejected input: %s", message)
    return InvalidArgumentError(message)


class LibraryService:
    """
    Admission rules and borrow lifecycle for the catalog.

    All state lives in the injected collaborators. Inputs are validated
    before any collaborator is called, so a malformed request never reaches
    the store or the review source.
    """

    def __init__(
        self,
        store: CatalogStore,
        reviews: ReviewSource,
        max_notification_attempts: int | None = None,
    ) -> None:
        if max_notification_attempts is None:
            max_notification_attempts = settings.notification_max_attempts
        if max_notification_attempts < 1:
            raise ValueError("max_notification_attempts must be at least 1")

        self._store = store
        self._reviews = reviews
        self._max_notification_attempts = max_notification_attempts

    @property
    def max_notification_attempts(self) -> int:
        return self._max_notification_attempts

    def _fetch_reviews(self, isbn: str) -> list[str]:
        try:
            result = self._reviews.get_reviews_for_book(isbn)
            if result is None:
                return []
            # A bare string is one review, not a sequence of characters.
            if isinstance(result, str):
                return [result]
            return list(result)
        except DomainError:
            raise
        except Exception as exc:
            logger.warning("Review source failed for isbn=%s: %s", isbn, exc)
            raise ReviewServiceUnavailableError(
                f"Review service unavailable for isbn={isbn}"
            ) from exc

    def _release_reviews(self) -> None:
        # A failing close must not mask the outcome of the notify call.
        try:
            self._reviews.close()
        except Exception:
            logger.warning("Failed to close review source", exc_info=True)

    def add_book(self, book: BookRef | None) -> None:
        """
        Add a new book to the catalog.

        - Validates ISBN, title and author formats
        - Rejects books already marked as borrowed
        - Validates ISBN uniqueness

        Raises:
            InvalidArgumentError: If any check fails, including duplicates
        """
        if book is None:
            raise _invalid("Book cannot be null")
        if not is_valid_isbn(book.isbn):
            raise _invalid(f"Invalid ISBN: {book.isbn!r}")
        if not is_valid_title(book.title):
            raise _invalid("Invalid title")
        if not is_valid_name(book.author):
            raise _invalid(f"Invalid author: {book.author!r}")
        if book.is_borrowed is True:
            raise _invalid("Book with invalid borrowed state")

        # Check if ISBN already exists
        if self._store.get_book_by_isbn(book.isbn) is not None:
            raise _invalid(f"Book already exists: isbn={book.isbn}")

        self._store.add_book(book.isbn, book)
        logger.info("Book added | isbn=%s", book.isbn)

    def register_user(self, user: UserRef | None) -> None:
        """
        Register a new user.

        - Validates user id (12 digits) and name formats
        - Requires a notification service
        - Validates user id uniqueness

        Raises:
            InvalidArgumentError: If any check fails, including duplicates
        """
        if user is None:
            raise _invalid("User cannot be null")
        if not is_valid_user_id(user.id):
            raise _invalid(f"Invalid user id: {user.id!r}")
        if not is_valid_name(user.name):
            raise _invalid(f"Invalid user name: {user.name!r}")
        if user.notification_service is None:
            raise _invalid("Invalid notification service")

        # Check if user id already exists
        if self._store.get_user_by_id(user.id) is not None:
            raise _invalid(f"User already exists: id={user.id}")

        self._store.register_user(user.id, user)
        logger.info("User registered | id=%s", user.id)

    def borrow_book(self, isbn: str, user_id: str) -> None:
        """
        Lend a book to a registered user.

        The book must be explicitly available; an unknown borrow state
        counts as borrowed.

        Raises:
            InvalidArgumentError: If the ISBN or user id is malformed
            BookNotFoundError: If no book has this ISBN
            UserNotRegisteredError: If no user has this id
            BookAlreadyBorrowedError: If the book is not explicitly available
        """
        if not is_valid_isbn(isbn):
            raise _invalid(f"Invalid ISBN: {isbn!r}")

        book = self._store.get_book_by_isbn(isbn)
        if book is None:
            raise BookNotFoundError(f"Book not found: isbn={isbn}")

        if not is_valid_user_id(user_id):
            raise _invalid(f"Invalid user id: {user_id!r}")

        if self._store.get_user_by_id(user_id) is None:
            raise UserNotRegisteredError(f"User not registered: id={user_id}")

        if not BorrowState.from_flag(book.is_borrowed).can_borrow:
            raise BookAlreadyBorrowedError(f"Book already borrowed: isbn={isbn}")

        book.borrow()
        self._store.borrow_book(isbn, user_id)
        logger.info("Book borrowed | isbn=%s user_id=%s", isbn, user_id)

    def return_book(self, isbn: str) -> None:
        """
        Return a borrowed book.

        Raises:
            InvalidArgumentError: If the ISBN is malformed
            BookNotFoundError: If no book has this ISBN
            BookNotBorrowedError: If the book is not currently borrowed
        """
        if not is_valid_isbn(isbn):
            raise _invalid(f"Invalid ISBN: {isbn!r}")

        book = self._store.get_book_by_isbn(isbn)
        if book is None:
            raise BookNotFoundError(f"Book not found: isbn={isbn}")

        if not BorrowState.from_flag(book.is_borrowed).can_return:
            raise BookNotBorrowedError(f"Book is not borrowed: isbn={isbn}")

        book.return_book()
        self._store.return_book(isbn)
        logger.info("Book returned | isbn=%s", isbn)

    def notify_user_with_book_reviews(self, isbn: str, user_id: str) -> None:
        """
        Send a user a digest of a book's reviews.

        Reviews are fetched once and the review source is closed whether the
        fetch succeeds, comes back empty or fails. Delivery is then retried
        on NotificationError up to max_notification_attempts times in total.

        Raises:
            InvalidArgumentError: If the ISBN or user id is malformed
            BookNotFoundError: If no book has this ISBN
            UserNotRegisteredError: If no user has this id
            NoReviewsFoundError: If the book has no reviews
            ReviewServiceUnavailableError: If the review source fails
            NotificationError: If every delivery attempt failed
        """
        if not is_valid_isbn(isbn):
            raise _invalid(f"Invalid ISBN: {isbn!r}")
        if not is_valid_user_id(user_id):
            raise _invalid(f"Invalid user id: {user_id!r}")

        book = self._store.get_book_by_isbn(isbn)
        if book is None:
            raise BookNotFoundError(f"Book not found: isbn={isbn}")

        user = self._store.get_user_by_id(user_id)
        if user is None:
            raise UserNotRegisteredError(f"User not registered: id={user_id}")

        try:
            reviews = self._fetch_reviews(isbn)
            if not reviews:
                raise NoReviewsFoundError(f"No reviews found for isbn={isbn}")
            message = format_review_digest(book.title, reviews)
        finally:
            self._release_reviews()

        attempts = deliver_with_retry(user, message, self._max_notification_attempts)
        logger.info(
            "Reviews sent | isbn=%s user_id=%s attempts=%d", isbn, user_id, attempts
        )
