"""Custom domain exceptions for the library catalog."""

# Stable, machine-readable error codes for API consumers.
INVALID_ARGUMENT = "INVALID_ARGUMENT"
NOT_FOUND = "NOT_FOUND"
BORROW_STATE_CONFLICT = "BORROW_STATE_CONFLICT"
NO_REVIEWS_FOUND = "NO_REVIEWS_FOUND"
REVIEW_SERVICE_UNAVAILABLE = "REVIEW_SERVICE_UNAVAILABLE"
NOTIFICATION_FAILED = "NOTIFICATION_FAILED"


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    code: str = "DOMAIN_ERROR"


class InvalidArgumentError(DomainError):
    """Raised when input is malformed or missing (e.g. bad ISBN, empty title, duplicate record)."""

    code = INVALID_ARGUMENT


class NotFoundError(DomainError):
    """Raised when a referenced resource does not exist in the catalog."""

    code = NOT_FOUND


class BookNotFoundError(NotFoundError):
    pass


class UserNotRegisteredError(NotFoundError):
    pass


class BorrowStateError(DomainError):
    """Raised when a borrow/return conflicts with the book's current state."""

    code = BORROW_STATE_CONFLICT


class BookAlreadyBorrowedError(BorrowStateError):
    pass


class BookNotBorrowedError(BorrowStateError):
    pass


class NoReviewsFoundError(DomainError):
    """Raised when the review source has nothing for the requested book."""

    code = NO_REVIEWS_FOUND


class ReviewServiceUnavailableError(DomainError):
    """Raised when the review source itself fails while fetching reviews."""

    code = REVIEW_SERVICE_UNAVAILABLE


class NotificationError(DomainError):
    """Raised when a notification could not be delivered to a user."""

    code = NOTIFICATION_FAILED
