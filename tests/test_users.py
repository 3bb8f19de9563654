from unittest.mock import MagicMock

import pytest

from catalog.errors import InvalidArgumentError
from catalog.interfaces import UserRef
from catalog.models.user import User

VALID_USER_ID = "123456789012"


# ============================================================================
# REGISTER USER TESTS
# ============================================================================


def test_register_user_success(library, store, user):
    """Test a valid new user is persisted once under their id."""
    library.register_user(user)

    store.get_user_by_id.assert_called_once_with(VALID_USER_ID)
    store.register_user.assert_called_once_with(VALID_USER_ID, user)


def test_register_user_name_with_spaces_success(library, store, user):
    """Test names with single interior spaces are accepted."""
    user.name = "Alice Smith"

    library.register_user(user)

    store.register_user.assert_called_once_with(VALID_USER_ID, user)


def test_register_user_reference_entity(library, store, notification_service):
    """Test the reference User entity can be registered."""
    new_user = User(
        id=VALID_USER_ID, name="Mary-Jane", notification_service=notification_service
    )

    library.register_user(new_user)

    store.register_user.assert_called_once_with(VALID_USER_ID, new_user)


def test_register_user_none(library, store):
    """Test registering no user at all fails without touching the store."""
    with pytest.raises(InvalidArgumentError):
        library.register_user(None)
    assert store.mock_calls == []


@pytest.mark.parametrize(
    "user_id", [None, "12345", "1234567890123", "12345678901a", ""]
)
def test_register_user_invalid_id(library, store, user, user_id):
    """Test missing or malformed user ids are rejected before any store call."""
    user.id = user_id

    with pytest.raises(InvalidArgumentError):
        library.register_user(user)
    assert store.mock_calls == []


@pytest.mark.parametrize("name", ["", "Alic3!", "Ann--Marie", "Ann ", " Ann"])
def test_register_user_invalid_name(library, store, user, name):
    """Test malformed names are rejected before any store call."""
    user.name = name

    with pytest.raises(InvalidArgumentError):
        library.register_user(user)
    assert store.mock_calls == []


def test_register_user_without_notification_service(library, store, user):
    """Test a user must come with a notification service."""
    user.notification_service = None

    with pytest.raises(InvalidArgumentError):
        library.register_user(user)
    assert store.mock_calls == []


def test_register_user_duplicate(library, store, user):
    """Test registering an id that already exists fails and persists nothing."""
    store.get_user_by_id.return_value = MagicMock(spec=UserRef)

    with pytest.raises(InvalidArgumentError, match="already exists"):
        library.register_user(user)
    store.register_user.assert_not_called()


# ============================================================================
# USER ENTITY TESTS
# ============================================================================


def test_user_send_notification_delegates_to_service(notification_service):
    """Test a user forwards messages to their notification service with their id."""
    entity = User(id=VALID_USER_ID, name="Alice", notification_service=notification_service)

    entity.send_notification("hello")

    notification_service.notify_user.assert_called_once_with(VALID_USER_ID, "hello")


def test_user_send_notification_without_service():
    """Test sending through a user with no notification service fails loudly."""
    entity = User(id=VALID_USER_ID, name="Alice")

    with pytest.raises(RuntimeError):
        entity.send_notification("hello")
