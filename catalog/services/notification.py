import logging

from catalog.core.config import MAX_NOTIFICATION_ATTEMPTS
from catalog.errors import NotificationError
from catalog.interfaces import UserRef

logger = logging.getLogger(__name__)


def deliver_with_retry(
    user: UserRef, message: str, max_attempts: int = MAX_NOTIFICATION_ATTEMPTS
) -> int:
    """
    Send a message to a user, retrying on delivery failure.

    Attempts are immediate (no backoff) and always resend the same message.
    Only NotificationError is retried; anything else propagates at once.

    Args:
        user: Recipient; its send_notification capability is used
        message: Text to deliver
        max_attempts: Total number of attempts, including the first

    Returns:
        The number of attempts it took to deliver the message.

    Raises:
        NotificationError: If every attempt failed (chained to the last failure)
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    last_error: NotificationError | None = None
    for attempt in range(1, max_attempts + 1):
        try:
            user.send_notification(message)
        except NotificationError as exc:
            last_error = exc
            logger.warning(
                "Notification to user %s failed (attempt %d/%d): %s",
                user.id,
                attempt,
                max_attempts,
                exc,
            )
            continue
        return attempt

    logger.error(
        "Giving up on notification to user %s after %d attempts", user.id, max_attempts
    )
    raise NotificationError(
        f"Notification to user {user.id} failed after {max_attempts} attempts"
    ) from last_error
