from __future__ import annotations

from dataclasses import dataclass

from catalog.interfaces import NotificationService


@dataclass(slots=True)
class User:
    id: str | None
    name: str
    notification_service: NotificationService | None = None

    def send_notification(self, message: str) -> None:
        """Deliver a message through this user's notification service.

        Raises:
            NotificationError: If the service fails to deliver. The service
                is expected to raise it; other exceptions propagate untouched.
        """
        if self.notification_service is None:
            raise RuntimeError(f"User {self.id} has no notification service")
        self.notification_service.notify_user(self.id, message)
