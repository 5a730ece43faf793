"""
Notification service for new contact submissions.

WHAT: Announces each accepted contact submission to the sales team.

WHY: Email delivery is out of scope for this backend. The service keeps
the seam where a real provider would plug in, and for now only logs the
notification.

HOW: NotificationService.notify_new_contact() builds a Notification and
hands it to the configured provider. Provider failures are logged and
swallowed: a lost notification must never fail a stored submission.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from cybershield.schemas.contact import ContactRecord


logger = logging.getLogger(__name__)


@dataclass
class Notification:
    """A notification about one contact submission."""

    contact_id: int
    subject: str
    body: str


class NotificationProvider(ABC):
    """Delivery backend for notifications."""

    @abstractmethod
    async def send(self, notification: Notification) -> None:
        """Deliver one notification."""


class LoggingNotificationProvider(NotificationProvider):
    """
    Provider that logs notifications instead of sending them.

    WHY: Allows the submission flow to run end to end without an email
    service. Logs at INFO so the notification shows up in the server output.
    Nothing is kept in memory.
    """

    async def send(self, notification: Notification) -> None:
        logger.info(f"[EMAIL NOTIFICATION] {notification.subject}")


class NotificationService:
    """Builds and dispatches contact notifications."""

    def __init__(self, provider: Optional[NotificationProvider] = None):
        self.provider = provider or LoggingNotificationProvider()

    async def notify_new_contact(self, record: ContactRecord) -> bool:
        """
        Notify about a new contact submission.

        Returns:
            True if the provider accepted the notification, False otherwise
        """
        notification = Notification(
            contact_id=record.id,
            subject=f"New contact from {record.name} regarding {record.service}",
            body=record.message,
        )
        try:
            await self.provider.send(notification)
        except Exception as e:
            logger.error(f"Failed to send notification for contact #{record.id}: {e}", exc_info=True)
            return False
        return True
