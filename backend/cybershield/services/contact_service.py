"""
Contact submission service.

WHAT: Business logic behind the contact form: validation, record
construction, persistence, and the new-contact notification.

WHY: Keeps the route handler a thin request/response mapping, following
the API → Service → DAO layering used across the backend.

HOW:
1. Check name, email, and message are present and non-empty
2. Check the email has a local@domain.tld shape
3. Fill defaults (company, service, nda) and capture requester IP/user agent
4. Append through ContactStore, which assigns the id
5. Log the submission and notify

Validation failures raise before the store is touched.
"""

import logging
import re
from datetime import datetime
from typing import List, Optional

from cybershield.core.exceptions import InvalidEmailError, MissingFieldsError
from cybershield.core.timeutils import iso_timestamp
from cybershield.dao.contact_store import ContactStore
from cybershield.middleware.request_context import RequestContext
from cybershield.schemas.contact import (
    ContactRecord,
    ContactSubmission,
    ContactSummary,
    NOT_SPECIFIED,
)
from cybershield.services.notification_service import NotificationService


logger = logging.getLogger(__name__)


# One "@", at least one "." after it, no whitespace anywhere.
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

REQUIRED_FIELDS = ("name", "email", "message")

CONTACT_RECEIVED_MESSAGE = "Message received securely. We'll respond within 24 hours."


def is_valid_email(email: str) -> bool:
    """Check that email looks like local@domain.tld."""
    return EMAIL_PATTERN.fullmatch(email) is not None


def validate_submission(submission: ContactSubmission) -> None:
    """
    Validate a contact submission.

    Raises:
        MissingFieldsError: name, email, or message is missing or empty
        InvalidEmailError: email does not match the expected shape
    """
    missing = [field for field in REQUIRED_FIELDS if not getattr(submission, field)]
    if missing:
        raise MissingFieldsError(missing=missing)

    if not is_valid_email(submission.email):
        raise InvalidEmailError()


class ContactService:
    """
    Accepts contact form submissions.

    Args:
        store: Where records are persisted
        notifications: Who hears about new records
    """

    def __init__(self, store: ContactStore, notifications: Optional[NotificationService] = None):
        self.store = store
        self.notifications = notifications or NotificationService()

    async def submit(
        self,
        submission: ContactSubmission,
        context: Optional[RequestContext] = None,
        received_at: Optional[datetime] = None,
    ) -> ContactRecord:
        """
        Validate and store a contact submission.

        Args:
            submission: Parsed request body
            context: Request context providing requester IP and user agent
            received_at: Submission time (defaults to now)

        Returns:
            The stored ContactRecord

        Raises:
            ValidationError: Submission is incomplete or malformed
            StorageError: The contact store could not be updated
        """
        validate_submission(submission)

        record = await self.store.append(
            {
                "name": submission.name,
                "email": submission.email,
                "company": submission.company or NOT_SPECIFIED,
                "service": submission.service or NOT_SPECIFIED,
                "message": submission.message,
                "nda": bool(submission.nda),
                "timestamp": iso_timestamp(received_at),
                "ip": context.ip_address if context else "unknown",
                "user_agent": context.user_agent if context else None,
            }
        )

        logger.info(f"New contact form submission: {record.name} <{record.email}>")
        await self.notifications.notify_new_contact(record)
        return record

    async def list_summaries(self) -> List[ContactSummary]:
        """Redacted view of every stored contact."""
        return await self.store.list()
