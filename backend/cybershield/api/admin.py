"""
Admin API endpoints.

WHAT: Read-only view of contact submissions for the team.

WHY: Lets the team review incoming requests without opening the data file.

SECURITY: There is no authentication on this router. It is a demo
endpoint and must sit behind a protected network or reverse proxy in any
real deployment. Responses are redacted: requester IP and user agent are
never returned.
"""

from typing import List

from fastapi import APIRouter, Depends

from cybershield.core.deps import get_contact_service
from cybershield.core.exceptions import StorageError
from cybershield.schemas.contact import ContactSummary
from cybershield.services.contact_service import ContactService


router = APIRouter(prefix="/admin", tags=["admin"])

LIST_FAILED_MESSAGE = "Failed to retrieve contacts"


@router.get("/contacts", response_model=List[ContactSummary])
async def list_contacts(
    contacts: ContactService = Depends(get_contact_service),
) -> List[ContactSummary]:
    """
    List all contact submissions, redacted.

    Messages are truncated to 100 characters followed by "...".

    Raises:
        StorageError: 500 when the contact store cannot be read
    """
    try:
        return await contacts.list_summaries()
    except StorageError as e:
        raise StorageError(message=LIST_FAILED_MESSAGE, detail=e.detail) from e
