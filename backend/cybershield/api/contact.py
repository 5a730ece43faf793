"""
Contact form API endpoint.

WHAT: Accepts contact form submissions from the website.

WHY: Visitors request quotes and consultations through the form; each
submission is stored for the team to follow up.

HOW: Thin FastAPI route over ContactService. Validation and storage errors
are raised as AppException subclasses and turned into JSON responses by
the registered exception handlers (400 for bad input, 500 for storage).
"""

from typing import Optional

from fastapi import APIRouter, Depends

from cybershield.core.deps import get_contact_service, get_context
from cybershield.middleware.request_context import RequestContext
from cybershield.schemas.contact import ContactSubmission, ContactSubmitResponse
from cybershield.services.contact_service import CONTACT_RECEIVED_MESSAGE, ContactService


router = APIRouter(tags=["contact"])


@router.post("/contact", response_model=ContactSubmitResponse)
async def submit_contact(
    submission: ContactSubmission,
    contacts: ContactService = Depends(get_contact_service),
    context: Optional[RequestContext] = Depends(get_context),
) -> ContactSubmitResponse:
    """
    Submit the contact form.

    Requires non-empty name, email, and message, and an email of the form
    local@domain.tld. Company and service default to "Not specified".

    Raises:
        ValidationError: 400 when required fields are missing or email is invalid
        StorageError: 500 when the submission could not be stored
    """
    record = await contacts.submit(submission, context=context)
    return ContactSubmitResponse(
        success=True,
        message=CONTACT_RECEIVED_MESSAGE,
        contact_id=record.id,
    )
