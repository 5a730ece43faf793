"""
Pydantic schemas for the contact form.

WHY: Schemas define request/response contracts, providing:
1. Type checking of the submitted body
2. API documentation (OpenAPI/Swagger)
3. A single place that decides which stored fields reach the admin view

Required-field and email checks are not expressed here: a missing name must
produce the form's own error message, so ContactService validates those.
"""

from typing import Optional

from pydantic import BaseModel, Field


NOT_SPECIFIED = "Not specified"
SUMMARY_MESSAGE_LENGTH = 100
SUMMARY_ELLIPSIS = "..."


class ContactSubmission(BaseModel):
    """
    Contact form request body.

    All fields are optional at the schema level; presence and email shape
    are checked by ContactService.
    """

    name: Optional[str] = Field(default=None, description="Visitor's name")
    email: Optional[str] = Field(default=None, description="Reply-to email address")
    company: Optional[str] = Field(default=None, description="Company name")
    service: Optional[str] = Field(default=None, description="Service of interest")
    message: Optional[str] = Field(default=None, description="Free-text message")
    nda: Optional[bool] = Field(default=None, description="Visitor requests an NDA first")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Alice",
                "email": "alice@example.com",
                "company": "Example Corp",
                "service": "Penetration Testing",
                "message": "We'd like a web application assessment.",
                "nda": True,
            }
        }


class ContactRecord(BaseModel):
    """
    A stored contact submission.

    WHY: Keys are written to disk in camelCase (userAgent) so the file stays
    compatible with existing contact exports.
    """

    id: int
    name: str
    email: str
    company: str = NOT_SPECIFIED
    service: str = NOT_SPECIFIED
    message: str
    nda: bool = False
    timestamp: str
    ip: str
    user_agent: Optional[str] = Field(default=None, alias="userAgent")

    class Config:
        populate_by_name = True


class ContactSummary(BaseModel):
    """
    Redacted contact record for the admin listing.

    Omits ip and userAgent; message is cut to SUMMARY_MESSAGE_LENGTH
    characters followed by SUMMARY_ELLIPSIS.
    """

    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    company: Optional[str] = None
    service: Optional[str] = None
    message: str
    nda: bool = False
    timestamp: Optional[str] = None


class ContactSubmitResponse(BaseModel):
    """Response for an accepted contact submission."""

    success: bool = True
    message: str
    contact_id: int = Field(..., alias="contactId")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "success": True,
                "message": "Message received securely. We'll respond within 24 hours.",
                "contactId": 1,
            }
        }

