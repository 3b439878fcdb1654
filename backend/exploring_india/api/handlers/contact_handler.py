"""
Contact Handler

Public contact form endpoint.
"""

from fastapi import APIRouter, Depends, status

from exploring_india.shared.schemas.contact import (
    ContactMessageCreate,
    ContactMessageResponse,
)
from exploring_india.shared.services.contact_service import ContactService
from exploring_india.api.dependencies.services import get_contact_service


router = APIRouter()


@router.post(
    "",
    response_model=ContactMessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_contact(
    submission: ContactMessageCreate,
    contact_service: ContactService = Depends(get_contact_service),
):
    """
    Store a contact message.

    Raises:
        400: Malformed email or message shorter than 10 characters
    """
    contact = await contact_service.submit_message(
        name=submission.name,
        email=submission.email,
        message=submission.message,
    )
    return ContactMessageResponse.model_validate(contact)
