"""
Contact Service

Stores contact-form submissions. Messages are write-only from the API's
point of view; nothing lists them back.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from exploring_india.shared.core.exceptions import ValidationError
from exploring_india.shared.core.logging import get_logger
from exploring_india.shared.models.contact_message import ContactMessage
from exploring_india.shared.repositories.contact_message_repository import ContactMessageRepository
from exploring_india.shared.schemas.contact import ContactMessageCreate
from exploring_india.shared.schemas.validation import validate_payload

logger = get_logger(__name__)


class ContactService:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = ContactMessageRepository(session)

    async def submit_message(self, name: str, email: str, message: str) -> ContactMessage:
        """
        Store a contact message.

        Raises:
            ValidationError: If the email is malformed or the message is
                shorter than 10 characters
        """
        result = validate_payload(
            ContactMessageCreate,
            {"name": name, "email": email, "message": message},
        )
        if not result.ok:
            raise ValidationError(result.message, details={"errors": result.errors})
        submission = result.value

        contact = await self.repo.create_message(
            name=submission.name,
            email=submission.email,
            message=submission.message,
        )

        logger.info("Contact message received", contact_message_id=contact.id)
        return contact
