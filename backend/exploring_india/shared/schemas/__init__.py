"""
Pydantic Schemas

Request and response models for the API, plus the validate_payload helper
services use to apply the same rules outside of FastAPI.

Schema Categories:
==================
- common: Base schema, message/error/health responses
- validation: validate_payload / ValidationResult
- user: Registration, login and user responses
- place: Place responses and seed records
- review: Review requests and responses
- user_place: Explored/upcoming requests and responses
- contact: Contact form request and response
"""

from exploring_india.shared.schemas.common import (
    BaseSchema,
    UtcDateTime,
    MessageResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from exploring_india.shared.schemas.validation import (
    ValidationResult,
    format_validation_errors,
    validate_payload,
)
from exploring_india.shared.schemas.user import UserCreate, UserLogin, UserResponse
from exploring_india.shared.schemas.place import PlaceCreate, PlaceResponse
from exploring_india.shared.schemas.review import (
    ReviewCreate,
    ReviewResponse,
    ReviewWithPlaceResponse,
)
from exploring_india.shared.schemas.user_place import (
    UserPlaceCreate,
    UserPlaceResponse,
    UserPlaceWithPlaceResponse,
)
from exploring_india.shared.schemas.contact import (
    ContactMessageCreate,
    ContactMessageResponse,
)

__all__ = [
    # Common
    "BaseSchema",
    "UtcDateTime",
    "MessageResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # Validation
    "ValidationResult",
    "validate_payload",
    "format_validation_errors",
    # User
    "UserCreate",
    "UserLogin",
    "UserResponse",
    # Place
    "PlaceCreate",
    "PlaceResponse",
    # Review
    "ReviewCreate",
    "ReviewResponse",
    "ReviewWithPlaceResponse",
    # User place
    "UserPlaceCreate",
    "UserPlaceResponse",
    "UserPlaceWithPlaceResponse",
    # Contact
    "ContactMessageCreate",
    "ContactMessageResponse",
]
