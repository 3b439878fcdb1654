"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories
and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database

Services should:
- Validate their input (validate_payload) and existence of related rows
- Coordinate multiple repositories if needed
- Take the caller's identity as an explicit RequestContext
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- AuthService: Registration, login/logout, session resolution
- PlaceService: Place lookups and seeding
- ReviewService: Creating and listing reviews
- UserPlaceService: Explored/upcoming places
- ContactService: Contact form submissions

Usage:
======
    from exploring_india.shared.services import AuthService

    service = AuthService(db)
    user = await service.register_user(username, password)
"""

from exploring_india.shared.services.auth_service import AuthService
from exploring_india.shared.services.place_service import PlaceService
from exploring_india.shared.services.review_service import ReviewService
from exploring_india.shared.services.user_place_service import UserPlaceService
from exploring_india.shared.services.contact_service import ContactService

__all__ = [
    "AuthService",
    "PlaceService",
    "ReviewService",
    "UserPlaceService",
    "ContactService",
]
