"""
Enums used across the application.
"""

from enum import Enum


class UserPlaceStatus(str, Enum):
    """A user's relationship to a place, fixed when the entry is created."""

    EXPLORED = "explored"
    UPCOMING = "upcoming"
