"""
Request Context

Identity of the caller for one request. The auth dependency builds it from
the session cookie and handlers pass it into services explicitly; nothing is
stored on global or thread-local state.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestContext:
    """
    Authenticated caller.

    Attributes:
        user_id: Id of the logged-in user
        session_id: Server-side session the request was authenticated with
    """

    user_id: str
    session_id: str
