"""
SnapEdit Backend: Caller Identity & Authorization Guard
==========================================================

What:  The authenticated-user value passed into every service call, the
       FastAPI dependency that extracts it, and the guard that requires it.
Why:   Services never look up "the current user" from ambient state; the
       route hands the identity over explicitly, which keeps the services
       callable from tests and scripts without a request.
How:   Session issuance happens upstream (auth gateway / reverse proxy),
       which forwards the verified user id in a trusted header named by
       `settings.auth_user_header`.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from starlette.requests import Request

from snapedit.config import settings
from snapedit.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurrentUser:
    """An authenticated caller. `id` is opaque to this service."""

    id: str


def get_current_user(request: Request) -> Optional[CurrentUser]:
    """
    FastAPI dependency: read the caller identity forwarded by the gateway.

    Returns None when the header is missing or blank. It does not raise;
    the decision belongs to `require_user`, which every action calls first.
    """
    user_id = request.headers.get(settings.auth_user_header, "").strip()
    if not user_id:
        return None
    return CurrentUser(id=user_id)


def require_user(caller: Optional[CurrentUser]) -> CurrentUser:
    """
    Authorization guard: return the caller or raise UnauthorizedError.

    Hard precondition for every action; nothing touches the database
    before it passes.
    """
    if caller is None or not caller.id:
        logger.debug("Rejected unauthenticated action call")
        raise UnauthorizedError()
    return caller
