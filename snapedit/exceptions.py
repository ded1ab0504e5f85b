"""
SnapEdit Backend: Custom Exception Hierarchy
===============================================

What:  Application exceptions for the three terminal action failures.
Why:   Services raise as soon as a condition is detected; global handlers
       (registered in main.py) render them with a machine-readable code and
       the right HTTP status. Services never format HTTP responses.
How:   Each exception carries a code, a user-facing message, and an optional
       context dict that is logged but never returned to the client.

Exception Hierarchy:
    SnapEditError (base)
    ├── UnauthorizedError  → 401 UNAUTHORIZED  (no authenticated caller)
    ├── NotFoundError      → 404 NOT_FOUND     (absent OR not owned)
    └── ValidationError    → 400 BAD_REQUEST   (input shape or refinement)

Persistence failures are not part of this hierarchy: SQLAlchemy errors
propagate unchanged and the catch-all handler renders a generic 500.
"""

from typing import Any, Dict, Optional


class SnapEditError(Exception):
    """
    Base exception for all SnapEdit action errors.

    Attributes:
        code:     Machine-readable error kind returned to the caller
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    code = "INTERNAL_SERVER_ERROR"
    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class UnauthorizedError(SnapEditError):
    """Raised by the authorization guard when no authenticated user is present."""

    code = "UNAUTHORIZED"
    status_code = 401

    def __init__(
        self,
        message: str = "You must be signed in to perform this action.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(SnapEditError):
    """
    Raised when a target or referenced parent is absent or owned by someone else.

    The two cases share one message on purpose: a caller probing another
    user's ids learns nothing beyond "not found". The requested id only goes
    into `context`, which is logged server-side.
    """

    code = "NOT_FOUND"
    status_code = 404

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found.", context=ctx)
        self.resource = resource


class ValidationError(SnapEditError):
    """
    Raised when action input fails its declared shape or a refinement.

    `issues` holds field-level violations in pydantic's error format so they
    can be surfaced to the caller verbatim.
    """

    code = "BAD_REQUEST"
    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        issues: Optional[list] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        self.issues = issues or []
