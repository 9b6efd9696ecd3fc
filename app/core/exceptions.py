"""Custom exceptions."""
from typing import Optional
from fastapi import HTTPException, status
from app.localization.helpers import get_translation


class NotFoundError(HTTPException):
    """Resource not found exception."""

    def __init__(self, detail: Optional[str] = None, locale: str = "en"):
        if detail is None:
            detail = get_translation("errors.resource_not_found", locale)
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class UnauthorizedError(HTTPException):
    """Unauthorized exception."""

    def __init__(self, detail: Optional[str] = None, locale: str = "en"):
        if detail is None:
            detail = get_translation("errors.not_authenticated", locale)
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class ForbiddenError(HTTPException):
    """Forbidden exception."""

    def __init__(self, detail: Optional[str] = None, locale: str = "en"):
        if detail is None:
            detail = get_translation("errors.permission_denied", locale)
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class ValidationError(HTTPException):
    """Validation exception."""

    def __init__(self, detail: Optional[str] = None, locale: str = "en"):
        if detail is None:
            detail = get_translation("errors.validation_error", locale)
        super().__init__(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=detail)


class ConflictError(HTTPException):
    """Conflict exception."""

    def __init__(self, detail: Optional[str] = None, locale: str = "en"):
        if detail is None:
            detail = get_translation("errors.resource_conflict", locale)
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class InvalidIdentifierError(ValueError):
    """Malformed or non-positive entity id in a routing token.

    Routers map this to ``NotFoundError``: ids embedded in URLs are opaque
    routing tokens, not form input.
    """

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid entity identifier: {value!r}")


class SlugExhaustedError(RuntimeError):
    """No free numeric suffix was found for a slug within the attempt limit."""

    def __init__(self, base_slug: str, lang: str, max_attempts: int):
        self.base_slug = base_slug
        self.lang = lang
        self.max_attempts = max_attempts
        super().__init__(
            f"Unable to generate unique {lang} slug for {base_slug!r} "
            f"after {max_attempts} attempts"
        )
