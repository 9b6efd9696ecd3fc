"""FastAPI dependencies for authentication and authorization."""
from uuid import UUID
from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from app.config import settings
from app.database import get_db
from app.models.user import User
from app.utils.security import decode_token
from app.utils.permissions import has_permission
from app.core.security import Permission
from app.core.exceptions import UnauthorizedError, ForbiddenError
from app.localization.helpers import get_locale_from_request, get_translation

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_V1_PREFIX}/auth/login")


def get_locale(request: Request) -> str:
    """Locale negotiated from the Accept-Language header."""
    return get_locale_from_request(request)


async def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Get current authenticated user from JWT token."""
    credentials_exception = UnauthorizedError("Could not validate credentials")

    try:
        payload = decode_token(token)
        if payload.get("type") != "access":
            raise credentials_exception
        user_id = UUID(str(payload.get("sub")))
    except ValueError:
        raise credentials_exception

    result = await db.execute(
        select(User)
        .where(User.id == user_id)
        .options(selectinload(User.roles))
    )
    user = result.scalar_one_or_none()

    if user is None:
        raise credentials_exception

    return user


async def get_current_active_user(
    current_user: User = Depends(get_current_user),
    locale: str = Depends(get_locale),
) -> User:
    """Get current active user."""
    if not current_user.is_active:
        raise ForbiddenError(get_translation("errors.user_inactive", locale))
    return current_user


def require_permission(permission: Permission):
    """Dependency factory for requiring a specific permission."""

    async def permission_checker(
        current_user: User = Depends(get_current_active_user),
    ) -> User:
        if not has_permission(current_user, permission):
            raise ForbiddenError(f"Permission required: {permission.value}")
        return current_user

    return permission_checker
