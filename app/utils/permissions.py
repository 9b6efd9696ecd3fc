"""RBAC permission helpers."""
from typing import Set
from app.models.user import User
from app.core.security import Permission


def get_user_permissions(user: User) -> Set[str]:
    """Collect permission strings from all of the user's roles."""
    permissions = set()
    for role in user.roles:
        if role.permissions:
            permissions.update(role.permissions)
    return permissions


def has_permission(user: User, permission: Permission) -> bool:
    """Check if user has a specific permission."""
    if not user.is_active:
        return False
    return permission.value in get_user_permissions(user)
