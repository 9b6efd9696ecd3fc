"""Security constants and permissions."""
from enum import Enum


class Permission(str, Enum):
    """Permission constants for RBAC."""

    # Monument permissions
    MONUMENT_VIEW = "monument.view"
    MONUMENT_CREATE = "monument.create"
    MONUMENT_UPDATE = "monument.update"
    MONUMENT_DELETE = "monument.delete"


# Role definitions with permissions
ROLE_PERMISSIONS = {
    "admin": list(Permission),
    "editor": [
        Permission.MONUMENT_VIEW,
        Permission.MONUMENT_CREATE,
        Permission.MONUMENT_UPDATE,
    ],
    "viewer": [
        Permission.MONUMENT_VIEW,
    ],
}
