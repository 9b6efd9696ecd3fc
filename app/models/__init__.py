"""Model modules."""
from app.models.user import User, Role
from app.models.monument import Monument

__all__ = [
    "User",
    "Role",
    "Monument",
]
