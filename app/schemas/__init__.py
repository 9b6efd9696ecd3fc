"""Schema modules."""
from app.schemas.auth import TokenResponse, RefreshTokenRequest, RefreshTokenResponse
from app.schemas.user import UserResponse, RoleResponse
from app.schemas.monument import (
    MonumentCreate,
    MonumentUpdate,
    MonumentResponse,
    SlugBackfillResponse,
)
from app.schemas.common import PaginatedResponse
