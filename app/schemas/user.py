"""User schemas."""
from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel, EmailStr
from datetime import datetime


class RoleResponse(BaseModel):
    """Role response schema."""

    id: UUID
    name: str
    permissions: List[str]
    description: Optional[str] = None

    class Config:
        from_attributes = True


class UserResponse(BaseModel):
    """User response schema."""

    id: UUID
    email: EmailStr
    full_name: str
    is_active: bool = True
    roles: List[RoleResponse] = []
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
