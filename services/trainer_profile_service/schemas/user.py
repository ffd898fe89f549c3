"""Account record for the user behind a trainer profile."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from services.trainer_profile_service.schemas.base import CamelModel


class UserAccount(CamelModel):
    id: Optional[str] = Field(default=None, alias="_id")
    role: Optional[str] = None
    provider: Optional[str] = None
    provider_id: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    is_active: bool = True

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
