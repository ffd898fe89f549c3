"""Subscription plan schemas. Amounts are in minor currency units."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from services.trainer_profile_service.schemas.base import CamelModel


class SubscriptionPlanMeta(CamelModel):
    trainer_id: Optional[str] = None
    sessions_included_per_month: Optional[int] = None
    free_trial_sessions: Optional[int] = None


class SubscriptionPlan(CamelModel):
    id: Optional[str] = Field(default=None, alias="_id")
    category: Optional[str] = None
    name: str = ""
    amount: int = 0  # minor units (paise, cents)
    currency: str = "INR"
    period: Optional[str] = None
    interval: int = 1
    meta: Optional[SubscriptionPlanMeta] = None
    description: Optional[str] = None
    is_active: bool = True

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
