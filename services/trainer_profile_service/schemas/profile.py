"""Envelope returned by ``GET {API_BASE_URL}/{slug}``."""

from typing import Optional

from pydantic import BaseModel, Field

from services.trainer_profile_service.schemas.base import CamelModel
from services.trainer_profile_service.schemas.plan import SubscriptionPlan
from services.trainer_profile_service.schemas.trainer import TrainerProfile
from services.trainer_profile_service.schemas.user import UserAccount


class TrainerProfileData(CamelModel):
    trainer_details: TrainerProfile
    user_details: UserAccount
    subscription_plans: list[SubscriptionPlan] = Field(default_factory=list)


class TrainerProfileResponse(BaseModel):
    msg: Optional[str] = None
    data: TrainerProfileData
