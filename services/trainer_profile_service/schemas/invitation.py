"""Invitation request payloads."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from services.trainer_profile_service.schemas.base import CamelModel


class InvitationRequestPayload(CamelModel):
    """Body POSTed to ``{API_BASE_URL}/invitation/request``."""

    trainer_slug: str
    email: str
    recaptcha_token: str


class InvitationRequestCreate(BaseModel):
    """Body accepted by the public invitation endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    email: str = ""
    recaptcha_token: Optional[str] = Field(default=None, alias="recaptchaToken")


class InvitationRequestResponse(BaseModel):
    status: str
    message: Optional[str] = None
