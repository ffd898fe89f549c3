"""Public trainer page endpoints."""

from typing import Optional

import httpx
from fastapi import APIRouter, Depends, HTTPException, Request

from libs.common.config import Settings, get_settings
from libs.common.rate_limit import invitation_limit_value, limiter
from services.trainer_profile_service.fetcher import TRAINER_NOT_FOUND
from services.trainer_profile_service.invitation import (
    InvitationSubmissionController,
    Invalid,
    Succeeded,
)
from services.trainer_profile_service.page import (
    PageError,
    PageReady,
    TrainerProfilePage,
)
from services.trainer_profile_service.schemas import (
    InvitationRequestCreate,
    InvitationRequestResponse,
    ProfileViewModel,
)

router = APIRouter(prefix="/trainers", tags=["trainers"])
config_router = APIRouter(tags=["system"])


def get_backend_transport() -> Optional[httpx.AsyncBaseTransport]:
    """Transport for backend calls; None uses the network. Overridden in tests."""
    return None


@config_router.get("/config")
async def get_public_config(settings: Settings = Depends(get_settings)) -> dict[str, str]:
    """Values the browser needs to render the verification widget."""
    return {"recaptcha_site_key": settings.RECAPTCHA_SITE_KEY}


@router.get("/{slug}", response_model=ProfileViewModel)
async def get_trainer_page(
    slug: str,
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_backend_transport),
):
    """
    Fetch a trainer by slug and return the render-ready profile page.
    """
    page = TrainerProfilePage.from_settings(slug, settings, transport=transport)
    state = await page.open()
    if isinstance(state, PageReady):
        return state.view

    if not isinstance(state, PageError):
        raise HTTPException(status_code=502, detail="Trainer profile did not load.")
    not_found = state.message == TRAINER_NOT_FOUND or state.status_code == 404
    raise HTTPException(status_code=404 if not_found else 502, detail=state.message)


@router.post(
    "/{slug}/invitation-requests", response_model=InvitationRequestResponse
)
@limiter.limit(invitation_limit_value)
async def request_invitation(
    request: Request,
    slug: str,
    body: InvitationRequestCreate,
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_backend_transport),
):
    """
    Validate and forward a visitor's invitation request to the trainer backend.

    422 for a form problem, 502 when the backend rejects or is unreachable.
    """
    controller = InvitationSubmissionController(
        slug,
        base_url=settings.API_BASE_URL,
        reset_verification_on_failure=settings.RESET_VERIFICATION_ON_FAILURE,
        timeout=settings.HTTP_TIMEOUT,
        transport=transport,
    )
    controller.set_email(body.email)
    controller.on_verified(body.recaptcha_token)

    state = await controller.submit()
    if isinstance(state, Succeeded):
        return InvitationRequestResponse(status="succeeded", message=state.message)
    if isinstance(state, Invalid):
        raise HTTPException(status_code=422, detail=state.message)
    raise HTTPException(status_code=502, detail=controller.error_message)
