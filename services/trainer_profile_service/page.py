"""Compose the profile page: fetcher -> view model, plus the invitation card."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

import httpx

from libs.common.config import Settings
from services.trainer_profile_service.fetcher import (
    UNUSABLE_PROFILE_MESSAGE,
    Failed,
    Loaded,
    LoadState,
    ProfileDataFetcher,
)
from services.trainer_profile_service.invitation import (
    InvitationSubmissionController,
    VerificationWidget,
)
from services.trainer_profile_service.schemas import ProfileViewModel
from services.trainer_profile_service.view_model import build_profile_view_model


@dataclass(frozen=True)
class PageLoading:
    pass


@dataclass(frozen=True)
class PageError:
    """Full-page blocking alert; no recovery action is offered."""

    message: str
    status_code: Optional[int] = None


@dataclass(frozen=True)
class PageReady:
    view: ProfileViewModel


PageState = Union[PageLoading, PageError, PageReady]


def render_page(state: LoadState) -> PageState:
    if isinstance(state, Loaded):
        return PageReady(
            build_profile_view_model(state.trainer, state.user, state.plans)
        )
    if isinstance(state, Failed):
        return PageError(state.message or UNUSABLE_PROFILE_MESSAGE, state.status_code)
    return PageLoading()


class TrainerProfilePage:
    """One mounted profile page for a slug."""

    def __init__(
        self,
        slug: Optional[str],
        *,
        fetcher: ProfileDataFetcher,
        invitation: InvitationSubmissionController,
    ):
        self.slug = slug
        self.fetcher = fetcher
        self.invitation = invitation

    @classmethod
    def from_settings(
        cls,
        slug: Optional[str],
        settings: Settings,
        *,
        widget: Optional[VerificationWidget] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "TrainerProfilePage":
        fetcher = ProfileDataFetcher(
            base_url=settings.API_BASE_URL,
            timeout=settings.HTTP_TIMEOUT,
            transport=transport,
        )
        invitation = InvitationSubmissionController(
            slug or "",
            base_url=settings.API_BASE_URL,
            widget=widget,
            reset_verification_on_failure=settings.RESET_VERIFICATION_ON_FAILURE,
            timeout=settings.HTTP_TIMEOUT,
            transport=transport,
        )
        return cls(slug, fetcher=fetcher, invitation=invitation)

    async def open(self) -> PageState:
        await self.fetcher.load(self.slug)
        return self.render()

    def render(self) -> PageState:
        return render_page(self.fetcher.state)

    def close(self) -> None:
        self.fetcher.reset()
