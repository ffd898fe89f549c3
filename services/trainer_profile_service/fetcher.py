"""Load a trainer's profile snapshot by slug.

The load state is a closed set of variants, so an error can never sit next to
loaded data:

    Idle -> Loading(slug) -> Loaded(trainer, user, plans)
                          -> Failed(message)

Each ``load`` fetches from scratch. ``watch`` is the slug-change entry point:
it cancels a superseded in-flight load, and any completion that still arrives
for an older slug is dropped instead of overwriting newer state.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Callable, Optional, Union
from urllib.parse import quote

import httpx
from pydantic import ValidationError as SchemaValidationError

from libs.common.logging import get_logger
from libs.common.service_client import api_get
from services.trainer_profile_service.errors import FetchError
from services.trainer_profile_service.schemas import (
    SubscriptionPlan,
    TrainerProfile,
    TrainerProfileData,
    TrainerProfileResponse,
    UserAccount,
)

logger = get_logger(__name__)

TRAINER_NOT_FOUND = "Trainer not found."
FETCH_FALLBACK_MESSAGE = "Something went wrong fetching trainer profile."
UNUSABLE_PROFILE_MESSAGE = "Unable to load trainer profile."


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    slug: str


@dataclass(frozen=True)
class Loaded:
    trainer: TrainerProfile
    user: UserAccount
    plans: tuple[SubscriptionPlan, ...] = ()


@dataclass(frozen=True)
class Failed:
    message: str
    status_code: Optional[int] = None


LoadState = Union[Idle, Loading, Loaded, Failed]
StateListener = Callable[[LoadState], None]


async def fetch_trainer_profile(
    slug: str,
    *,
    base_url: str,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> TrainerProfileData:
    """GET ``{base_url}/{slug}`` and parse the ``data`` envelope.

    Raises:
        FetchError: transport failure, non-2xx status or a payload without
            ``trainerDetails``/``userDetails``.
    """
    try:
        response = await api_get(
            base_url=base_url,
            path=f"/{quote(slug, safe='')}",
            timeout=timeout,
            transport=transport,
        )
    except httpx.RequestError as exc:
        raise FetchError(str(exc) or FETCH_FALLBACK_MESSAGE) from exc

    if not response.is_success:
        raise FetchError(
            f"Failed to fetch trainer: {response.status_code}",
            status_code=response.status_code,
        )

    try:
        payload = TrainerProfileResponse.model_validate(response.json())
    except (ValueError, SchemaValidationError) as exc:
        raise FetchError(UNUSABLE_PROFILE_MESSAGE, response.status_code) from exc
    return payload.data


class ProfileDataFetcher:
    """Owns the load state for one profile page."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport
        self._state: LoadState = Idle()
        self._generation = 0
        self._task: Optional[asyncio.Task] = None
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> LoadState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a state listener; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, state: LoadState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    async def load(self, slug: Optional[str]) -> LoadState:
        """Fetch the profile for ``slug`` and return the resulting state.

        A blank slug fails immediately without touching the network. If a
        newer load starts while this one is awaiting the backend, this call's
        outcome is returned to the caller but not applied to ``state``.
        """
        self._generation += 1
        generation = self._generation

        if not slug or not slug.strip():
            self._set_state(Failed(TRAINER_NOT_FOUND))
            return self._state

        self._set_state(Loading(slug))
        result: LoadState
        try:
            data = await fetch_trainer_profile(
                slug,
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self.transport,
            )
        except FetchError as exc:
            logger.warning(f"Error fetching trainer profile '{slug}': {exc.message}")
            result = Failed(exc.message, exc.status_code)
        else:
            result = Loaded(
                trainer=data.trainer_details,
                user=data.user_details,
                plans=tuple(data.subscription_plans),
            )

        if generation != self._generation:
            logger.debug(f"Dropping stale profile response for '{slug}'")
            return result

        self._set_state(result)
        return result

    def watch(self, slug: Optional[str]) -> asyncio.Task:
        """React to a slug change: cancel the superseded load and start anew."""
        self.cancel()
        self._task = asyncio.create_task(self.load(slug))
        return self._task

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    def reset(self) -> None:
        """Discard the snapshot, e.g. when the page goes away."""
        self.cancel()
        self._generation += 1
        self._set_state(Idle())
