"""Unit tests for ProfileDataFetcher against a fake trainer backend."""

import asyncio

import httpx
import pytest

from services.trainer_profile_service.fetcher import (
    FETCH_FALLBACK_MESSAGE,
    TRAINER_NOT_FOUND,
    UNUSABLE_PROFILE_MESSAGE,
    Failed,
    Idle,
    Loaded,
    Loading,
    ProfileDataFetcher,
)
from tests.factories import TrainerFactory, UserFactory, profile_envelope


@pytest.fixture
def fetcher(backend):
    return ProfileDataFetcher(base_url=backend.base_url, transport=backend.transport)


@pytest.mark.asyncio
@pytest.mark.unit
@pytest.mark.parametrize("slug", [None, "", "   "])
async def test_blank_slug_fails_without_network_call(fetcher, backend, slug):
    state = await fetcher.load(slug)

    assert state == Failed(TRAINER_NOT_FOUND)
    assert fetcher.state == Failed(TRAINER_NOT_FOUND)
    assert backend.requests == []


@pytest.mark.asyncio
@pytest.mark.unit
async def test_load_success(fetcher, backend):
    backend.on("GET", "/jane-doe", json=profile_envelope())
    seen = []
    fetcher.subscribe(seen.append)

    state = await fetcher.load("jane-doe")

    assert isinstance(state, Loaded)
    assert state.user.name == "Jane Doe"
    assert state.trainer.public_slug == "jane-doe"
    assert len(state.plans) == 1
    assert [type(s) for s in seen] == [Loading, Loaded]
    assert len(backend.requests_to("GET", "/jane-doe")) == 1


@pytest.mark.asyncio
@pytest.mark.unit
async def test_missing_plans_default_to_empty(fetcher, backend):
    body = profile_envelope()
    del body["data"]["subscriptionPlans"]
    backend.on("GET", "/jane-doe", json=body)

    state = await fetcher.load("jane-doe")

    assert isinstance(state, Loaded)
    assert state.plans == ()


@pytest.mark.asyncio
@pytest.mark.unit
async def test_non_success_status_embeds_code(fetcher, backend):
    backend.on("GET", "/ghost", status_code=404, json={"msg": "Trainer not found"})

    state = await fetcher.load("ghost")

    assert state == Failed("Failed to fetch trainer: 404", 404)


@pytest.mark.asyncio
@pytest.mark.unit
async def test_transport_failure_uses_error_message(fetcher, backend):
    def refuse(request):
        raise httpx.ConnectError("Connection refused", request=request)

    backend.on("GET", "/jane-doe", handler=refuse)

    state = await fetcher.load("jane-doe")

    assert state == Failed("Connection refused")


@pytest.mark.asyncio
@pytest.mark.unit
async def test_transport_failure_without_text_uses_fallback(fetcher, backend):
    def refuse(request):
        raise httpx.ReadError("", request=request)

    backend.on("GET", "/jane-doe", handler=refuse)

    state = await fetcher.load("jane-doe")

    assert state == Failed(FETCH_FALLBACK_MESSAGE)


@pytest.mark.asyncio
@pytest.mark.unit
async def test_payload_without_trainer_details_fails(fetcher, backend):
    backend.on(
        "GET",
        "/jane-doe",
        json={"msg": "ok", "data": {"userDetails": UserFactory.create()}},
    )

    state = await fetcher.load("jane-doe")

    assert isinstance(state, Failed)
    assert state.message == UNUSABLE_PROFILE_MESSAGE


@pytest.mark.asyncio
@pytest.mark.unit
async def test_every_load_refetches(fetcher, backend):
    backend.on("GET", "/jane-doe", json=profile_envelope())

    await fetcher.load("jane-doe")
    await fetcher.load("jane-doe")

    assert len(backend.requests_to("GET", "/jane-doe")) == 2


@pytest.mark.asyncio
@pytest.mark.unit
async def test_slug_is_a_single_path_segment(fetcher, backend):
    backend.on("GET", "/a/b", json=profile_envelope())

    state = await fetcher.load("a/b")

    assert isinstance(state, Loaded)
    assert backend.requests[0].url.raw_path.endswith(b"/a%2Fb")


# ---------------------------------------------------------------------------
# Slug changes while a load is in flight
# ---------------------------------------------------------------------------


def _slow_route(started: asyncio.Event, release: asyncio.Event, body):
    async def handler(request):
        started.set()
        await release.wait()
        return httpx.Response(200, json=body)

    return handler


@pytest.mark.asyncio
@pytest.mark.unit
async def test_watch_cancels_superseded_load(fetcher, backend):
    started, release = asyncio.Event(), asyncio.Event()
    backend.on(
        "GET",
        "/old-slug",
        handler=_slow_route(started, release, profile_envelope()),
    )
    backend.on(
        "GET",
        "/new-slug",
        json=profile_envelope(user=UserFactory.create(name="New Trainer")),
    )

    first = fetcher.watch("old-slug")
    await started.wait()
    second = fetcher.watch("new-slug")

    state = await second
    with pytest.raises(asyncio.CancelledError):
        await first

    assert isinstance(state, Loaded)
    assert fetcher.state.user.name == "New Trainer"


@pytest.mark.asyncio
@pytest.mark.unit
async def test_stale_response_does_not_overwrite_newer_state(fetcher, backend):
    started, release = asyncio.Event(), asyncio.Event()
    backend.on(
        "GET",
        "/old-slug",
        handler=_slow_route(
            started,
            release,
            profile_envelope(user=UserFactory.create(name="Old Trainer")),
        ),
    )
    backend.on(
        "GET",
        "/new-slug",
        json=profile_envelope(user=UserFactory.create(name="New Trainer")),
    )

    old = asyncio.create_task(fetcher.load("old-slug"))
    await started.wait()
    new_state = await fetcher.load("new-slug")
    release.set()
    old_state = await old

    assert old_state.user.name == "Old Trainer"
    assert fetcher.state == new_state
    assert fetcher.state.user.name == "New Trainer"


@pytest.mark.asyncio
@pytest.mark.unit
async def test_reset_discards_snapshot(fetcher, backend):
    backend.on(
        "GET", "/jane-doe", json=profile_envelope(trainer=TrainerFactory.create())
    )
    await fetcher.load("jane-doe")

    fetcher.reset()

    assert fetcher.state == Idle()


@pytest.mark.unit
def test_unsubscribe_stops_notifications(fetcher):
    seen = []
    unsubscribe = fetcher.subscribe(seen.append)
    unsubscribe()

    fetcher.reset()

    assert seen == []
