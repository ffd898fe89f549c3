"""Invitation request form: validation, bot verification and submission.

State machine::

    Editing -> Validating -> Invalid(message)
                          -> Submitting -> Succeeded(message)
                                        -> Failed(message)

Invalid, Succeeded and Failed fall back to Editing on the next interaction
(email edit or verification callback). Only one submission can be in flight;
``submit`` is a no-op while Submitting, and a send that raises or is
cancelled never leaves the form stuck there.
"""

from __future__ import annotations

import asyncio
import re
from dataclasses import dataclass
from typing import Optional, Protocol, Union

import httpx

from libs.common.logging import get_logger
from libs.common.service_client import api_post, error_text
from services.trainer_profile_service.errors import SubmissionError, ValidationError
from services.trainer_profile_service.schemas import InvitationRequestPayload

logger = get_logger(__name__)

INVITATION_REQUEST_PATH = "/invitation/request"

EMAIL_REQUIRED_MESSAGE = "Please enter your email."
EMAIL_INVALID_MESSAGE = "Please enter a valid email address."
VERIFICATION_REQUIRED_MESSAGE = "Please complete the reCAPTCHA."
SUCCESS_MESSAGE = (
    "Invitation request sent successfully. The trainer will contact you soon."
)
SUBMISSION_FALLBACK_MESSAGE = "Something went wrong. Please try again."

SUBMIT_LABEL = "Request Invitation"
SUBMITTING_LABEL = "Sending request…"

# local@domain.tld, no whitespace anywhere
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class VerificationWidget(Protocol):
    """The bot-verification challenge rendered next to the form."""

    def reset(self) -> None: ...


@dataclass(frozen=True)
class Editing:
    pass


@dataclass(frozen=True)
class Validating:
    pass


@dataclass(frozen=True)
class Invalid:
    message: str


@dataclass(frozen=True)
class Submitting:
    pass


@dataclass(frozen=True)
class Succeeded:
    message: str


@dataclass(frozen=True)
class Failed:
    message: str


SubmissionState = Union[Editing, Validating, Invalid, Submitting, Succeeded, Failed]


def validate_invitation(email: str, verification_token: Optional[str]) -> str:
    """Check the form in order and return the trimmed email.

    Raises:
        ValidationError: for the first failing rule only.
    """
    email = email or ""
    trimmed = email.strip()
    if not trimmed:
        raise ValidationError(EMAIL_REQUIRED_MESSAGE)
    # The pattern sees the email as typed, so surrounding spaces fail it.
    if not EMAIL_PATTERN.fullmatch(email):
        raise ValidationError(EMAIL_INVALID_MESSAGE)
    if not verification_token:
        raise ValidationError(VERIFICATION_REQUIRED_MESSAGE)
    return trimmed


async def send_invitation_request(
    payload: InvitationRequestPayload,
    *,
    base_url: str,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> None:
    """POST the request; the response body is ignored on success.

    Raises:
        SubmissionError: with the server's ``error`` text when it sent one.
    """
    try:
        response = await api_post(
            base_url=base_url,
            path=INVITATION_REQUEST_PATH,
            json=payload.model_dump(by_alias=True),
            timeout=timeout,
            transport=transport,
        )
    except httpx.RequestError as exc:
        raise SubmissionError(str(exc) or SUBMISSION_FALLBACK_MESSAGE) from exc

    if not response.is_success:
        raise SubmissionError(
            error_text(response)
            or f"Request failed with status {response.status_code}",
            status_code=response.status_code,
        )


class InvitationSubmissionController:
    """Form state for one trainer's invitation request card."""

    def __init__(
        self,
        trainer_slug: str,
        *,
        base_url: str,
        widget: Optional[VerificationWidget] = None,
        reset_verification_on_failure: bool = True,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.trainer_slug = trainer_slug
        self.base_url = base_url
        self.widget = widget
        self.reset_verification_on_failure = reset_verification_on_failure
        self.timeout = timeout
        self.transport = transport

        self._email = ""
        self._verification_token: Optional[str] = None
        self._state: SubmissionState = Editing()

    # -- read side ---------------------------------------------------------

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def email(self) -> str:
        return self._email

    @property
    def verification_token(self) -> Optional[str]:
        return self._verification_token

    @property
    def can_submit(self) -> bool:
        return not isinstance(self._state, Submitting)

    @property
    def submit_label(self) -> str:
        return SUBMITTING_LABEL if isinstance(self._state, Submitting) else SUBMIT_LABEL

    @property
    def error_message(self) -> Optional[str]:
        if isinstance(self._state, (Invalid, Failed)):
            return self._state.message
        return None

    @property
    def success_message(self) -> Optional[str]:
        if isinstance(self._state, Succeeded):
            return self._state.message
        return None

    # -- interactions ------------------------------------------------------

    def _resume_editing(self) -> None:
        if isinstance(self._state, (Invalid, Succeeded, Failed)):
            self._state = Editing()

    def set_email(self, value: str) -> None:
        self._email = value
        self._resume_editing()

    def on_verified(self, token: Optional[str]) -> None:
        """Widget callback; a None token means the challenge expired."""
        self._verification_token = token or None
        self._resume_editing()

    def on_expired(self) -> None:
        self.on_verified(None)

    def _reset_verification(self) -> None:
        self._verification_token = None
        if self.widget is not None:
            self.widget.reset()

    def _fail(self, message: str) -> SubmissionState:
        self._state = Failed(message)
        if self.reset_verification_on_failure:
            self._reset_verification()
        return self._state

    async def submit(self) -> SubmissionState:
        if isinstance(self._state, Submitting):
            logger.debug("Ignoring submit while a request is in flight")
            return self._state

        self._state = Validating()
        try:
            email = validate_invitation(self._email, self._verification_token)
        except ValidationError as exc:
            self._state = Invalid(exc.message)
            return self._state

        self._state = Submitting()
        payload = InvitationRequestPayload(
            trainer_slug=self.trainer_slug,
            email=email,
            recaptcha_token=self._verification_token,
        )
        try:
            await send_invitation_request(
                payload,
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self.transport,
            )
        except SubmissionError as exc:
            logger.warning(
                f"Invitation request for '{self.trainer_slug}' failed: {exc.message}"
            )
            return self._fail(exc.message)
        except asyncio.CancelledError:
            self._state = Editing()
            raise
        except Exception:
            logger.exception(
                f"Unexpected error sending invitation for '{self.trainer_slug}'"
            )
            return self._fail(SUBMISSION_FALLBACK_MESSAGE)

        logger.info(f"Invitation request sent for trainer '{self.trainer_slug}'")
        self._email = ""
        self._reset_verification()
        self._state = Succeeded(SUCCESS_MESSAGE)
        return self._state
