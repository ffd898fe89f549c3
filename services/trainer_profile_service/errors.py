"""Error taxonomy for the trainer profile page.

These are raised inside the fetcher and the invitation controller and caught
at their boundaries, where the message becomes user-visible state.
"""

from typing import Optional


class TrainerPageError(Exception):
    """Base error carrying a user-facing message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FetchError(TrainerPageError):
    """Profile load failed (transport error, non-2xx or unusable payload)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ValidationError(TrainerPageError):
    """Invitation form input was rejected before reaching the network."""


class SubmissionError(TrainerPageError):
    """Invitation request was rejected by the server or never delivered."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
