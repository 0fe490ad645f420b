"""Failure classification and user-facing messages.

Rate limiting is the only transport failure the user can act on (by
waiting), so it gets its own message; every other failure falls back to
an operation-specific generic message.
"""

from __future__ import annotations

from typing import Any

from address_lookup.models.results import ServiceError, TransportFailure

RATE_LIMIT_STATUS = 429

RATE_LIMITED_MESSAGE = "Too many requests. Please wait before trying again."
SEARCH_FAILED_MESSAGE = "An unexpected error occurred during address search."
RESOLVE_FAILED_MESSAGE = (
    "Address lookup service temporarily unavailable. "
    "Please contact your administrator or enter the address manually"
)
SAVE_FAILED_MESSAGE = "Failed to save address details."
SAVE_SUCCEEDED_MESSAGE = "Address updated successfully"
VALIDATION_FAILED_MESSAGE = "Please update the invalid form entries and try again."


def _structured_status(error: Any) -> int | None:
    for attr in ("status", "status_code"):
        value = getattr(error, attr, None)
        if isinstance(value, int):
            return value
    context = getattr(error, "context", None)
    if isinstance(context, dict):
        value = context.get("status")
        if isinstance(value, int):
            return value
    return None


def is_rate_limited(error: BaseException | None) -> bool:
    """Check whether a failure signals "too many requests".

    The status is looked up on the structured channel first (``status``,
    ``status_code`` or ``context["status"]``); the message text is the
    fallback, used only when no status is present, since some transports
    only report the code there.
    """
    if error is None:
        return False
    status = _structured_status(error)
    if status is not None:
        return status == RATE_LIMIT_STATUS
    return str(RATE_LIMIT_STATUS) in str(error)


def search_failure_message(failure: ServiceError | TransportFailure) -> str:
    """User message for a search that did not return candidates."""
    if isinstance(failure, ServiceError):
        return failure.message
    if is_rate_limited(failure.cause):
        return RATE_LIMITED_MESSAGE
    return SEARCH_FAILED_MESSAGE


def resolve_failure_message(failure: ServiceError | TransportFailure) -> str:
    """User message for a selection that could not be resolved."""
    if isinstance(failure, ServiceError):
        return failure.message
    if is_rate_limited(failure.cause):
        return RATE_LIMITED_MESSAGE
    return RESOLVE_FAILED_MESSAGE


def save_failure_detail(error: BaseException) -> str:
    """Notification text for a failed save, including the store's detail."""
    detail = getattr(error, "message", None)
    if not isinstance(detail, str) or not detail:
        detail = str(error)
    if not detail:
        return SAVE_FAILED_MESSAGE
    return f"{SAVE_FAILED_MESSAGE.rstrip('.')}: {detail}"
