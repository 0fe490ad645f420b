import pytest

from address_lookup import (
    PACKAGE_NAME,
    RATE_LIMITED_MESSAGE,
    RESOLVE_FAILED_MESSAGE,
    SEARCH_FAILED_MESSAGE,
    AddressLookupError,
    RecordStoreError,
    ServiceError,
    TransportFailure,
    is_rate_limited,
)
from address_lookup.classification import (
    resolve_failure_message,
    save_failure_detail,
    search_failure_message,
)
from tests.fakes import StatusError


class StatusCodeError(Exception):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP error {status_code}")
        self.status_code = status_code


@pytest.mark.parametrize(
    "error",
    [
        StatusError("Too Many Requests", status=429),
        StatusCodeError(429),
        RuntimeError("Request failed with status 429"),
        AddressLookupError(
            "remote_http_error", "429: Too Many Requests", {"package": PACKAGE_NAME, "status": 429}
        ),
    ],
)
def test_rate_limit_detected_on_every_channel(error: Exception) -> None:
    assert is_rate_limited(error)
    assert search_failure_message(TransportFailure(error)) == RATE_LIMITED_MESSAGE
    assert resolve_failure_message(TransportFailure(error)) == RATE_LIMITED_MESSAGE


@pytest.mark.parametrize(
    "error",
    [
        StatusError("Service Unavailable", status=503),
        ConnectionError("connection reset"),
        AddressLookupError("remote_request", "timed out", {"package": PACKAGE_NAME}),
        AddressLookupError(
            "remote_http_error",
            "404: No addresses found for 1429 High Street",
            {"package": PACKAGE_NAME, "status": 404},
        ),
        StatusError("Bad query 429 Main Road", status=400),
        None,
    ],
)
def test_other_failures_are_not_rate_limited(error: Exception | None) -> None:
    assert not is_rate_limited(error)


def test_generic_messages_differ_by_operation() -> None:
    failure = TransportFailure(ConnectionError("refused"))
    assert search_failure_message(failure) == SEARCH_FAILED_MESSAGE
    assert resolve_failure_message(failure) == RESOLVE_FAILED_MESSAGE


def test_service_error_message_is_verbatim() -> None:
    failure = ServiceError("Daily limit reached")
    assert search_failure_message(failure) == "Daily limit reached"
    assert resolve_failure_message(failure) == "Daily limit reached"


def test_lookup_error_exposes_status() -> None:
    error = AddressLookupError(
        "remote_http_error", "500: oops", {"package": PACKAGE_NAME, "status": 500}
    )
    assert error.status == 500
    assert AddressLookupError.from_exception("remote_request", OSError("down")).status is None


def test_save_failure_detail_includes_store_message() -> None:
    detail = save_failure_detail(RecordStoreError("Fields are read-only: BillingCity"))
    assert detail == "Failed to save address details: Fields are read-only: BillingCity"


def test_status_in_context_overrides_message_text() -> None:
    error = AddressLookupError(
        "remote_http_error",
        "500: Upstream failed for 1429 High Street",
        {"package": PACKAGE_NAME, "status": 500},
    )
    assert search_failure_message(TransportFailure(error)) == SEARCH_FAILED_MESSAGE
    assert resolve_failure_message(TransportFailure(error)) == RESOLVE_FAILED_MESSAGE


def test_save_failure_detail_ignores_message_method() -> None:
    error = AddressLookupError(
        "store_write", "Record is locked", {"package": PACKAGE_NAME}
    )

    detail = save_failure_detail(error)

    assert detail == "Failed to save address details: Record is locked"
    assert "bound method" not in detail
