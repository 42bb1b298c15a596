"""Tests for error types and API error message extraction."""

import pytest
from hypothesis import given, strategies as st

from cheathub.services.errors import (
    TRANSPORT_ADVISORY,
    ApiError,
    ErrorCategory,
    ErrorSeverity,
    MalformedResponseError,
    TransportError,
    ValidationError,
    describe_transport_error,
    extract_api_error_message,
    flatten_error_details,
    is_fetch_failure,
)


non_empty_text = st.text(min_size=1, max_size=50).filter(lambda x: x.strip())
status_codes = st.integers(min_value=400, max_value=599)
reasons = st.sampled_from(["Bad Request", "Unauthorized", "Not Found", "Internal Server Error"])


class TestExtractApiErrorMessage:
    """The ordered fallback: message, title, errors, status line."""

    @given(message=non_empty_text, title=non_empty_text, status=status_codes, reason=reasons)
    def test_message_wins_over_everything(self, message: str, title: str, status: int, reason: str) -> None:
        body = {"message": message, "title": title, "errors": {"field": ["bad"]}}
        assert extract_api_error_message(body, status, reason) == message

    @given(title=non_empty_text, status=status_codes, reason=reasons)
    def test_title_used_without_message(self, title: str, status: int, reason: str) -> None:
        body = {"title": title, "errors": {"field": ["bad"]}}
        assert extract_api_error_message(body, status, reason) == title

    def test_errors_flattened_without_message_or_title(self) -> None:
        body = {"errors": {"email": ["Email is required", "Email is invalid"], "password": ["Too short"]}}
        assert extract_api_error_message(body, 400, "Bad Request") == (
            "Email is required; Email is invalid; Too short"
        )

    @given(status=status_codes, reason=reasons)
    def test_status_line_for_non_object_body(self, status: int, reason: str) -> None:
        for body in (None, [], "oops", 42):
            assert extract_api_error_message(body, status, reason) == f"{status}: {reason}"

    def test_status_line_for_empty_fields(self) -> None:
        body = {"message": "", "title": None, "errors": {}}
        assert extract_api_error_message(body, 500, "Internal Server Error") == "500: Internal Server Error"

    def test_non_string_message_is_stringified(self) -> None:
        assert extract_api_error_message({"message": 404}, 404, "Not Found") == "404"


class TestFlattenErrorDetails:
    def test_mixed_list_and_scalar_values(self) -> None:
        assert flatten_error_details({"a": ["x", "y"], "b": "z"}) == "x; y; z"

    def test_list_of_messages(self) -> None:
        assert flatten_error_details(["one", "two"]) == "one; two"

    def test_unflattenable_value_falls_back_to_json(self) -> None:
        assert flatten_error_details("plain") == '"plain"'

    @given(st.dictionaries(non_empty_text, st.lists(non_empty_text, max_size=3), max_size=4))
    def test_every_message_appears(self, errors: dict[str, list[str]]) -> None:
        flattened = flatten_error_details(errors)
        for messages in errors.values():
            for message in messages:
                assert message in flattened


class TestTransportErrors:
    @pytest.mark.parametrize("text", [
        "Failed to fetch",
        "All connection attempts failed",
        "[Errno -2] Name or service not known",
        "[Errno 111] Connection refused",
    ])
    def test_fetch_failure_gets_advisory(self, text: str) -> None:
        error = TransportError(text)
        assert error.looks_like_fetch_failure
        message = describe_transport_error("Network error while requesting the token", error)
        assert message == f"Network error while requesting the token: {text}{TRANSPORT_ADVISORY}"

    def test_other_transport_text_has_no_advisory(self) -> None:
        error = TransportError("ReadTimeout")
        assert not is_fetch_failure("ReadTimeout")
        message = describe_transport_error("Network error while requesting cheats", error)
        assert message == "Network error while requesting cheats: ReadTimeout"

    def test_technical_details_include_original_error(self) -> None:
        original = ConnectionError("boom")
        error = TransportError("boom", original_error=original, url="https://api.test/v1/token")
        assert error.category == ErrorCategory.TRANSPORT
        assert error.technical_details is not None
        assert "ConnectionError: boom" in error.technical_details
        assert "https://api.test/v1/token" in error.technical_details


class TestErrorTaxonomy:
    def test_validation_error_is_a_warning(self) -> None:
        error = ValidationError("Please enter a TitleId", field="title_id")
        assert error.category == ErrorCategory.VALIDATION
        assert error.severity == ErrorSeverity.WARNING
        assert error.field == "title_id"

    def test_malformed_response_is_an_api_error(self) -> None:
        error = MalformedResponseError("bad shape", status_code=200)
        assert isinstance(error, ApiError)
        assert error.category == ErrorCategory.API
        assert error.technical_details == "Status: 200"
