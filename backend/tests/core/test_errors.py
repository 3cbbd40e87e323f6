"""Error hierarchy — codes, statuses and the REST response shape."""

from pursuit.core.errors import (
    ApplySupersededError, CeilingValidationError, DatabaseError, ErrorContext,
    ErrorSeverity, PresetNotFoundError, PresetUnreadableError, ResourceNotFoundError,
)


def test_ceiling_error_is_400_with_validator_text():
    err = CeilingValidationError("minimum exceeds maximum")
    body = err.to_response()["error"]
    assert err.http_status == 400
    assert body["code"] == "CEILING_INVALID"
    assert body["message"] == "minimum exceeds maximum"
    assert body["category"] == "validation"


def test_status_codes():
    assert PresetNotFoundError().http_status == 404
    assert PresetUnreadableError("not valid JSON").http_status == 422
    assert ApplySupersededError().http_status == 409
    assert ResourceNotFoundError("Application", "RFP-1").http_status == 404
    assert DatabaseError("boom", "query").http_status == 503


def test_superseded_is_only_a_warning():
    assert ApplySupersededError().severity is ErrorSeverity.WARNING


def test_user_message_overrides_internal_message():
    err = PresetUnreadableError("not valid JSON")
    assert "not valid JSON" in err.message
    assert err.to_response()["error"]["message"] == "Unable to load preset"


def test_context_fields_in_response():
    err = PresetNotFoundError(ErrorContext(storage_key="pursuit:preset"))
    assert err.to_response()["error"]["context"]["storage_key"] == "pursuit:preset"
