import pytest
from pydantic import ValidationError

from session_registry.errors import (
    SessionAlreadyExistsError,
    SessionNotFoundError,
    StoreErrorKind,
    error_for_kind,
)
from session_registry.sessions import SessionRecord, SessionStatus, StoreResult, compose_session_id


def test_compose_session_id():
    assert compose_session_id("alice", "2024-01-01") == "alice#2024-01-01"


@pytest.mark.parametrize("user_id, date", [("", "2024-01-01"), ("alice", "")])
def test_compose_session_id_requires_both_parts(user_id, date):
    with pytest.raises(ValueError):
        compose_session_id(user_id, date)


def test_open_accepts_explicit_session_id():
    record = SessionRecord.open(user_id="u1", date="d1", session_id="custom")
    assert record.session_id == "custom"


def test_status_parsed_from_string():
    record = SessionRecord.open(user_id="u1", date="d1", status="closed")
    assert record.status is SessionStatus.CLOSED


def test_empty_session_id_is_rejected():
    with pytest.raises(ValidationError):
        SessionRecord(session_id="", user_id="u1", date="d1")


def test_str_is_single_line():
    text = str(SessionRecord.open(user_id="u1", date="d1"))
    assert text == "Session u1#d1: user=u1 date=d1 status=active"


def test_error_for_kind_maps_to_exception_classes():
    assert isinstance(error_for_kind(StoreErrorKind.ALREADY_EXISTS, "x"), SessionAlreadyExistsError)
    assert isinstance(error_for_kind(StoreErrorKind.NOT_FOUND, "x"), SessionNotFoundError)


def test_success_result_unwraps_to_value():
    record = SessionRecord.open(user_id="u1", date="d1")
    result = StoreResult.success(record)
    assert result.ok
    assert result.error is None
    assert result.unwrap() is record


def test_failure_result_keeps_message():
    result = StoreResult.failure(StoreErrorKind.NOT_FOUND, "u1#d1", "gone")
    with pytest.raises(SessionNotFoundError) as exc_info:
        result.unwrap()
    assert str(exc_info.value) == "gone"
