import pytest

from netlab.service_errors import (
    DBError,
    InvalidInput,
    NotFound,
    ServerError,
    WebServiceError,
)


def test_db_error_hides_details():
    err = DBError("connection refused")
    assert err.error_message() == "Database error"
    assert err.to_response() == ({"error_message": "Database error"}, 500)


def test_server_error_hides_details():
    err = ServerError("worker crashed")
    assert err.to_response() == ({"error_message": "Internal server error"}, 500)


def test_not_found_passes_message_through():
    err = NotFound("Teacher id not found")
    assert err.to_response() == ({"error_message": "Teacher id not found"}, 404)


def test_invalid_input_is_bad_request():
    err = InvalidInput("Invalid input")
    assert err.to_response() == ({"error_message": "Invalid input"}, 400)


@pytest.mark.parametrize(
    "cls, status",
    [(DBError, 500), (ServerError, 500), (NotFound, 404), (InvalidInput, 400)],
)
def test_all_errors_share_a_base(cls, status):
    err = cls("detail")
    assert isinstance(err, WebServiceError)
    assert err.message == "detail"
    assert str(err) == "detail"
    assert err.to_response()[1] == status


def test_error_message_logs_the_detail(capsys):
    NotFound("Course id not found").error_message()
    out = capsys.readouterr().out
    assert "Not found error occurred" in out
    assert "Course id not found" in out


def test_db_error_log_keeps_hidden_detail(capsys):
    DBError("disk full").error_message()
    out = capsys.readouterr().out
    assert "Database error occurred" in out
    assert "disk full" in out