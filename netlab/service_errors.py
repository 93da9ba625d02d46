"""Errors raised by the teacher and course service, with their HTTP answers."""

from __future__ import annotations

from typing import Any


class WebServiceError(Exception):
    """Base of every error the service reports to its clients."""

    status_code = 500
    _log_label = "Server error occurred"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def _public_message(self) -> str:
        return self.message

    def error_message(self) -> str:
        """Log the error and return the message that may be shown to clients."""
        print(f"{self._log_label}: {self.message!r}")
        return self._public_message()

    def to_response(self) -> tuple[dict[str, Any], int]:
        """Return the JSON body and the HTTP status code for this error."""
        return {"error_message": self.error_message()}, self.status_code


class DBError(WebServiceError):
    """A database operation failed; details are hidden from clients."""

    status_code = 500
    _log_label = "Database error occurred"

    def _public_message(self) -> str:
        return "Database error"


class ServerError(WebServiceError):
    """The web framework failed; details are hidden from clients."""

    status_code = 500
    _log_label = "Server error occurred"

    def _public_message(self) -> str:
        return "Internal server error"


class NotFound(WebServiceError):
    """The requested record does not exist."""

    status_code = 404
    _log_label = "Not found error occurred"


class InvalidInput(WebServiceError):
    """The request carried parameters that could not be accepted."""

    status_code = 400
    _log_label = "Invalid parameters received"