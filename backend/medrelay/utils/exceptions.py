"""
Relay error taxonomy.

Every error carries the HTTP status it is surfaced with. Authentication
failures keep the 500 status existing clients already handle.
"""


class RelayError(Exception):
    """Base class for errors with a known HTTP mapping."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputValidationError(RelayError):
    """A required request input is missing."""

    status_code = 400


class AuthenticationError(RelayError):
    """Missing or invalid bearer token, or the token belongs to another user."""

    status_code = 500


class UpstreamError(RelayError):
    """An external service failed."""

    status_code = 500


class UploadError(UpstreamError):
    """The media host rejected the upload or could not be reached."""
