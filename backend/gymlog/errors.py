"""
Domain errors raised below the router layer.

`gymlog.main` maps them onto HTTP responses; services and the auth gate
raise them without knowing about status codes.
"""


class GymlogError(Exception):
    """Base class for errors the API turns into a client-facing response."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class AuthenticationError(GymlogError):
    """Missing, invalid or expired token, or bad login credentials (401)."""


class ValidationError(GymlogError):
    """A set payload is missing a required field or has a malformed one (400)."""
