"""
Domain errors raised by the service layer.

Services never build HTTP responses themselves.  They raise one of
the exceptions below and the handler registered in ``main.create_app``
turns it into a JSON body of the form ``{"message": "..."}`` with the
exception's status code.
"""

from fastapi import status


class TrackerError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TrackerError):
    """A required field is missing from a create request."""

    status_code = status.HTTP_400_BAD_REQUEST

    @classmethod
    def required(cls, field_name: str) -> "ValidationError":
        return cls(f"{field_name} is required")


class NotFoundError(TrackerError):
    """A record, or the parent a foreign key points at, does not exist."""

    status_code = status.HTTP_404_NOT_FOUND

    @classmethod
    def for_entity(cls, entity: str) -> "NotFoundError":
        return cls(f"{entity} not found")
