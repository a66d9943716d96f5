"""
API Error Types

Every failure a route can report on purpose is one of the classes below.
Each carries the HTTP status code and the message sent to the client; the
exception handlers registered in main.create_app() turn them into

    {"error": "<message>"}

Anything that is not an APIError becomes a 500 with a fixed message.

Taxonomy:
- NotFoundError (404): the requested entity does not exist
- ReferencedEntityMissingError (404): a book points at an author that does
  not exist
- ConflictError (400): an author still has books and cannot be deleted
"""

from fastapi import status


class APIError(Exception):
    """
    Base class for errors that map to a client-facing response.

    Attributes:
        status_code: HTTP status code of the response
        message: Text placed in the "error" field
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal Server Error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(APIError):
    """The entity addressed by the request does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not Found"


class ReferencedEntityMissingError(NotFoundError):
    """A write refers to another entity that does not exist."""

    default_message = "Author not found"


class ConflictError(APIError):
    """The write would break referential integrity."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Cannot delete author with associated books"
