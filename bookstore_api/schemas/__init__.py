"""
Pydantic Schemas Package

This package contains Pydantic models for request/response validation.

Schema Naming Convention:
- XxxBase: Writable fields and their validators
- XxxCreate: Body of POST requests
- XxxUpdate: Body of PUT requests (full replace)
- XxxResponse: Fields returned in API responses
"""

from bookstore_api.schemas.author import (
    AuthorBase,
    AuthorCreate,
    AuthorResponse,
    AuthorUpdate,
)
from bookstore_api.schemas.book import (
    AuthorBooksResponse,
    BookBase,
    BookCreate,
    BookResponse,
    BookUpdate,
    BookWithAuthorResponse,
)

__all__ = [
    # Author schemas
    "AuthorBase",
    "AuthorCreate",
    "AuthorUpdate",
    "AuthorResponse",
    # Book schemas
    "BookBase",
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    "BookWithAuthorResponse",
    "AuthorBooksResponse",
]
