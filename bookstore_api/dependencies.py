"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

Annotated aliases keep route signatures short:

    def list_books(books: BookRepo, author: AuthorFilter = None):
        ...

instead of repeating Depends(...) in every handler.
"""

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from bookstore_api.database import get_db
from bookstore_api.services.authors import AuthorRepository
from bookstore_api.services.books import BookRepository

# =============================================================================
# Database Session
# =============================================================================
DbSession = Annotated[Session, Depends(get_db)]


# =============================================================================
# Repositories
# =============================================================================
def get_author_repository(db: DbSession) -> AuthorRepository:
    """Author repository bound to the request's session."""
    return AuthorRepository(db)


def get_book_repository(db: DbSession) -> BookRepository:
    """Book repository bound to the request's session."""
    return BookRepository(db)


AuthorRepo = Annotated[AuthorRepository, Depends(get_author_repository)]
BookRepo = Annotated[BookRepository, Depends(get_book_repository)]


# =============================================================================
# Query Parameters
# =============================================================================
# Kept as text: a value that is not an author id matches no books instead of
# failing validation.
AuthorFilter = Annotated[
    str | None,
    Query(
        alias="author",
        description="Only return books written by this author ID",
        examples=["1"],
    ),
]
