"""
Authors Router

CRUD endpoints for authors, plus the author's book list.

Path ids are taken as text and resolved by the repository, so
/authors/abc answers 404 like any other unknown author.
"""

from fastapi import APIRouter, status

from bookstore_api.dependencies import AuthorRepo
from bookstore_api.errors import NotFoundError
from bookstore_api.schemas import (
    AuthorBooksResponse,
    AuthorCreate,
    AuthorResponse,
    AuthorUpdate,
    BookResponse,
)

router = APIRouter(
    prefix="/authors",
    tags=["Authors"],
    responses={
        404: {"description": "Author not found"},
    },
)


@router.get(
    "",
    response_model=list[AuthorResponse],
    summary="List all authors",
    description="Get a list of all authors in the system.",
)
def list_authors(authors: AuthorRepo) -> list[AuthorResponse]:
    """List all authors."""
    return [AuthorResponse.model_validate(a) for a in authors.list_all()]


@router.get(
    "/{author_id}",
    response_model=AuthorResponse,
    summary="Get an author by ID",
    description="Retrieve detailed information about a specific author.",
)
def get_author(author_id: str, authors: AuthorRepo) -> AuthorResponse:
    """Get a single author by ID."""
    author = authors.get(author_id)
    if author is None:
        raise NotFoundError("Author not found")
    return AuthorResponse.model_validate(author)


@router.post(
    "",
    response_model=AuthorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new author",
    description="Create a new author. Name and birthdate are required.",
)
def create_author(author_data: AuthorCreate, authors: AuthorRepo) -> AuthorResponse:
    """Create a new author."""
    author = authors.create(author_data)
    return AuthorResponse.model_validate(author)


@router.put(
    "/{author_id}",
    response_model=AuthorResponse,
    summary="Replace an author",
    description="Replace all fields of an existing author.",
)
def update_author(
    author_id: str,
    author_data: AuthorUpdate,
    authors: AuthorRepo,
) -> AuthorResponse:
    """Replace an existing author."""
    author = authors.update(author_id, author_data)
    if author is None:
        raise NotFoundError("Author not found")
    return AuthorResponse.model_validate(author)


@router.delete(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an author",
    description="Delete an author. Refused while any book references the author.",
    responses={
        400: {"description": "Author still has books"},
    },
)
def delete_author(author_id: str, authors: AuthorRepo) -> None:
    """
    Delete an author.

    Raises:
        ConflictError: 400 if books still reference the author
        NotFoundError: 404 if the author does not exist
    """
    if not authors.delete(author_id):
        raise NotFoundError("Author not found")


@router.get(
    "/{author_id}/books",
    response_model=AuthorBooksResponse,
    summary="Get books by author",
    description="Get an author together with all of their books.",
)
def get_author_books(author_id: str, authors: AuthorRepo) -> AuthorBooksResponse:
    """Get an author and their books in insertion order."""
    result = authors.list_books(author_id)
    if result is None:
        raise NotFoundError("Author not found")

    author, books = result
    return AuthorBooksResponse(
        author=AuthorResponse.model_validate(author),
        books=[BookResponse.model_validate(book) for book in books],
    )
