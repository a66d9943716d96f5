"""
Books Router

CRUD endpoints for books.

Reads return each book with its author's name (author_name). Writes check
that author_id names an existing author before touching the books table and
answer 404 "Author not found" when it does not.
"""

from fastapi import APIRouter, status

from bookstore_api.dependencies import AuthorFilter, BookRepo
from bookstore_api.errors import NotFoundError
from bookstore_api.schemas import (
    BookCreate,
    BookResponse,
    BookUpdate,
    BookWithAuthorResponse,
)

# =============================================================================
# Router Configuration
# =============================================================================
router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        404: {"description": "Book or author not found"},
    },
)


# =============================================================================
# CRUD Endpoints
# =============================================================================

@router.get(
    "",
    response_model=list[BookWithAuthorResponse],
    summary="List all books",
    description="Get all books with their author's name, optionally filtered by author ID.",
)
def list_books(books: BookRepo, author: AuthorFilter = None) -> list[BookWithAuthorResponse]:
    """
    List all books.

    Examples:
        GET /books
        GET /books?author=1
    """
    # An empty ?author= means no filter
    rows = books.list_all(author_id=author or None)
    return [BookWithAuthorResponse.model_validate(row) for row in rows]


@router.get(
    "/{book_id}",
    response_model=BookWithAuthorResponse,
    summary="Get a book by ID",
    description="Retrieve a specific book with its author's name.",
)
def get_book(book_id: str, books: BookRepo) -> BookWithAuthorResponse:
    """Get a single book by its ID."""
    row = books.get(book_id)
    if row is None:
        raise NotFoundError("Book not found")
    return BookWithAuthorResponse.model_validate(row)


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    description="Create a new book for an existing author.",
)
def create_book(book_data: BookCreate, books: BookRepo) -> BookResponse:
    """
    Create a new book.

    Raises:
        ReferencedEntityMissingError: 404 if author_id names no author
    """
    book = books.create(book_data)
    return BookResponse.model_validate(book)


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    summary="Replace a book",
    description="Replace all fields of an existing book. The author must exist.",
)
def update_book(book_id: str, book_data: BookUpdate, books: BookRepo) -> BookResponse:
    """
    Replace an existing book.

    Raises:
        ReferencedEntityMissingError: 404 if author_id names no author
        NotFoundError: 404 if the book does not exist
    """
    book = books.update(book_id, book_data)
    if book is None:
        raise NotFoundError("Book not found")
    return BookResponse.model_validate(book)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
    description="Permanently delete a book from the database.",
)
def delete_book(book_id: str, books: BookRepo) -> None:
    """Delete a book. Returns 204 No Content on success."""
    if not books.delete(book_id):
        raise NotFoundError("Book not found")
