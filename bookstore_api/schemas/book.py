"""
Book Pydantic Schemas

Request schemas validate the writable book fields. Response schemas come in
three shapes:
- BookResponse: the stored row (create, update, an author's book list)
- BookWithAuthorResponse: the row plus the joined author_name (listing and
  single-book lookup)
- AuthorBooksResponse: an author together with their books
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bookstore_api.schemas.author import AuthorResponse
from bookstore_api.utils.parsing import parse_integer, parse_iso_date


class BookBase(BaseModel):
    """
    Base schema with the writable book fields.

    Validation:
    - title: present, a string, non-empty after trimming (stored trimmed)
    - published_date: an ISO-8601 date
    - author_id: an integer, or a string of digits
    - description: optional free text

    Whether author_id points at an existing author is checked later by the
    book repository, not here.
    """

    title: str = Field(
        default=None,
        validate_default=True,
        max_length=255,
        description="Book title",
        examples=["Pride and Prejudice"],
    )

    description: str | None = Field(
        default=None,
        description="Book description or summary",
        examples=["A romantic novel of manners."],
    )

    published_date: date = Field(
        default=None,
        validate_default=True,
        description="Date of publication (ISO-8601)",
        examples=["1813-01-28"],
    )

    author_id: int = Field(
        default=None,
        validate_default=True,
        description="ID of the author who wrote the book",
        examples=[1],
    )

    @field_validator("title", mode="before")
    @classmethod
    def title_must_not_be_empty(cls, v: object) -> str:
        """Require a non-blank title and normalize surrounding whitespace."""
        if not isinstance(v, str) or not v.strip():
            raise ValueError("Title is required")
        return v.strip()

    @field_validator("published_date", mode="before")
    @classmethod
    def published_date_must_be_iso_date(cls, v: object) -> date:
        """Parse the publication date as an ISO-8601 date."""
        parsed = parse_iso_date(v)
        if parsed is None:
            raise ValueError("Published date must be valid")
        return parsed

    @field_validator("author_id", mode="before")
    @classmethod
    def author_id_must_be_integer(cls, v: object) -> int:
        """Accept integers and integer strings, reject everything else."""
        parsed = parse_integer(v)
        if parsed is None:
            raise ValueError("Author ID must be an integer")
        return parsed


class BookCreate(BookBase):
    """
    Schema for creating a new book.

    Example request body:
    {
        "title": "Pride and Prejudice",
        "published_date": "1813-01-28",
        "author_id": 1
    }
    """
    pass


class BookUpdate(BookBase):
    """
    Schema for replacing an existing book.

    All required fields must be resupplied; an omitted description clears
    the stored one. A changed author_id is re-checked against the authors
    table before the update is applied.
    """
    pass


class BookResponse(BaseModel):
    """Schema for a stored book row."""

    id: int = Field(..., description="Unique identifier", examples=[1])
    title: str = Field(..., description="Book title")
    description: str | None = Field(default=None, description="Book description")
    published_date: date = Field(..., description="Date of publication")
    author_id: int = Field(..., description="ID of the book's author")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Pride and Prejudice",
                "description": None,
                "published_date": "1813-01-28",
                "author_id": 1,
            }
        },
    )


class BookWithAuthorResponse(BookResponse):
    """
    Schema for a book joined with its author's name.

    author_name is null when the join finds no author row.
    """

    author_name: str | None = Field(
        default=None,
        description="Name of the book's author",
        examples=["Jane Austen"],
    )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Pride and Prejudice",
                "description": None,
                "published_date": "1813-01-28",
                "author_id": 1,
                "author_name": "Jane Austen",
            }
        },
    )


class AuthorBooksResponse(BaseModel):
    """Schema for GET /authors/{id}/books."""

    author: AuthorResponse = Field(..., description="The requested author")
    books: list[BookResponse] = Field(
        default=[],
        description="The author's books in insertion order",
    )
