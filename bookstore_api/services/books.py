"""
Book Repository

CRUD operations on the books table.

Reads go through the query composer and come back as plain dicts holding
the book columns plus author_name. Writes return Book entities. Every write
that sets author_id first runs the Create/Update-Book integrity rule inside
the same transaction.
"""

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from bookstore_api.errors import ReferencedEntityMissingError
from bookstore_api.models import Book
from bookstore_api.schemas import BookCreate, BookUpdate
from bookstore_api.services.book_queries import (
    book_with_author_name,
    books_with_author_name,
)
from bookstore_api.services.integrity import ensure_author_exists, guarded_write
from bookstore_api.utils.parsing import parse_id

logger = logging.getLogger(__name__)


class BookRepository:
    """
    Data access for books.

    Usage:
        repo = BookRepository(db)
        repo.list_all(author_id=1)
        repo.get(1)["author_name"]
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def list_all(self, author_id: int | str | None = None) -> list[dict[str, Any]]:
        """
        List books with their author's name.

        Args:
            author_id: Optional exact-match filter. A value that is not a
                row id matches no book.

        Returns:
            One dict per book, in insertion order
        """
        if author_id is None:
            stmt = books_with_author_name()
        else:
            parsed = parse_id(author_id)
            if parsed is None:
                return []
            stmt = books_with_author_name(parsed)

        rows = self.db.execute(stmt).mappings().all()
        return [dict(row) for row in rows]

    def get(self, book_id: int | str) -> dict[str, Any] | None:
        """Get one book with its author's name, or None if it does not exist."""
        parsed = parse_id(book_id)
        if parsed is None:
            return None
        row = self.db.execute(book_with_author_name(parsed)).mappings().first()
        return dict(row) if row is not None else None

    def create(self, data: BookCreate) -> Book:
        """
        Insert a new book for an existing author.

        Raises:
            ReferencedEntityMissingError: If data.author_id names no author;
                nothing is inserted
        """
        with guarded_write(self.db, ReferencedEntityMissingError("Author not found")):
            ensure_author_exists(self.db, data.author_id)

            book = Book(**data.model_dump())
            self.db.add(book)
            self.db.commit()

        self.db.refresh(book)
        logger.info(f"Created book {book.id} for author {book.author_id}")
        return book

    def update(self, book_id: int | str, data: BookUpdate) -> Book | None:
        """
        Replace every writable field of a book.

        The (possibly new) author is checked before the book is looked up,
        so a request naming both a missing book and a missing author reports
        the author.

        Returns:
            The updated book, or None if no book matches

        Raises:
            ReferencedEntityMissingError: If data.author_id names no author
        """
        with guarded_write(self.db, ReferencedEntityMissingError("Author not found")):
            ensure_author_exists(self.db, data.author_id)

            parsed = parse_id(book_id)
            if parsed is None:
                return None

            stmt = select(Book).where(Book.id == parsed).with_for_update()
            book = self.db.execute(stmt).scalar_one_or_none()
            if book is None:
                return None

            for field, value in data.model_dump().items():
                setattr(book, field, value)
            self.db.commit()

        self.db.refresh(book)
        logger.info(f"Updated book {book.id}")
        return book

    def delete(self, book_id: int | str) -> bool:
        """
        Delete a book.

        Returns:
            True if the book was deleted, False if no book matches
        """
        parsed = parse_id(book_id)
        if parsed is None:
            return False

        stmt = select(Book).where(Book.id == parsed)
        book = self.db.execute(stmt).scalar_one_or_none()
        if book is None:
            return False

        self.db.delete(book)
        self.db.commit()

        logger.info(f"Deleted book {parsed}")
        return True
