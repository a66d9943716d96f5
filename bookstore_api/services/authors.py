"""
Author Repository

CRUD operations on the authors table.

Lookups take the raw identifier from the request. Anything that does not
parse as a row id is treated as "no such author" and reported as None or
False, never as a type error.
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from bookstore_api.models import Author, Book
from bookstore_api.schemas import AuthorCreate, AuthorUpdate
from bookstore_api.services.book_queries import books_for_author
from bookstore_api.services.integrity import (
    ensure_author_has_no_books,
    guarded_write,
    lock_author,
)
from bookstore_api.utils.parsing import parse_id

logger = logging.getLogger(__name__)


class AuthorRepository:
    """
    Data access for authors.

    Usage:
        repo = AuthorRepository(db)
        author = repo.create(AuthorCreate(name="Jane Austen", birthdate="1775-12-16"))
        repo.get(author.id)
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def list_all(self) -> list[Author]:
        """All authors in insertion order."""
        stmt = select(Author).order_by(Author.id)
        return list(self.db.execute(stmt).scalars().all())

    def get(self, author_id: int | str) -> Author | None:
        """
        Get an author by id.

        Args:
            author_id: Row id, as an int or the raw path segment

        Returns:
            The author, or None if no author matches
        """
        parsed = parse_id(author_id)
        if parsed is None:
            return None
        stmt = select(Author).where(Author.id == parsed)
        return self.db.execute(stmt).scalar_one_or_none()

    def create(self, data: AuthorCreate) -> Author:
        """Insert a new author and return it with its assigned id."""
        author = Author(**data.model_dump())

        self.db.add(author)
        self.db.commit()
        self.db.refresh(author)

        logger.info(f"Created author {author.id}")
        return author

    def update(self, author_id: int | str, data: AuthorUpdate) -> Author | None:
        """
        Replace every writable field of an author.

        Returns:
            The updated author, or None if no author matches
        """
        parsed = parse_id(author_id)
        if parsed is None:
            return None

        author = lock_author(self.db, parsed)
        if author is None:
            return None

        for field, value in data.model_dump().items():
            setattr(author, field, value)

        self.db.commit()
        self.db.refresh(author)

        logger.info(f"Updated author {author.id}")
        return author

    def delete(self, author_id: int | str) -> bool:
        """
        Delete an author that no book references.

        The author row is locked before the books check, so a concurrent
        book insert for this author either finishes first (and the delete
        is refused) or waits and then fails its own author check.

        Returns:
            True if the author was deleted, False if no author matches

        Raises:
            ConflictError: If books still reference the author
        """
        parsed = parse_id(author_id)
        if parsed is None:
            return False

        with guarded_write(self.db):
            author = lock_author(self.db, parsed)
            if author is None:
                return False

            ensure_author_has_no_books(self.db, parsed)

            self.db.delete(author)
            self.db.commit()

        logger.info(f"Deleted author {parsed}")
        return True

    def list_books(self, author_id: int | str) -> tuple[Author, list[Book]] | None:
        """
        Get an author together with their books.

        Returns:
            (author, books) with books in insertion order, or None if the
            author does not exist
        """
        author = self.get(author_id)
        if author is None:
            return None

        books = self.db.execute(books_for_author(author.id)).scalars().all()
        return author, list(books)
