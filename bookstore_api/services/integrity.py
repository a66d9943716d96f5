"""
Referential Integrity Guard

Two rules checked before any write touches the books/authors pair:

1. Create/Update-Book: the book's author_id must name an existing author.
   Violations raise ReferencedEntityMissingError (404 "Author not found").
2. Delete-Author: an author with at least one book cannot be deleted.
   Violations raise ConflictError (400).

The checks run on the caller's session, inside the same transaction as the
write that follows. The author row is locked while it is inspected
(FOR SHARE for book writes, FOR UPDATE for author deletes), so on
PostgreSQL a book insert and a delete of its author cannot interleave. The
SQLite dialect emits no lock clause.

The books.author_id foreign key stays the authoritative rule:
guarded_write() turns an IntegrityError raised by the write into the same
error the pre-check would have produced.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bookstore_api.errors import (
    APIError,
    ConflictError,
    ReferencedEntityMissingError,
)
from bookstore_api.models import Author, Book
from bookstore_api.utils.parsing import is_storable_id

logger = logging.getLogger(__name__)


def ensure_author_exists(db: Session, author_id: int) -> Author:
    """
    Create/Update-Book rule: the referenced author must exist.

    Args:
        db: Session of the pending write
        author_id: author_id carried by the book

    Returns:
        The referenced author, share-locked until the transaction ends

    Raises:
        ReferencedEntityMissingError: If no author has this id
    """
    author = None
    if is_storable_id(author_id):
        stmt = (
            select(Author)
            .where(Author.id == author_id)
            .with_for_update(read=True)
        )
        author = db.execute(stmt).scalar_one_or_none()

    if author is None:
        logger.warning(f"Rejected book write: author {author_id} does not exist")
        raise ReferencedEntityMissingError("Author not found")
    return author


def lock_author(db: Session, author_id: int) -> Author | None:
    """Fetch an author for modification, locking the row FOR UPDATE."""
    stmt = select(Author).where(Author.id == author_id).with_for_update()
    return db.execute(stmt).scalar_one_or_none()


def ensure_author_has_no_books(db: Session, author_id: int) -> None:
    """
    Delete-Author rule: the author must not be referenced by any book.

    Raises:
        ConflictError: If at least one book has this author_id
    """
    stmt = select(Book.id).where(Book.author_id == author_id).limit(1)
    if db.execute(stmt).first() is not None:
        logger.warning(f"Rejected delete of author {author_id}: books still reference it")
        raise ConflictError("Cannot delete author with associated books")


@contextmanager
def guarded_write(
    db: Session,
    on_integrity_error: APIError | None = None,
) -> Iterator[None]:
    """
    Run a check-then-write sequence as one unit.

    A storage IntegrityError rolls the session back and is re-raised as
    on_integrity_error when one is given. Refusals by the integrity rules
    raise before anything is written; their row locks are released when the
    request session closes.

    Usage:
        with guarded_write(db, ReferencedEntityMissingError("Author not found")):
            ensure_author_exists(db, data.author_id)
            db.add(book)
            db.commit()
    """
    try:
        yield
    except IntegrityError as exc:
        db.rollback()
        if on_integrity_error is None:
            raise
        logger.warning(f"Write refused by database constraint: {exc.orig}")
        raise on_integrity_error from exc