"""
Book Query Composer

Builds the SELECT statements used to read books.

The listing shape is books LEFT OUTER JOIN authors, projecting every books
column plus the author's name:

    SELECT books.*, authors.name AS author_name
    FROM books LEFT OUTER JOIN authors ON books.author_id = authors.id
    [WHERE books.author_id = :author_id]
    ORDER BY books.id

The single-book lookup reuses the same join restricted to one id. The
functions only build statements; executing them is up to the caller.
"""

from sqlalchemy import Select, select

from bookstore_api.models import Author, Book


def _book_join() -> Select:
    """books.* plus authors.name, outer-joined on the author reference."""
    return (
        select(*Book.__table__.columns, Author.name.label("author_name"))
        .select_from(Book)
        .outerjoin(Author, Book.author_id == Author.id)
    )


def books_with_author_name(author_id: int | None = None) -> Select:
    """
    Statement listing books with their author's name.

    Args:
        author_id: When given, keep only books with this exact author_id

    Returns:
        SELECT yielding one row per book, in insertion (id) order
    """
    stmt = _book_join()
    if author_id is not None:
        stmt = stmt.where(Book.author_id == author_id)
    return stmt.order_by(Book.id)


def book_with_author_name(book_id: int) -> Select:
    """Statement fetching at most one book, joined like the listing."""
    return _book_join().where(Book.id == book_id)


def books_for_author(author_id: int) -> Select:
    """Statement listing an author's Book entities in insertion order."""
    return (
        select(Book)
        .where(Book.author_id == author_id)
        .order_by(Book.id)
    )
