"""
Book Model

Represents a book written by exactly one author.

The author reference is a plain foreign key column:

    books.author_id -> authors.id  ON DELETE CASCADE

The cascade is the storage-level rule. The application never relies on it:
the author repository refuses to delete an author that still has books.
"""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore_api.database import Base

if TYPE_CHECKING:
    from bookstore_api.models.author import Author


class Book(Base):
    """
    Book model representing books in the store.

    Table: books

    Fields:
    - title: Book title (required)
    - description: Summary (optional)
    - published_date: Publication date (required)
    - author_id: Owning author (required, foreign key)

    Indexes:
    - Primary key on id (automatic)
    - author_id: For listing an author's books and the delete guard

    Example:
        book = Book(
            title="Pride and Prejudice",
            published_date=date(1813, 1, 28),
            author_id=author.id,
        )
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Book title"
    )

    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Book description or summary"
    )

    # Date (not DateTime) because only the day matters
    published_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        comment="Date of publication"
    )

    author_id: Mapped[int] = mapped_column(
        ForeignKey("authors.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
        comment="Author who wrote the book"
    )

    author: Mapped["Author"] = relationship(
        "Author",
        back_populates="books",
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', author_id={self.author_id})"
