"""
Author Model

Represents an author in the bookstore database.
"""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore_api.database import Base

# TYPE_CHECKING is True only during type checking (mypy, IDE)
if TYPE_CHECKING:
    from bookstore_api.models.book import Book


class Author(Base):
    """
    Author model representing writers in the system.

    Table: authors

    Relationships:
    - books: One-to-Many, every Book carries an author_id

    Example:
        author = Author(
            name="Jane Austen",
            birthdate=date(1775, 12, 16),
        )
        db.add(author)
        db.commit()
    """

    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Author's full name"
    )

    bio: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Author biography"
    )

    birthdate: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        comment="Author's date of birth"
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    # passive_deletes=True leaves dependent rows to the ON DELETE CASCADE rule
    # of books.author_id; the ORM never loads or nulls out books on delete.
    books: Mapped[list["Book"]] = relationship(
        "Book",
        back_populates="author",
        passive_deletes=True,
        order_by="Book.id",
    )

    def __repr__(self) -> str:
        return f"Author(id={self.id}, name='{self.name}')"
