"""
SQLAlchemy Models Package

This package contains all database models for the Bookstore API.

Model Relationships:
- Author <-> Book: One-to-Many (an author writes many books,
                   a book has exactly one author)

Importing the models here registers them with Base.metadata, which is what
Alembic and create_tables() read.
"""

from bookstore_api.models.author import Author
from bookstore_api.models.book import Book

__all__ = [
    "Author",
    "Book",
]
