"""
Services Package

Data access and business rules, kept separate from HTTP handling:
- authors.py: AuthorRepository (CRUD, author's book list)
- books.py: BookRepository (CRUD, listing with author names)
- book_queries.py: SELECT statements for the book/author join
- integrity.py: referential integrity rules for book writes and author deletes
"""

from bookstore_api.services.authors import AuthorRepository
from bookstore_api.services.books import BookRepository

__all__ = [
    "AuthorRepository",
    "BookRepository",
]
