"""
API Routers Package

Router Structure:
- authors.py: /authors/* endpoints
- books.py: /books/* endpoints

Each router is imported and registered in main.py.
"""

from bookstore_api.routers.authors import router as authors_router
from bookstore_api.routers.books import router as books_router

__all__ = [
    "authors_router",
    "books_router",
]
