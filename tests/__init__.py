"""
Test Suite for Bookstore API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_authors.py: Tests for /authors endpoints
- test_books.py: Tests for /books endpoints
- test_integrity.py: Repository, integrity rule and query composer tests
- test_app.py: Root/health endpoints, error responder, settings, workflow

Running Tests:
    # Run all tests
    pytest

    # Run specific file
    pytest tests/test_books.py

    # Run with verbose output
    pytest -v
"""
