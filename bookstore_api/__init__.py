"""
Bookstore API Application Package

An HTTP CRUD service for authors and the books they wrote.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine, session factory and declarative base
- errors.py: API error types mapped to HTTP responses
- main.py: FastAPI application factory and error handlers
- dependencies.py: Dependency injection aliases
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Repositories, query composer, integrity rules
- utils/: Parsing helpers
"""

__version__ = "1.0.0"
