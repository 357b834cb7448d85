"""
BookStore API Application Package

CRUD web API for a book store: Authors, Books and Users.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine, session factory and declarative base
- exceptions.py: Error types and the handlers that translate them to HTTP
- dependencies.py: Dependency injection functions (sessions, repositories, auth)
- main.py: FastAPI application factory
- models/: SQLAlchemy ORM entities
- schemas/: Pydantic request/response DTOs
- repositories/: Generic repository and per-entity data access
- routers/: API route handlers (controllers)
- services/: Logging handle, DTO mapping, password/JWT security
"""

__version__ = "0.1.0"
