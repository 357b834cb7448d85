"""
Test Suite for BookStore API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_authors.py: Tests for /api/authors endpoints
- test_books.py: Tests for /api/books endpoints
- test_users.py: Tests for /api/users endpoints
- test_repositories.py: Generic repository contract
- test_mapper.py: Entity <-> DTO conversions
- test_error_handling.py: Translation of failures into 400/404/500
- test_config.py: Settings validation

Running Tests:
    pytest
    pytest tests/test_authors.py
    pytest -v
"""
