#!/usr/bin/env python3
"""
Database Seed Script

Fills an empty BookStore database with sample authors, books and an
administrator account, going through the same DTOs, mapper and
repositories as the API so seeded rows pass the same validation.

USAGE:
    python scripts/seed_data.py

    # Choose the administrator credentials
    SEED_ADMIN_EMAIL=admin@example.com SEED_ADMIN_PASSWORD=S3cret! python scripts/seed_data.py

Existing rows are cleared first.
"""

import os
import sys
from decimal import Decimal
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy.orm import Session

from bookstore_api.config import get_settings
from bookstore_api.database import SessionLocal, create_tables
from bookstore_api.models import Author, Book, User, UserRole
from bookstore_api.repositories import AuthorRepository, BookRepository, UserRepository
from bookstore_api.schemas import AuthorCreate, BookCreate
from bookstore_api.services.logger import configure_logging, get_logger_service
from bookstore_api.services.mapper import author_from_create, book_from_create
from bookstore_api.services.security import hash_password

AUTHORS = [
    AuthorCreate(
        first_name="George",
        last_name="Orwell",
        bio="English novelist and essayist, journalist and critic. "
            "Best known for '1984' and 'Animal Farm'.",
    ),
    AuthorCreate(
        first_name="Jane",
        last_name="Austen",
        bio="English novelist known for her six major novels which critique "
            "the British landed gentry at the end of the 18th century.",
    ),
    AuthorCreate(
        first_name="Ernest",
        last_name="Hemingway",
        bio="American novelist, short-story writer and journalist.",
    ),
    AuthorCreate(
        first_name="Agatha",
        last_name="Christie",
        bio="English writer known for her 66 detective novels.",
    ),
    AuthorCreate(first_name="Isaac", last_name="Asimov"),
]

# (author last name, book data); None means the book has no author
BOOKS = [
    ("Orwell", dict(
        title="1984",
        year=1949,
        isbn="9780451524935",
        summary="A dystopian novel set in a totalitarian society under constant surveillance.",
        image="1984.jpg",
        price=Decimal("12.99"),
    )),
    ("Orwell", dict(
        title="Animal Farm",
        year=1945,
        isbn="9780451526342",
        summary="An allegorical novella reflecting events leading up to the Russian Revolution.",
        image="animal-farm.jpg",
        price=Decimal("9.99"),
    )),
    ("Austen", dict(
        title="Pride and Prejudice",
        year=1813,
        isbn="9780141439518",
        summary="A romantic novel following the emotional development of Elizabeth Bennet.",
        price=Decimal("8.99"),
    )),
    ("Hemingway", dict(
        title="The Old Man and the Sea",
        year=1952,
        isbn="9780684801223",
        price=Decimal("11.99"),
    )),
    ("Christie", dict(
        title="Murder on the Orient Express",
        year=1934,
        isbn="9780062693662",
        price=Decimal("14.99"),
    )),
    ("Asimov", dict(
        title="Foundation",
        year=1951,
        isbn="9780553293357",
        price=Decimal("15.99"),
    )),
    (None, dict(
        title="Beowulf",
        isbn="9780393320978",
        summary="Old English epic poem of unknown authorship.",
    )),
]


def clear_data(db: Session) -> None:
    """Clear all existing data from the database."""
    print("Clearing existing data...")
    db.query(Book).delete()
    db.query(Author).delete()
    db.query(User).delete()
    db.commit()


def create_authors(repo: AuthorRepository) -> dict[str, Author]:
    print("Creating authors...")
    authors = {}
    for dto in AUTHORS:
        author = author_from_create(dto)
        if not repo.create(author):
            raise RuntimeError(f"Could not create author {dto.last_name}")
        authors[author.last_name] = author

    print(f"Created {len(authors)} authors.")
    return authors


def create_books(repo: BookRepository, authors: dict[str, Author]) -> list[Book]:
    print("Creating books...")
    books = []
    for last_name, data in BOOKS:
        author_id = authors[last_name].id if last_name else None
        book = book_from_create(BookCreate(author_id=author_id, **data))
        if not repo.create(book):
            raise RuntimeError(f"Could not create book {book.title}")
        books.append(book)

    print(f"Created {len(books)} books.")
    return books


def create_admin(repo: UserRepository) -> User:
    email = os.environ.get("SEED_ADMIN_EMAIL", "admin@bookstore.com").lower()
    password = os.environ.get("SEED_ADMIN_PASSWORD", "Admin@123")

    admin = User(
        email=email,
        hashed_password=hash_password(password),
        role=UserRole.ADMINISTRATOR.value,
    )
    if not repo.create(admin):
        raise RuntimeError(f"Could not create administrator {email}")

    print(f"Created administrator {email}.")
    return admin


def seed_database(clear_existing: bool = True) -> None:
    """
    Seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    settings = get_settings()
    configure_logging(settings)
    log = get_logger_service()

    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()
    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        authors = create_authors(AuthorRepository(db, log))
        books = create_books(BookRepository(db, log), authors)
        create_admin(UserRepository(db, log))

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - Authors: {len(authors)}")
        print(f"  - Books: {len(books)}")
        print(f"\nAPI documentation at http://localhost:{settings.port}/docs")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()
