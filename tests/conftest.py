"""
Pytest configuration and fixtures for expense tracker tests.
"""

import os

# Keep the app's own engine off disk; tests bind their own.
os.environ["DATABASE_URL"] = "sqlite://"

from datetime import datetime, timezone
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from database import get_db, init_db
from main import app
from models.category import Category
from models.item import Item


@pytest.fixture
def engine():
    """In-memory SQLite shared by every session in one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory) -> Generator[Session, None, None]:
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def categories(db) -> dict[str, Category]:
    """Pre-seeded categories, keyed by name."""
    cats = {name: Category(name=name) for name in ("Food", "Salary", "Rent", "Travel")}
    db.add_all(cats.values())
    db.commit()
    return cats


@pytest.fixture
def client(session_factory) -> Generator[TestClient, None, None]:
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def backdate(db):
    """Move an item's created_at to the first of the given month."""

    def _backdate(item: Item, year: int, month: int) -> Item:
        item.created_at = datetime(year, month, 1, 12, 0, tzinfo=timezone.utc)
        db.commit()
        return item

    return _backdate
