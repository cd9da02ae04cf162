"""Global pytest fixtures for the coffee-shop user layer."""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import create_autospec

import pytest
from sqlalchemy import StaticPool
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from coffeeshop.db import init_db, make_engine, make_session_factory
from coffeeshop.models.seed import run_seeding
from coffeeshop.repositories import UserRepository


@pytest.fixture
def user_repo_mock() -> UserRepository:
    """Autospecced repository; lookups miss unless a test configures them."""
    repo = create_autospec(UserRepository, instance=True)
    repo.get_by_id.return_value = None
    repo.get_by_username.return_value = None
    repo.get_by_email.return_value = None
    repo.authenticate.return_value = None
    return repo


@pytest.fixture
def sqlite_engine_memory() -> Iterator[Engine]:
    """In-memory SQLite engine shared across connections, with tables created."""
    engine = make_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(sqlite_engine_memory: Engine) -> Iterator[Session]:
    """Session over a database whose default roles are already seeded."""
    factory = make_session_factory(sqlite_engine_memory)
    with factory() as db_session:
        run_seeding(db_session)
        yield db_session
        db_session.rollback()
