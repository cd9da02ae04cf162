"""Wiring of the UserService to its configuration and storage backend."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session, sessionmaker

from coffeeshop.config import Settings, get_settings
from coffeeshop.db import init_db, make_engine, make_session_factory, session_scope
from coffeeshop.logging import configure_logging
from coffeeshop.models.seed import run_seeding
from coffeeshop.repositories import InMemoryUserRepository, SqlAlchemyUserRepository, UserRepository
from coffeeshop.services import UserService

logger = logging.getLogger(__name__)


def bootstrap_database(settings: Settings | None = None, *, setup_logging: bool = True) -> sessionmaker[Session]:
    """Prepare the configured database and return a session factory for it.

    Creates missing tables and seeds the default roles. Safe to call on an
    already initialized database.

    Args:
        settings: Settings to use; defaults to the environment-derived settings.
        setup_logging: Install the console log handler at the configured level.
    """
    settings = settings or get_settings()
    if setup_logging:
        configure_logging(settings.log_level)

    engine = make_engine(settings.database_url, echo=settings.echo_sql)
    init_db(engine)

    factory = make_session_factory(engine)
    with session_scope(factory) as session:
        run_seeding(session)

    logger.info("Database ready")
    return factory


def build_user_service(session: Session | None = None) -> UserService:
    """Return a UserService backed by SQL when a session is given, in memory otherwise.

    Args:
        session: An open SQLAlchemy session. The caller owns its transaction.
    """
    repo: UserRepository
    if session is None:
        repo = InMemoryUserRepository()
    else:
        repo = SqlAlchemyUserRepository(session)

    logger.debug("UserService bound to %s", type(repo).__name__)
    return UserService(repo)
