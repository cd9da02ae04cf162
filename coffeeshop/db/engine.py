"""Database engine and session helpers.

Use this module whenever an Engine or Session is needed so that every
connection is configured the same way.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url
from sqlalchemy.orm import Session, sessionmaker

from coffeeshop.models import Base

if TYPE_CHECKING:
    from sqlite3 import Connection as SQLiteConnection

    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

SQLITE_NAMES = {"sqlite", "sqlite+pysqlite"}


def is_sqlite(url: str | URL) -> bool:
    """Return True if the given SQLAlchemy URL or string corresponds to SQLite."""
    return make_url(str(url)).get_backend_name() in SQLITE_NAMES


def make_engine(url: str | URL, *, echo: bool = False, **kwargs) -> Engine:
    """Create a SQLAlchemy Engine for the given URL.

    SQLite connections get ``PRAGMA foreign_keys=ON`` so that a user's role_id
    must reference an existing role.

    Args:
        url: Database connection URL (str or :class:`URL`).
        echo: If True, log SQL statements.
        **kwargs: Passed through to :func:`sqlalchemy.create_engine`.
    """
    engine = create_engine(url, echo=echo, **kwargs)

    if is_sqlite(url):

        @event.listens_for(engine, "connect")
        def _sqlite_pragmas(dbapi_conn: SQLiteConnection, conn_record):  # pylint: disable=W0613
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON;")
            cur.close()

    logger.debug("Created engine for %s", make_url(str(url)).render_as_string(hide_password=True))
    return engine


def make_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False)


@contextmanager
def session_scope(factory: sessionmaker[Session]) -> Iterator[Session]:
    """Provide a transactional scope around a series of repository calls.

    Commits when the block exits normally; rolls back and re-raises otherwise.
    """
    session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        logger.debug("Rolling back session after error")
        session.rollback()
        raise
    finally:
        session.close()


def init_db(engine: Engine) -> None:
    """Create every table that does not exist yet."""
    Base.metadata.create_all(engine)
