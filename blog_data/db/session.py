from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from .config import Settings, get_settings

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
def create_db_engine(settings: Optional[Settings] = None) -> Engine:
    """
    Build the connection pool for the configured database.

    The engine is meant to be created once at process start and passed to
    create_session_factory; nothing here is cached at module level.
    """
    settings = settings or get_settings()
    engine = create_engine(
        settings.database_url,
        echo=settings.SQL_ECHO,
        pool_pre_ping=settings.SQL_POOL_PRE_PING,
    )
    logger.info("Database engine created for dialect %s", engine.dialect.name)
    return engine


# PUBLIC_INTERFACE
def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Return a session factory bound to the given engine."""
    return sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)


# PUBLIC_INTERFACE
@contextmanager
def session_scope(factory: sessionmaker[Session]) -> Iterator[Session]:
    """
    Yield a Session from the factory and close it on exit.

    Usage:
        with session_scope(factory) as session:
            posts = PostRepository(session).list_published()
    """
    with factory() as session:
        yield session
