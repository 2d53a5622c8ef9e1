# stockapp/database.py
"""
Database ownership for the stock app.

A ``Database`` is built from settings when the application starts and is
disposed when it stops. Request handlers never touch the engine directly;
they receive a session through ``get_db``.
"""

import logging

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

# Declarative base for all models
Base = declarative_base()


def _engine_kwargs(url: str, echo: bool) -> dict:
    kwargs = {"echo": echo, "future": True}

    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        # Handlers run in FastAPI's threadpool
        kwargs["connect_args"] = {"check_same_thread": False}
        if parsed.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool

    return kwargs


class Database:
    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.engine = create_engine(url, **_engine_kwargs(url, echo))
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
            future=True,
        )

    def create_all(self):
        # Register every model on Base.metadata before creating tables
        from stockapp import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ready at %s", self.engine.url)

    def session(self):
        return self.SessionLocal()

    def dispose(self):
        self.engine.dispose()
        logger.info("Database connections closed")


# -------------------------------------------------------------------
# DEPENDENCY (for FastAPI)
# -------------------------------------------------------------------

def get_db(request: Request):
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
