"""
Database configuration using SQLAlchemy ORM
This file sets up the connection to PostgreSQL (or SQLite for local runs and tests)
"""
import math

from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from educify.config import settings

DATABASE_URL = settings.SQLALCHEMY_DATABASE_URL


def _build_engine(url: str):
    if url.startswith("sqlite"):
        # One shared connection so an in-memory database survives across sessions
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=settings.DB_ECHO,
        )
    return create_engine(
        url, pool_size=10, max_overflow=15, pool_pre_ping=True, echo=settings.DB_ECHO
    )


engine = _build_engine(DATABASE_URL)


def _null_safe(fn):
    def wrapper(*args):
        if any(arg is None for arg in args):
            return None
        return fn(*args)
    return wrapper


if engine.dialect.name == "sqlite":

    @event.listens_for(engine, "connect")
    def _register_math_functions(dbapi_connection, connection_record):
        """SQLite has no trigonometry built in; the distance query needs it."""
        for name, nargs, fn in (
            ("radians", 1, math.radians),
            ("sin", 1, math.sin),
            ("cos", 1, math.cos),
            ("acos", 1, math.acos),
            ("least", 2, min),
            ("greatest", 2, max),
        ):
            dbapi_connection.create_function(name, nargs, _null_safe(fn), deterministic=True)


# workspace for database operations. transaction manager.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for all database models
Base = declarative_base()


# for dependency injection
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
