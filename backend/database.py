"""
Database Configuration Module

This module handles the database configuration and connection setup for the ledger service.
It uses SQLAlchemy for ORM (Object-Relational Mapping) with PostgreSQL as the database.

The module includes:
- Database connection setup
- Session management and the transactional unit of work
- Base model class definition
"""

import logging
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from config import DATABASE_URL
from errors import LedgerError, StorageError

logger = logging.getLogger("database")

# Create SQLAlchemy engine
# SQLite (used by the test-suite) is restricted to one shared connection so an
# in-memory database is visible from every request thread.
if DATABASE_URL.startswith("sqlite"):
    engine = create_engine(
        DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
else:
    engine = create_engine(DATABASE_URL, pool_pre_ping=True)

# Create SessionLocal class
# autocommit=False means every unit of work ends with an explicit commit or rollback
# autoflush=False means we need to explicitly flush changes to the database
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base is the declarative base class that our ORM models will inherit from
Base = declarative_base()


# Dependency to get database session
def get_db():
    """
    Dependency function that provides a database session.

    This function creates a new database session for each request and ensures
    that the session is properly closed after the request is completed.

    Yields:
        Session: A SQLAlchemy database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def unit_of_work(db: Session):
    """
    Run a block of writes as one transaction.

    Commits when the block finishes. Any failure rolls back everything written
    inside the block; SQLAlchemy errors are re-raised as StorageError.
    """
    try:
        yield db
        db.commit()
    except LedgerError:
        db.rollback()
        raise
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Transaction rolled back: {exc}")
        raise StorageError("Storage is unavailable, please retry") from exc
    except Exception:
        db.rollback()
        logger.exception("Transaction rolled back after an unexpected error")
        raise
