"""
Connection to one library's SQLite file.

A library holds exactly one DBAPI connection for as long as it is open.
Sessions handed out by session_scope() report every failure, including
rows that no longer fit their record type, as DataAccessError.
"""

import logging
import os
from contextlib import contextmanager
from typing import Generator, List
from sqlalchemy import create_engine, event, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from moviedb.database.exceptions import DataAccessError, wrap_db_errors
from moviedb.database.models import Base

logger = logging.getLogger(__name__)

MEMORY_DB_PATH = ":memory:"


def get_database_url(db_path: str) -> str:
    """
    Map a library file path to a SQLAlchemy URL.

    ':memory:' gives a private in-memory database; for a file path the
    parent directory is created when missing.
    """
    if db_path == MEMORY_DB_PATH:
        return "sqlite://"

    db_dir = os.path.dirname(db_path)
    if db_dir:
        os.makedirs(db_dir, exist_ok=True)
    return f"sqlite:///{os.path.abspath(db_path)}"


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    """Switch on foreign keys, which the join tables' ON DELETE CASCADE needs."""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseManager:
    """
    The open connection of one library.

    Attributes:
        db_path: Library file path, or ':memory:'
        engine: Engine on a StaticPool, i.e. a single shared connection
    """

    def __init__(self, db_path: str, echo: bool = False):
        """
        Open a library file.

        Args:
            db_path: Path to the SQLite file, or ':memory:'
            echo: Log every SQL statement
        """
        self.db_path = str(db_path)
        self.engine = create_engine(
            get_database_url(self.db_path),
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool
        )
        self.SessionLocal = sessionmaker(autoflush=False, bind=self.engine)
        self._closed = False
        logger.debug("Opened database %s", self.db_path)

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self, action: str) -> None:
        if self._closed:
            raise DataAccessError(f"{action} failed: library {self.db_path} is closed")

    def create_schema(self, reset: bool = False) -> None:
        """
        Create the library tables that are missing.

        Existing tables and their rows are left alone, unless reset is set:
        then every table is dropped first and the library starts out empty.
        """
        action = "Resetting schema" if reset else "Creating schema"
        self._check_open(action)
        with wrap_db_errors(f"{action} of {self.db_path}"):
            with self.engine.begin() as conn:
                if reset:
                    Base.metadata.drop_all(bind=conn)
                Base.metadata.create_all(bind=conn)

    def table_names(self) -> List[str]:
        """Names of the tables present in the library file."""
        self._check_open("Inspecting schema")
        with wrap_db_errors(f"Inspecting schema of {self.db_path}"):
            return inspect(self.engine).get_table_names()

    @contextmanager
    def session_scope(self, action: str = "Database operation") -> Generator[Session, None, None]:
        """
        One transaction: commit on success, roll back on failure.

        Database failures raised inside the block come out as
        DataAccessError whose message starts with action; anything else
        propagates unchanged.

        Usage:
            with db_manager.session_scope("Creating movie") as session:
                session.add(row)
        """
        self._check_open(action)
        session = self.SessionLocal()
        try:
            with wrap_db_errors(action):
                try:
                    yield session
                    session.commit()
                except Exception:
                    session.rollback()
                    raise
        finally:
            session.close()

    def close(self) -> None:
        """Release the library's connection. Closing twice does nothing."""
        if self._closed:
            return
        self.engine.dispose()
        self._closed = True
        logger.debug("Closed database %s", self.db_path)
