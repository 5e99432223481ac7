"""
Data-access error type.

Every failure executing a statement (constraint violation, I/O failure,
lost connection, a value SQLite can not store, a stored row that is not a
valid record) surfaces to callers as a single DataAccessError carrying the
SQLite status code and message.
"""

from contextlib import contextmanager
from typing import Generator

from pydantic import ValidationError
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

# OverflowError comes straight from sqlite3 for integers beyond 64 bits;
# ValidationError from rows that break a record's constraints
TRANSLATED_ERRORS = (SQLAlchemyError, OverflowError, ValidationError)


class DataAccessError(Exception):
    """
    Raised when a database statement fails.
    
    Attributes:
        code: SQLite extended result code, or None if the driver gave none
        name: SQLite error name (e.g. 'SQLITE_CONSTRAINT_FOREIGNKEY') or the
            exception class name
        message: Human-readable description of the failure
    """
    
    def __init__(self, message: str, code: int | None = None, name: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.name = name
    
    @classmethod
    def from_exception(cls, action: str, exc: Exception) -> "DataAccessError":
        """Build a DataAccessError from a driver, SQLAlchemy or record error."""
        code = None
        name = type(exc).__name__
        if isinstance(exc, DBAPIError) and exc.orig is not None:
            code = getattr(exc.orig, 'sqlite_errorcode', None)
            name = getattr(exc.orig, 'sqlite_errorname', None) or type(exc.orig).__name__
            detail = str(exc.orig)
        elif isinstance(exc, ValidationError):
            problems = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in exc.errors()
            )
            detail = f"stored row is not a valid {exc.title}: {problems}"
        else:
            detail = str(exc)
        return cls(f"{action} failed: {detail}", code=code, name=name)
    
    def __str__(self) -> str:
        if self.code is not None:
            return f"{self.message} (code={self.code}, {self.name})"
        return self.message


@contextmanager
def wrap_db_errors(action: str) -> Generator[None, None, None]:
    """
    Translate database errors raised inside the block into DataAccessError.
    
    Usage:
        with wrap_db_errors("Creating schema"):
            Base.metadata.create_all(bind=engine)
    """
    try:
        yield
    except TRANSLATED_ERRORS as e:
        raise DataAccessError.from_exception(action, e) from e
