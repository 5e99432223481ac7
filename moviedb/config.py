"""
Application configuration loaded from environment or defaults.
"""

import os
from pathlib import Path

# Every library is stored as <library dir>/<name><LIBRARY_EXTENSION>
LIBRARY_EXTENSION = ".db"


def get_library_dir() -> Path:
    """Get the directory holding library database files from env or default."""
    return Path(
        os.getenv("MOVIEDB_LIBRARY_DIR", "")
        or Path(__file__).resolve().parents[1] / "data" / "libraries"
    )


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("MOVIEDB_LOG_LEVEL", "INFO").upper()


def get_sql_echo() -> bool:
    """Whether SQLAlchemy should log every SQL statement."""
    return os.getenv("MOVIEDB_SQL_ECHO", "").lower() in ("1", "true", "yes")
