"""
Library management: one SQLite file per named movie library.

A library name typed by the user is sanitized (all whitespace removed,
lower-cased) and mapped to <library dir>/<name>.db.
"""

import logging
import re
from pathlib import Path

from moviedb.config import LIBRARY_EXTENSION, get_library_dir, get_sql_echo
from moviedb.database.connection import DatabaseManager
from moviedb.database.exceptions import DataAccessError
from moviedb.database.init_db import init_database

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def format_library_name(name: str) -> str:
    """
    Sanitize a library name.
    
    Args:
        name: Name as entered by the user, e.g. ' My Movies '
        
    Returns:
        Name with all whitespace removed, lower-cased, e.g. 'mymovies'
        
    Raises:
        ValueError: If nothing is left after sanitizing
    """
    formatted = _WHITESPACE.sub("", name or "").lower()
    if not formatted:
        raise ValueError("Library name can not be empty")
    return formatted


def library_path(name: str, library_dir: Path | None = None) -> Path:
    """Get the database file path of a library."""
    directory = Path(library_dir) if library_dir is not None else get_library_dir()
    return directory / f"{format_library_name(name)}{LIBRARY_EXTENSION}"


def library_exists(name: str, library_dir: Path | None = None) -> bool:
    """Check whether a library's database file exists."""
    return library_path(name, library_dir).is_file()


def create_library(
    name: str,
    library_dir: Path | None = None,
    seed_genres: bool = True,
) -> Path:
    """
    Create a new library file with the full schema.
    
    Calling this for an existing library is harmless: the schema is only
    created where missing and no rows are touched.
    
    Args:
        name: Library name (sanitized before use)
        library_dir: Directory for library files (default: from config)
        seed_genres: Fill the genre catalog of the new library
        
    Returns:
        Path of the library database file
        
    Raises:
        DataAccessError: If the file exists but is not a usable SQLite database
    """
    path = library_path(name, library_dir)
    db_manager = DatabaseManager(str(path))
    try:
        init_database(db_manager, seed_genres=seed_genres)
    finally:
        db_manager.close()
    logger.info("Created library '%s' at %s", path.stem, path)
    return path


def open_library(
    name: str,
    library_dir: Path | None = None,
    create: bool = False,
) -> DatabaseManager:
    """
    Open a library and return its connection manager.
    
    Args:
        name: Library name (sanitized before use)
        library_dir: Directory for library files (default: from config)
        create: Create the library if it does not exist yet
        
    Returns:
        DatabaseManager holding the library's single connection
        
    Raises:
        FileNotFoundError: If the library does not exist and create is False
        DataAccessError: If the file is not a usable SQLite database
    """
    path = library_path(name, library_dir)
    if not path.is_file():
        if not create:
            raise FileNotFoundError(f"Library '{path.stem}' does not exist: {path}")
        create_library(name, library_dir)
    
    db_manager = DatabaseManager(str(path), echo=get_sql_echo())
    try:
        # Older files may predate a table; creating missing ones is idempotent
        init_database(db_manager, seed_genres=False)
    except DataAccessError:
        db_manager.close()
        raise
    logger.info("Opened library '%s'", path.stem)
    return db_manager
