"""
Database initialization and schema creation.

This module provides functions to create the library schema and populate
a fresh library with the genre catalog.
"""

import logging

from sqlalchemy import func, select

from moviedb.database.connection import DatabaseManager
from moviedb.database.models import GenreRow

logger = logging.getLogger(__name__)

# Genre catalog seeded into every new library, in id order
GENRE_CATALOG = (
    'Action', 'Adventure', 'Animation', 'Biography', 'Comedy', 'Crime',
    'Documentary', 'Family', 'Film-Noir', 'Fantasy', 'History', 'Horror',
    'Music', 'Musical', 'Mystery', 'Romance', 'Sci-Fi', 'Sport', 'War',
    'Thriller', 'Drama',
)

EXPECTED_TABLES = {'movies', 'actors', 'genres', 'movie_actors', 'movie_genres'}


def seed_genre_catalog(db_manager: DatabaseManager) -> int:
    """
    Insert the genre catalog if the genres table is empty.
    
    Args:
        db_manager: DatabaseManager instance
        
    Returns:
        Number of genres inserted (0 if the catalog was already present)
    """
    with db_manager.session_scope("Seeding genre catalog") as session:
        existing = session.scalar(select(func.count(GenreRow.id)))
        if existing:
            return 0
        session.add_all(GenreRow(name=name) for name in GENRE_CATALOG)
    logger.info("Seeded %d genres", len(GENRE_CATALOG))
    return len(GENRE_CATALOG)


def init_database(
    db_manager: DatabaseManager,
    reset: bool = False,
    seed_genres: bool = True,
) -> DatabaseManager:
    """
    Initialize the database and create all tables.
    
    Safe to call on an already-initialized library: existing tables and
    rows are left untouched unless reset is requested.
    
    Args:
        db_manager: DatabaseManager instance for the library
        reset: If True, drop existing tables before creating new ones
        seed_genres: If True, fill an empty genres table with GENRE_CATALOG
        
    Returns:
        The same DatabaseManager instance
        
    Raises:
        DataAccessError: If the file is not a usable SQLite database
    """
    if reset:
        logger.warning("Resetting database %s (dropping all tables)", db_manager.db_path)
    db_manager.create_schema(reset=reset)
    logger.debug("Schema ready in %s", db_manager.db_path)
    
    if seed_genres:
        seed_genre_catalog(db_manager)
    
    return db_manager


def verify_schema(db_manager: DatabaseManager) -> bool:
    """
    Verify that all tables exist in the database.
    
    Args:
        db_manager: DatabaseManager instance
        
    Returns:
        True if all tables exist, False otherwise
    """
    existing_tables = set(db_manager.table_names())
    
    missing_tables = EXPECTED_TABLES - existing_tables
    
    if missing_tables:
        logger.warning("Missing tables: %s", sorted(missing_tables))
        return False
    
    return True
