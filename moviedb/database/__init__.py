"""
Database module for the movie catalog.

This module provides the ORM schema, connection management, schema
initialization and one data-access object per entity, for SQLite library
files using SQLAlchemy.
"""

from moviedb.database.models import Base, MovieRow, ActorRow, GenreRow, movie_actors, movie_genres
from moviedb.database.connection import DatabaseManager
from moviedb.database.exceptions import DataAccessError
from moviedb.database.init_db import init_database, verify_schema, GENRE_CATALOG
from moviedb.database.movie_dao import MovieDao
from moviedb.database.actor_dao import ActorDao
from moviedb.database.genre_dao import GenreDao

__all__ = [
    # Models
    'Base',
    'MovieRow',
    'ActorRow',
    'GenreRow',
    'movie_actors',
    'movie_genres',
    # Connection
    'DatabaseManager',
    'DataAccessError',
    # Initialization
    'init_database',
    'verify_schema',
    'GENRE_CATALOG',
    # Data-access objects
    'MovieDao',
    'ActorDao',
    'GenreDao',
]
