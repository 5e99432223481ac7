"""
Data-access object for movies.

Translates between Movie records and rows of the movies table, and keeps
the movie_actors and movie_genres join tables in step with each movie's
actor and genre ids.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from sqlalchemy import Column, delete, func, insert, literal_column, select
from sqlalchemy.orm import Session

from moviedb.database.connection import DatabaseManager
from moviedb.database.models import MovieRow, movie_actors, movie_genres
from moviedb.models import Movie

logger = logging.getLogger(__name__)

# Columns of the movies table written on create and update
MOVIE_COLUMNS = (
    'title', 'release_year', 'director', 'writer', 'producer',
    'cinematographer', 'budget', 'country',
)


def _unique(ids: Iterable[int]) -> List[int]:
    """Drop repeated ids, keeping the first occurrence."""
    return list(dict.fromkeys(ids))


class MovieDao:
    """
    CRUD operations for movies and their actor/genre associations.
    
    Every call runs in its own session; create and update run all of their
    statements in one transaction, so a failing join-row insert leaves no
    partial movie behind.
    """
    
    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager
    
    def create(self, movie: Movie) -> int:
        """
        Insert a movie and its actor and genre links.
        
        Args:
            movie: Movie to insert (its id is ignored)
            
        Returns:
            Generated movie id
            
        Raises:
            DataAccessError: If any statement fails, e.g. an unknown actor id
        """
        with self.db_manager.session_scope(f"Creating movie '{movie.title}'") as session:
            row = MovieRow(**{name: getattr(movie, name) for name in MOVIE_COLUMNS})
            session.add(row)
            session.flush()
            movie_id = row.id
            self._insert_links(session, movie_id, movie)
        logger.debug("Created movie %d '%s'", movie_id, movie.title)
        return movie_id
    
    def read(self, movie_id: int) -> Optional[Movie]:
        """
        Get a movie by id.
        
        Args:
            movie_id: Movie id
            
        Returns:
            Movie with its actor and genre ids, or None if not found
        """
        with self.db_manager.session_scope(f"Reading movie {movie_id}") as session:
            row = session.get(MovieRow, movie_id)
            if row is None:
                return None
            movie = Movie.model_validate(row)
            movie.actor_ids = self._linked_ids(session, movie_actors.c.actor_id, movie_id)
            movie.genre_ids = self._linked_ids(session, movie_genres.c.genre_id, movie_id)
            return movie

    def read_all(self) -> List[Movie]:
        """
        Get every movie in the library, ordered by id.
        
        Returns:
            List of Movie records with their actor and genre ids
        """
        with self.db_manager.session_scope("Reading all movies") as session:
            rows = session.scalars(select(MovieRow).order_by(MovieRow.id)).all()
            actor_links = self._links_by_movie(session, movie_actors.c.actor_id)
            genre_links = self._links_by_movie(session, movie_genres.c.genre_id)
            
            movies = []
            for row in rows:
                movie = Movie.model_validate(row)
                movie.actor_ids = actor_links.get(row.id, [])
                movie.genre_ids = genre_links.get(row.id, [])
                movies.append(movie)
            return movies

    def update(self, movie: Movie) -> bool:
        """
        Overwrite a movie's columns and replace all of its links.
        
        The movie's existing join rows are deleted and the current actor and
        genre ids are inserted in their place.
        
        Args:
            movie: Movie carrying the id of the row to update
            
        Returns:
            True if the movie existed and was updated, False otherwise
        """
        if movie.id is None:
            return False
        
        with self.db_manager.session_scope(f"Updating movie {movie.id}") as session:
            row = session.get(MovieRow, movie.id)
            if row is None:
                return False
            for name in MOVIE_COLUMNS:
                setattr(row, name, getattr(movie, name))
            session.flush()
            self._delete_links(session, movie.id)
            self._insert_links(session, movie.id, movie)
        logger.debug("Updated movie %d '%s'", movie.id, movie.title)
        return True
    
    def delete(self, movie_id: int) -> bool:
        """
        Delete a movie together with its join rows.
        
        Args:
            movie_id: Movie id
            
        Returns:
            True if the movie was deleted, False if not found
        """
        with self.db_manager.session_scope(f"Deleting movie {movie_id}") as session:
            self._delete_links(session, movie_id)
            result = session.execute(delete(MovieRow).where(MovieRow.id == movie_id))
            deleted = result.rowcount > 0
        if deleted:
            logger.debug("Deleted movie %d", movie_id)
        return deleted
    
    def count(self) -> int:
        """Get total count of movies."""
        with self.db_manager.session_scope("Counting movies") as session:
            return session.scalar(select(func.count(MovieRow.id)))

    # ==================== JOIN TABLE HELPERS ====================
    
    @staticmethod
    def _insert_links(session: Session, movie_id: int, movie: Movie) -> None:
        actor_ids = _unique(movie.actor_ids)
        if actor_ids:
            session.execute(
                insert(movie_actors),
                [{'movie_id': movie_id, 'actor_id': actor_id} for actor_id in actor_ids]
            )
        genre_ids = _unique(movie.genre_ids)
        if genre_ids:
            session.execute(
                insert(movie_genres),
                [{'movie_id': movie_id, 'genre_id': genre_id} for genre_id in genre_ids]
            )
    
    @staticmethod
    def _delete_links(session: Session, movie_id: int) -> None:
        session.execute(delete(movie_actors).where(movie_actors.c.movie_id == movie_id))
        session.execute(delete(movie_genres).where(movie_genres.c.movie_id == movie_id))
    
    @staticmethod
    def _linked_ids(session: Session, column: Column, movie_id: int) -> List[int]:
        """Ids linked to one movie through column's join table, in insertion order."""
        table = column.table
        stmt = (
            select(column)
            .where(table.c.movie_id == movie_id)
            .order_by(literal_column('rowid'))
        )
        return list(session.scalars(stmt))
    
    @staticmethod
    def _links_by_movie(session: Session, column: Column) -> Dict[int, List[int]]:
        """All links of column's join table grouped by movie id."""
        table = column.table
        stmt = select(table.c.movie_id, column).order_by(literal_column('rowid'))
        links = defaultdict(list)
        for movie_id, linked_id in session.execute(stmt):
            links[movie_id].append(linked_id)
        return links
