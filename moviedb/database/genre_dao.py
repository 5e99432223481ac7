"""
Data-access object for genres.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, func, select

from moviedb.database.connection import DatabaseManager
from moviedb.database.models import GenreRow
from moviedb.models import Genre

logger = logging.getLogger(__name__)


class GenreDao:
    """
    CRUD operations for the genre catalog.
    
    New libraries start with the seeded catalog (see init_db.GENRE_CATALOG).
    Deleting a genre drops its movie_genres rows through the foreign key.
    """
    
    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager
    
    def create(self, genre: Genre) -> int:
        """
        Insert a genre.
        
        Args:
            genre: Genre to insert (its id is ignored)
            
        Returns:
            Generated genre id
        """
        with self.db_manager.session_scope(f"Creating genre '{genre.name}'") as session:
            row = GenreRow(name=genre.name)
            session.add(row)
            session.flush()
            genre_id = row.id
        logger.debug("Created genre %d '%s'", genre_id, genre.name)
        return genre_id
    
    def read(self, genre_id: int) -> Optional[Genre]:
        """
        Get a genre by id.
        
        Args:
            genre_id: Genre id
            
        Returns:
            Genre or None if not found
        """
        with self.db_manager.session_scope(f"Reading genre {genre_id}") as session:
            row = session.get(GenreRow, genre_id)
            return Genre.model_validate(row) if row is not None else None

    def get_genre_by_id(self, genre_id: int) -> Optional[Genre]:
        """Alias of read()."""
        return self.read(genre_id)
    
    def find_by_name(self, name: str) -> Optional[Genre]:
        """Get the first genre (by id) with exactly this name, or None."""
        with self.db_manager.session_scope(f"Finding genre '{name}'") as session:
            row = session.scalars(
                select(GenreRow).where(GenreRow.name == name).order_by(GenreRow.id)
            ).first()
            return Genre.model_validate(row) if row is not None else None

    def read_all(self) -> List[Genre]:
        """Get every genre, ordered by id."""
        with self.db_manager.session_scope("Reading all genres") as session:
            rows = session.scalars(select(GenreRow).order_by(GenreRow.id)).all()
            return [Genre.model_validate(row) for row in rows]

    def update(self, genre: Genre) -> bool:
        """
        Rename a genre.
        
        Args:
            genre: Genre carrying the id of the row to update
            
        Returns:
            True if the genre existed and was updated, False otherwise
        """
        if genre.id is None:
            return False
        
        with self.db_manager.session_scope(f"Updating genre {genre.id}") as session:
            row = session.get(GenreRow, genre.id)
            if row is None:
                return False
            row.name = genre.name
        return True
    
    def delete(self, genre_id: int) -> bool:
        """
        Delete a genre.
        
        Args:
            genre_id: Genre id
            
        Returns:
            True if the genre was deleted, False if not found
        """
        with self.db_manager.session_scope(f"Deleting genre {genre_id}") as session:
            result = session.execute(delete(GenreRow).where(GenreRow.id == genre_id))
            return result.rowcount > 0

    def count(self) -> int:
        """Get total count of genres."""
        with self.db_manager.session_scope("Counting genres") as session:
            return session.scalar(select(func.count(GenreRow.id)))
