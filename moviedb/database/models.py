"""
SQLAlchemy ORM models for the movie database.

This module defines the movies, actors and genres tables and the two join
tables (movie_actors, movie_genres) linking movies to actors and genres.
"""

from sqlalchemy import Column, Integer, Text, ForeignKey, Table
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class MovieRow(Base):
    """
    Movie table storing the movie details.
    
    Attributes:
        id: Primary key, auto-incremented
        title: Movie title
        release_year: Year the movie was released
        director: Director's name
        writer: Writer's name
        producer: Producer's name
        cinematographer: Cinematographer's name
        budget: Production budget as a whole number
        country: Country (or countries) of production
    """
    __tablename__ = 'movies'
    __table_args__ = {'sqlite_autoincrement': True}
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=True)
    release_year: Mapped[int] = mapped_column(Integer, nullable=True)
    director: Mapped[str] = mapped_column(Text, nullable=True)
    writer: Mapped[str] = mapped_column(Text, nullable=True)
    producer: Mapped[str] = mapped_column(Text, nullable=True)
    cinematographer: Mapped[str] = mapped_column(Text, nullable=True)
    budget: Mapped[int] = mapped_column(Integer, nullable=True)
    country: Mapped[str] = mapped_column(Text, nullable=True)
    
    def __repr__(self) -> str:
        return f"<MovieRow(id={self.id}, title='{self.title}', year={self.release_year})>"


class ActorRow(Base):
    """Actor table: one row per actor name."""
    __tablename__ = 'actors'
    __table_args__ = {'sqlite_autoincrement': True}
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=True)
    
    def __repr__(self) -> str:
        return f"<ActorRow(id={self.id}, name='{self.name}')>"


class GenreRow(Base):
    """Genre table: the genre catalog of a library."""
    __tablename__ = 'genres'
    __table_args__ = {'sqlite_autoincrement': True}
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=True)
    
    def __repr__(self) -> str:
        return f"<GenreRow(id={self.id}, name='{self.name}')>"


# Join tables hold only (movie, actor) and (movie, genre) id pairs.
movie_actors = Table(
    'movie_actors',
    Base.metadata,
    Column('movie_id', Integer, ForeignKey('movies.id', ondelete='CASCADE')),
    Column('actor_id', Integer, ForeignKey('actors.id', ondelete='CASCADE')),
)

movie_genres = Table(
    'movie_genres',
    Base.metadata,
    Column('movie_id', Integer, ForeignKey('movies.id', ondelete='CASCADE')),
    Column('genre_id', Integer, ForeignKey('genres.id', ondelete='CASCADE')),
)
