"""
Shared fixtures: an in-memory library per test, empty or pre-filled.
"""

import pytest

from moviedb.database import ActorDao, DatabaseManager, GenreDao, MovieDao, init_database
from moviedb.models import Actor, Movie


@pytest.fixture
def db_manager():
    """Create an initialized in-memory library (genre catalog seeded)."""
    manager = DatabaseManager(":memory:")
    init_database(manager)
    yield manager
    manager.close()


@pytest.fixture
def movie_dao(db_manager):
    return MovieDao(db_manager)


@pytest.fixture
def actor_dao(db_manager):
    return ActorDao(db_manager)


@pytest.fixture
def genre_dao(db_manager):
    return GenreDao(db_manager)


@pytest.fixture
def genre_ids(genre_dao):
    """Map of catalog genre name to id."""
    return {genre.name: genre.id for genre in genre_dao.read_all()}


@pytest.fixture
def filled_db(db_manager, movie_dao, actor_dao, genre_ids):
    """
    Fill the library with six actors and five movies.
    
    Actor ids: 1 Robert De Niro, 2 Meryl Streep, 3 Jamie Foxx,
    4 Christoph Waltz, 5 Margot Robbie, 6 Leonardo Di Caprio.
    Movie ids: 1 Inception, 2 The Wolf of Wall Street, 3 Django Unchained,
    4 The Deer Hunter, 5 Taxi Driver.
    """
    actors = {}
    for name in ["Robert De Niro", "Meryl Streep", "Jamie Foxx",
                 "Christoph Waltz", "Margot Robbie", "Leonardo Di Caprio"]:
        actors[name] = actor_dao.create(Actor(name=name))
    
    movies = [
        ("Inception", 2010, "Christopher Nolan",
         ["Leonardo Di Caprio"], ["Adventure", "Fantasy"]),
        ("The Wolf of Wall Street", 2013, "Martin Scorsese",
         ["Leonardo Di Caprio", "Margot Robbie"], ["Comedy", "Drama"]),
        ("Django Unchained", 2012, "Quentin Tarantino",
         ["Jamie Foxx", "Christoph Waltz"], ["Action", "Adventure"]),
        ("The Deer Hunter", 1978, "Michael Cimino",
         ["Robert De Niro", "Meryl Streep"], ["Drama"]),
        ("Taxi Driver", 1976, "Martin Scorsese",
         ["Robert De Niro"], ["Crime", "Drama"]),
    ]
    for title, year, director, cast, genres in movies:
        movie_dao.create(Movie(
            title=title,
            release_year=year,
            director=director,
            actor_ids=[actors[a] for a in cast],
            genre_ids=[genre_ids[g] for g in genres],
        ))
    return db_manager
