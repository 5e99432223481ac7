#!/usr/bin/env python
"""
Library creation script.

This script sets up a movie library:
1. Creates the library file and schema (tables, genre catalog)
2. Optionally fills it with demonstration movies and actors

Usage:
    # Create an empty library
    python scripts/init_library.py "My Movies"

    # Create a library with demonstration data
    python scripts/init_library.py "My Movies" --demo

    # Drop everything in an existing library and start over
    python scripts/init_library.py "My Movies" --reset --demo
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from moviedb.database import ActorDao, DataAccessError, GenreDao, MovieDao, init_database
from moviedb.library import create_library, format_library_name, library_exists, open_library
from moviedb.models import Actor, Movie
from moviedb.utils import get_logger
from moviedb.utils.logging_config import configure_library_logging

logger = get_logger(__name__)

DEMO_ACTORS = [
    "Robert De Niro", "Leonardo DiCaprio", "Morgan Freeman", "Uma Thurman",
    "Tom Hanks", "Keanu Reeves", "Marlon Brando", "Brad Pitt", "Edward Norton",
    "Christian Bale", "Liam Neeson", "Elijah Wood", "Mark Hamill", "Harrison Ford",
]

# (title, year, director, writer, producer, cinematographer, budget, country, actors, genres)
DEMO_MOVIES = [
    ("Inception", 2010, "Christopher Nolan", "Christopher Nolan", "Emma Thomas",
     "Wally Pfister", 160000000, "USA", ["Leonardo DiCaprio"], ["Action", "Sci-Fi", "Thriller"]),
    ("The Shawshank Redemption", 1994, "Frank Darabont", "Stephen King", "Niki Marvin",
     "Roger Deakins", 25000000, "USA", ["Morgan Freeman"], ["Crime", "Drama"]),
    ("Pulp Fiction", 1994, "Quentin Tarantino", "Quentin Tarantino", "Lawrence Bender",
     "Andrzej Sekula", 8000000, "USA", ["Uma Thurman", "Brad Pitt"], ["Crime", "Drama"]),
    ("Forrest Gump", 1994, "Robert Zemeckis", "Winston Groom", "Wendy Finerman",
     "Don Burgess", 55000000, "USA", ["Tom Hanks"], ["Comedy", "Drama", "Romance"]),
    ("The Matrix", 1999, "Lana Wachowski", "Lilly Wachowski", "Joel Silver",
     "Bill Pope", 63000000, "USA", ["Keanu Reeves"], ["Action", "Sci-Fi"]),
    ("The Godfather", 1972, "Francis Ford Coppola", "Mario Puzo", "Albert S. Ruddy",
     "Gordon Willis", 6000000, "USA", ["Marlon Brando"], ["Crime", "Drama"]),
    ("Fight Club", 1999, "David Fincher", "Chuck Palahniuk", "Art Linson",
     "Jeff Cronenweth", 63000000, "Germany/USA", ["Brad Pitt", "Edward Norton"], ["Drama"]),
    ("The Dark Knight", 2008, "Christopher Nolan", "Jonathan Nolan", "Christopher Nolan",
     "Wally Pfister", 185000000, "USA/UK", ["Christian Bale"], ["Action", "Crime", "Drama"]),
    ("Schindler's List", 1993, "Steven Spielberg", "Thomas Keneally", "Steven Spielberg",
     "Janusz Kamiński", 22000000, "USA", ["Liam Neeson"], ["Biography", "Drama", "History"]),
    ("The Lord of the Rings: The Return of the King", 2003, "Peter Jackson", "J.R.R. Tolkien",
     "Peter Jackson", "Andrew Lesnie", 94000000, "New Zealand/USA", ["Elijah Wood"],
     ["Adventure", "Drama", "Fantasy"]),
    ("Star Wars: Episode V - The Empire Strikes Back", 1980, "Irvin Kershner", "Leigh Brackett",
     "Gary Kurtz", "Peter Suschitzky", 18000000, "USA", ["Mark Hamill", "Harrison Ford"],
     ["Action", "Adventure", "Sci-Fi"]),
    ("Taxi Driver", 1976, "Martin Scorsese", "Paul Schrader", "Michael Phillips",
     "Michael Chapman", 1900000, "USA", ["Robert De Niro"], ["Crime", "Drama"]),
]


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def fill_demo_data(db_manager, verbose=True):
    """
    Insert the demonstration actors and movies.
    
    Args:
        db_manager: DatabaseManager of the library
        verbose: Print progress information
        
    Returns:
        Number of movies created
    """
    if verbose:
        print_section("Adding Demonstration Data")
    
    actor_dao = ActorDao(db_manager)
    genre_dao = GenreDao(db_manager)
    movie_dao = MovieDao(db_manager)
    
    actor_ids = {}
    for name in DEMO_ACTORS:
        existing = actor_dao.find_by_name(name)
        actor_ids[name] = existing.id if existing else actor_dao.create(Actor(name=name))
    
    genre_ids = {genre.name: genre.id for genre in genre_dao.read_all()}
    existing_titles = {movie.title for movie in movie_dao.read_all()}
    
    created = 0
    for (title, year, director, writer, producer, cinematographer,
         budget, country, actors, genres) in DEMO_MOVIES:
        if title in existing_titles:
            if verbose:
                print(f"  [SKIP] {title}: already in the library")
            continue
        missing = [g for g in genres if g not in genre_ids]
        if missing:
            print(f"  [SKIP] {title}: genres not in catalog: {', '.join(missing)}")
            continue
        movie = Movie(
            title=title,
            release_year=year,
            director=director,
            writer=writer,
            producer=producer,
            cinematographer=cinematographer,
            budget=budget,
            country=country,
            actor_ids=[actor_ids[a] for a in actors],
            genre_ids=[genre_ids[g] for g in genres],
        )
        movie_dao.create(movie)
        created += 1
    
    if verbose:
        print(f"  Actors: {len(actor_ids)}")
        print(f"  Movies: {created}")
    return created


def main():
    parser = argparse.ArgumentParser(description="Create a movie library")
    parser.add_argument("name", help="Library name (whitespace is removed, case is ignored)")
    parser.add_argument("--reset", action="store_true",
                        help="Drop all tables of an existing library first")
    parser.add_argument("--demo", action="store_true",
                        help="Fill the library with demonstration movies")
    parser.add_argument("--no-genres", action="store_true",
                        help="Do not seed the genre catalog")
    parser.add_argument("--library-dir", type=Path, default=None,
                        help="Directory of library files (default: MOVIEDB_LIBRARY_DIR)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args()
    
    configure_library_logging(debug=args.debug)
    
    try:
        name = format_library_name(args.name)
    except ValueError as e:
        print(f"[ERROR] {e}")
        return 1
    
    print_section(f"Library: {name}")
    existed = library_exists(name, args.library_dir)
    db_manager = None
    try:
        if not existed:
            path = create_library(name, args.library_dir, seed_genres=not args.no_genres)
            print(f"  Created {path}")
        else:
            print("  Library already exists")
        
        db_manager = open_library(name, args.library_dir)
        if existed:
            init_database(db_manager, reset=args.reset, seed_genres=not args.no_genres)
            if args.reset:
                print("  Library reset")
        if args.demo:
            fill_demo_data(db_manager)
    except DataAccessError as e:
        logger.error("Creating library failed. SQLite code: %s (%s), message: %s",
                     e.code, e.name, e.message)
        print("\n❌ Library creation failed!")
        return 1
    finally:
        if db_manager is not None:
            db_manager.close()
    
    print("\n✅ Library ready!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
